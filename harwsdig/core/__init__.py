"""Core pipeline — entry selection and transcript rendering."""
