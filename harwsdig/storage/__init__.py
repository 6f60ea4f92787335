"""Input loading for HAR documents."""
