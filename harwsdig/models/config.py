"""Configuration models for transcript display."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DisplayOptions(BaseModel):
    """Renderer toggles. Defaults give the truncated, escaped transcript."""

    full_url: bool = False
    full_data: bool = False
    raw_data: bool = False
    url_truncate_length: int = Field(default=50, ge=0)
    data_truncate_length: int = Field(default=70, ge=0)
    counter_width: int = Field(default=5, ge=0)

    def summary(self) -> str:
        return (
            f"full_url={self.full_url} full_data={self.full_data} raw_data={self.raw_data} "
            f"url_len={self.url_truncate_length} data_len={self.data_truncate_length}"
        )
