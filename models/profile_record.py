from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ProfileRecord(BaseModel):
    """Text fragments scraped from one rendered profile page."""

    name: str = ""
    title_line: str = ""
    education_text: str = ""
    experience_text: str = ""

    model_config = ConfigDict(frozen=True, extra="forbid")
