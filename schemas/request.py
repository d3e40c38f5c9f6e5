"""Request schemas for Summarist."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class SummaryLength(str, Enum):
    BRIEF = "BRIEF"
    STANDARD = "STANDARD"
    DETAILED = "DETAILED"


class OutputFormat(str, Enum):
    PARAGRAPH = "PARAGRAPH"
    BULLET_POINTS = "BULLET_POINTS"
    EXECUTIVE_SUMMARY = "EXECUTIVE_SUMMARY"


class SummarizationRequest(BaseModel):
    """One user action: the text to summarize and how to summarize it."""

    content: str = Field(..., min_length=1, description="Text to summarize.")
    length: SummaryLength = SummaryLength.STANDARD
    format: OutputFormat = OutputFormat.PARAGRAPH
    focus_area: str | None = Field(
        default=None,
        alias="focusArea",
        description="Optional topic the summary should emphasise.",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("content")
    @classmethod
    def _content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("content must not be blank")
        return value
