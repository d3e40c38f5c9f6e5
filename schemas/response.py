"""Result and history schemas for Summarist."""

from __future__ import annotations

from pydantic import BaseModel, Field

from schemas.request import OutputFormat, SummaryLength


class SummarizationResult(BaseModel):
    """Validated LLM output.  Only ``engine.response_parser`` builds these."""

    summary: str
    key_insights: list[str] = Field(default_factory=list, alias="keyInsights")
    actionable_items: list[str] = Field(default_factory=list, alias="actionableItems")
    suggested_questions: list[str] = Field(default_factory=list, alias="suggestedQuestions")

    model_config = {"populate_by_name": True}


class HistoryEntry(BaseModel):
    """One persisted record of a past successful summarization."""

    id: str
    timestamp: int = Field(description="Creation instant, epoch milliseconds.")
    content: str
    summary_length: SummaryLength = Field(alias="summaryLength")
    output_format: OutputFormat = Field(alias="outputFormat")
    focus_area: str = Field(default="", alias="focusArea")
    result: SummarizationResult

    model_config = {"populate_by_name": True, "frozen": True}
