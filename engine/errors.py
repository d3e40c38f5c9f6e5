"""Error taxonomy surfaced by the summarization pipeline."""

from __future__ import annotations


class SummarizationError(Exception):
    """Base class for every request-path failure.

    ``user_message`` is safe to show to an end user; ``str(exc)`` may carry
    diagnostic detail.
    """

    user_message = "Failed to generate a summary."


class ConfigError(SummarizationError):
    """The LLM credential is missing, a placeholder, or rejected by the provider."""

    user_message = (
        "The summarization service is not configured. "
        "Set OPENAI_API_KEY in the environment or a .env file."
    )


class TransportError(SummarizationError):
    """The provider call failed for any reason other than a bad credential."""

    @property
    def user_message(self) -> str:  # type: ignore[override]
        return str(self) or SummarizationError.user_message


class ParseError(SummarizationError):
    """The response text was not valid JSON."""

    user_message = "Could not parse the summary response."

    def __init__(self, raw_text: str, reason: str) -> None:
        super().__init__(f"Response was not valid JSON: {reason}")
        self.raw_text = raw_text
        self.reason = reason


class SchemaError(SummarizationError):
    """The response parsed but lacks a string ``summary`` field."""

    user_message = "The summary response had an invalid shape."
