"""Request Builder — turns user choices into one instruction payload."""

from __future__ import annotations

from prompts.system_prompt import (
    CLOSING_INSTRUCTION,
    FOCUS_INSTRUCTION_TEMPLATE,
    FORMAT_INSTRUCTIONS,
    GENERAL_FOCUS_INSTRUCTION,
    LENGTH_INSTRUCTIONS,
    OUTPUT_SCHEMA_INSTRUCTION,
    SYSTEM_INSTRUCTION,
)
from schemas.request import OutputFormat, SummaryLength


def focus_instruction(focus_area: str | None) -> str:
    if focus_area and focus_area.strip():
        return FOCUS_INSTRUCTION_TEMPLATE.format(focus_area=focus_area.strip())
    return GENERAL_FOCUS_INSTRUCTION


def build_prompt(
    content: str,
    length: SummaryLength,
    format: OutputFormat,
    focus_area: str | None = None,
) -> str:
    """Compose the full prompt for a summarization request.

    Pure function: identical inputs always give identical text.  ``length``
    and ``format`` must be enum members; anything else raises ``ValueError``
    since an unknown value is a caller bug.

    Parameters
    ----------
    content : str
        Text to summarize.  The caller rejects blank content beforehand.
    length : SummaryLength
        Selects the word-count band.
    format : OutputFormat
        Selects how the ``summary`` field is laid out.
    focus_area : str | None
        Quoted verbatim into the prompt when non-blank.

    Returns
    -------
    str
        The prompt text.
    """
    length_instruction = LENGTH_INSTRUCTIONS[SummaryLength(length)]
    format_instruction = FORMAT_INSTRUCTIONS[OutputFormat(format)]

    sections = [
        SYSTEM_INSTRUCTION,
        OUTPUT_SCHEMA_INSTRUCTION,
        f"Content to summarize:\n---\n{content}\n---",
        "User Requirements:\n"
        f"- Summary Length Instruction: {length_instruction}\n"
        f"- Output Format Instruction for the 'summary' field: {format_instruction}\n"
        f"- Focus Area Instruction: {focus_instruction(focus_area)}",
        CLOSING_INSTRUCTION,
    ]
    return "\n\n".join(sections) + "\n"
