"""Response Validator — the only boundary between raw LLM text and a result."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from engine.errors import ParseError, SchemaError
from schemas.response import SummarizationResult

logger = logging.getLogger("summarist.engine.response_parser")

# Whole-text fence, optional language tag: ```json\n{...}\n```
_FENCE_RE = re.compile(r"^```(\w*)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)

_LIST_FIELDS: dict[str, str] = {
    "keyInsights": "key_insights",
    "actionableItems": "actionable_items",
    "suggestedQuestions": "suggested_questions",
}


def strip_code_fence(raw_text: str) -> str:
    """Return the interior of a fence that spans the entire text, else the trimmed text."""
    text = raw_text.strip()
    match = _FENCE_RE.match(text)
    if match and match.group(2):
        return match.group(2).strip()
    return text


def _coerce_string_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Response field '%s' is not an array; defaulting to empty.", key)
        return []

    items = [item for item in value if isinstance(item, str)]
    if len(items) != len(value):
        logger.warning("Dropped %d non-string item(s) from '%s'.", len(value) - len(items), key)
    return items


def parse_result(raw_text: str) -> SummarizationResult:
    """Validate raw LLM output and return a fully populated result.

    Raises ``ParseError`` when the text is not JSON and ``SchemaError`` when
    the ``summary`` field is missing or not a string.  Optional list fields
    never fail the result: missing or malformed ones become ``[]``.
    """
    text = strip_code_fence(raw_text)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("Failed to parse LLM JSON: %s\nRaw: %s", exc, text[:500])
        raise ParseError(text, str(exc)) from exc

    if not isinstance(data, dict) or not isinstance(data.get("summary"), str):
        raise SchemaError("missing or invalid summary field")

    fields = {attr: _coerce_string_list(data, key) for key, attr in _LIST_FIELDS.items()}
    return SummarizationResult(summary=data["summary"], **fields)
