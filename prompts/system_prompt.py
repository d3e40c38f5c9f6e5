"""Prompt text used to build a summarization request.

The model is told to return **only** a JSON object so the response parser can
validate it deterministically.  ``engine.prompt_builder`` stitches these
pieces together; nothing here is formatted at import time.
"""

from schemas.request import OutputFormat, SummaryLength

# ── Preamble ───────────────────────────────────────────────────────────

SYSTEM_INSTRUCTION = """
System Instruction: You are an advanced content summarization assistant. Analyze the
provided content and produce a structured summary tailored to the user's requirements.
Preserve the original context and tone.
Identify key insights, main points, and actionable items.
""".strip()

# ── Output contract ────────────────────────────────────────────────────

OUTPUT_SCHEMA_INSTRUCTION = """
Return your response as a single, valid JSON object that follows the structure below
exactly. Do NOT include any text, comments, or markdown formatting (such as ``` fences)
outside of this JSON object.
Ensure all strings are properly escaped.
Arrays of strings ("keyInsights", "actionableItems", "suggestedQuestions") must have no
trailing commas and every element must be quoted, e.g. ["Insight 1", "Insight 2"], or []
when empty.

The JSON object must have exactly these four keys:
{
  "summary": "string",
  "keyInsights": ["string", ...],
  "actionableItems": ["string", ...],
  "suggestedQuestions": ["string", ...]
}

Details for each field:
- "summary": (string) The main summarized text, following the length and format instructions below.
- "keyInsights": (array of strings) 2-5 key insights drawn from the content, or [] if there are none.
- "actionableItems": (array of strings) Actionable items, deadlines, or critical information, or [] if there are none.
- "suggestedQuestions": (array of strings) 2-3 follow-up questions or areas needing clarification, or [] if there are none.
""".strip()

# ── Per-request instructions ───────────────────────────────────────────

LENGTH_INSTRUCTIONS: dict[SummaryLength, str] = {
    SummaryLength.BRIEF: (
        "Provide a brief overview (50-100 words) containing only the essential points."
    ),
    SummaryLength.STANDARD: (
        "Provide a standard summary (150-300 words) covering the main ideas with some supporting details."
    ),
    SummaryLength.DETAILED: (
        "Provide a detailed analysis (300-500 words) offering a comprehensive overview with context."
    ),
}

FORMAT_INSTRUCTIONS: dict[OutputFormat, str] = {
    OutputFormat.PARAGRAPH: (
        "The 'summary' field should contain the main summarized text as standard prose paragraphs."
    ),
    OutputFormat.BULLET_POINTS: (
        "The 'summary' field should contain the main summarized text as a list of bullet points. "
        "Each bullet point must start with a hyphen '-' and be on its own line "
        "(e.g. '- Point 1\\n- Point 2')."
    ),
    OutputFormat.EXECUTIVE_SUMMARY: (
        "The 'summary' field should contain a business-focused executive summary. "
        "Where appropriate, highlight recommendations or key decisions within it."
    ),
}

FOCUS_INSTRUCTION_TEMPLATE = 'Pay special attention to the following focus area: "{focus_area}".'
GENERAL_FOCUS_INSTRUCTION = "Provide a general summary."

CLOSING_INSTRUCTION = "Ensure the entire response is a single, valid JSON object."
