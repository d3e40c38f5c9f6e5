"""Display text for enum values and result sections, plus the language preference."""

from __future__ import annotations

import logging

from config import settings
from schemas.request import OutputFormat, SummaryLength
from services.storage import LANGUAGE_KEY, KeyValueStore

logger = logging.getLogger("summarist.engine.labels")

FALLBACK_LANGUAGE = "en"
RTL_LANGUAGES = frozenset({"ar"})

LENGTH_LABELS: dict[str, dict[SummaryLength, str]] = {
    "en": {
        SummaryLength.BRIEF: "Brief (50-100 words)",
        SummaryLength.STANDARD: "Standard (150-300 words)",
        SummaryLength.DETAILED: "Detailed (300-500 words)",
    },
    "es": {
        SummaryLength.BRIEF: "Breve (50-100 palabras)",
        SummaryLength.STANDARD: "Estándar (150-300 palabras)",
        SummaryLength.DETAILED: "Detallado (300-500 palabras)",
    },
    "ar": {
        SummaryLength.BRIEF: "موجز (50-100 كلمة)",
        SummaryLength.STANDARD: "قياسي (150-300 كلمة)",
        SummaryLength.DETAILED: "مفصل (300-500 كلمة)",
    },
}

FORMAT_LABELS: dict[str, dict[OutputFormat, str]] = {
    "en": {
        OutputFormat.PARAGRAPH: "Paragraph",
        OutputFormat.BULLET_POINTS: "Bullet Points",
        OutputFormat.EXECUTIVE_SUMMARY: "Executive Summary",
    },
    "es": {
        OutputFormat.PARAGRAPH: "Párrafo",
        OutputFormat.BULLET_POINTS: "Viñetas",
        OutputFormat.EXECUTIVE_SUMMARY: "Resumen ejecutivo",
    },
    "ar": {
        OutputFormat.PARAGRAPH: "فقرة",
        OutputFormat.BULLET_POINTS: "نقاط",
        OutputFormat.EXECUTIVE_SUMMARY: "ملخص تنفيذي",
    },
}

SECTION_LABELS: dict[str, dict[str, str]] = {
    "en": {
        "summary": "Summary",
        "keyInsights": "Key Insights",
        "actionableItems": "Actionable Items",
        "suggestedQuestions": "Suggested Questions",
    },
    "es": {
        "summary": "Resumen",
        "keyInsights": "Ideas clave",
        "actionableItems": "Acciones a realizar",
        "suggestedQuestions": "Preguntas sugeridas",
    },
    "ar": {
        "summary": "الملخص",
        "keyInsights": "رؤى رئيسية",
        "actionableItems": "إجراءات قابلة للتنفيذ",
        "suggestedQuestions": "أسئلة مقترحة",
    },
}

SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(LENGTH_LABELS)


def length_label(length: SummaryLength, language: str = FALLBACK_LANGUAGE) -> str:
    return LENGTH_LABELS.get(language, LENGTH_LABELS[FALLBACK_LANGUAGE])[length]


def format_label(fmt: OutputFormat, language: str = FALLBACK_LANGUAGE) -> str:
    return FORMAT_LABELS.get(language, FORMAT_LABELS[FALLBACK_LANGUAGE])[fmt]


def section_label(section: str, language: str = FALLBACK_LANGUAGE) -> str:
    return SECTION_LABELS.get(language, SECTION_LABELS[FALLBACK_LANGUAGE])[section]


class LanguagePreference:
    """Persisted UI language, stored under ``LANGUAGE_KEY``."""

    def __init__(self, store: KeyValueStore, *, default: str | None = None) -> None:
        self._store = store
        default = default or settings.default_language
        self.default = default if default in SUPPORTED_LANGUAGES else FALLBACK_LANGUAGE

    def get(self) -> str:
        stored = self._store.get(LANGUAGE_KEY)
        if stored is None:
            return self.default
        stored = stored.strip()
        if stored not in SUPPORTED_LANGUAGES:
            logger.warning("Stored language %r is not supported; using %r.", stored, self.default)
            return self.default
        return stored

    def set(self, language: str) -> str:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported language {language!r}; choose from {', '.join(SUPPORTED_LANGUAGES)}."
            )
        self._store.set(LANGUAGE_KEY, language)
        return language

    def direction(self) -> str:
        return "rtl" if self.get() in RTL_LANGUAGES else "ltr"
