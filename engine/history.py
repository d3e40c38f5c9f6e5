"""History Store — bounded, newest-first log of past summarizations."""

from __future__ import annotations

import logging
import time

from pydantic import TypeAdapter, ValidationError

from config import settings
from schemas.request import SummarizationRequest
from schemas.response import HistoryEntry, SummarizationResult
from services.storage import HISTORY_KEY, KeyValueStore

logger = logging.getLogger("summarist.engine.history")

_ENTRIES = TypeAdapter(list[HistoryEntry])


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class HistoryStore:
    """Owns the persisted entry sequence; the only writer of ``HISTORY_KEY``.

    Invariant: ``entries`` is newest first, never longer than ``max_items``,
    and equal to what is in the durable store after every public call.
    The durable record is read on construction.
    """

    def __init__(self, store: KeyValueStore, *, max_items: int | None = None) -> None:
        self._store = store
        self.max_items = max_items if max_items is not None else settings.history_max_items
        self._entries: list[HistoryEntry] = []
        self.load()

    @property
    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def load(self) -> list[HistoryEntry]:
        """Read durable state.  Missing → empty; corrupt → cleared and empty."""
        try:
            raw = self._store.get(HISTORY_KEY)
        except UnicodeDecodeError as exc:
            logger.warning("Discarding undecodable history record: %s", exc)
            self._store.remove(HISTORY_KEY)
            self._entries = []
            return []

        if raw is None:
            self._entries = []
            return []

        try:
            entries = _ENTRIES.validate_json(raw)
        except ValidationError as exc:
            logger.warning("Discarding unreadable history record: %s", exc.errors()[:1])
            self._store.remove(HISTORY_KEY)
            self._entries = []
            return []

        if len(entries) > self.max_items:
            entries = entries[: self.max_items]
            self._persist(entries)
        self._entries = entries
        return list(entries)

    def append(self, entry: HistoryEntry) -> None:
        updated = [entry, *self._entries][: self.max_items]
        self._persist(updated)
        self._entries = updated

    def record(self, request: SummarizationRequest, result: SummarizationResult) -> HistoryEntry:
        """Create the entry for a successful summarization and append it."""
        timestamp = _now_ms()
        if self._entries and timestamp <= self._entries[0].timestamp:
            timestamp = self._entries[0].timestamp + 1

        entry = HistoryEntry(
            id=str(timestamp),
            timestamp=timestamp,
            content=request.content,
            summary_length=request.length,
            output_format=request.format,
            focus_area=request.focus_area or "",
            result=result,
        )
        self.append(entry)
        return entry

    def get(self, entry_id: str) -> HistoryEntry | None:
        return next((e for e in self._entries if e.id == entry_id), None)

    def clear(self) -> None:
        self._store.remove(HISTORY_KEY)
        self._entries = []

    def _persist(self, entries: list[HistoryEntry]) -> None:
        self._store.set(HISTORY_KEY, _ENTRIES.dump_json(entries, by_alias=True).decode("utf-8"))
