"""Tests for local persistence (file store, history store, language preference)."""

from __future__ import annotations

import json

import pytest

from engine.history import HistoryStore
from engine.labels import LanguagePreference, format_label, length_label, section_label
from schemas.request import OutputFormat, SummarizationRequest, SummaryLength
from schemas.response import HistoryEntry, SummarizationResult
from services.storage import HISTORY_KEY, LANGUAGE_KEY, FileStore


# ── Helpers ────────────────────────────────────────────────────────────

@pytest.fixture()
def store(tmp_path) -> FileStore:
    return FileStore(tmp_path / "data")


def _entry(n: int) -> HistoryEntry:
    return HistoryEntry(
        id=str(1_700_000_000_000 + n),
        timestamp=1_700_000_000_000 + n,
        content=f"Content {n}",
        summary_length=SummaryLength.STANDARD,
        output_format=OutputFormat.BULLET_POINTS,
        focus_area="",
        result=SummarizationResult(summary=f"Summary {n}", key_insights=[f"i{n}"]),
    )


# ── FileStore tests ────────────────────────────────────────────────────

class TestFileStore:
    def test_get_missing_returns_none(self, store):
        assert store.get("nothing") is None

    def test_set_get_remove(self, store):
        store.set("k", "value")
        assert store.get("k") == "value"
        store.remove("k")
        assert store.get("k") is None

    def test_remove_missing_is_noop(self, store):
        store.remove("never-set")

    def test_no_temp_files_left(self, store):
        store.set("k", "one")
        store.set("k", "two")
        assert [p.name for p in store.root.iterdir()] == ["k.json"]

    def test_rejects_path_like_keys(self, store):
        with pytest.raises(ValueError):
            store.set("../escape", "x")


# ── HistoryStore tests ─────────────────────────────────────────────────

class TestHistoryStore:
    def test_load_empty(self, store):
        assert HistoryStore(store).load() == []

    def test_cap_keeps_newest_first(self, store):
        history = HistoryStore(store, max_items=20)
        for n in range(25):
            history.append(_entry(n))

        ids = [e.id for e in history.entries]
        assert len(ids) == 20
        assert ids == [_entry(n).id for n in range(24, 4, -1)]
        assert [e.id for e in HistoryStore(store).load()] == ids

    def test_persisted_format(self, store):
        history = HistoryStore(store)
        history.append(_entry(1))

        data = json.loads(store.get(HISTORY_KEY))
        assert set(data[0]) == {
            "id", "timestamp", "content", "summaryLength", "outputFormat", "focusArea", "result",
        }
        assert data[0]["summaryLength"] == "STANDARD"
        assert data[0]["outputFormat"] == "BULLET_POINTS"
        assert data[0]["result"]["keyInsights"] == ["i1"]

    def test_round_trip(self, store):
        HistoryStore(store).append(_entry(7))
        assert HistoryStore(store).load() == [_entry(7)]

    def test_clear_then_load(self, store):
        history = HistoryStore(store)
        history.append(_entry(1))
        history.clear()

        assert history.entries == []
        assert store.get(HISTORY_KEY) is None
        assert HistoryStore(store).load() == []

    @pytest.mark.parametrize("garbage", ["not json at all", '{"id": 1}', '[{"id": "x"}]'])
    def test_corrupt_record_is_discarded(self, store, garbage):
        store.set(HISTORY_KEY, garbage)

        assert HistoryStore(store).load() == []
        assert store.get(HISTORY_KEY) is None

    def test_undecodable_record_is_discarded(self, store):
        store.root.mkdir(parents=True)
        (store.root / f"{HISTORY_KEY}.json").write_bytes(b"\xff\xfe\x80garbage")

        history = HistoryStore(store)

        assert history.entries == []
        assert history.load() == []
        assert store.get(HISTORY_KEY) is None

    def test_fresh_instance_appends_to_existing_history(self, store):
        first = HistoryStore(store)
        for n in range(5):
            first.append(_entry(n))

        HistoryStore(store).append(_entry(99))

        ids = [e.id for e in HistoryStore(store).load()]
        assert ids == [_entry(n).id for n in (99, 4, 3, 2, 1, 0)]

    def test_entries_available_without_explicit_load(self, store):
        HistoryStore(store).append(_entry(1))
        assert HistoryStore(store).entries == [_entry(1)]

    def test_oversized_record_truncated_on_load(self, store):
        big = HistoryStore(store, max_items=30)
        for n in range(30):
            big.append(_entry(n))

        small = HistoryStore(store, max_items=20)
        assert len(small.load()) == 20
        assert len(json.loads(store.get(HISTORY_KEY))) == 20

    def test_record_assigns_unique_increasing_ids(self, store):
        history = HistoryStore(store)
        request = SummarizationRequest(content="Text", length=SummaryLength.BRIEF, format=OutputFormat.PARAGRAPH)
        result = SummarizationResult(summary="S")

        first = history.record(request, result)
        second = history.record(request, result)

        assert second.timestamp > first.timestamp
        assert first.id != second.id
        assert history.entries[0] == second
        assert second.focus_area == ""
        assert second.summary_length is SummaryLength.BRIEF

    def test_get_by_id(self, store):
        history = HistoryStore(store)
        history.append(_entry(3))
        assert history.get(_entry(3).id) == _entry(3)
        assert history.get("missing") is None


# ── Labels & language tests ────────────────────────────────────────────

class TestLabels:
    def test_english_labels(self):
        assert length_label(SummaryLength.STANDARD) == "Standard (150-300 words)"
        assert format_label(OutputFormat.BULLET_POINTS) == "Bullet Points"
        assert section_label("keyInsights") == "Key Insights"

    def test_unknown_language_falls_back_to_english(self):
        assert format_label(OutputFormat.PARAGRAPH, "xx") == "Paragraph"

    def test_every_language_covers_every_member(self):
        from engine.labels import FORMAT_LABELS, LENGTH_LABELS, SECTION_LABELS

        for language in LENGTH_LABELS:
            assert set(LENGTH_LABELS[language]) == set(SummaryLength)
            assert set(FORMAT_LABELS[language]) == set(OutputFormat)
            assert set(SECTION_LABELS[language]) == set(SECTION_LABELS["en"])


class TestLanguagePreference:
    def test_default_when_unset(self, store):
        assert LanguagePreference(store, default="en").get() == "en"

    def test_set_persists(self, store):
        LanguagePreference(store).set("ar")
        preference = LanguagePreference(store)
        assert preference.get() == "ar"
        assert preference.direction() == "rtl"

    def test_unsupported_stored_value_ignored(self, store):
        store.set(LANGUAGE_KEY, "klingon")
        assert LanguagePreference(store, default="es").get() == "es"

    def test_set_rejects_unsupported(self, store):
        with pytest.raises(ValueError):
            LanguagePreference(store).set("klingon")
        assert store.get(LANGUAGE_KEY) is None
