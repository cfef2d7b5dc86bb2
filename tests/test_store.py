"""Tests for the in-memory analysis history and settings."""

import pytest

from bug_hunter.analyzer import analyze
from bug_hunter.config import DEFAULT_HISTORY_SIZE, DEFAULT_MAX_CODE_BYTES, Settings
from bug_hunter.models import Analysis
from bug_hunter.store import AnalysisStore


def _analysis(code: str = "var a = 1;", language: str = "javascript") -> Analysis:
    result = analyze(code, language)
    return Analysis(code=code, language=language, bugs=result.bugs, summary=result.summary)


class TestAnalysisStore:
    def test_save_assigns_id_and_timestamp(self):
        store = AnalysisStore()

        analysis_id = store.save(_analysis())

        saved = store.get(analysis_id)
        assert len(analysis_id) == 32
        assert saved.id == analysis_id
        assert saved.created_at is not None
        assert saved.code == "var a = 1;"
        assert saved.summary.info == 1

    def test_save_does_not_mutate_input(self):
        store = AnalysisStore()
        analysis = _analysis()

        store.save(analysis)

        assert analysis.id is None
        assert analysis.created_at is None

    def test_get_missing(self):
        assert AnalysisStore().get("missing") is None

    def test_list_recent_newest_first_without_code(self):
        store = AnalysisStore()
        first = store.save(_analysis("var a = 1;"))
        second = store.save(_analysis("eval(x)"))

        recent = store.list_recent()

        assert [analysis.id for analysis in recent] == [second, first]
        assert all(analysis.code is None for analysis in recent)
        assert store.get(first).code == "var a = 1;"

    def test_list_recent_limit(self):
        store = AnalysisStore()
        ids = [store.save(_analysis()) for _ in range(5)]

        recent = store.list_recent(limit=2)

        assert [analysis.id for analysis in recent] == [ids[4], ids[3]]

    def test_oldest_dropped_when_full(self):
        store = AnalysisStore(max_size=2)
        first = store.save(_analysis())
        store.save(_analysis())
        store.save(_analysis())

        assert len(store) == 2
        assert store.get(first) is None

    def test_delete(self):
        store = AnalysisStore()
        analysis_id = store.save(_analysis())

        assert store.delete(analysis_id) is True
        assert store.get(analysis_id) is None
        assert store.delete(analysis_id) is False

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            AnalysisStore(max_size=0)


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BUG_HUNTER_MAX_CODE_BYTES", raising=False)
        monkeypatch.delenv("BUG_HUNTER_HISTORY_SIZE", raising=False)

        settings = Settings.from_env()

        assert settings.max_code_bytes == DEFAULT_MAX_CODE_BYTES
        assert settings.history_size == DEFAULT_HISTORY_SIZE

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("BUG_HUNTER_MAX_CODE_BYTES", "2048")
        monkeypatch.setenv("BUG_HUNTER_HISTORY_SIZE", "10")

        settings = Settings.from_env()

        assert settings == Settings(max_code_bytes=2048, history_size=10)

    def test_invalid_value(self, monkeypatch):
        monkeypatch.setenv("BUG_HUNTER_HISTORY_SIZE", "lots")

        with pytest.raises(ValueError, match="BUG_HUNTER_HISTORY_SIZE"):
            Settings.from_env()
