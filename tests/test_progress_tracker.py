"""
Tests for SceneProgressTracker (progress_tracker.py).
"""
import pytest
from factories import make_full_module

from bridgefast.models import SceneProgressEntry
from bridgefast.progress_tracker import SceneProgressTracker


@pytest.fixture
def tracker():
    t = SceneProgressTracker()
    t.initialize(make_full_module())
    return t


class TestSceneProgressTracker:
    def test_initialize_creates_zeroed_entries(self, tracker):
        entries = tracker.entries()
        assert [e.scene_id for e in entries] == ["f-1", "f-2", "f-3", "f-4", "f-5"]
        assert all(not e.completed and e.score == 0 for e in entries)
        assert len(tracker) == 5

    def test_record_replaces_entry(self, tracker):
        tracker.record("f-2", SceneProgressEntry("f-2", completed=True, score=30, selected_choice="c-best"))
        assert tracker.is_completed("f-2")
        assert tracker.get("f-2").selected_choice == "c-best"

    def test_record_unknown_scene_raises(self, tracker):
        with pytest.raises(KeyError):
            tracker.record("nope", SceneProgressEntry("nope", completed=True))

    def test_get_unknown_returns_none(self, tracker):
        assert tracker.get("nope") is None
        assert tracker.is_completed("nope") is False

    def test_totals_count_completed_only(self, tracker):
        tracker.record("f-2", SceneProgressEntry("f-2", completed=True, score=30))
        tracker.record("f-3", SceneProgressEntry("f-3", completed=True, score=10))
        tracker.record("f-4", SceneProgressEntry("f-4", completed=False, score=99))
        assert tracker.completed_count() == 2
        assert tracker.total_score() == 40

    def test_reinitialize_resets(self, tracker):
        tracker.record("f-2", SceneProgressEntry("f-2", completed=True, score=30))
        tracker.initialize(make_full_module())
        assert tracker.completed_count() == 0
