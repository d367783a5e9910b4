"""
Tests for SceneEngine (engine.py).
Covers navigation and unlocking, per-type scoring, finalization, retake
variation and collaborator failure handling.
"""
import pytest
from factories import (
    RecordingBackend,
    RecordingNarrator,
    StubGenerator,
    make_engine,
    make_full_module,
)

from bridgefast.engine import ModuleNotFound, quiz_score
from bridgefast.models import AttemptContext, SceneChoice, SceneOverride, SceneType
from bridgefast.timer import TimerPhase


CANDIDATE = "cand-1"


@pytest.fixture
def full_engine(backend, narrator):
    eng = make_engine(make_full_module(), backend=backend, narrator=narrator)
    eng.load("full-module", CANDIDATE)
    yield eng
    eng.leave()


def _play_to_quiz(eng):
    """From scene 0 of the full module, skip to the quiz scene (index 3)."""
    eng.go_to_next()
    eng.go_to_next()
    eng.set_reflection_text("x" * 20)
    eng.submit_reflection()
    assert eng.current_scene.type == SceneType.QUIZ


class TestLoad:
    def test_load_by_slug_and_id(self, engine):
        assert engine.load("test-module", CANDIDATE).id == "module-test"
        assert engine.load("module-test", CANDIDATE).slug == "test-module"

    def test_unknown_module_raises_and_creates_no_state(self, engine, backend):
        with pytest.raises(ModuleNotFound):
            engine.load("no-such-module", CANDIDATE)
        assert engine.module is None
        assert engine.trace is None
        assert backend.calls == []

    def test_module_not_found_is_lookup_error(self, engine):
        with pytest.raises(LookupError):
            engine.load("missing", CANDIDATE)

    def test_initial_state(self, engine):
        engine.load("test-module", CANDIDATE)
        assert engine.current_index == 0
        assert engine.total_score == 0
        assert engine.module_completed is False
        assert [e.completed for e in engine.tracker.entries()] == [False, False, False]
        assert engine.attempt == AttemptContext(is_retake=False, attempt_number=1)

    def test_timer_started_from_duration(self, engine):
        engine.load("test-module", CANDIDATE)
        snap = engine.timer_snapshot()
        assert snap.seconds_remaining == 300
        assert snap.phase == TimerPhase.RUNNING.value
        assert snap.is_running is True

    def test_first_narrative_scene_auto_narrated(self, engine, narrator):
        engine.load("test-module", CANDIDATE)
        assert len(narrator.spoken) == 1
        assert "**" not in narrator.spoken[0]


class TestNavigationAndUnlocking:
    def test_only_first_scene_unlocked_at_load(self, engine):
        engine.load("test-module", CANDIDATE)
        assert engine.is_scene_unlocked(0) is True
        assert engine.is_scene_unlocked(1) is False
        assert engine.is_scene_unlocked(2) is False

    @pytest.mark.parametrize("index", [-1, 3, 99])
    def test_out_of_range_never_unlocked(self, engine, index):
        engine.load("test-module", CANDIDATE)
        assert engine.is_scene_unlocked(index) is False

    def test_navigate_to_locked_scene_rejected(self, engine):
        engine.load("test-module", CANDIDATE)
        assert engine.navigate_to(2) is False
        assert engine.current_index == 0

    def test_go_to_next_marks_current_completed_with_zero(self, engine):
        engine.load("test-module", CANDIDATE)
        assert engine.go_to_next() is True
        entry = engine.progress_entry("s-narrative")
        assert entry.completed is True and entry.score == 0
        assert engine.current_index == 1
        assert engine.is_scene_unlocked(1) is True
        assert engine.is_scene_unlocked(2) is False

    def test_go_to_previous_keeps_progress(self, engine):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        assert engine.go_to_previous() is True
        assert engine.current_index == 0
        assert engine.tracker.is_completed("s-narrative")

    def test_previous_at_first_scene_is_noop(self, engine):
        engine.load("test-module", CANDIDATE)
        assert engine.go_to_previous() is False
        assert engine.current_index == 0

    def test_next_at_last_scene_is_noop(self, engine):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        engine.go_to_next()
        assert engine.is_last_scene
        assert engine.go_to_next() is False
        assert engine.current_index == 2

    def test_navigate_to_unlocked_scene(self, engine):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        engine.go_to_previous()
        assert engine.navigate_to(1) is True
        assert engine.current_index == 1

    def test_navigation_clears_transient_state(self, engine):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        engine.select_choice("c-ok")
        engine.go_to_previous()
        engine.navigate_to(1)
        assert engine.interaction.selected_choice is None
        assert engine.interaction.show_feedback is False

    def test_narration_cancelled_on_scene_change(self, engine, narrator):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        assert narrator.cancels == 1

    def test_narrative_spoken_once_per_scene(self, engine, narrator):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        engine.go_to_previous()
        assert len(narrator.spoken) == 1


class TestChoiceScenes:
    def test_submit_requires_selection(self, engine):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        assert engine.submit_choice() is False
        assert engine.total_score == 0

    def test_unknown_choice_rejected(self, engine):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        assert engine.select_choice("c-nope") is False

    @pytest.mark.parametrize("choice_id,points", [("c-best", 30), ("c-ok", 10), ("c-poor", 5)])
    def test_submit_records_choice_points(self, engine, choice_id, points):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        assert engine.select_choice(choice_id) is True
        assert engine.submit_choice() is True
        entry = engine.progress_entry("s-choice")
        assert entry.completed and entry.score == points
        assert entry.selected_choice == choice_id
        assert engine.total_score == points
        assert engine.interaction.show_feedback is True
        assert engine.current_index == 1, "choice submission must not auto-advance"

    def test_feedback_visible_after_submit(self, engine):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        assert engine.choice_feedback() is None
        engine.select_choice("c-best")
        engine.submit_choice()
        chosen = engine.choice_feedback()
        assert isinstance(chosen, SceneChoice)
        assert chosen.feedback == "Great."

    def test_resubmission_blocked_while_feedback_shown(self, engine):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        engine.select_choice("c-poor")
        engine.submit_choice()
        assert engine.select_choice("c-best") is False
        assert engine.submit_choice() is False
        assert engine.total_score == 5

    def test_completed_choice_not_rescored_after_revisit(self, engine):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        engine.select_choice("c-poor")
        engine.submit_choice()
        engine.go_to_next()
        engine.go_to_previous()
        assert engine.select_choice("c-best") is False
        assert engine.submit_choice() is False
        assert engine.total_score == 5
        assert engine.choice_feedback().id == "c-poor"

    def test_skipped_choice_scene_scores_zero(self, engine):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        engine.go_to_next()
        assert engine.progress_entry("s-choice").score == 0
        engine.go_to_previous()
        assert engine.select_choice("c-best") is False

    def test_submit_on_wrong_scene_type(self, engine):
        engine.load("test-module", CANDIDATE)
        assert engine.select_choice("c-best") is False
        assert engine.submit_quiz() is False
        assert engine.submit_reflection() is False
        assert engine.total_score == 0


class TestReflectionScenes:
    @pytest.mark.parametrize("length,accepted", [(0, False), (19, False), (20, True), (21, True)])
    def test_min_length_boundary_inclusive(self, full_engine, length, accepted):
        full_engine.go_to_next()
        full_engine.go_to_next()
        assert full_engine.current_scene.type == SceneType.REFLECTION
        full_engine.set_reflection_text("x" * length)
        assert full_engine.submit_reflection() is accepted
        assert full_engine.total_score == (10 if accepted else 0)

    def test_accepted_reflection_auto_advances(self, full_engine):
        full_engine.go_to_next()
        full_engine.go_to_next()
        text = "I told my colleague I needed focus time."
        full_engine.set_reflection_text(text)
        full_engine.submit_reflection()
        assert full_engine.current_index == 3
        entry = full_engine.progress_entry("f-3")
        assert entry.completed and entry.score == 10 and entry.reflection == text

    def test_rejected_reflection_leaves_no_trace_in_progress(self, full_engine):
        full_engine.go_to_next()
        full_engine.go_to_next()
        full_engine.set_reflection_text("too short")
        full_engine.submit_reflection()
        assert full_engine.current_index == 2
        assert full_engine.tracker.is_completed("f-3") is False


class TestQuizScenes:
    @pytest.mark.parametrize("correct,total,expected", [
        (0, 3, 0), (1, 3, 10), (2, 3, 20), (3, 3, 30),
        (1, 4, 8), (3, 4, 23), (1, 8, 4), (0, 0, 0),
    ])
    def test_quiz_score_rounds_half_up(self, correct, total, expected):
        assert quiz_score(correct, total) == expected

    def test_submit_requires_every_answer(self, full_engine):
        _play_to_quiz(full_engine)
        full_engine.answer_question(0, 2)
        full_engine.answer_question(1, 2)
        full_engine.answer_question(2, 2)
        assert full_engine.submit_quiz() is False
        assert full_engine.tracker.is_completed("f-4") is False

    @pytest.mark.parametrize("n_correct,points", [(0, 0), (1, 8), (2, 15), (3, 23), (4, 30)])
    def test_quiz_scoring(self, full_engine, n_correct, points):
        _play_to_quiz(full_engine)
        for q in range(4):
            full_engine.answer_question(q, 2 if q < n_correct else 0)
        assert full_engine.submit_quiz() is True
        entry = full_engine.progress_entry("f-4")
        assert entry.score == points
        assert full_engine.total_score == 10 + points
        assert full_engine.current_index == 3, "quiz submission must not auto-advance"

    @pytest.mark.parametrize("question,option", [(-1, 0), (4, 0), (0, -1), (0, 4)])
    def test_out_of_range_answers_rejected(self, full_engine, question, option):
        _play_to_quiz(full_engine)
        assert full_engine.answer_question(question, option) is False

    def test_quiz_read_only_after_submit(self, full_engine):
        _play_to_quiz(full_engine)
        for q in range(4):
            full_engine.answer_question(q, 2)
        full_engine.submit_quiz()
        assert full_engine.answer_question(0, 1) is False
        assert full_engine.submit_quiz() is False
        assert full_engine.progress_entry("f-4").quiz_answers == [2, 2, 2, 2]

    def test_quiz_review_explains_wrong_answers_only(self, full_engine):
        _play_to_quiz(full_engine)
        assert full_engine.quiz_review() == []
        for q, a in enumerate([2, 0, 2, 1]):
            full_engine.answer_question(q, a)
        full_engine.submit_quiz()
        review = full_engine.quiz_review()
        assert [r.correct for r in review] == [True, False, True, False]
        assert review[0].explanation == ""
        assert review[1].explanation == "Because of reason 2."
        assert review[3].learner_index == 1 and review[3].correct_index == 2


class TestCompletion:
    def _finish(self, engine):
        engine.load("test-module", CANDIDATE)
        engine.go_to_next()
        engine.select_choice("c-best")
        engine.submit_choice()
        engine.go_to_next()
        return engine.complete_module()

    def test_three_scene_end_to_end(self, engine, backend):
        assert self._finish(engine) is True
        assert engine.total_score == 30
        assert engine.module_completed is True
        assert backend.finalized == [(CANDIDATE, "module-test", 30, 1)]
        assert backend.events == [(CANDIDATE, "module-test", 30)]
        assert backend.calls == [
            "check_retake_status",
            "save_scene_progress",
            "save_scene_progress",
            "save_scene_progress",
            "finalize_module",
            "record_completion_event",
        ]

    def test_summary_after_completion(self, engine):
        self._finish(engine)
        summary = engine.summary()
        assert summary.total_score == 30
        assert summary.passed is True
        assert summary.completed_scenes == summary.total_scenes == 3
        assert summary.progress_pct == 100.0
        assert summary.module_completed is True

    def test_score_conservation(self, engine):
        self._finish(engine)
        assert engine.tracker.total_score() == engine.total_score

    def test_complete_only_once(self, engine, backend):
        self._finish(engine)
        assert engine.complete_module() is False
        assert len(backend.finalized) == 1

    def test_complete_rejected_before_completion_scene(self, engine, backend):
        engine.load("test-module", CANDIDATE)
        assert engine.complete_module() is False
        assert backend.finalized == []

    def test_timer_stopped_on_completion(self, engine):
        self._finish(engine)
        assert engine.timer.is_running is False
        assert engine.timer_snapshot().phase == TimerPhase.STOPPED.value
        remaining = engine.timer.seconds_remaining
        engine.timer.tick()
        assert engine.timer.seconds_remaining == remaining

    def test_leave_stops_timer(self, engine):
        engine.load("test-module", CANDIDATE)
        engine.leave()
        assert engine.timer.is_running is False


class TestCollaboratorFailures:
    def test_persistence_failures_do_not_roll_back(self, three_scene_module):
        backend = RecordingBackend(fail_on=("save_scene_progress", "finalize_module"))
        eng = make_engine(three_scene_module, backend=backend)
        eng.load("test-module", CANDIDATE)
        eng.go_to_next()
        eng.select_choice("c-best")
        eng.submit_choice()
        eng.go_to_next()
        assert eng.complete_module() is True
        assert eng.total_score == 30
        assert eng.module_completed is True
        failures = eng.trace.failures()
        assert len(failures) == 4
        assert "record_completion_event" not in backend.calls, "audit write only follows a successful finalize"

    def test_audit_failure_is_traced(self, three_scene_module):
        backend = RecordingBackend(fail_on=("record_completion_event",))
        eng = make_engine(three_scene_module, backend=backend)
        eng.load("test-module", CANDIDATE)
        eng.go_to_next()
        eng.go_to_next()
        eng.complete_module()
        assert backend.finalized == [(CANDIDATE, "module-test", 0, 1)]
        assert [f.kind for f in eng.trace.failures()] == ["finalize"]

    def test_retake_lookup_failure_defaults_to_first_attempt(self, three_scene_module):
        backend   = RecordingBackend(fail_on=("check_retake_status",))
        generator = StubGenerator()
        eng = make_engine(three_scene_module, backend=backend, generator=generator)
        eng.load("test-module", CANDIDATE)
        assert eng.attempt == AttemptContext()
        assert generator.calls == []
        assert eng.trace.failures()[0].status == "fallback"

    def test_narrator_failure_does_not_block_load(self, three_scene_module):
        eng = make_engine(three_scene_module, narrator=RecordingNarrator(fail=True))
        eng.load("test-module", CANDIDATE)
        assert eng.go_to_next() is True


class TestRetakeVariation:
    _OVERRIDE = SceneOverride(
        content="A new scenario.",
        choices=(
            SceneChoice(id="x-1", text="New best", is_correct=True,  feedback="Yes.", points=40),
            SceneChoice(id="x-2", text="New poor", is_correct=False, feedback="No.",  points=5),
        ),
    )

    def _retake_engine(self, module, generator, attempt=AttemptContext(is_retake=True, attempt_number=2)):
        return make_engine(module, backend=RecordingBackend(attempt=attempt), generator=generator)

    def test_variation_applied_on_retake(self, three_scene_module):
        generator = StubGenerator({"s-choice": self._OVERRIDE})
        eng = self._retake_engine(three_scene_module, generator)
        eng.load("test-module", CANDIDATE)
        eng.go_to_next()
        assert eng.current_scene.content == "A new scenario."
        assert [c.id for c in eng.current_scene.choices] == ["x-1", "x-2"]
        eng.select_choice("x-1")
        eng.submit_choice()
        assert eng.total_score == 40
        assert generator.calls == [("Test Module", ("Professionalism", "Judgment Quality"), 2)]

    def test_catalog_scene_not_mutated(self, three_scene_module):
        eng = self._retake_engine(three_scene_module, StubGenerator({"s-choice": self._OVERRIDE}))
        eng.load("test-module", CANDIDATE)
        base = three_scene_module.scene_by_id("s-choice")
        assert base.content == "What do you do?"
        assert base.choices[0].id == "c-best"

    @pytest.mark.parametrize("attempt", [
        AttemptContext(is_retake=False, attempt_number=1),
        AttemptContext(is_retake=True,  attempt_number=1),
    ])
    def test_no_generation_without_retake(self, three_scene_module, attempt):
        generator = StubGenerator({"s-choice": self._OVERRIDE})
        eng = self._retake_engine(three_scene_module, generator, attempt=attempt)
        eng.load("test-module", CANDIDATE)
        assert generator.calls == []
        assert eng.variations == {}

    def test_generation_failure_falls_back_to_base(self, three_scene_module):
        eng = self._retake_engine(three_scene_module, StubGenerator(error=RuntimeError("model down")))
        eng.load("test-module", CANDIDATE)
        assert eng.variations == {}
        assert list(eng.scenes) == list(three_scene_module.scenes)
        assert eng.trace.failures()[0].kind == "generate"

    def test_blocked_overrides_dropped(self, three_scene_module):
        two_correct = SceneOverride(choices=(
            SceneChoice(id="y-1", text="A", is_correct=True, feedback="", points=10),
            SceneChoice(id="y-2", text="B", is_correct=True, feedback="", points=10),
        ))
        generator = StubGenerator({"s-choice": two_correct, "ghost-scene": SceneOverride(title="Boo")})
        eng = self._retake_engine(three_scene_module, generator)
        eng.load("test-module", CANDIDATE)
        assert eng.variations == {}
        eng.go_to_next()
        assert eng.current_scene.choices[0].id == "c-best"

    def test_mock_generator_used_by_default(self, three_scene_module):
        eng = self._retake_engine(three_scene_module, None)
        eng.load("test-module", CANDIDATE)
        assert set(eng.variations) == {"s-choice"}
        ids = sorted(c.id for c in eng.scenes[1].choices)
        assert ids == ["c-best", "c-ok", "c-poor"]
