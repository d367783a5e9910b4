"""
engine.py — Interactive training scene engine
=============================================
Drives one candidate through one module: resolves retake status and
content variation at load, evaluates submissions per scene type, keeps the
running score, enforces sequential unlocking and finalizes the attempt on
the completion scene.

Scoring
-------
  choice       points of the selected option
  reflection   fixed 10 points (answer must reach the prompt's min_length)
  quiz         round_half_up(correct / questions × 30)
  narrative    0, recorded when the learner moves past it
  completion   0, recorded on finalize

Invariants
----------
  • total_score == Σ score of completed progress entries
  • a completed scene is never re-scored
  • scene i > 0 is reachable by navigate_to only when scene i-1 is completed

Failure handling
----------------
Submissions that fail validation return False and change nothing.  Calls
to the backend, generator and narrator are wrapped at the call site: the
failure is logged, appended to ``engine.trace`` and a default is used.
Local state is never rolled back because persistence failed.

Public API
----------
  SceneEngine.load(id_or_slug, candidate_id)
  go_to_next / go_to_previous / navigate_to / is_scene_unlocked
  select_choice / submit_choice
  set_reflection_text / submit_reflection
  answer_question / submit_quiz
  complete_module / leave
  summary / quiz_review / choice_feedback
"""

from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import Optional

from bridgefast.config import Settings, get_settings
from bridgefast.database import SqliteTrainingBackend, TrainingBackend
from bridgefast.guardrails import REFLECTION_POINTS, QUIZ_POINTS, GuardrailsPipeline
from bridgefast.models import (
    AttemptContext,
    ModuleSummary,
    QuestionReview,
    Scene,
    SceneChoice,
    SceneInteraction,
    SceneProgressEntry,
    SceneType,
    TimerSnapshot,
    TrainingModule,
    VariationMap,
)
from bridgefast.module_catalog import ModuleCatalog, get_catalog
from bridgefast.narration import NarrationController, Narrator
from bridgefast.progress_tracker import SceneProgressTracker
from bridgefast.scene_generation import SceneVariationGenerator, get_generator
from bridgefast.session_trace import SessionTrace
from bridgefast.timer import CountdownTimer, TimerTicker
from bridgefast.variation import resolve_module

logger = logging.getLogger(__name__)

QUIZ_ROUNDING = "half_up"


class ModuleNotFound(LookupError):
    """No catalog module has the requested id or slug."""


def quiz_score(correct: int, total: int) -> int:
    """Quiz points out of 30, rounded half-up (1/8 → 3.75 → 4, 1/4 → 7.5 → 8)."""
    if total <= 0:
        return 0
    return math.floor(Fraction(correct * QUIZ_POINTS, total) + Fraction(1, 2))


class SceneEngine:
    """
    Stateful player for a single module session.

    Usage::

        engine = SceneEngine(backend=SqliteTrainingBackend())
        engine.load("professional-boundaries", candidate_id="cand-42")
        engine.go_to_next()
        ...
        engine.complete_module()
    """

    def __init__(
        self,
        backend:    TrainingBackend | None = None,
        generator:  SceneVariationGenerator | None = None,
        narrator:   Narrator | None = None,
        catalog:    ModuleCatalog | None = None,
        settings:   Settings | None = None,
        run_clock:  bool = True,
    ) -> None:
        self._settings  = settings or get_settings()
        self.backend    = backend if backend is not None else SqliteTrainingBackend(self._settings.database.path)
        self.generator  = generator if generator is not None else get_generator(self._settings)
        self.catalog    = catalog if catalog is not None else get_catalog()
        self.narration  = NarrationController(narrator, muted=self._settings.player.narration_muted)
        self.guardrails = GuardrailsPipeline()
        self.run_clock  = run_clock

        self.module:        Optional[TrainingModule] = None
        self.candidate_id:  Optional[str] = None
        self.attempt:       AttemptContext = AttemptContext()
        self.variations:    VariationMap = {}
        self.scenes:        list[Scene] = []
        self.tracker        = SceneProgressTracker()
        self.interaction    = SceneInteraction()
        self.current_index  = 0
        self.total_score    = 0
        self.module_completed = False
        self.timer:  Optional[CountdownTimer] = None
        self._ticker: Optional[TimerTicker] = None
        self.trace:  Optional[SessionTrace] = None

    # ─── Loading ─────────────────────────────────────────────────────────────

    def load(self, id_or_slug: str, candidate_id: str) -> TrainingModule:
        """
        Start a session on the module named by *id_or_slug*.

        Raises:
            ModuleNotFound – no module with that id or slug; no state is created.
        """
        module = self.catalog.find_module(id_or_slug)
        if module is None:
            raise ModuleNotFound(f"No training module with id or slug '{id_or_slug}'")

        if self.module is not None:
            self.leave()

        self.module           = module
        self.candidate_id     = candidate_id
        self.trace            = SessionTrace(module_id=module.id, candidate_id=candidate_id)
        self.tracker.initialize(module)
        self.total_score      = 0
        self.module_completed = False
        self.current_index    = 0
        self.interaction      = SceneInteraction()

        self.attempt   = self._resolve_attempt()
        self.variations = self._resolve_variations() if self.attempt.wants_variation else {}
        self.scenes     = resolve_module(module, self.variations)

        self.timer = CountdownTimer.from_duration_label(module.duration)
        self.timer.start()
        if self.run_clock:
            self._ticker = TimerTicker(self.timer, self._settings.player.tick_seconds)
            self._ticker.start()

        self.narration.reset()
        self._enter_scene()
        self.trace.record(
            "load", "ok", f"Loaded {module.id} attempt {self.attempt.attempt_number}",
            is_retake=self.attempt.is_retake, variations=sorted(self.variations),
        )
        logger.debug("Loaded %s for %s (attempt %d, %d variations)",
                     module.id, candidate_id, self.attempt.attempt_number, len(self.variations))
        return module

    def _resolve_attempt(self) -> AttemptContext:
        try:
            return self.backend.check_retake_status(self.candidate_id, self.module.id)
        except Exception as exc:
            logger.warning("Retake status lookup failed for %s; treating as first attempt",
                           self.module.id, exc_info=True)
            self.trace.record("load", "fallback", f"Retake status unavailable: {exc}")
            return AttemptContext()

    def _resolve_variations(self) -> VariationMap:
        module = self.module
        try:
            generated = self.generator.generate_varied_scenes(
                module.title, module.competencies, module.scenes, self.attempt.attempt_number,
            )
        except Exception as exc:
            logger.warning("Content variation failed for %s; using base scenes",
                           module.id, exc_info=True)
            self.trace.record("generate", "fallback", f"Variation generation failed: {exc}")
            return {}

        kept, result = self.guardrails.filter_variations(module, generated or {})
        for v in result.violations:
            logger.warning("Variation [%s] %s: %s", v.field, v.code, v.message)
        dropped = sorted(set(generated or {}) - set(kept))
        if dropped:
            self.trace.record("generate", "fallback",
                              f"Dropped {len(dropped)} generated overrides", dropped=dropped)
        return kept

    # ─── Read accessors ──────────────────────────────────────────────────────

    @property
    def is_loaded(self) -> bool:
        return self.module is not None

    @property
    def current_scene(self) -> Optional[Scene]:
        if not self.scenes:
            return None
        return self.scenes[self.current_index]

    @property
    def is_first_scene(self) -> bool:
        return self.current_index == 0

    @property
    def is_last_scene(self) -> bool:
        return self.current_index >= len(self.scenes) - 1

    def timer_snapshot(self) -> Optional[TimerSnapshot]:
        return self.timer.snapshot() if self.timer is not None else None

    def progress_entry(self, scene_id: str) -> Optional[SceneProgressEntry]:
        return self.tracker.get(scene_id)

    def is_scene_unlocked(self, index: int) -> bool:
        if not 0 <= index < len(self.scenes):
            return False
        if index == 0:
            return True
        return self.tracker.is_completed(self.scenes[index - 1].id)

    def _current_completed(self) -> bool:
        scene = self.current_scene
        return scene is not None and self.tracker.is_completed(scene.id)

    # ─── Navigation ──────────────────────────────────────────────────────────

    def go_to_next(self) -> bool:
        if not self.is_loaded or self.is_last_scene:
            return False
        scene = self.current_scene
        if not self.tracker.is_completed(scene.id):
            self._record(SceneProgressEntry(scene_id=scene.id, completed=True, score=0))
        self._change_scene(self.current_index + 1)
        return True

    def go_to_previous(self) -> bool:
        if not self.is_loaded or self.current_index == 0:
            return False
        self._change_scene(self.current_index - 1)
        return True

    def navigate_to(self, index: int) -> bool:
        if not self.is_loaded or not self.is_scene_unlocked(index):
            self._reject("navigate", f"Scene {index} is locked or out of range")
            return False
        self._change_scene(index)
        return True

    def _change_scene(self, index: int) -> None:
        self.narration.cancel()
        self.current_index = index
        self.interaction   = SceneInteraction()
        self._enter_scene()
        self.trace.record("navigate", "ok", f"Entered scene {index}", scene_id=self.current_scene.id)

    def _enter_scene(self) -> None:
        scene = self.current_scene
        if scene.type == SceneType.QUIZ:
            self.interaction.quiz_answers = [None] * len(scene.quiz or ())
        if scene.type == SceneType.NARRATIVE:
            self.narration.auto_speak(self.current_index, scene.content)

    def speak_current(self) -> bool:
        """Replay narration for the scene on screen."""
        scene = self.current_scene
        return scene is not None and self.narration.speak(scene.content)

    # ─── Choice scenes ───────────────────────────────────────────────────────

    def select_choice(self, choice_id: str) -> bool:
        scene = self.current_scene
        if (scene is None or scene.type != SceneType.CHOICE or self._current_completed()
                or self.interaction.show_feedback or scene.choice_by_id(choice_id) is None):
            return self._reject("submit", f"Cannot select choice '{choice_id}'")
        self.interaction.selected_choice = choice_id
        return True

    def submit_choice(self) -> bool:
        scene = self.current_scene
        if (scene is None or scene.type != SceneType.CHOICE or self._current_completed()
                or self.interaction.show_feedback or self.interaction.selected_choice is None):
            return self._reject("submit", "Choice submission rejected")
        choice = scene.choice_by_id(self.interaction.selected_choice)
        self._record(SceneProgressEntry(
            scene_id=scene.id, completed=True, score=choice.points, selected_choice=choice.id,
        ))
        self.interaction.show_feedback = True
        return True

    def choice_feedback(self) -> Optional[SceneChoice]:
        """The submitted option (with its feedback), once feedback is visible."""
        scene = self.current_scene
        if scene is None or scene.type != SceneType.CHOICE:
            return None
        entry = self.tracker.get(scene.id)
        if entry is None or not entry.completed or entry.selected_choice is None:
            return None
        return scene.choice_by_id(entry.selected_choice)

    # ─── Reflection scenes ───────────────────────────────────────────────────

    def set_reflection_text(self, text: str) -> bool:
        scene = self.current_scene
        if scene is None or scene.type != SceneType.REFLECTION or self._current_completed():
            return False
        self.interaction.reflection_text = text
        return True

    @property
    def can_submit_reflection(self) -> bool:
        scene = self.current_scene
        if scene is None or scene.type != SceneType.REFLECTION or self._current_completed():
            return False
        min_length = scene.reflection.min_length if scene.reflection else 0
        return len(self.interaction.reflection_text) >= min_length

    def submit_reflection(self) -> bool:
        if not self.can_submit_reflection:
            return self._reject("submit", "Reflection too short or not on a reflection scene")
        scene = self.current_scene
        self._record(SceneProgressEntry(
            scene_id=scene.id, completed=True, score=REFLECTION_POINTS,
            reflection=self.interaction.reflection_text,
        ))
        self.go_to_next()
        return True

    # ─── Quiz scenes ─────────────────────────────────────────────────────────

    def answer_question(self, question_index: int, option_index: int) -> bool:
        scene = self.current_scene
        if (scene is None or scene.type != SceneType.QUIZ or self._current_completed()
                or self.interaction.quiz_submitted):
            return False
        questions = scene.quiz or ()
        if not 0 <= question_index < len(questions):
            return False
        if not 0 <= option_index < len(questions[question_index].options):
            return False
        self.interaction.quiz_answers[question_index] = option_index
        return True

    def submit_quiz(self) -> bool:
        scene = self.current_scene
        if (scene is None or scene.type != SceneType.QUIZ or self._current_completed()
                or self.interaction.quiz_submitted):
            return self._reject("submit", "Quiz submission rejected")
        answers   = self.interaction.quiz_answers
        questions = scene.quiz or ()
        if len(answers) != len(questions) or any(a is None for a in answers):
            return self._reject("submit", "Every quiz question needs an answer")

        correct = sum(1 for q, a in zip(questions, answers) if a == q.correct_index)
        self._record(SceneProgressEntry(
            scene_id=scene.id, completed=True, score=quiz_score(correct, len(questions)),
            quiz_answers=list(answers),
        ))
        self.interaction.quiz_submitted = True
        return True

    def quiz_review(self) -> list[QuestionReview]:
        """Per-question results for the current quiz scene once it is submitted."""
        scene = self.current_scene
        if scene is None or scene.type != SceneType.QUIZ:
            return []
        entry = self.tracker.get(scene.id)
        if entry is None or entry.quiz_answers is None:
            return []
        return [
            QuestionReview(
                question_index = i,
                correct        = answer == q.correct_index,
                learner_index  = answer,
                correct_index  = q.correct_index,
                explanation    = "" if answer == q.correct_index else q.explanation,
            )
            for i, (q, answer) in enumerate(zip(scene.quiz or (), entry.quiz_answers))
        ]

    # ─── Finalization ────────────────────────────────────────────────────────

    def complete_module(self) -> bool:
        scene = self.current_scene
        if scene is None or scene.type != SceneType.COMPLETION or self.module_completed:
            return self._reject("finalize", "Module can only be completed once, from the completion scene")

        if not self.tracker.is_completed(scene.id):
            self._record(SceneProgressEntry(scene_id=scene.id, completed=True, score=0))
        self.module_completed = True
        self._stop_clock()
        self.narration.cancel()

        module, score = self.module, self.total_score
        try:
            self.backend.finalize_module(self.candidate_id, module.id, score,
                                         self.attempt.attempt_number)
        except Exception as exc:
            logger.warning("Finalizing %s failed; keeping local completion", module.id,
                           exc_info=True)
            self.trace.record("finalize", "failed", f"finalize_module failed: {exc}",
                              scene_id=scene.id)
            return True

        try:
            self.backend.record_completion_event(self.candidate_id, module, score)
        except Exception as exc:
            logger.warning("Growth log write failed for %s", module.id, exc_info=True)
            self.trace.record("finalize", "failed", f"record_completion_event failed: {exc}",
                              scene_id=scene.id)
            return True

        self.trace.record("finalize", "ok", f"Completed {module.id} with {score}/{module.total_points}",
                          scene_id=scene.id, score=score)
        return True

    def leave(self) -> None:
        """Stop background activity when the learner navigates away."""
        self._stop_clock()
        self.narration.cancel()

    def _stop_clock(self) -> None:
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None
        if self.timer is not None:
            self.timer.stop()

    # ─── Summary ─────────────────────────────────────────────────────────────

    def summary(self) -> ModuleSummary:
        if self.module is None:
            raise RuntimeError("No module loaded")
        module    = self.module
        completed = self.tracker.completed_count()
        return ModuleSummary(
            module_id        = module.id,
            module_title     = module.title,
            total_score      = self.total_score,
            total_points     = module.total_points,
            passing_score    = module.passing_score,
            passed           = self.total_score >= module.passing_score,
            completed_scenes = completed,
            total_scenes     = len(self.scenes),
            current_index    = self.current_index,
            progress_pct     = round(completed / len(self.scenes) * 100, 1) if self.scenes else 0.0,
            attempt          = self.attempt,
            timer            = self.timer_snapshot(),
            module_completed = self.module_completed,
        )

    # ─── Internals ───────────────────────────────────────────────────────────

    def _record(self, entry: SceneProgressEntry) -> None:
        self.tracker.record(entry.scene_id, entry)
        self.total_score += entry.score
        self.trace.record("submit", "ok", f"Recorded {entry.scene_id} (+{entry.score})",
                          scene_id=entry.scene_id, score=entry.score)
        try:
            self.backend.save_scene_progress(self.candidate_id, self.module.id,
                                             self.attempt.attempt_number, entry)
        except Exception as exc:
            logger.warning("Saving progress for %s failed", entry.scene_id, exc_info=True)
            self.trace.record("persist", "failed", f"save_scene_progress failed: {exc}",
                              scene_id=entry.scene_id)

    def _reject(self, kind: str, message: str) -> bool:
        if self.trace is not None:
            scene = self.current_scene
            self.trace.record(kind, "rejected", message, scene_id=scene.id if scene else None)
        logger.debug("Rejected: %s", message)
        return False
