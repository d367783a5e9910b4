"""
Data models for the BridgeFast training scene engine.

Catalog content (modules, scenes, choices, questions) and generated retake
overrides are Pydantic models so that both the static catalog and LLM output
go through the same validation.  Runtime state owned by the engine
(progress entries, the per-visit interaction buffer, attempt context) are
plain dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ─── Enumerations ────────────────────────────────────────────────────────────

class SceneType(str, Enum):
    """Discriminator for a scene's payload and submission contract."""
    NARRATIVE  = "narrative"   # text only; completed implicitly by go_to_next
    CHOICE     = "choice"      # one option from a list, scored by option points
    REFLECTION = "reflection"  # free text with a minimum length, fixed 10 pts
    QUIZ       = "quiz"        # multiple MCQs, scored out of 30
    COMPLETION = "completion"  # terminal scene; finalized explicitly
    VIDEO      = "video"       # declared by the catalog format, never used


class Difficulty(str, Enum):
    BEGINNER     = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED     = "advanced"


# ─── Catalog models ──────────────────────────────────────────────────────────

class SceneChoice(BaseModel):
    """One option in a choice scene."""
    model_config = ConfigDict(frozen=True)

    id:          str
    text:        str
    is_correct:  bool
    feedback:    str
    points:      int = Field(ge=0)


class ReflectionPrompt(BaseModel):
    """Prompt and minimum answer length for a reflection scene."""
    model_config = ConfigDict(frozen=True)

    prompt:      str
    min_length:  int = Field(ge=0)


class QuizQuestion(BaseModel):
    """A single multiple-choice question inside a quiz scene."""
    model_config = ConfigDict(frozen=True)

    question:       str
    options:        tuple[str, ...]
    correct_index:  int = Field(ge=0)    # 0-based index into options
    explanation:    str


class Scene(BaseModel):
    """
    One step of a module.  ``choices`` / ``reflection`` / ``quiz`` are only
    populated for the matching ``type``; ``character``, ``setting`` and
    ``animation_type`` are presentation metadata the engine never reads.
    """
    model_config = ConfigDict(frozen=True)

    id:              str
    title:           str
    type:            SceneType
    content:         str
    character:       Optional[str] = None
    setting:         Optional[str] = None
    animation_type:  Optional[str] = None
    next_scene_id:   Optional[str] = None
    video_url:       Optional[str] = None
    choices:         Optional[tuple[SceneChoice, ...]] = None
    reflection:      Optional[ReflectionPrompt] = None
    quiz:            Optional[tuple[QuizQuestion, ...]] = None

    def choice_by_id(self, choice_id: str) -> Optional[SceneChoice]:
        return next((c for c in self.choices or () if c.id == choice_id), None)


class TrainingModule(BaseModel):
    """
    Static definition of an interactive training module.
    Loaded once from the catalog and never mutated afterwards.
    """
    model_config = ConfigDict(frozen=True)

    id:                 str
    slug:               str
    title:              str
    subtitle:           str = ""
    description:        str = ""
    duration:           str = Field(description='Human duration, e.g. "25 min"')
    difficulty:         Difficulty = Difficulty.INTERMEDIATE
    competencies:       tuple[str, ...] = ()
    total_points:       int = Field(ge=0)
    passing_score:      int = Field(ge=0)
    certificate_title:  str = ""
    scenes:             tuple[Scene, ...]

    # ── Derived helpers ──────────────────────────────────────────────────────

    @property
    def scene_ids(self) -> list[str]:
        return [s.id for s in self.scenes]

    def scene_by_id(self, scene_id: str) -> Optional[Scene]:
        return next((s for s in self.scenes if s.id == scene_id), None)

    def scenes_of_type(self, scene_type: SceneType) -> list[Scene]:
        return [s for s in self.scenes if s.type == scene_type]


# ─── Retake overrides ────────────────────────────────────────────────────────

class SceneOverride(BaseModel):
    """
    Partial replacement for a scene's content on a retake attempt.
    Every field is optional; unset fields fall back to the base scene.
    """
    model_config = ConfigDict(frozen=True)

    title:       Optional[str] = None
    content:     Optional[str] = None
    character:   Optional[str] = None
    setting:     Optional[str] = None
    choices:     Optional[tuple[SceneChoice, ...]] = None
    reflection:  Optional[ReflectionPrompt] = None
    quiz:        Optional[tuple[QuizQuestion, ...]] = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


VariationMap = dict[str, SceneOverride]


# ─── Runtime state ───────────────────────────────────────────────────────────

@dataclass
class SceneProgressEntry:
    """Completion state for one (candidate, scene) pair."""
    scene_id:         str
    completed:        bool = False
    score:            int  = 0
    selected_choice:  Optional[str] = None
    reflection:       Optional[str] = None
    quiz_answers:     Optional[list[int]] = None


@dataclass(frozen=True)
class AttemptContext:
    """Whether this module load is a retake, and which attempt it is."""
    is_retake:       bool = False
    attempt_number:  int  = 1

    @property
    def wants_variation(self) -> bool:
        return self.is_retake and self.attempt_number > 1


@dataclass
class SceneInteraction:
    """
    Transient input for the scene currently on screen.
    Discarded on every scene change; never persisted.
    """
    selected_choice:  Optional[str] = None
    show_feedback:    bool = False
    reflection_text:  str  = ""
    quiz_answers:     list[Optional[int]] = field(default_factory=list)
    quiz_submitted:   bool = False


@dataclass(frozen=True)
class QuestionReview:
    """Post-submission review line for one quiz question."""
    question_index:  int
    correct:         bool
    learner_index:   int
    correct_index:   int
    explanation:     str   # empty when the learner answered correctly


@dataclass(frozen=True)
class TimerSnapshot:
    seconds_remaining:  int
    is_overtime:        bool
    is_running:         bool
    phase:              str
    display:            str


@dataclass(frozen=True)
class ModuleSummary:
    """Read-only view of a module session for summary / dashboard panels."""
    module_id:         str
    module_title:      str
    total_score:       int
    total_points:      int
    passing_score:     int
    passed:            bool
    completed_scenes:  int
    total_scenes:      int
    current_index:     int
    progress_pct:      float
    attempt:           AttemptContext
    timer:             Optional[TimerSnapshot]
    module_completed:  bool
