"""
guardrails.py — Catalog and generated-content validation
========================================================
Validates the static module catalog once when the registry is built, and
every AI-generated retake override before the engine is allowed to use it.

Guardrail levels
----------------
BLOCK   – Hard-stop: the module is rejected / the override is dropped.
WARN    – Soft-stop: accepted, a warning is logged.
INFO    – Advisory only: authored content the engine handles fine but an
          editor may want to look at (logged at debug level).

Guards implemented
------------------
Catalog guards (ModuleCatalog build):
  C-01  Module has at least one scene
  C-02  Scene ids are unique
  C-03  Exactly one completion scene, and it is the last scene
  C-04  next_scene_id names the following scene (unknown id BLOCK, other order INFO)
  C-05  Choice scenes carry ≥2 uniquely-identified choices, ≥1 correct
        (several correct choices is INFO)
  C-06  Reflection scenes carry a reflection prompt
  C-07  Quiz scenes carry ≥1 question; every correct_index is in range
  C-08  passing_score ≤ total_points, and is reachable
  C-09  Duration label is parseable ("<n> min"), else the 10-minute default

Variation guards (after SceneVariationGenerator):
  V-01  Override targets a scene that exists in the module
  V-02  Override payload matches the target scene's type
  V-03  Generated choices: ≥2 options, unique ids, exactly one correct
  V-04  Generated quiz: ≥2 options per question, correct_index in range
  V-05  No profanity / harmful keywords in generated free text   [heuristic]
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from bridgefast.models import (
    QuizQuestion,
    Scene,
    SceneChoice,
    SceneOverride,
    SceneType,
    TrainingModule,
    VariationMap,
)
from bridgefast.timer import DURATION_PATTERN

# Points a scene contributes at most, by type (choice scenes use their best option)
REFLECTION_POINTS = 10
QUIZ_POINTS       = 30


# ─── Enums & data models ─────────────────────────────────────────────────────

class GuardrailLevel(str, Enum):
    BLOCK = "BLOCK"
    WARN  = "WARN"
    INFO  = "INFO"


@dataclass
class GuardrailViolation:
    code:    str
    level:   GuardrailLevel
    message: str
    field:   str = ""   # scene id (or module field) that triggered the violation


@dataclass
class GuardrailResult:
    passed:     bool
    violations: list[GuardrailViolation] = field(default_factory=list)

    @property
    def blocked(self) -> bool:
        return any(v.level == GuardrailLevel.BLOCK for v in self.violations)

    @property
    def warnings(self) -> list[GuardrailViolation]:
        return [v for v in self.violations if v.level == GuardrailLevel.WARN]

    @property
    def infos(self) -> list[GuardrailViolation]:
        return [v for v in self.violations if v.level == GuardrailLevel.INFO]

    def blocked_fields(self) -> set[str]:
        return {v.field for v in self.violations if v.level == GuardrailLevel.BLOCK}

    def summary(self) -> str:
        if not self.violations:
            return "✅ All guardrails passed."
        icon = {GuardrailLevel.BLOCK: "🚫", GuardrailLevel.WARN: "⚠️", GuardrailLevel.INFO: "ℹ️"}
        return "\n".join(f"{icon[v.level]} [{v.code}] {v.message}" for v in self.violations)


def _result(violations: list[GuardrailViolation]) -> GuardrailResult:
    return GuardrailResult(
        passed=not any(v.level == GuardrailLevel.BLOCK for v in violations),
        violations=violations,
    )


_HARMFUL_PATTERN = re.compile(
    r"\b(fuck|shit|bitch|cunt|asshole|bastard"
    r"|kill\s+myself|suicide|self.harm"
    r"|bomb|terrorist|weapon|explosive"
    r"|malware|ransomware|phishing)\b",
    re.IGNORECASE,
)


# ─── Shared payload checks ───────────────────────────────────────────────────

def _choice_violations(code: str, scene_id: str, choices: Iterable[SceneChoice],
                       exactly_one_correct: bool) -> list[GuardrailViolation]:
    choices = list(choices)
    out: list[GuardrailViolation] = []
    if len(choices) < 2:
        out.append(GuardrailViolation(
            code=code, level=GuardrailLevel.BLOCK, field=scene_id,
            message=f"Scene '{scene_id}' needs at least 2 choices (has {len(choices)}).",
        ))
    ids = [c.id for c in choices]
    if len(ids) != len(set(ids)):
        out.append(GuardrailViolation(
            code=code, level=GuardrailLevel.BLOCK, field=scene_id,
            message=f"Scene '{scene_id}' has duplicate choice ids.",
        ))
    n_correct = sum(1 for c in choices if c.is_correct)
    if n_correct == 0 or (exactly_one_correct and n_correct != 1):
        out.append(GuardrailViolation(
            code=code, level=GuardrailLevel.BLOCK, field=scene_id,
            message=(
                f"Scene '{scene_id}' has {n_correct} correct choices; "
                f"expected {'exactly one' if exactly_one_correct else 'at least one'}."
            ),
        ))
    elif n_correct > 1:
        out.append(GuardrailViolation(
            code=code, level=GuardrailLevel.INFO, field=scene_id,
            message=f"Scene '{scene_id}' marks {n_correct} choices as correct.",
        ))
    return out


def _quiz_violations(code: str, scene_id: str,
                     questions: Iterable[QuizQuestion]) -> list[GuardrailViolation]:
    questions = list(questions)
    out: list[GuardrailViolation] = []
    if not questions:
        out.append(GuardrailViolation(
            code=code, level=GuardrailLevel.BLOCK, field=scene_id,
            message=f"Quiz scene '{scene_id}' has no questions.",
        ))
    for i, q in enumerate(questions):
        if len(q.options) < 2:
            out.append(GuardrailViolation(
                code=code, level=GuardrailLevel.BLOCK, field=scene_id,
                message=f"Quiz '{scene_id}' question {i + 1} has fewer than 2 options.",
            ))
        if not 0 <= q.correct_index < len(q.options):
            out.append(GuardrailViolation(
                code=code, level=GuardrailLevel.BLOCK, field=scene_id,
                message=(
                    f"Quiz '{scene_id}' question {i + 1} correct_index "
                    f"{q.correct_index} out of range (0–{len(q.options) - 1})."
                ),
            ))
    return out


# ─── Catalog guardrails ──────────────────────────────────────────────────────

class CatalogGuardrails:
    """C-01 – C-09: structural checks on a catalog module."""

    def check(self, module: TrainingModule) -> GuardrailResult:
        violations: list[GuardrailViolation] = []
        scenes = list(module.scenes)

        # C-01 Non-empty
        if not scenes:
            violations.append(GuardrailViolation(
                code="C-01", level=GuardrailLevel.BLOCK, field="scenes",
                message=f"Module '{module.id}' has no scenes.",
            ))
            return _result(violations)

        # C-02 Unique ids
        ids = [s.id for s in scenes]
        dupes = sorted({sid for sid in ids if ids.count(sid) > 1})
        if dupes:
            violations.append(GuardrailViolation(
                code="C-02", level=GuardrailLevel.BLOCK, field="scenes",
                message=f"Duplicate scene ids: {', '.join(dupes)}.",
            ))

        # C-03 Completion scene last
        completions = [s for s in scenes if s.type == SceneType.COMPLETION]
        if len(completions) != 1 or scenes[-1].type != SceneType.COMPLETION:
            violations.append(GuardrailViolation(
                code="C-03", level=GuardrailLevel.BLOCK, field=scenes[-1].id,
                message=(
                    f"Module '{module.id}' must end with exactly one completion scene "
                    f"(found {len(completions)})."
                ),
            ))

        # C-04 Linear chain
        for i, scene in enumerate(scenes):
            expected = scenes[i + 1].id if i + 1 < len(scenes) else None
            if scene.next_scene_id == expected:
                continue
            if scene.next_scene_id is not None and scene.next_scene_id not in ids:
                level, what = GuardrailLevel.BLOCK, "names an unknown scene"
            else:
                level, what = GuardrailLevel.INFO, f"does not match scene order (expected {expected})"
            violations.append(GuardrailViolation(
                code="C-04", level=level, field=scene.id,
                message=f"Scene '{scene.id}' next_scene_id '{scene.next_scene_id}' {what}.",
            ))

        for scene in scenes:
            violations.extend(self._payload_violations(scene))

        # C-08 Passing score
        if module.passing_score > module.total_points:
            violations.append(GuardrailViolation(
                code="C-08", level=GuardrailLevel.BLOCK, field="passing_score",
                message=(
                    f"Passing score {module.passing_score} exceeds total points "
                    f"{module.total_points}."
                ),
            ))
        reachable = max_achievable_score(module)
        if reachable < module.passing_score:
            violations.append(GuardrailViolation(
                code="C-08", level=GuardrailLevel.WARN, field="passing_score",
                message=(
                    f"Best possible score {reachable} is below passing score "
                    f"{module.passing_score}."
                ),
            ))

        # C-09 Duration label
        if not DURATION_PATTERN.fullmatch(module.duration or ""):
            violations.append(GuardrailViolation(
                code="C-09", level=GuardrailLevel.WARN, field="duration",
                message=f"Duration '{module.duration}' is not '<n> min'; timer uses 10 minutes.",
            ))

        return _result(violations)

    def _payload_violations(self, scene: Scene) -> list[GuardrailViolation]:
        # C-05 / C-06 / C-07
        if scene.type == SceneType.CHOICE:
            if not scene.choices:
                return [GuardrailViolation(
                    code="C-05", level=GuardrailLevel.BLOCK, field=scene.id,
                    message=f"Choice scene '{scene.id}' has no choices.",
                )]
            return _choice_violations("C-05", scene.id, scene.choices, exactly_one_correct=False)
        if scene.type == SceneType.REFLECTION and scene.reflection is None:
            return [GuardrailViolation(
                code="C-06", level=GuardrailLevel.BLOCK, field=scene.id,
                message=f"Reflection scene '{scene.id}' has no reflection prompt.",
            )]
        if scene.type == SceneType.QUIZ:
            return _quiz_violations("C-07", scene.id, scene.quiz or ())
        return []


def max_achievable_score(module: TrainingModule) -> int:
    total = 0
    for scene in module.scenes:
        if scene.type == SceneType.CHOICE and scene.choices:
            total += max(c.points for c in scene.choices)
        elif scene.type == SceneType.REFLECTION:
            total += REFLECTION_POINTS
        elif scene.type == SceneType.QUIZ:
            total += QUIZ_POINTS
    return total


# ─── Variation guardrails ────────────────────────────────────────────────────

class VariationGuardrails:
    """V-01 – V-05: checks on generated retake overrides."""

    def check(self, module: TrainingModule, variations: VariationMap) -> GuardrailResult:
        violations: list[GuardrailViolation] = []
        for scene_id, override in variations.items():
            violations.extend(self.check_override(module.scene_by_id(scene_id), scene_id, override))
        return _result(violations)

    def check_override(self, scene: Scene | None, scene_id: str,
                       override: SceneOverride) -> list[GuardrailViolation]:
        # V-01 Target exists
        if scene is None:
            return [GuardrailViolation(
                code="V-01", level=GuardrailLevel.BLOCK, field=scene_id,
                message=f"Override targets unknown scene '{scene_id}'.",
            )]

        out: list[GuardrailViolation] = []

        # V-02 Payload matches type
        for payload, owner in (("choices", SceneType.CHOICE),
                               ("reflection", SceneType.REFLECTION),
                               ("quiz", SceneType.QUIZ)):
            if getattr(override, payload) is not None and scene.type != owner:
                out.append(GuardrailViolation(
                    code="V-02", level=GuardrailLevel.BLOCK, field=scene_id,
                    message=f"Override for {scene.type.value} scene '{scene_id}' carries '{payload}'.",
                ))

        # V-03 Choices
        if override.choices is not None:
            out.extend(_choice_violations("V-03", scene_id, override.choices, exactly_one_correct=True))

        # V-04 Quiz
        if override.quiz is not None:
            out.extend(_quiz_violations("V-04", scene_id, override.quiz))

        # V-05 Harmful content
        for text in _override_texts(override):
            match = _HARMFUL_PATTERN.search(text)
            if match:
                out.append(GuardrailViolation(
                    code="V-05", level=GuardrailLevel.BLOCK, field=scene_id,
                    message=f"Generated text for '{scene_id}' contains flagged term '{match.group(0)}'.",
                ))
                break

        return out

    def filter(self, module: TrainingModule,
               variations: VariationMap) -> tuple[VariationMap, GuardrailResult]:
        """Return *variations* minus every override with a BLOCK violation."""
        result  = self.check(module, variations)
        blocked = result.blocked_fields()
        kept    = {sid: ov for sid, ov in variations.items() if sid not in blocked}
        return kept, result


def _override_texts(override: SceneOverride) -> list[str]:
    texts = [t for t in (override.title, override.content) if t]
    for c in override.choices or ():
        texts.extend((c.text, c.feedback))
    if override.reflection is not None:
        texts.append(override.reflection.prompt)
    for q in override.quiz or ():
        texts.append(q.question)
        texts.extend(q.options)
        texts.append(q.explanation)
    return texts


# ─── Facade ──────────────────────────────────────────────────────────────────

class GuardrailsPipeline:
    """
    Single entry-point for both validation stages.

    Usage::

        gp = GuardrailsPipeline()
        result      = gp.check_module(module)
        kept, result = gp.filter_variations(module, variations)
    """

    def __init__(self):
        self.catalog_guard   = CatalogGuardrails()
        self.variation_guard = VariationGuardrails()

    def check_module(self, module: TrainingModule) -> GuardrailResult:
        return self.catalog_guard.check(module)

    def filter_variations(self, module: TrainingModule,
                          variations: VariationMap) -> tuple[VariationMap, GuardrailResult]:
        return self.variation_guard.filter(module, variations)
