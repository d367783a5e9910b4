"""
scene_generation.py — Retake content variation generator
========================================================
Produces the ``VariationMap`` the engine overlays on a module when a
candidate retakes it, so a second attempt does not replay identical
scenarios, questions and prompts.

Two tiers (chosen by ``get_generator``):
  1. Live: Azure OpenAI JSON-mode completions, one call per scene / question.
  2. Mock: deterministic rule-based variation, no credentials needed.
     Seeded by (module title, attempt number) so a given attempt
     always sees the same variant.

Both tiers share the same contract:
  generate_varied_scenes(module_title, competencies, base_scenes, attempt_number)
      → dict[scene_id, SceneOverride]

A failure on one scene keeps the base content for that scene; only a
failure to reach the model at all propagates to the caller.
"""

from __future__ import annotations

import hashlib
import json
import logging
import random
import re
import textwrap
from typing import Any, Optional, Sequence

from openai import AzureOpenAI
from pydantic import BaseModel, Field

from bridgefast.config import AzureOpenAIConfig, Settings, get_settings
from bridgefast.models import (
    QuizQuestion,
    ReflectionPrompt,
    Scene,
    SceneChoice,
    SceneOverride,
    SceneType,
    VariationMap,
)

logger = logging.getLogger(__name__)

MAX_CHOICE_SCENES      = 3
MAX_QUESTIONS_PER_QUIZ = 3

CORRECT_CHOICE_DEFAULT_POINTS   = 50
INCORRECT_CHOICE_DEFAULT_POINTS = 15


# ─── Prompts ─────────────────────────────────────────────────────────────────

_CHOICE_SYSTEM_PROMPT = textwrap.dedent("""
    You write workplace behavioral training scenarios for a professional
    credentialing platform.  Given an existing choice scene, write a NEW
    scenario that tests the same competencies with different people, setting
    and details, plus exactly four response options.

    Scoring guide for option points: best response 50, good 30, okay 20,
    poor 10.  Exactly ONE option has "is_correct": true.

    Respond with ONLY a JSON object:
    {
      "scenario": "<scenario text ending in a question to the learner>",
      "choices": [
        {"text": "...", "is_correct": true|false, "feedback": "...", "points": <int>}
      ]
    }
""").strip()

_QUIZ_SYSTEM_PROMPT = textwrap.dedent("""
    You write multiple-choice knowledge-check questions for workplace
    behavioral training.  Given an existing question, write a NEW question
    that checks the same concept in a different way, with exactly four
    options and one correct answer.

    Respond with ONLY a JSON object:
    {
      "question": "...",
      "options": ["...", "...", "...", "..."],
      "correct_index": <0-3>,
      "explanation": "<why the correct option is right>"
    }
""").strip()

_REFLECTION_SYSTEM_PROMPT = textwrap.dedent("""
    You write reflection prompts for workplace behavioral training.  Given an
    existing prompt, write a NEW open-ended prompt of 50-100 words that asks
    the learner to connect the module's competencies to their own experience.

    Respond with ONLY a JSON object: {"prompt": "..."}
""").strip()

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def extract_json(text: str) -> dict[str, Any]:
    """Pull the outermost JSON object out of a model reply."""
    match = _JSON_OBJECT.search(text or "")
    if not match:
        raise ValueError("No JSON object in model response")
    return json.loads(match.group(0))


# ─── LLM payload schemas ─────────────────────────────────────────────────────

class _GeneratedChoice(BaseModel):
    text:        str
    is_correct:  bool = False
    feedback:    str = ""
    points:      Optional[int] = Field(default=None, ge=0)


class _GeneratedChoiceScene(BaseModel):
    scenario:  str
    choices:   list[_GeneratedChoice] = Field(min_length=2)


class _GeneratedQuestion(BaseModel):
    question:       str
    options:        list[str] = Field(min_length=2)
    correct_index:  int = Field(ge=0)
    explanation:    str = ""


class _GeneratedReflection(BaseModel):
    prompt: str


# ─── Interface ───────────────────────────────────────────────────────────────

class SceneVariationGenerator:
    """Base class for retake content generators."""

    tier = "base"

    def generate_varied_scenes(self, module_title: str, competencies: Sequence[str],
                               base_scenes: Sequence[Scene],
                               attempt_number: int) -> VariationMap:
        raise NotImplementedError


# ─── Tier 1: Azure OpenAI ────────────────────────────────────────────────────

class LLMSceneVariationGenerator(SceneVariationGenerator):
    """
    Regenerates up to three choice scenes, up to three questions of every
    quiz scene and every reflection prompt with Azure OpenAI.
    """

    tier = "azure_openai"

    def __init__(self, config: AzureOpenAIConfig | None = None) -> None:
        self._cfg = config or get_settings().openai
        if not self._cfg.is_configured:
            raise EnvironmentError(
                "Azure OpenAI is not configured. "
                "Set AZURE_OPENAI_ENDPOINT + AZURE_OPENAI_API_KEY."
            )
        self._client = AzureOpenAI(
            azure_endpoint=self._cfg.endpoint,
            api_key=self._cfg.api_key,
            api_version=self._cfg.api_version,
        )

    def _call_llm(self, system_prompt: str, user_message: str,
                  temperature: float) -> dict[str, Any]:
        response = self._client.chat.completions.create(
            model=self._cfg.deployment,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user",   "content": user_message},
            ],
            temperature=temperature,
            max_tokens=1200,
        )
        return extract_json(response.choices[0].message.content)

    # ── Per-scene generators ─────────────────────────────────────────────────

    def _vary_choice_scene(self, scene: Scene, module_title: str,
                           competencies: str, attempt_number: int) -> SceneOverride:
        options = "\n".join(f"- {c.text}" for c in scene.choices or ())
        data = self._call_llm(_CHOICE_SYSTEM_PROMPT, textwrap.dedent(f"""
            Module: {module_title}
            Competencies: {competencies}
            Attempt number: {attempt_number}

            Original scenario: {scene.content}
            Original options:
            {options}
        """).strip(), temperature=0.9)

        generated = _GeneratedChoiceScene.model_validate(data)
        choices = tuple(
            SceneChoice(
                id=f"choice-{i + 1}",
                text=c.text,
                is_correct=c.is_correct,
                feedback=c.feedback,
                points=c.points if c.points is not None else (
                    CORRECT_CHOICE_DEFAULT_POINTS if c.is_correct
                    else INCORRECT_CHOICE_DEFAULT_POINTS
                ),
            )
            for i, c in enumerate(generated.choices)
        )
        return SceneOverride(content=generated.scenario, choices=choices)

    def _vary_question(self, question: QuizQuestion, module_title: str,
                       competencies: str) -> QuizQuestion:
        options = "\n".join(f"{i}. {o}" for i, o in enumerate(question.options))
        data = self._call_llm(_QUIZ_SYSTEM_PROMPT, textwrap.dedent(f"""
            Module: {module_title}
            Competencies: {competencies}

            Original question: {question.question}
            Original options:
            {options}
        """).strip(), temperature=0.85)

        generated = _GeneratedQuestion.model_validate(data)
        return QuizQuestion(
            question=generated.question,
            options=tuple(generated.options),
            correct_index=generated.correct_index,
            explanation=generated.explanation,
        )

    def _vary_reflection(self, scene: Scene, module_title: str,
                         competencies: str) -> SceneOverride:
        data = self._call_llm(_REFLECTION_SYSTEM_PROMPT, textwrap.dedent(f"""
            Module: {module_title}
            Competencies: {competencies}

            Original prompt: {scene.reflection.prompt}
        """).strip(), temperature=0.8)

        generated = _GeneratedReflection.model_validate(data)
        return SceneOverride(reflection=ReflectionPrompt(
            prompt=generated.prompt,
            min_length=scene.reflection.min_length,
        ))

    # ── Public interface ──────────────────────────────────────────────────────

    def generate_varied_scenes(self, module_title: str, competencies: Sequence[str],
                               base_scenes: Sequence[Scene],
                               attempt_number: int) -> VariationMap:
        comp = ", ".join(competencies) or "professional judgment"
        variations: VariationMap = {}

        choice_scenes = [s for s in base_scenes if s.type == SceneType.CHOICE][:MAX_CHOICE_SCENES]
        for scene in choice_scenes:
            try:
                variations[scene.id] = self._vary_choice_scene(scene, module_title, comp, attempt_number)
            except Exception:
                logger.warning("Choice variation failed for %s; keeping original", scene.id,
                               exc_info=True)

        for scene in (s for s in base_scenes if s.type == SceneType.QUIZ and s.quiz):
            questions = list(scene.quiz)
            changed   = False
            for i, question in enumerate(questions[:MAX_QUESTIONS_PER_QUIZ]):
                try:
                    questions[i] = self._vary_question(question, module_title, comp)
                    changed = True
                except Exception:
                    logger.warning("Quiz variation failed for %s q%d; keeping original",
                                   scene.id, i + 1, exc_info=True)
            if changed:
                variations[scene.id] = SceneOverride(quiz=tuple(questions))

        for scene in (s for s in base_scenes if s.type == SceneType.REFLECTION and s.reflection):
            try:
                variations[scene.id] = self._vary_reflection(scene, module_title, comp)
            except Exception:
                logger.warning("Reflection variation failed for %s; keeping original", scene.id,
                               exc_info=True)

        logger.info("Generated %d scene variations for '%s' attempt %d",
                    len(variations), module_title, attempt_number)
        return variations


# ─── Tier 2: rule-based mock ─────────────────────────────────────────────────

_REFLECTION_TEMPLATES: tuple[str, ...] = (
    "Think of a recent moment at work that called for {competency}. What did you "
    "do, what would you do differently after this module, and why?",
    "Describe a colleague you admire for their {competency}. Which of their habits "
    "could you adopt, and where would it have helped you recently?",
    "Recall a situation where a lack of {competency} made things harder for you or "
    "your team. What was the turning point, and what did you learn from it?",
    "Imagine you are coaching a new hire on {competency}. What story from your own "
    "experience would you share, and what lesson would you want them to remember?",
)


def _seed_for(module_title: str, attempt_number: int) -> int:
    digest = hashlib.sha256(f"{module_title}:{attempt_number}".encode("utf-8")).hexdigest()
    return int(digest[:16], 16)


class MockSceneVariationGenerator(SceneVariationGenerator):
    """
    Deterministic variation without an LLM.

    - choice scenes: option order shuffled (ids, points and feedback travel
      with their option)
    - quiz scenes: options of each question shuffled, correct_index remapped
    - reflection scenes: prompt rotated through a template bank
    """

    tier = "mock"

    def generate_varied_scenes(self, module_title: str, competencies: Sequence[str],
                               base_scenes: Sequence[Scene],
                               attempt_number: int) -> VariationMap:
        rng = random.Random(_seed_for(module_title, attempt_number))
        variations: VariationMap = {}

        choice_scenes = [s for s in base_scenes if s.type == SceneType.CHOICE][:MAX_CHOICE_SCENES]
        for scene in choice_scenes:
            choices = list(scene.choices or ())
            rng.shuffle(choices)
            variations[scene.id] = SceneOverride(choices=tuple(choices))

        for scene in base_scenes:
            if scene.type == SceneType.QUIZ and scene.quiz:
                variations[scene.id] = SceneOverride(
                    quiz=tuple(self._shuffle_question(q, rng) for q in scene.quiz)
                )
            elif scene.type == SceneType.REFLECTION and scene.reflection:
                competency = (
                    competencies[(attempt_number - 1) % len(competencies)].lower()
                    if competencies else "professional judgment"
                )
                template = _REFLECTION_TEMPLATES[(attempt_number - 2) % len(_REFLECTION_TEMPLATES)]
                variations[scene.id] = SceneOverride(reflection=ReflectionPrompt(
                    prompt=template.format(competency=competency),
                    min_length=scene.reflection.min_length,
                ))

        return variations

    @staticmethod
    def _shuffle_question(question: QuizQuestion, rng: random.Random) -> QuizQuestion:
        order = list(range(len(question.options)))
        rng.shuffle(order)
        return question.model_copy(update={
            "options":       tuple(question.options[i] for i in order),
            "correct_index": order.index(question.correct_index),
        })


# ─── Tier selection ──────────────────────────────────────────────────────────

def get_generator(settings: Settings | None = None) -> SceneVariationGenerator:
    """Live generator when Azure OpenAI is configured and not forced to mock."""
    settings = settings or get_settings()
    if settings.live_mode:
        return LLMSceneVariationGenerator(settings.openai)
    return MockSceneVariationGenerator()
