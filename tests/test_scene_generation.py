"""
Tests for retake content generation (scene_generation.py).
Only the rule-based tier runs; the live tier is checked for routing and
payload handling with a stubbed client.
"""
from types import SimpleNamespace
import json

import pytest
from factories import make_full_module

from bridgefast.config import get_settings
from bridgefast.guardrails import VariationGuardrails
from bridgefast.models import SceneType
from bridgefast.module_catalog import find_module
from bridgefast.scene_generation import (
    LLMSceneVariationGenerator,
    MockSceneVariationGenerator,
    extract_json,
    get_generator,
)


@pytest.fixture
def generator():
    return MockSceneVariationGenerator()


def _generate(generator, module, attempt=2):
    return generator.generate_varied_scenes(module.title, module.competencies, module.scenes, attempt)


class TestExtractJson:
    def test_plain_object(self):
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_object_inside_prose(self):
        assert extract_json('Sure!\n```json\n{"prompt": "Hi"}\n```') == {"prompt": "Hi"}

    def test_no_object_raises(self):
        with pytest.raises(ValueError):
            extract_json("no json here")


class TestMockGenerator:
    def test_covers_choice_quiz_and_reflection(self, generator):
        variations = _generate(generator, make_full_module())
        assert set(variations) == {"f-2", "f-3", "f-4"}

    def test_deterministic_per_attempt(self, generator):
        module = find_module("professional-boundaries")
        assert _generate(generator, module, 2) == _generate(generator, module, 2)

    def test_choice_set_preserved(self, generator):
        module = find_module("module-7")
        variations = _generate(generator, module, 3)
        for scene in module.scenes_of_type(SceneType.CHOICE):
            varied = variations[scene.id].choices
            assert sorted(c.id for c in varied) == sorted(c.id for c in scene.choices)

    def test_quiz_correct_answer_follows_shuffle(self, generator):
        module = find_module("professional-boundaries")
        base = module.scene_by_id("scene-1-9")
        varied = _generate(generator, module, 4)["scene-1-9"].quiz
        for original, shuffled in zip(base.quiz, varied):
            assert sorted(shuffled.options) == sorted(original.options)
            assert shuffled.options[shuffled.correct_index] == original.options[original.correct_index]

    def test_reflection_keeps_min_length(self, generator):
        module = find_module("professional-boundaries")
        varied = _generate(generator, module)["scene-1-7"].reflection
        assert varied.min_length == 50
        assert varied.prompt != module.scene_by_id("scene-1-7").reflection.prompt

    def test_reflection_prompt_rotates(self, generator):
        module = find_module("professional-boundaries")
        prompts = {_generate(generator, module, n)["scene-1-7"].reflection.prompt for n in (2, 3, 4, 5)}
        assert len(prompts) == 4

    @pytest.mark.parametrize("slug", ["professional-boundaries", "digital-boundaries", "handling-harsh-criticism"])
    def test_output_passes_variation_guardrails(self, generator, slug):
        module = find_module(slug)
        result = VariationGuardrails().check(module, _generate(generator, module))
        assert result.passed, result.summary()


class TestTierSelection:
    def test_mock_when_forced(self):
        assert isinstance(get_generator(get_settings()), MockSceneVariationGenerator)

    def test_live_generator_requires_credentials(self):
        with pytest.raises(EnvironmentError):
            LLMSceneVariationGenerator(get_settings().openai)


class _FakeCompletions:
    def __init__(self, replies):
        self._replies = list(replies)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        message = SimpleNamespace(content=json.dumps(reply))
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class TestLiveGeneratorPayloads:
    """LLM tier with the client replaced; no network calls."""

    def _generator(self, replies):
        gen = LLMSceneVariationGenerator.__new__(LLMSceneVariationGenerator)
        gen._cfg = SimpleNamespace(deployment="test-deployment")
        completions = _FakeCompletions(replies)
        gen._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
        return gen, completions

    def test_full_module_variation(self):
        choice_reply = {
            "scenario": "A new colleague keeps messaging you late at night.",
            "choices": [
                {"text": "Reply at once", "is_correct": False, "feedback": "No."},
                {"text": "Set expectations kindly", "is_correct": True, "feedback": "Yes."},
                {"text": "Ignore forever", "is_correct": False, "feedback": "No.", "points": 10},
            ],
        }
        question_reply = {"question": "New?", "options": ["a", "b", "c", "d"],
                          "correct_index": 3, "explanation": "d is right"}
        reflection_reply = {"prompt": "Reflect on a new situation."}
        gen, completions = self._generator(
            [choice_reply] + [question_reply, RuntimeError("rate limited"), question_reply]
            + [reflection_reply]
        )
        module = make_full_module()
        variations = _generate(gen, module)

        choice = variations["f-2"]
        assert choice.content.startswith("A new colleague")
        assert [c.id for c in choice.choices] == ["choice-1", "choice-2", "choice-3"]
        assert [c.points for c in choice.choices] == [15, 50, 10]

        quiz = variations["f-4"].quiz
        assert len(quiz) == 4
        assert quiz[0].question == "New?" and quiz[0].correct_index == 3
        assert quiz[1] == module.scene_by_id("f-4").quiz[1], "failed question keeps original"
        assert quiz[3] == module.scene_by_id("f-4").quiz[3], "only the first three questions vary"

        assert variations["f-3"].reflection.prompt == "Reflect on a new situation."
        assert variations["f-3"].reflection.min_length == 20

        assert all(c["response_format"] == {"type": "json_object"} for c in completions.calls)
        assert [c["temperature"] for c in completions.calls] == [0.9, 0.85, 0.85, 0.85, 0.8]

    def test_failed_scene_keeps_base(self):
        gen, _ = self._generator([ValueError("bad json"), {}, {}, {}, {"prompt": "Ok."}])
        variations = _generate(gen, make_full_module())
        assert "f-2" not in variations
        assert "f-4" not in variations
        assert "f-3" in variations
