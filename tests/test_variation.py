"""
Tests for the retake content overlay (variation.py).
"""
import pytest
from factories import make_full_module

from bridgefast.models import QuizQuestion, ReflectionPrompt, SceneChoice, SceneOverride, SceneType
from bridgefast.variation import resolve, resolve_module


@pytest.fixture
def module():
    return make_full_module()


@pytest.fixture
def choice_scene(module):
    return module.scene_by_id("f-2")


class TestResolve:
    @pytest.mark.parametrize("variation_map", [None, {}])
    def test_empty_map_returns_base(self, choice_scene, variation_map):
        assert resolve(choice_scene, variation_map) is choice_scene

    def test_missing_entry_returns_base(self, choice_scene):
        assert resolve(choice_scene, {"other": SceneOverride(title="X")}) is choice_scene

    def test_empty_override_returns_base(self, choice_scene):
        assert resolve(choice_scene, {"f-2": SceneOverride()}) is choice_scene

    def test_only_set_fields_replaced(self, choice_scene):
        effective = resolve(choice_scene, {"f-2": SceneOverride(content="New text")})
        assert effective.content == "New text"
        assert effective.title == choice_scene.title
        assert effective.choices == choice_scene.choices

    def test_id_and_type_never_change(self, choice_scene):
        new_choices = (SceneChoice(id="n-1", text="t", is_correct=True, feedback="f", points=1),)
        effective = resolve(choice_scene, {"f-2": SceneOverride(choices=new_choices, title="T")})
        assert effective.id == "f-2"
        assert effective.type == SceneType.CHOICE
        assert effective.choices == new_choices

    def test_base_scene_not_mutated(self, choice_scene):
        before = choice_scene.model_dump()
        resolve(choice_scene, {"f-2": SceneOverride(content="changed", character="Sam")})
        assert choice_scene.model_dump() == before

    def test_deterministic(self, choice_scene):
        vmap = {"f-2": SceneOverride(setting="Cafe")}
        assert resolve(choice_scene, vmap) == resolve(choice_scene, vmap)

    def test_reflection_and_quiz_overrides(self, module):
        new_prompt = ReflectionPrompt(prompt="New prompt", min_length=20)
        new_quiz = (QuizQuestion(question="Q?", options=("a", "b"), correct_index=1, explanation="e"),)
        scenes = resolve_module(module, {
            "f-3": SceneOverride(reflection=new_prompt),
            "f-4": SceneOverride(quiz=new_quiz),
        })
        assert scenes[2].reflection == new_prompt
        assert scenes[3].quiz == new_quiz
        assert scenes[0] is module.scenes[0]
