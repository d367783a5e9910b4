"""
Tests for catalog (C-xx) and variation (V-xx) guardrails.
"""
import pytest
from factories import (
    make_choice_scene,
    make_completion_scene,
    make_full_module,
    make_module,
    make_narrative_scene,
    make_quiz_scene,
    make_reflection_scene,
)

from bridgefast.guardrails import (
    CatalogGuardrails,
    GuardrailLevel,
    GuardrailResult,
    GuardrailsPipeline,
    GuardrailViolation,
    VariationGuardrails,
)
from bridgefast.models import (
    QuizQuestion,
    ReflectionPrompt,
    SceneChoice,
    SceneOverride,
    TrainingModule,
)


def _codes(result, level=None):
    return {v.code for v in result.violations if level is None or v.level == level}


def _choice(cid, correct, text="Option", points=10):
    return SceneChoice(id=cid, text=text, is_correct=correct, feedback="", points=points)


@pytest.fixture
def catalog_guard():
    return CatalogGuardrails()


@pytest.fixture
def variation_guard():
    return VariationGuardrails()


class TestGuardrailResult:
    def test_summary_all_passed(self):
        assert "passed" in GuardrailResult(passed=True).summary()

    def test_level_partitions(self):
        result = GuardrailResult(passed=False, violations=[
            GuardrailViolation("X-1", GuardrailLevel.BLOCK, "b", field="s-1"),
            GuardrailViolation("X-2", GuardrailLevel.WARN, "w"),
            GuardrailViolation("X-3", GuardrailLevel.INFO, "i"),
        ])
        assert result.blocked
        assert [v.code for v in result.warnings] == ["X-2"]
        assert [v.code for v in result.infos] == ["X-3"]
        assert result.blocked_fields() == {"s-1"}
        assert "[X-1]" in result.summary()


class TestCatalogGuardrails:
    def test_full_module_passes(self, catalog_guard):
        result = catalog_guard.check(make_full_module())
        assert result.passed and not result.blocked, result.summary()

    def test_c01_no_scenes(self, catalog_guard):
        module = TrainingModule(id="m", slug="m", title="Empty", duration="5 min",
                                total_points=100, passing_score=70, scenes=())
        assert "C-01" in _codes(catalog_guard.check(module), GuardrailLevel.BLOCK)

    def test_c02_duplicate_ids(self, catalog_guard):
        module = make_module([make_narrative_scene("d"), make_narrative_scene("d"),
                              make_completion_scene("end")])
        assert "C-02" in _codes(catalog_guard.check(module), GuardrailLevel.BLOCK)

    def test_c03_completion_not_last(self, catalog_guard):
        module = make_module([make_completion_scene("end"), make_narrative_scene("n")])
        assert "C-03" in _codes(catalog_guard.check(module), GuardrailLevel.BLOCK)

    def test_c04_dangling_next_pointer_blocks(self, catalog_guard):
        first = dict(make_narrative_scene("n-1"), next_scene_id="n-missing")
        module = make_module([first, make_completion_scene("end")])
        assert "C-04" in _codes(catalog_guard.check(module), GuardrailLevel.BLOCK)

    def test_c04_out_of_order_pointer_is_advisory(self, catalog_guard):
        first = dict(make_narrative_scene("n-1"), next_scene_id="end")
        module = make_module([first, make_narrative_scene("n-2"), make_completion_scene("end")])
        result = catalog_guard.check(module)
        assert "C-04" in _codes(result, GuardrailLevel.INFO)
        assert "C-04" not in _codes(result, GuardrailLevel.WARN)
        assert not result.blocked

    def test_c05_choice_scene_without_correct_option(self, catalog_guard):
        scene = make_choice_scene("c", choices=[
            {"id": "a", "text": "A", "is_correct": False, "feedback": "", "points": 1},
            {"id": "b", "text": "B", "is_correct": False, "feedback": "", "points": 2},
        ])
        module = make_module([scene, make_completion_scene("end")])
        assert "C-05" in _codes(catalog_guard.check(module), GuardrailLevel.BLOCK)

    def test_c06_reflection_without_prompt(self, catalog_guard):
        scene = make_reflection_scene("r")
        del scene["reflection"]
        module = make_module([scene, make_completion_scene("end")])
        assert "C-06" in _codes(catalog_guard.check(module), GuardrailLevel.BLOCK)

    def test_c07_quiz_index_out_of_range(self, catalog_guard):
        module = make_module([make_quiz_scene("q", correct_index=7), make_completion_scene("end")])
        assert "C-07" in _codes(catalog_guard.check(module), GuardrailLevel.BLOCK)

    def test_c07_quiz_without_questions(self, catalog_guard):
        module = make_module([make_quiz_scene("q", n_questions=0), make_completion_scene("end")])
        assert "C-07" in _codes(catalog_guard.check(module), GuardrailLevel.BLOCK)

    def test_c08_passing_above_total(self, catalog_guard):
        module = make_module(total_points=50, passing_score=60)
        assert "C-08" in _codes(catalog_guard.check(module), GuardrailLevel.BLOCK)

    def test_c08_unreachable_passing_warns(self, catalog_guard):
        module = make_module(passing_score=90)
        result = catalog_guard.check(module)
        assert "C-08" in _codes(result, GuardrailLevel.WARN)
        assert not result.blocked

    @pytest.mark.parametrize("duration,flagged", [
        ("5 min", False), ("1 hour", True), ("", True), ("1.5 min", True),
    ])
    def test_c09_duration_label(self, catalog_guard, duration, flagged):
        result = catalog_guard.check(make_module(duration=duration))
        assert ("C-09" in _codes(result, GuardrailLevel.WARN)) is flagged


class TestVariationGuardrails:
    @pytest.fixture
    def module(self):
        return make_full_module()

    def test_valid_overrides_pass(self, variation_guard, module):
        result = variation_guard.check(module, {
            "f-2": SceneOverride(content="New", choices=(_choice("1", True), _choice("2", False))),
            "f-3": SceneOverride(reflection=ReflectionPrompt(prompt="Think.", min_length=20)),
        })
        assert result.passed, result.summary()

    def test_v01_unknown_scene(self, variation_guard, module):
        result = variation_guard.check(module, {"ghost": SceneOverride(title="Boo")})
        assert _codes(result, GuardrailLevel.BLOCK) == {"V-01"}

    def test_v02_payload_type_mismatch(self, variation_guard, module):
        result = variation_guard.check(module, {
            "f-1": SceneOverride(choices=(_choice("1", True), _choice("2", False))),
        })
        assert "V-02" in _codes(result, GuardrailLevel.BLOCK)

    @pytest.mark.parametrize("choices", [
        (_choice("1", True),),
        (_choice("1", True), _choice("2", True)),
        (_choice("1", False), _choice("2", False)),
        (_choice("1", True), _choice("1", False)),
    ])
    def test_v03_generated_choice_rules(self, variation_guard, module, choices):
        result = variation_guard.check(module, {"f-2": SceneOverride(choices=choices)})
        assert "V-03" in _codes(result, GuardrailLevel.BLOCK)

    def test_v04_quiz_index_out_of_range(self, variation_guard, module):
        quiz = (QuizQuestion(question="Q", options=("a", "b"), correct_index=3, explanation=""),)
        result = variation_guard.check(module, {"f-4": SceneOverride(quiz=quiz)})
        assert "V-04" in _codes(result, GuardrailLevel.BLOCK)

    def test_v05_harmful_text(self, variation_guard, module):
        result = variation_guard.check(module, {"f-1": SceneOverride(content="Build a bomb today.")})
        assert "V-05" in _codes(result, GuardrailLevel.BLOCK)

    def test_filter_keeps_only_clean_overrides(self, variation_guard, module):
        good = SceneOverride(content="Fresh scenario")
        kept, result = variation_guard.filter(module, {
            "f-1": good,
            "ghost": SceneOverride(title="x"),
        })
        assert kept == {"f-1": good}
        assert result.blocked


class TestGuardrailsPipeline:
    def test_check_module_reports_advisories_without_blocking(self):
        scene = make_choice_scene("c", choices=[
            {"id": "a", "text": "A", "is_correct": True, "feedback": "", "points": 20},
            {"id": "b", "text": "B", "is_correct": True, "feedback": "", "points": 20},
        ])
        result = GuardrailsPipeline().check_module(make_module([scene, make_completion_scene("end")]))
        assert result.passed
        assert [v.code for v in result.infos] == ["C-05"]
        assert result.warnings == []

    def test_filter_variations_drops_unknown_scene(self):
        module = make_full_module()
        kept, result = GuardrailsPipeline().filter_variations(
            module, {"f-1": SceneOverride(title="Fresh"), "ghost": SceneOverride(title="x")},
        )
        assert set(kept) == {"f-1"}
        assert "V-01" in _codes(result)
