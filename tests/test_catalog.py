"""
Tests for the built-in module catalog and ModuleCatalog registry.
"""
import pytest
from factories import make_completion_scene, make_module, make_narrative_scene

from bridgefast.guardrails import CatalogGuardrails, max_achievable_score
from bridgefast.models import SceneType, TrainingModule
from bridgefast.module_catalog import ModuleCatalog, find_module, get_catalog, list_modules
from bridgefast.timer import parse_duration


BUILT_IN = [
    ("module-1",  "professional-boundaries",    10, 1500),
    ("module-2",  "digital-boundaries",          9, 1200),
    ("module-3",  "credit-and-recognition",     12, 1800),
    ("module-4",  "collaborative-disagreement", 12, 2100),
    ("module-5",  "difficult-teammates",        12, 1800),
    ("module-6",  "receiving-feedback",         12, 1500),
    ("module-7",  "handling-harsh-criticism",   10, 1200),
    ("module-8",  "process-deviation",          11, 1500),
    ("module-9",  "workplace-integrity",        10, 1200),
    ("module-10", "ethical-negotiations",       12, 1500),
]


class TestBuiltInCatalog:
    def test_all_modules_in_order(self):
        assert [m.id for m in list_modules()] == [module_id for module_id, *_ in BUILT_IN]

    @pytest.mark.parametrize("module_id,slug,n_scenes,seconds", BUILT_IN)
    def test_lookup_by_id_and_slug(self, module_id, slug, n_scenes, seconds):
        by_id, by_slug = find_module(module_id), find_module(slug)
        assert by_id is not None
        assert by_id is by_slug
        assert len(by_id.scenes) == n_scenes
        assert parse_duration(by_id.duration) == seconds

    def test_unknown_returns_none(self):
        assert find_module("module-99") is None

    @pytest.mark.parametrize("module", list_modules(), ids=lambda m: m.slug)
    def test_modules_pass_catalog_guardrails(self, module):
        result = CatalogGuardrails().check(module)
        assert result.passed, result.summary()

    @pytest.mark.parametrize("module", list_modules(), ids=lambda m: m.slug)
    def test_ends_with_completion(self, module):
        assert module.scenes[-1].type == SceneType.COMPLETION
        assert module.scenes[-1].next_scene_id is None

    @pytest.mark.parametrize("module", list_modules(), ids=lambda m: m.slug)
    def test_points_and_passing(self, module):
        assert module.total_points == 100
        assert module.passing_score == 70
        assert max_achievable_score(module) >= module.passing_score

    def test_professional_boundaries_correct_choice(self):
        scene = find_module("professional-boundaries").scene_by_id("scene-1-6")
        correct = [c for c in scene.choices if c.is_correct]
        assert [c.id for c in correct] == ["choice-1c"]
        assert correct[0].points == 50

    def test_harsh_critics_chain_is_linear(self):
        module = find_module("module-7")
        assert module.scene_by_id("scene-7-7").next_scene_id == "scene-7-9"

    def test_workplace_integrity_accepts_two_correct_choices(self):
        module = find_module("workplace-integrity")
        correct = [c.id for c in module.scene_by_id("scene-9-5").choices if c.is_correct]
        assert correct == ["choice-9f", "choice-9g"]
        result = CatalogGuardrails().check(module)
        assert [v.code for v in result.infos] == ["C-05"]
        assert result.warnings == []
        assert not result.blocked

    def test_catalog_built_once(self):
        assert get_catalog() is get_catalog()

    def test_modules_are_immutable(self):
        module = find_module("module-2")
        with pytest.raises(Exception):
            module.title = "Changed"


class TestModuleCatalogRegistry:
    def test_accepts_models_and_dicts(self):
        raw = make_module(module_id="m-a", slug="a").model_dump(mode="json")
        catalog = ModuleCatalog([raw, make_module(module_id="m-b", slug="b")])
        assert len(catalog) == 2
        assert "a" in catalog and "m-b" in catalog
        assert isinstance(catalog.find_module("m-a"), TrainingModule)

    def test_duplicate_slug_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            ModuleCatalog([make_module(module_id="m-a", slug="same"),
                           make_module(module_id="m-b", slug="same")])

    def test_blocked_module_rejected(self):
        no_completion = make_module([make_narrative_scene("n-1"), make_narrative_scene("n-2")])
        with pytest.raises(ValueError, match="C-03"):
            ModuleCatalog([no_completion])

    def test_warnings_do_not_reject(self):
        module = make_module([make_narrative_scene("n-1"), make_completion_scene("n-2")],
                             duration="a while")
        assert ModuleCatalog([module]).find_module("test-module") is module
