"""
variation.py — Retake content overlay
=====================================
On a retake the engine receives a ``VariationMap`` (scene id → SceneOverride)
from the generator.  ``resolve`` overlays an override onto the base scene
field by field and returns the scene the learner actually sees.  The catalog
scene is never mutated; ``id`` and ``type`` are never replaced.
"""

from __future__ import annotations

from typing import Optional

from bridgefast.models import Scene, SceneOverride, TrainingModule, VariationMap

_OVERRIDABLE_FIELDS = tuple(SceneOverride.model_fields)


def resolve(scene: Scene, variation_map: Optional[VariationMap]) -> Scene:
    """Return *scene* with any override fields from *variation_map* applied."""
    if not variation_map:
        return scene
    override = variation_map.get(scene.id)
    if override is None or override.is_empty():
        return scene

    update = {
        name: getattr(override, name)
        for name in _OVERRIDABLE_FIELDS
        if getattr(override, name) is not None
    }
    return scene.model_copy(update=update)


def resolve_module(module: TrainingModule, variation_map: Optional[VariationMap]) -> list[Scene]:
    """Effective scene list for a whole module, in catalog order."""
    return [resolve(s, variation_map) for s in module.scenes]
