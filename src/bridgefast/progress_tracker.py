"""
Scene progress tracker.

Holds one ``SceneProgressEntry`` per scene of the loaded module.  Entries are
created zeroed when a module is initialised and are only ever replaced,
never removed, so ``total_score()`` always equals the sum of the scores the
engine has recorded.
"""

from __future__ import annotations

from typing import Optional

from bridgefast.models import SceneProgressEntry, TrainingModule


class SceneProgressTracker:

    def __init__(self) -> None:
        self._entries: dict[str, SceneProgressEntry] = {}
        self._order:   list[str] = []

    def initialize(self, module: TrainingModule) -> None:
        """Reset to one zeroed, not-completed entry per scene of *module*."""
        self._order   = module.scene_ids
        self._entries = {sid: SceneProgressEntry(scene_id=sid) for sid in self._order}

    def record(self, scene_id: str, entry: SceneProgressEntry) -> None:
        if scene_id not in self._entries:
            raise KeyError(f"Scene '{scene_id}' is not part of the loaded module")
        self._entries[scene_id] = entry

    def get(self, scene_id: str) -> Optional[SceneProgressEntry]:
        return self._entries.get(scene_id)

    def is_completed(self, scene_id: str) -> bool:
        entry = self._entries.get(scene_id)
        return entry is not None and entry.completed

    def completed_count(self) -> int:
        return sum(1 for e in self._entries.values() if e.completed)

    def total_score(self) -> int:
        return sum(e.score for e in self._entries.values() if e.completed)

    def entries(self) -> list[SceneProgressEntry]:
        """Entries in scene order."""
        return [self._entries[sid] for sid in self._order]

    def __len__(self) -> int:
        return len(self._order)
