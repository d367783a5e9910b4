"""
session_trace.py — In-memory audit trail for one module session
================================================================
The engine emits a ``SessionEvent`` for every state transition and for
every collaborator call that fails.  The trace is the only place a
PersistenceFailure or ExternalUnavailable outcome becomes visible to the
caller, since engine transitions never raise for them.

Data model
----------
  SessionEvent     One transition or failure: kind, scene, status, detail.
  SessionTrace     Ordered list of SessionEvents for one load() of a module.

Key fields
----------
  SessionEvent.kind     "load" | "navigate" | "submit" | "finalize" |
                        "generate" | "persist" | "narrate"
  SessionEvent.status   "ok" | "rejected" | "failed" | "fallback"
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


@dataclass
class SessionEvent:
    """One entry in a session trace."""
    kind:        str
    status:      str
    message:     str
    scene_id:    Optional[str] = None
    at_ms:       float = 0.0       # ms since the trace started
    detail:      dict[str, Any] = field(default_factory=dict)


@dataclass
class SessionTrace:
    """Full trace for a single module session."""
    module_id:     str
    candidate_id:  str
    started_at:    str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    events:        list[SessionEvent] = field(default_factory=list)
    _t0:           float = field(default_factory=time.monotonic, repr=False)

    def append(self, event: SessionEvent) -> None:
        self.events.append(event)

    def record(self, kind: str, status: str, message: str,
               scene_id: Optional[str] = None, **detail: Any) -> SessionEvent:
        event = SessionEvent(
            kind     = kind,
            status   = status,
            message  = message,
            scene_id = scene_id,
            at_ms    = round((time.monotonic() - self._t0) * 1000, 1),
            detail   = detail,
        )
        self.append(event)
        return event

    def failures(self) -> list[SessionEvent]:
        return [e for e in self.events if e.status in ("failed", "fallback")]

    def of_kind(self, kind: str) -> list[SessionEvent]:
        return [e for e in self.events if e.kind == kind]
