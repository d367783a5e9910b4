"""
bridgefast — Interactive Behavioral Training Scene Engine
==========================================================
Package containing the scene engine, its supporting state holders, the
static module catalog, and the persistence / generation collaborators used
by the BridgeFast interactive training player.

Module map
----------
  models.py              Scene / module data model (pydantic) and runtime
                         state records (dataclasses).
  config.py              Settings loaded from .env; live vs mock detection.
  module_catalog.py      Static training modules + id/slug registry.
  progress_tracker.py    Per-scene completion / score store.
  variation.py           Field-by-field overlay of retake content.
  scene_generation.py    Retake content generator (Azure OpenAI / mock).
  timer.py               Countdown timer with one-time overtime extension.
  narration.py           Optional narration side effect + text cleaning.
  engine.py              SceneEngine: the orchestrator.
  database.py            SQLite backend (attempts, scene progress, growth log).
  guardrails.py          Catalog + generated-content validation rules.
  session_trace.py       In-memory audit trail for one module session.
  cli_player.py          Rich terminal player built on the engine API.

Session order
-------------
  find_module(id_or_slug) → check_retake_status
  → (retake only) generate_varied_scenes → GuardrailsPipeline.filter_variations
  → CountdownTimer.start → scene loop (submit_* / go_to_* / navigate_to)
  ** completion scene ** → complete_module → finalize_module + growth log
"""
__version__ = "0.1.0"
