"""
bridgefast/database.py — SQLite reference backend for training progress
========================================================================
Local stand-in for the platform's hosted progress store.  The engine only
talks to the ``TrainingBackend`` interface; ``SqliteTrainingBackend`` is the
implementation the CLI player uses.

Design decisions
----------------
- **One row per completed attempt** in ``module_progress``: retake status
  is derived by counting those rows, so attempt numbers keep growing.
- **WAL journal mode**: the timer ticker never touches the database, but a
  second player process may read while another writes.
- **Best-effort writes**: callers (the engine) catch and log failures; this
  module lets sqlite3 errors propagate.

Schema (see init_db for the full CREATE TABLE statements)
---------------------------------------------------------
  module_progress      candidate_id, module_id, attempt_number, status,
                       progress_percent, final_score, completed_at
  scene_progress       candidate_id, module_id, attempt_number, scene_id,
                       completed, score, selected_choice, reflection,
                       quiz_answers_json
  growth_log_entries   candidate_id, event_type, title, description,
                       source_component, metadata_json, created_at

Public API
----------
  init_db(db_path)                          create tables if they don't exist
  count_completed_attempts(cand, module)    → int
  upsert_module_progress(...)               finalize one attempt
  upsert_scene_progress(...)                save one SceneProgressEntry
  insert_growth_log_entry(...)              append an audit event
  get_module_progress / get_scene_progress / get_growth_log   → list[dict]
  TrainingBackend                           interface consumed by the engine
  SqliteTrainingBackend                     implementation over this module
"""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path
from typing import Optional

from bridgefast.config import get_settings
from bridgefast.models import AttemptContext, SceneProgressEntry, TrainingModule

logger = logging.getLogger(__name__)


def _resolve_path(db_path: Optional[Path | str]) -> Path:
    return Path(db_path) if db_path else get_settings().database.path


def _get_conn(db_path: Optional[Path | str] = None) -> sqlite3.Connection:
    """Return a connection with row_factory set."""
    conn = sqlite3.connect(str(_resolve_path(db_path)), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def init_db(db_path: Optional[Path | str] = None) -> None:
    """Create tables if they don't exist."""
    conn = _get_conn(db_path)
    conn.executescript("""
    CREATE TABLE IF NOT EXISTS module_progress (
        id                INTEGER PRIMARY KEY AUTOINCREMENT,
        candidate_id      TEXT    NOT NULL,
        module_id         TEXT    NOT NULL,
        attempt_number    INTEGER NOT NULL DEFAULT 1,
        status            TEXT    NOT NULL DEFAULT 'in_progress',
        progress_percent  INTEGER NOT NULL DEFAULT 0,
        final_score       INTEGER,
        completed_at      TEXT,
        updated_at        TEXT    DEFAULT (datetime('now')),
        UNIQUE (candidate_id, module_id, attempt_number)
    );
    CREATE TABLE IF NOT EXISTS scene_progress (
        id                INTEGER PRIMARY KEY AUTOINCREMENT,
        candidate_id      TEXT    NOT NULL,
        module_id         TEXT    NOT NULL,
        attempt_number    INTEGER NOT NULL DEFAULT 1,
        scene_id          TEXT    NOT NULL,
        completed         INTEGER NOT NULL DEFAULT 0,
        score             INTEGER NOT NULL DEFAULT 0,
        selected_choice   TEXT,
        reflection        TEXT,
        quiz_answers_json TEXT,
        updated_at        TEXT    DEFAULT (datetime('now')),
        UNIQUE (candidate_id, module_id, attempt_number, scene_id)
    );
    CREATE TABLE IF NOT EXISTS growth_log_entries (
        id                INTEGER PRIMARY KEY AUTOINCREMENT,
        candidate_id      TEXT    NOT NULL,
        event_type        TEXT    NOT NULL,
        title             TEXT    NOT NULL,
        description       TEXT,
        source_component  TEXT,
        metadata_json     TEXT,
        created_at        TEXT    DEFAULT (datetime('now'))
    );
    """)
    conn.commit()
    conn.close()


# ─── Module attempts ─────────────────────────────────────────────────────────

def count_completed_attempts(candidate_id: str, module_id: str,
                             db_path: Optional[Path | str] = None) -> int:
    conn = _get_conn(db_path)
    row = conn.execute(
        "SELECT COUNT(*) AS n FROM module_progress "
        "WHERE candidate_id = ? AND module_id = ? AND status = 'completed'",
        (candidate_id, module_id),
    ).fetchone()
    conn.close()
    return int(row["n"])


def upsert_module_progress(candidate_id: str, module_id: str, attempt_number: int,
                           final_score: int, status: str = "completed",
                           progress_percent: int = 100,
                           db_path: Optional[Path | str] = None) -> None:
    conn = _get_conn(db_path)
    conn.execute(
        """
        INSERT INTO module_progress
            (candidate_id, module_id, attempt_number, status, progress_percent,
             final_score, completed_at)
        VALUES (?, ?, ?, ?, ?, ?, CASE WHEN ? = 'completed' THEN datetime('now') END)
        ON CONFLICT (candidate_id, module_id, attempt_number) DO UPDATE SET
            status           = excluded.status,
            progress_percent = excluded.progress_percent,
            final_score      = excluded.final_score,
            completed_at     = excluded.completed_at,
            updated_at       = datetime('now')
        """,
        (candidate_id, module_id, attempt_number, status, progress_percent,
         final_score, status),
    )
    conn.commit()
    conn.close()


def get_module_progress(candidate_id: str, module_id: str,
                        db_path: Optional[Path | str] = None) -> list[dict]:
    conn = _get_conn(db_path)
    rows = conn.execute(
        "SELECT * FROM module_progress WHERE candidate_id = ? AND module_id = ? "
        "ORDER BY attempt_number",
        (candidate_id, module_id),
    ).fetchall()
    conn.close()
    return [dict(r) for r in rows]


# ─── Scene progress ──────────────────────────────────────────────────────────

def upsert_scene_progress(candidate_id: str, module_id: str, attempt_number: int,
                          entry: SceneProgressEntry,
                          db_path: Optional[Path | str] = None) -> None:
    quiz_json = json.dumps(entry.quiz_answers) if entry.quiz_answers is not None else None
    conn = _get_conn(db_path)
    conn.execute(
        """
        INSERT INTO scene_progress
            (candidate_id, module_id, attempt_number, scene_id, completed, score,
             selected_choice, reflection, quiz_answers_json)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        ON CONFLICT (candidate_id, module_id, attempt_number, scene_id) DO UPDATE SET
            completed         = excluded.completed,
            score             = excluded.score,
            selected_choice   = excluded.selected_choice,
            reflection        = excluded.reflection,
            quiz_answers_json = excluded.quiz_answers_json,
            updated_at        = datetime('now')
        """,
        (candidate_id, module_id, attempt_number, entry.scene_id, int(entry.completed),
         entry.score, entry.selected_choice, entry.reflection, quiz_json),
    )
    conn.commit()
    conn.close()


def get_scene_progress(candidate_id: str, module_id: str, attempt_number: int,
                       db_path: Optional[Path | str] = None) -> list[SceneProgressEntry]:
    conn = _get_conn(db_path)
    rows = conn.execute(
        "SELECT * FROM scene_progress "
        "WHERE candidate_id = ? AND module_id = ? AND attempt_number = ? ORDER BY id",
        (candidate_id, module_id, attempt_number),
    ).fetchall()
    conn.close()
    return [
        SceneProgressEntry(
            scene_id        = r["scene_id"],
            completed       = bool(r["completed"]),
            score           = r["score"],
            selected_choice = r["selected_choice"],
            reflection      = r["reflection"],
            quiz_answers    = json.loads(r["quiz_answers_json"]) if r["quiz_answers_json"] else None,
        )
        for r in rows
    ]


# ─── Growth log ──────────────────────────────────────────────────────────────

def insert_growth_log_entry(candidate_id: str, event_type: str, title: str,
                            description: str, source_component: str,
                            metadata: Optional[dict] = None,
                            db_path: Optional[Path | str] = None) -> None:
    conn = _get_conn(db_path)
    conn.execute(
        "INSERT INTO growth_log_entries "
        "(candidate_id, event_type, title, description, source_component, metadata_json) "
        "VALUES (?, ?, ?, ?, ?, ?)",
        (candidate_id, event_type, title, description, source_component,
         json.dumps(metadata or {})),
    )
    conn.commit()
    conn.close()


def get_growth_log(candidate_id: str, db_path: Optional[Path | str] = None) -> list[dict]:
    conn = _get_conn(db_path)
    rows = conn.execute(
        "SELECT * FROM growth_log_entries WHERE candidate_id = ? ORDER BY id",
        (candidate_id,),
    ).fetchall()
    conn.close()
    out = []
    for r in rows:
        d = dict(r)
        d["metadata"] = json.loads(d.pop("metadata_json") or "{}")
        out.append(d)
    return out


# ─── Backend interface ───────────────────────────────────────────────────────

class TrainingBackend:
    """
    Persistence collaborator for the scene engine.

    Every method may raise; the engine catches, logs and traces failures
    and never rolls back local state because of them.
    """

    def check_retake_status(self, candidate_id: str, module_id: str) -> AttemptContext:
        raise NotImplementedError

    def finalize_module(self, candidate_id: str, module_id: str,
                        total_score: int, attempt_number: int) -> None:
        raise NotImplementedError

    def record_completion_event(self, candidate_id: str, module: TrainingModule,
                                total_score: int) -> None:
        raise NotImplementedError

    def save_scene_progress(self, candidate_id: str, module_id: str,
                            attempt_number: int, entry: SceneProgressEntry) -> None:
        raise NotImplementedError


class SqliteTrainingBackend(TrainingBackend):
    """``TrainingBackend`` over the local SQLite file."""

    SOURCE_COMPONENT = "InteractiveTraining"

    def __init__(self, db_path: Optional[Path | str] = None) -> None:
        self.db_path = _resolve_path(db_path)
        init_db(self.db_path)

    def check_retake_status(self, candidate_id: str, module_id: str) -> AttemptContext:
        completed = count_completed_attempts(candidate_id, module_id, self.db_path)
        return AttemptContext(is_retake=completed > 0, attempt_number=completed + 1)

    def finalize_module(self, candidate_id: str, module_id: str,
                        total_score: int, attempt_number: int) -> None:
        upsert_module_progress(
            candidate_id, module_id, attempt_number, total_score,
            status="completed", progress_percent=100, db_path=self.db_path,
        )
        logger.info("Finalized %s attempt %d for %s (score %d)",
                    module_id, attempt_number, candidate_id, total_score)

    def record_completion_event(self, candidate_id: str, module: TrainingModule,
                                total_score: int) -> None:
        insert_growth_log_entry(
            candidate_id,
            event_type       = "training",
            title            = f"Completed Interactive Module: {module.title}",
            description      = f"Completed {module.title} with score {total_score}/{module.total_points}",
            source_component = self.SOURCE_COMPONENT,
            metadata         = {"module_id": module.id, "module_slug": module.slug,
                                "score": total_score},
            db_path          = self.db_path,
        )

    def save_scene_progress(self, candidate_id: str, module_id: str,
                            attempt_number: int, entry: SceneProgressEntry) -> None:
        upsert_scene_progress(candidate_id, module_id, attempt_number, entry, self.db_path)
