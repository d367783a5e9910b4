"""
Shared pytest fixtures for the BridgeFast scene engine test suite.
All fixtures use mock mode — no Azure credentials required.
Factory helpers live in tests/factories.py so they can be imported
directly by test modules as well as being used here.
"""
import sys
import os
import tempfile

_tests_dir = os.path.dirname(__file__)
_src_dir   = os.path.join(_tests_dir, "..", "src")
for _p in (_tests_dir, _src_dir):
    if _p not in sys.path:
        sys.path.insert(0, _p)

# Force mock mode: never call Azure during tests
os.environ["FORCE_MOCK_MODE"] = "true"
os.environ["NARRATION_MUTED"] = "false"
os.environ.setdefault("AZURE_OPENAI_ENDPOINT", "<placeholder>")
os.environ.setdefault("AZURE_OPENAI_API_KEY",  "<placeholder>")
os.environ.setdefault("BRIDGEFAST_DB_PATH", os.path.join(tempfile.gettempdir(), "bridgefast_test.db"))


import pytest

from factories import (
    RecordingBackend,
    RecordingNarrator,
    make_engine,
    make_module,
)

from bridgefast.database import SqliteTrainingBackend


# ─── pytest fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def narrator():
    return RecordingNarrator()


@pytest.fixture
def three_scene_module():
    """narrative → choice (correct option worth 30) → completion"""
    return make_module()


@pytest.fixture
def engine(three_scene_module, backend, narrator):
    eng = make_engine(three_scene_module, backend=backend, narrator=narrator)
    yield eng
    eng.leave()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "bridgefast_test.db"


@pytest.fixture
def sqlite_backend(db_path):
    return SqliteTrainingBackend(db_path)
