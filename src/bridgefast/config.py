"""
config.py — Central settings for the BridgeFast training player
================================================================
All configuration is loaded from environment variables / .env file.
Copy .env.example → .env and fill in your values.

Live content variation activates automatically when AZURE_OPENAI_ENDPOINT
and AZURE_OPENAI_API_KEY contain real (non-placeholder) values and
FORCE_MOCK_MODE is not set.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env into os.environ (no-op if already set, safe to call multiple times)
load_dotenv(override=False)

_DEFAULT_DB_PATH = Path(__file__).resolve().parent.parent.parent / "bridgefast_data.db"


# ─── Helpers ────────────────────────────────────────────────────────────────

def _is_placeholder(value: str) -> bool:
    """Return True if the value looks like an unfilled template placeholder."""
    return not value or "<" in value or value.startswith("your-") or value == "PLACEHOLDER"


# ─── Azure OpenAI (retake content generation) ───────────────────────────────

@dataclass(frozen=True)
class AzureOpenAIConfig:
    endpoint:    str
    api_key:     str
    deployment:  str
    api_version: str

    @property
    def is_configured(self) -> bool:
        """True when both endpoint and key are real (non-placeholder) values."""
        return (
            bool(self.endpoint)
            and bool(self.api_key)
            and not _is_placeholder(self.endpoint)
            and not _is_placeholder(self.api_key)
        )


# ─── Persistence ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DatabaseConfig:
    path: Path

    @property
    def is_configured(self) -> bool:
        return bool(str(self.path))


# ─── Player-level settings ───────────────────────────────────────────────────

@dataclass(frozen=True)
class PlayerConfig:
    force_mock_mode:    bool
    narration_muted:    bool
    tick_seconds:       float   # wall-clock length of one timer tick
    log_level:          str


# ─── Master settings object ──────────────────────────────────────────────────

@dataclass(frozen=True)
class Settings:
    openai:    AzureOpenAIConfig
    database:  DatabaseConfig
    player:    PlayerConfig

    @property
    def live_mode(self) -> bool:
        """True when Azure OpenAI creds are real and FORCE_MOCK_MODE is false."""
        return self.openai.is_configured and not self.player.force_mock_mode

    def status_summary(self) -> dict[str, str]:
        """Return a dict of service → status badge for the player header."""
        def badge(ok: bool) -> str:
            return "🟢 Live" if ok else "⚪ Not configured"

        return {
            "Azure OpenAI":      badge(self.openai.is_configured),
            "Content variation": "🟢 Live" if self.live_mode else "🟡 Mock (rule-based)",
            "Progress database": badge(self.database.is_configured),
            "Narration":         "🔇 Muted" if self.player.narration_muted else "🔊 On",
        }


def get_settings() -> Settings:
    """Load all configuration from environment variables."""
    _str   = lambda k, d="": os.getenv(k, d).strip()
    _float = lambda k, d=0.0: float(os.getenv(k, str(d)) or d)
    _bool  = lambda k, d=False: os.getenv(k, str(d)).lower() in ("1", "true", "yes")

    return Settings(
        openai=AzureOpenAIConfig(
            endpoint    = _str("AZURE_OPENAI_ENDPOINT").rstrip("/"),
            api_key     = _str("AZURE_OPENAI_API_KEY"),
            deployment  = _str("AZURE_OPENAI_DEPLOYMENT", "gpt-4o"),
            api_version = _str("AZURE_OPENAI_API_VERSION", "2024-12-01-preview"),
        ),
        database=DatabaseConfig(
            path = Path(_str("BRIDGEFAST_DB_PATH") or _DEFAULT_DB_PATH),
        ),
        player=PlayerConfig(
            force_mock_mode = _bool("FORCE_MOCK_MODE", False),
            narration_muted = _bool("NARRATION_MUTED", False),
            tick_seconds    = _float("TIMER_TICK_SECONDS", 1.0),
            log_level       = _str("LOG_LEVEL", "WARNING").upper(),
        ),
    )
