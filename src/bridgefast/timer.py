"""
timer.py — Module countdown timer
=================================
Each module session runs a countdown sized from the module's human duration
("25 min" → 1500 s).  When the countdown first reaches zero the learner is
granted one overtime extension of 180 s; the second time it reaches zero
the timer stops for good.  The timer is advisory: expiry never blocks
submission or navigation.

Phases
------
  NOT_STARTED  → start() → RUNNING
  RUNNING      → first zero → OVERTIME (seconds reset to 180)
  OVERTIME     → second zero → EXPIRED
  RUNNING | OVERTIME → stop() → STOPPED (seconds kept)

Public API
----------
  parse_duration(text)        → seconds (default 600 when unparseable)
  format_time(seconds)        → "m:ss"
  CountdownTimer              thread-safe state machine, one tick() per second
  TimerTicker                 daemon thread that calls tick() on an interval
"""

from __future__ import annotations

import logging
import re
import threading
from enum import Enum
from typing import Optional

from bridgefast.models import TimerSnapshot

logger = logging.getLogger(__name__)

DEFAULT_DURATION_SECONDS = 10 * 60
OVERTIME_SECONDS         = 3 * 60

DURATION_PATTERN = re.compile(r"\s*(\d+)\s*min\s*", re.IGNORECASE)


# ─── Helpers ─────────────────────────────────────────────────────────────────

def parse_duration(text: Optional[str]) -> int:
    """
    Convert a duration label such as ``"25 min"`` into seconds.

    The whole label must be ``<n> min``; anything else falls back to ten
    minutes.
    """
    match = DURATION_PATTERN.fullmatch(text or "")
    if not match:
        return DEFAULT_DURATION_SECONDS
    return int(match.group(1)) * 60


def format_time(seconds: int) -> str:
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"


class TimerPhase(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING     = "running"
    OVERTIME    = "overtime"
    EXPIRED     = "expired"
    STOPPED     = "stopped"


# ─── State machine ───────────────────────────────────────────────────────────

class CountdownTimer:
    """
    Countdown with a single overtime extension.

    All state lives behind one lock so a background ticker and the engine
    thread can touch it concurrently.
    """

    def __init__(self, duration_seconds: int = DEFAULT_DURATION_SECONDS,
                 overtime_seconds: int = OVERTIME_SECONDS) -> None:
        self._lock              = threading.Lock()
        self._duration          = max(0, int(duration_seconds))
        self._overtime_seconds  = overtime_seconds
        self._seconds_remaining = self._duration
        self._is_overtime       = False
        self._is_running        = False
        self._phase             = TimerPhase.NOT_STARTED

    @classmethod
    def from_duration_label(cls, label: Optional[str]) -> "CountdownTimer":
        return cls(parse_duration(label))

    # ── Transitions ──────────────────────────────────────────────────────────

    def start(self) -> None:
        with self._lock:
            if self._phase != TimerPhase.NOT_STARTED:
                return
            self._phase      = TimerPhase.RUNNING
            self._is_running = True

    def tick(self) -> None:
        """Advance the countdown by one second.  No-op unless running."""
        with self._lock:
            if not self._is_running:
                return
            self._seconds_remaining = max(0, self._seconds_remaining - 1)
            if self._seconds_remaining > 0:
                return

            if not self._is_overtime:
                self._is_overtime       = True
                self._seconds_remaining = self._overtime_seconds
                self._phase             = TimerPhase.OVERTIME
                logger.debug("Timer reached zero; granting %ds overtime", self._overtime_seconds)
            else:
                self._is_running = False
                self._phase      = TimerPhase.EXPIRED
                logger.debug("Timer expired after overtime")

    def stop(self) -> None:
        """Halt ticking.  An expired or never-started timer keeps its phase."""
        with self._lock:
            self._is_running = False
            if self._phase in (TimerPhase.RUNNING, TimerPhase.OVERTIME):
                self._phase = TimerPhase.STOPPED

    # ── Read accessors ───────────────────────────────────────────────────────

    @property
    def seconds_remaining(self) -> int:
        with self._lock:
            return self._seconds_remaining

    @property
    def is_overtime(self) -> bool:
        with self._lock:
            return self._is_overtime

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._is_running

    @property
    def phase(self) -> TimerPhase:
        with self._lock:
            return self._phase

    def snapshot(self) -> TimerSnapshot:
        with self._lock:
            return TimerSnapshot(
                seconds_remaining = self._seconds_remaining,
                is_overtime       = self._is_overtime,
                is_running        = self._is_running,
                phase             = self._phase.value,
                display           = format_time(self._seconds_remaining),
            )


# ─── Background ticker ───────────────────────────────────────────────────────

class TimerTicker:
    """
    Calls ``timer.tick()`` every *interval* seconds on a daemon thread until
    cancelled or the timer stops running.
    """

    def __init__(self, timer: CountdownTimer, interval: float = 1.0) -> None:
        self._timer    = timer
        self._interval = interval
        self._stopped  = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name="bridgefast-timer", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while not self._stopped.wait(self._interval):
            self._timer.tick()
            if not self._timer.is_running:
                break

    def cancel(self) -> None:
        self._stopped.set()

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
