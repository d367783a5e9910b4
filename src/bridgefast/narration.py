"""
narration.py — Optional spoken narration of scene text
======================================================
Narration is a side effect: the engine asks for narrative scenes to be read
aloud once per scene visit-index and cancels any utterance in flight on every
scene change.  No text-to-speech engine ships with the package; callers plug
one in by subclassing ``Narrator``.

Public API
----------
  clean_narration_text(text)   strip markdown emphasis / bullets / newlines
  Narrator                     speak(text) / cancel() interface
  SilentNarrator               no-op default
  NarrationController          mute flag + once-per-scene bookkeeping
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_EMPHASIS = re.compile(r"\*\*|\*")
_BULLETS  = re.compile(r"•")
_NEWLINES = re.compile(r"\n+")


def clean_narration_text(text: str) -> str:
    """Remove markdown markers and bullets so the text reads naturally."""
    text = _EMPHASIS.sub("", text or "")
    text = _BULLETS.sub("", text)
    text = _NEWLINES.sub(" ", text)
    return text.strip()


class Narrator:
    """Text-to-speech sink.  Subclasses override both methods."""

    def speak(self, text: str) -> None:
        raise NotImplementedError

    def cancel(self) -> None:
        raise NotImplementedError


class SilentNarrator(Narrator):
    def speak(self, text: str) -> None:
        pass

    def cancel(self) -> None:
        pass


class NarrationController:
    """
    Wraps a ``Narrator`` with the player's narration rules.

    Narrator failures are logged and swallowed here: narration must never
    interrupt a scene transition.
    """

    def __init__(self, narrator: Narrator | None = None, muted: bool = False) -> None:
        self.narrator = narrator or SilentNarrator()
        self.muted    = muted
        self._spoken: set[int] = set()
        self.is_speaking = False

    def speak(self, text: str) -> bool:
        """Speak *text* now (manual replay).  Returns False when muted or failed."""
        if self.muted:
            return False
        self.cancel()
        try:
            self.narrator.speak(clean_narration_text(text))
        except Exception:
            logger.warning("Narrator failed to speak", exc_info=True)
            self.is_speaking = False
            return False
        self.is_speaking = True
        return True

    def auto_speak(self, scene_index: int, text: str) -> bool:
        """Speak a narrative scene the first time its index is shown."""
        if self.muted or scene_index in self._spoken:
            return False
        self._spoken.add(scene_index)
        return self.speak(text)

    def cancel(self) -> None:
        if not self.is_speaking:
            return
        self.is_speaking = False
        try:
            self.narrator.cancel()
        except Exception:
            logger.warning("Narrator failed to cancel", exc_info=True)

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        if self.muted:
            self.cancel()
        return self.muted

    def reset(self) -> None:
        self.cancel()
        self._spoken.clear()
