"""
Tests for narration text cleaning and the NarrationController.
"""
import pytest
from factories import RecordingNarrator

from bridgefast.narration import NarrationController, clean_narration_text


class TestCleanNarrationText:
    @pytest.mark.parametrize("raw,clean", [
        ("**Key Principles:**", "Key Principles:"),
        ("*emphasis* here", "emphasis here"),
        ("Line one\nLine two", "Line one Line two"),
        ("Over the weeks:\n\n• first\n• second", "Over the weeks:  first  second"),
        ("  padded  ", "padded"),
        ("", ""),
    ])
    def test_clean(self, raw, clean):
        assert clean_narration_text(raw) == clean


class TestNarrationController:
    def test_auto_speak_once_per_index(self):
        narrator = RecordingNarrator()
        ctl = NarrationController(narrator)
        assert ctl.auto_speak(0, "Hello") is True
        assert ctl.auto_speak(0, "Hello") is False
        assert ctl.auto_speak(1, "Next") is True
        assert narrator.spoken == ["Hello", "Next"]

    def test_muted_never_speaks(self):
        narrator = RecordingNarrator()
        ctl = NarrationController(narrator, muted=True)
        assert ctl.auto_speak(0, "Hello") is False
        assert ctl.speak("Hello") is False
        assert narrator.spoken == []

    def test_manual_replay_allowed_after_auto(self):
        narrator = RecordingNarrator()
        ctl = NarrationController(narrator)
        ctl.auto_speak(0, "Hello")
        assert ctl.speak("Hello") is True
        assert narrator.spoken == ["Hello", "Hello"]
        assert narrator.cancels == 1, "replay cancels the utterance in flight"

    def test_cancel_only_when_speaking(self):
        narrator = RecordingNarrator()
        ctl = NarrationController(narrator)
        ctl.cancel()
        assert narrator.cancels == 0
        ctl.speak("Hi")
        ctl.cancel()
        ctl.cancel()
        assert narrator.cancels == 1

    def test_toggle_mute_cancels(self):
        narrator = RecordingNarrator()
        ctl = NarrationController(narrator)
        ctl.speak("Hi")
        assert ctl.toggle_mute() is True
        assert narrator.cancels == 1
        assert ctl.toggle_mute() is False

    def test_failing_narrator_is_contained(self):
        ctl = NarrationController(RecordingNarrator(fail=True))
        assert ctl.speak("Hi") is False
        assert ctl.is_speaking is False

    def test_reset_forgets_spoken_scenes(self):
        narrator = RecordingNarrator()
        ctl = NarrationController(narrator)
        ctl.auto_speak(0, "Hello")
        ctl.reset()
        assert ctl.auto_speak(0, "Hello") is True
