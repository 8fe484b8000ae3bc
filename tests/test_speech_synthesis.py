import pytest

from models import SpeechSynthesisOptions, Voice
from services.speech_synthesis import build_utterance, select_voice

VOICES = [
    Voice(name="Amelie", lang="fr-FR", default=True),
    Voice(name="Daniel", lang="en-GB"),
    Voice(name="Samantha", lang="en-US", default=True),
]


def test_defaults():
    utterance = build_utterance("Hello", language="en-US")
    assert (utterance.rate, utterance.pitch, utterance.volume) == (0.9, 1.0, 0.8)
    assert utterance.lang == "en-US"
    assert utterance.voice is None


def test_options_are_clamped():
    options = SpeechSynthesisOptions(rate=20, pitch=5, volume=3)
    utterance = build_utterance("Hello", options)
    assert (utterance.rate, utterance.pitch, utterance.volume) == (10, 2, 1)


def test_zero_falls_back_to_default():
    utterance = build_utterance("Hello", SpeechSynthesisOptions(rate=0))
    assert utterance.rate == 0.9


def test_default_voice_for_language_preferred():
    assert select_voice(VOICES, "en-US").name == "Samantha"


def test_any_voice_for_language_when_no_default():
    voices = [v for v in VOICES if v.name != "Samantha"]
    assert select_voice(voices, "en-US").name == "Daniel"


def test_requested_voice_wins():
    options = SpeechSynthesisOptions(voice="Amelie")
    assert build_utterance("Bonjour", options, VOICES, "en-US").voice.name == "Amelie"


def test_no_matching_voice():
    assert select_voice(VOICES[:1], "en-US") is None


def test_empty_text_rejected():
    with pytest.raises(ValueError):
        build_utterance("   ")
