from typing import Optional, Sequence
from config import Config
from models import SpeechSynthesisOptions, Utterance, Voice


def _clamp(value: Optional[float], default: float, lower: float, upper: float) -> float:
    # Zero counts as unset
    return max(lower, min(upper, value or default))


def select_voice(voices: Sequence[Voice], language: str,
                 requested: Optional[str] = None) -> Optional[Voice]:
    """Requested voice first, then the default voice for the language, then any match."""
    if requested:
        for voice in voices:
            if voice.name == requested:
                return voice

    prefix = language.split("-")[0].lower()
    matching = [voice for voice in voices if voice.lang.lower().startswith(prefix)]
    for voice in matching:
        if voice.default:
            return voice
    return matching[0] if matching else None


def build_utterance(text: str,
                    options: Optional[SpeechSynthesisOptions] = None,
                    voices: Sequence[Voice] = (),
                    language: str = Config.TTS_LANGUAGE) -> Utterance:
    if not text or not text.strip():
        raise ValueError("Cannot speak empty text")
    options = options or SpeechSynthesisOptions()

    return Utterance(
        text=text,
        rate=_clamp(options.rate, Config.TTS_DEFAULT_RATE, 0.1, 10),
        pitch=_clamp(options.pitch, Config.TTS_DEFAULT_PITCH, 0, 2),
        volume=_clamp(options.volume, Config.TTS_DEFAULT_VOLUME, 0, 1),
        lang=language,
        voice=select_voice(voices, language, options.voice),
    )
