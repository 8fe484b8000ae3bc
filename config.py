from dotenv import load_dotenv
import os

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


# Configuration class for the application
class Config:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Pronunciation scoring
    PRONUNCIATION_BASE_MIN = 85
    PRONUNCIATION_BASE_MAX = 95
    PRONUNCIATION_FLOOR = 60
    PRONUNCIATION_SUGGESTION_THRESHOLD = 80
    PRONUNCIATION_MAX_PENALTY = 25
    PRONUNCIATION_JITTER = _env_flag("PRONUNCIATION_JITTER")  # randomized base scores, off for reproducible runs

    # Sub-score formulas
    NEUTRAL_PRONUNCIATION_SCORE = 85
    GRAMMAR_BASE_SCORE = 95
    GRAMMAR_PENALTY_PER_FINDING = 10
    GRAMMAR_FLOOR = 50
    FLUENCY_BASE_SCORE = 100
    FLUENCY_SHORT_WORDS = 10
    FLUENCY_SHORT_PENALTY = 20
    FLUENCY_LONG_WORDS = 100
    FLUENCY_LONG_PENALTY = 10
    FLUENCY_FLOOR = 60
    FLUENCY_CEILING = 95
    XP_MULTIPLIER = 2

    # Display selection
    HIGHLIGHT_SCORE_THRESHOLD = 85
    HIGHLIGHT_MAX_WORDS = 3
    HIGHLIGHT_MAX_VOCABULARY = 2

    # Speech synthesis
    TTS_LANGUAGE = os.getenv("TTS_LANGUAGE", "en-US")
    TTS_DEFAULT_RATE = 0.9
    TTS_DEFAULT_PITCH = 1.0
    TTS_DEFAULT_VOLUME = 0.8

    # Artificial delay for the HTTP layer only
    SIMULATED_LATENCY_SEC = float(os.getenv("SIMULATED_LATENCY_SEC", "0"))

    CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
    CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/0")
