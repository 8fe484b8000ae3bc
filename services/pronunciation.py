import hashlib
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple
from config import Config
from models import PronunciationFinding
from services.scoring import round_half_up

GOOD_PRONUNCIATION = "Good pronunciation!"


@dataclass(frozen=True)
class SoundRule:
    """A sound that learners commonly struggle with.

    Higher difficulty means the sound is usually produced correctly, so a
    match costs fewer points.
    """
    sound: str
    difficulty: float
    suggestion: str

    def matches(self, word: str) -> bool:
        return self.sound in word

    def annotate(self, word: str) -> str:
        return "/" + word.replace(self.sound, f"[{self.sound}]") + "/"


SOUND_RULES: Tuple[SoundRule, ...] = (
    SoundRule("th", 0.7, "Focus on tongue placement between teeth for 'th' sounds"),
    SoundRule("r", 0.8, "Curl tongue tip slightly back for clear 'r' sounds"),
    SoundRule("w", 0.9, "Round lips more prominently for 'w' sounds"),
    SoundRule("v", 0.8, "Touch lower lip with upper teeth for 'v' sounds"),
    SoundRule("l", 0.85, "Place tongue tip against roof of mouth for 'l' sounds"),
)


class ScoreVariation:
    """Deterministic base scores and full rule penalties."""

    def base_score(self, word: str) -> float:
        span = Config.PRONUNCIATION_BASE_MAX - Config.PRONUNCIATION_BASE_MIN
        digest = int(hashlib.md5(word.encode("utf-8")).hexdigest(), 16)
        return Config.PRONUNCIATION_BASE_MIN + (digest % (span * 100 + 1)) / 100

    def penalty_scale(self, word: str, rule: SoundRule) -> float:
        return 1.0


class RandomScoreVariation(ScoreVariation):
    """Randomized jitter for a livelier demo experience; not reproducible."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def base_score(self, word: str) -> float:
        return self.rng.uniform(Config.PRONUNCIATION_BASE_MIN, Config.PRONUNCIATION_BASE_MAX)

    def penalty_scale(self, word: str, rule: SoundRule) -> float:
        return self.rng.random()


def score_word(word: str,
               base_score: float,
               rules: Sequence[SoundRule] = SOUND_RULES,
               penalty_scale: Optional[Callable[[SoundRule], float]] = None) -> PronunciationFinding:
    """Apply every matching sound rule to a word, starting from base_score."""
    score = base_score
    suggestion = GOOD_PRONUNCIATION
    phonetic_correction = None

    for rule in rules:
        if not rule.matches(word):
            continue
        scale = penalty_scale(rule) if penalty_scale else 1.0
        penalty = Config.PRONUNCIATION_MAX_PENALTY * (1 - rule.difficulty) * scale
        score = max(Config.PRONUNCIATION_FLOOR, score - penalty)
        if score < Config.PRONUNCIATION_SUGGESTION_THRESHOLD:
            suggestion = rule.suggestion
            phonetic_correction = rule.annotate(word)

    return PronunciationFinding(
        word=word,
        score=round_half_up(max(0, min(100, score))),
        suggestion=suggestion,
        phonetic_correction=phonetic_correction,
    )


class PronunciationAnalyzer:
    def __init__(self, variation: Optional[ScoreVariation] = None,
                 rules: Sequence[SoundRule] = SOUND_RULES):
        if variation is None:
            variation = RandomScoreVariation() if Config.PRONUNCIATION_JITTER else ScoreVariation()
        self.variation = variation
        self.rules = tuple(rules)

    def analyze_pronunciation(self, tokens: List[str]) -> List[PronunciationFinding]:
        """One finding per token, in transcript order"""
        findings = []
        for token in tokens:
            findings.append(score_word(
                token,
                self.variation.base_score(token),
                self.rules,
                lambda rule, token=token: self.variation.penalty_scale(token, rule),
            ))
        return findings
