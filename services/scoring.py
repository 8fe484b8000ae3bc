import math
from dataclasses import dataclass
from typing import List, Sequence
from config import Config
from models import Feedback, GrammarFinding, PronunciationFinding, Scores


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """Round halves upward (80.5 -> 81), unlike the built-in round()."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class RawScores:
    """Unrounded sub-scores; only Scores is ever shown to a user."""
    pronunciation: float
    grammar: float
    fluency: float

    @property
    def overall(self) -> float:
        return (self.pronunciation + self.grammar + self.fluency) / 3


class ScoreAggregator:
    """The one place the sub-score formulas live."""

    def pronunciation_score(self, findings: Sequence[PronunciationFinding]) -> float:
        if not findings:
            return Config.NEUTRAL_PRONUNCIATION_SCORE
        mean = sum(finding.score for finding in findings) / len(findings)
        return clamp(mean, 0, 100)

    def grammar_score(self, findings: Sequence[GrammarFinding]) -> float:
        score = Config.GRAMMAR_BASE_SCORE - Config.GRAMMAR_PENALTY_PER_FINDING * len(findings)
        return clamp(score, Config.GRAMMAR_FLOOR, Config.GRAMMAR_BASE_SCORE)

    def fluency_score(self, token_count: int) -> float:
        score = Config.FLUENCY_BASE_SCORE
        if token_count < Config.FLUENCY_SHORT_WORDS:
            score -= Config.FLUENCY_SHORT_PENALTY
        if token_count > Config.FLUENCY_LONG_WORDS:
            score -= Config.FLUENCY_LONG_PENALTY
        return clamp(score, Config.FLUENCY_FLOOR, Config.FLUENCY_CEILING)

    def raw_scores(self,
                   pronunciation: Sequence[PronunciationFinding],
                   grammar: Sequence[GrammarFinding],
                   token_count: int) -> RawScores:
        return RawScores(
            pronunciation=self.pronunciation_score(pronunciation),
            grammar=self.grammar_score(grammar),
            fluency=self.fluency_score(token_count),
        )

    def aggregate(self,
                  pronunciation: List[PronunciationFinding],
                  grammar: List[GrammarFinding],
                  token_count: int) -> Scores:
        """Overall is the rounded mean of the displayed sub-scores"""
        raw = self.raw_scores(pronunciation, grammar, token_count)
        shown = (
            round_half_up(raw.pronunciation),
            round_half_up(raw.grammar),
            round_half_up(raw.fluency),
        )
        return Scores(
            pronunciation=shown[0],
            grammar=shown[1],
            fluency=shown[2],
            overall=round_half_up(clamp(sum(shown) / 3, 0, 100)),
        )

    def aggregate_feedback(self, feedback: Feedback, token_count: int) -> Scores:
        return self.aggregate(feedback.pronunciation, feedback.grammar, token_count)

    def experience_points(self, feedback: Feedback, token_count: int) -> int:
        # Doubles the unrounded overall, so odd totals are possible
        raw = self.raw_scores(feedback.pronunciation, feedback.grammar, token_count)
        return round_half_up(raw.overall * Config.XP_MULTIPLIER)
