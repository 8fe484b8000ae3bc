from typing import List, Tuple
from config import Config
from models import (
    Feedback,
    FeedbackHighlights,
    GrammarFinding,
    PronunciationFinding,
    VocabularyFinding,
)

NO_SPEECH_MESSAGE = (
    "No speech detected. Please try speaking again and ensure your microphone is working properly."
)
ANALYSIS_ERROR_MESSAGE = "An error occurred during analysis. Please try again."

# (minimum overall score, comment), checked top-down
OVERALL_COMMENTS: Tuple[Tuple[float, str], ...] = (
    (90, "Excellent work! Your English is very clear and natural. Your pronunciation, grammar, "
         "and fluency are all at a high level. Keep practicing to maintain this excellent standard."),
    (80, "Great job! You're communicating effectively with good clarity and structure. Focus on the "
         "specific areas highlighted for improvement to reach the next level."),
    (70, "Good progress! You're developing solid English skills. Continue practicing the suggested "
         "improvements, particularly in pronunciation and grammar, to enhance your overall fluency."),
    (60, "You're making steady progress! Focus on pronunciation fundamentals and basic grammar "
         "structures for clearer communication. Regular practice will help you improve significantly."),
)
FALLBACK_COMMENT = (
    "Keep practicing! Focus on basic pronunciation patterns and simple sentence structures. "
    "Don't get discouraged - consistent practice will lead to noticeable improvements."
)


def overall_comment(overall_score: float) -> str:
    for minimum, comment in OVERALL_COMMENTS:
        if overall_score >= minimum:
            return comment
    return FALLBACK_COMMENT


def score_band(score: float) -> str:
    """Label used by clients to colour a score."""
    if score >= 85:
        return "good"
    elif score >= 70:
        return "fair"
    return "needs_work"


def select_highlights(feedback: Feedback) -> FeedbackHighlights:
    """Pick the few findings worth showing first; the feedback itself is untouched."""
    focus_words = [p for p in feedback.pronunciation if p.score < Config.HIGHLIGHT_SCORE_THRESHOLD]
    return FeedbackHighlights(
        focus_words=focus_words[:Config.HIGHLIGHT_MAX_WORDS],
        vocabulary_tips=feedback.vocabulary[:Config.HIGHLIGHT_MAX_VOCABULARY],
    )


class FeedbackComposer:
    def compose(self,
                pronunciation: List[PronunciationFinding],
                grammar: List[GrammarFinding],
                vocabulary: List[VocabularyFinding],
                overall_score: float) -> Feedback:
        return Feedback(
            pronunciation=pronunciation,
            grammar=grammar,
            vocabulary=vocabulary,
            overall=overall_comment(overall_score),
        )

    def no_speech(self) -> Feedback:
        return Feedback(overall=NO_SPEECH_MESSAGE)

    def analysis_error(self) -> Feedback:
        return Feedback(overall=ANALYSIS_ERROR_MESSAGE)
