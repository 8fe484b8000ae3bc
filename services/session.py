import uuid
from datetime import datetime, timezone
from typing import Callable, Optional
from models import Feedback, PracticeSession
from services.scoring import ScoreAggregator
from services.tokenizer import tokenize_words


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_session(transcript: str,
                  feedback: Feedback,
                  user_id: str,
                  duration_seconds: float,
                  original_text: Optional[str] = None,
                  aggregator: Optional[ScoreAggregator] = None,
                  clock: Callable[[], datetime] = _utc_now) -> PracticeSession:
    """Wrap a finished analysis into a practice session record.

    Scores come from the shared ScoreAggregator so they always match the
    ones the analysis itself reported.
    """
    aggregator = aggregator or ScoreAggregator()
    token_count = len(tokenize_words(transcript))
    scores = aggregator.aggregate_feedback(feedback, token_count)

    return PracticeSession(
        id=f"session-{uuid.uuid4().hex}",
        user_id=user_id,
        transcript=transcript.strip(),
        original_text=original_text,
        scores=scores,
        feedback=feedback,
        duration_seconds=duration_seconds,
        timestamp=clock(),
        xp_gained=aggregator.experience_points(feedback, token_count),
    )
