import re
from typing import List

_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
_EDGE_PUNCTUATION = re.compile(r"^[\W_]+|[\W_]+$")


def tokenize_words(transcript: str) -> List[str]:
    """Lowercase whitespace-separated words with edge punctuation stripped."""
    tokens = []
    for raw in transcript.strip().split():
        token = _EDGE_PUNCTUATION.sub("", raw).lower()
        if token:
            tokens.append(token)
    return tokens


def split_sentences(transcript: str) -> List[str]:
    """Non-empty sentences in order; list position is the sentence index."""
    return [part.strip() for part in _SENTENCE_BOUNDARY.split(transcript) if part.strip()]
