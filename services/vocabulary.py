import re
from typing import Dict, List, Mapping
from models import VocabularyFinding

_NON_WORD = re.compile(r"\W+")
MIN_WORD_LENGTH = 4

VOCABULARY_ENHANCEMENTS: Dict[str, List[str]] = {
    "good": ["excellent", "outstanding", "remarkable", "superb"],
    "bad": ["terrible", "awful", "dreadful", "poor"],
    "big": ["enormous", "massive", "gigantic", "substantial"],
    "small": ["tiny", "minuscule", "compact", "petite"],
    "nice": ["pleasant", "delightful", "charming", "lovely"],
    "very": ["extremely", "incredibly", "remarkably", "exceptionally"],
    "said": ["stated", "mentioned", "declared", "expressed"],
    "went": ["traveled", "journeyed", "proceeded", "departed"],
}


class VocabularyAnalyzer:
    def __init__(self, enhancements: Mapping[str, List[str]] = VOCABULARY_ENHANCEMENTS):
        self.enhancements = enhancements

    def analyze_vocabulary(self, transcript: str) -> List[VocabularyFinding]:
        """Suggest stronger words, at most once per plain word"""
        words = [w for w in _NON_WORD.split(transcript.lower()) if len(w) >= MIN_WORD_LENGTH]

        findings = []
        processed = set()
        for word in words:
            if word in processed:
                continue
            alternatives = self.enhancements.get(word)
            if alternatives:
                processed.add(word)
                findings.append(VocabularyFinding(
                    word=word,
                    alternatives=list(alternatives),
                    context=f'Consider using more specific vocabulary instead of "{word}" '
                            "to make your speech more engaging",
                ))
        return findings
