import re
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple
from models import GrammarFinding

_AGREEMENT_FIXES: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"\bi are\b"), "I am"),
    (re.compile(r"\byou is\b"), "you are"),
    (re.compile(r"\bwe is\b"), "we are"),
)
_A_BEFORE_VOWEL = re.compile(r"\ba\s+([aeiou])")
_AN_BEFORE_VOWEL = re.compile(r"\ban\s+[aeiou]")
_MODIFIED_UNIQUE = re.compile(r"\b(?:very|more)\s+unique\b")


@dataclass(frozen=True)
class GrammarRule:
    error: str
    explanation: str
    detect: Callable[[str], bool]
    correct: Callable[[str], str]


def _has_disagreement(sentence: str) -> bool:
    return any(pattern.search(sentence) for pattern, _ in _AGREEMENT_FIXES)


def _fix_disagreement(sentence: str) -> str:
    for pattern, replacement in _AGREEMENT_FIXES:
        sentence = pattern.sub(replacement, sentence)
    return sentence


def _misuses_article(sentence: str) -> bool:
    # A sentence that already uses "an" correctly is left alone
    return bool(_A_BEFORE_VOWEL.search(sentence)) and not _AN_BEFORE_VOWEL.search(sentence)


GRAMMAR_RULES: Tuple[GrammarRule, ...] = (
    GrammarRule(
        error="Subject-verb disagreement",
        explanation="Make sure the subject and verb agree in number and person",
        detect=_has_disagreement,
        correct=_fix_disagreement,
    ),
    GrammarRule(
        error="Article usage",
        explanation="Use 'an' before words that start with vowel sounds",
        detect=_misuses_article,
        correct=lambda sentence: _A_BEFORE_VOWEL.sub(r"an \1", sentence),
    ),
    GrammarRule(
        error="Redundant modifier",
        explanation="'Unique' is already absolute - avoid modifying it with 'very' or 'more'",
        detect=lambda sentence: bool(_MODIFIED_UNIQUE.search(sentence)),
        correct=lambda sentence: _MODIFIED_UNIQUE.sub("unique", sentence),
    ),
)


class GrammarAnalyzer:
    def __init__(self, rules: Sequence[GrammarRule] = GRAMMAR_RULES):
        self.rules = tuple(rules)

    def analyze_grammar(self, sentences: List[str]) -> List[GrammarFinding]:
        """Check every sentence against every rule; rules are not exclusive."""
        findings = []
        for index, sentence in enumerate(sentences):
            normalized = sentence.strip().lower()
            if not normalized:
                continue
            for rule in self.rules:
                if rule.detect(normalized):
                    findings.append(GrammarFinding(
                        error=rule.error,
                        correction=rule.correct(normalized),
                        explanation=rule.explanation,
                        sentence_index=index,
                    ))
        return findings
