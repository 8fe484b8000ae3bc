import logging
from typing import Optional
from models import Evaluation, Feedback
from services.feedback_generator import FeedbackComposer
from services.grammar import GrammarAnalyzer
from services.pronunciation import PronunciationAnalyzer
from services.scoring import ScoreAggregator
from services.tokenizer import split_sentences, tokenize_words
from services.vocabulary import VocabularyAnalyzer


class SpeechAnalysisEngine:
    """Turns a transcript into findings, scores and an overall comment.

    Pure and synchronous: no I/O and no state shared between calls, so one
    instance can serve concurrent callers.
    """

    def __init__(self,
                 pronunciation_analyzer: Optional[PronunciationAnalyzer] = None,
                 grammar_analyzer: Optional[GrammarAnalyzer] = None,
                 vocabulary_analyzer: Optional[VocabularyAnalyzer] = None,
                 score_aggregator: Optional[ScoreAggregator] = None,
                 composer: Optional[FeedbackComposer] = None):
        self.pronunciation_analyzer = pronunciation_analyzer or PronunciationAnalyzer()
        self.grammar_analyzer = grammar_analyzer or GrammarAnalyzer()
        self.vocabulary_analyzer = vocabulary_analyzer or VocabularyAnalyzer()
        self.score_aggregator = score_aggregator or ScoreAggregator()
        self.composer = composer or FeedbackComposer()

    def evaluate(self, transcript: str, original_text: Optional[str] = None) -> Evaluation:
        """Analyze a transcript; never raises.

        original_text (the lesson text the speaker was reading) is accepted
        but not yet compared against the transcript.
        """
        if not isinstance(transcript, str) or not transcript.strip():
            logging.info("Empty transcript received, skipping analysis")
            return Evaluation(feedback=self.composer.no_speech())

        try:
            tokens = tokenize_words(transcript)
            pronunciation = self.pronunciation_analyzer.analyze_pronunciation(tokens)
            grammar = self.grammar_analyzer.analyze_grammar(split_sentences(transcript))
            vocabulary = self.vocabulary_analyzer.analyze_vocabulary(transcript)

            scores = self.score_aggregator.aggregate(pronunciation, grammar, len(tokens))
            feedback = self.composer.compose(pronunciation, grammar, vocabulary, scores.overall)
            return Evaluation(feedback=feedback, scores=scores)
        except Exception as e:
            logging.error(f"Error in analysis service: {str(e)}", exc_info=True)
            return Evaluation(feedback=self.composer.analysis_error())

    def analyze_complete(self, transcript: str, original_text: Optional[str] = None) -> Feedback:
        return self.evaluate(transcript, original_text).feedback
