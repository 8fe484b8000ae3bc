from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional

class PronunciationFinding(BaseModel):
    word: str
    score: int = Field(ge=0, le=100)
    suggestion: str
    phonetic_correction: Optional[str] = None

class GrammarFinding(BaseModel):
    error: str
    correction: str
    explanation: str
    sentence_index: int = Field(ge=0)

class VocabularyFinding(BaseModel):
    word: str
    alternatives: List[str] = Field(min_length=1)
    context: str

class Feedback(BaseModel):
    pronunciation: List[PronunciationFinding] = []
    grammar: List[GrammarFinding] = []
    vocabulary: List[VocabularyFinding] = []
    overall: str

class Scores(BaseModel):
    pronunciation: int = Field(ge=0, le=100)
    grammar: int = Field(ge=50, le=95)
    fluency: int = Field(ge=60, le=95)
    overall: int = Field(ge=0, le=100)

class Evaluation(BaseModel):
    feedback: Feedback
    scores: Optional[Scores] = None

class PracticeSession(BaseModel):
    id: str
    user_id: str
    transcript: str
    original_text: Optional[str] = None
    scores: Scores
    feedback: Feedback
    duration_seconds: float = Field(ge=0)
    timestamp: datetime
    xp_gained: int

class FeedbackHighlights(BaseModel):
    focus_words: List[PronunciationFinding]
    vocabulary_tips: List[VocabularyFinding]

class AnalysisRequest(BaseModel):
    transcript: str = ""
    original_text: Optional[str] = None

class AnalysisResponse(BaseModel):
    feedback: Feedback
    scores: Optional[Scores] = None
    highlights: FeedbackHighlights

class SessionRequest(BaseModel):
    transcript: str
    user_id: str
    duration_seconds: float = Field(ge=0)
    original_text: Optional[str] = None

class Voice(BaseModel):
    name: str
    lang: str
    default: bool = False

class SpeechSynthesisOptions(BaseModel):
    rate: Optional[float] = None
    pitch: Optional[float] = None
    volume: Optional[float] = None
    voice: Optional[str] = None

class SpeechSynthesisRequest(BaseModel):
    text: str
    options: SpeechSynthesisOptions = SpeechSynthesisOptions()
    voices: List[Voice] = []

class Utterance(BaseModel):
    text: str
    rate: float
    pitch: float
    volume: float
    lang: str
    voice: Optional[Voice] = None
