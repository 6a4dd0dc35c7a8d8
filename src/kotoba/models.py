from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class VocabularyEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    term: str
    reading: str
    translation: str
    category: str = ""


class GrammarPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    pattern: str
    translation: str
    example: str
    example_translation: str


class QuizQuestion(BaseModel):
    entry_id: int
    term: str
    reading: str
    correct_answer: str
    options: List[str]

    @property
    def prompt(self) -> Tuple[str, str]:
        return self.term, self.reading


class AnswerRecord(BaseModel):
    term: str
    user_answer: str
    correct_answer: str
    is_correct: bool


class SubmissionOutcome(BaseModel):
    recorded: bool
    is_correct: bool = False
    correct_answer: Optional[str] = None
    user_answer: str = ""


class QuestionState(str, Enum):
    NO_QUESTION = "no_question"
    UNANSWERED = "unanswered"
    ANSWERED = "answered"


class QuizSession(BaseModel):
    current_question: Optional[QuizQuestion] = None
    answered: bool = False
    last_answer_correct: bool = False
    score: int = 0
    total: int = 0
    skipped: int = 0
    answers: List[AnswerRecord] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def state(self) -> QuestionState:
        if self.current_question is None:
            return QuestionState.NO_QUESTION
        if self.answered:
            return QuestionState.ANSWERED
        return QuestionState.UNANSWERED

    @property
    def score_percentage(self) -> int:
        return round((self.score / self.total) * 100) if self.total > 0 else 0
