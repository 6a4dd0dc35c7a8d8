import logging
import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .errors import InsufficientDataError
from .models import (
    AnswerRecord,
    QuizQuestion,
    QuizSession,
    SubmissionOutcome,
    VocabularyEntry,
)

logger = logging.getLogger(__name__)

NUM_OPTIONS = 4


# --- Strategy Pattern: Quiz Generators ---
class QuizGenerator(ABC):
    """Abstract Base Class for different question generation strategies."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    @abstractmethod
    def pick_target(self, entries: Sequence[VocabularyEntry]) -> VocabularyEntry:
        pass

    def generate(self, entries: Sequence[VocabularyEntry]) -> QuizQuestion:
        if len(entries) < NUM_OPTIONS:
            raise InsufficientDataError(len(entries), NUM_OPTIONS)

        target = self.pick_target(entries)
        options = [target.translation] + self._pick_distractors(target, entries)
        self.rng.shuffle(options)

        return QuizQuestion(
            entry_id=target.id,
            term=target.term,
            reading=target.reading,
            correct_answer=target.translation,
            options=options,
        )

    def _pick_distractors(
        self, target: VocabularyEntry, entries: Sequence[VocabularyEntry]
    ) -> list:
        """Samples wrong translations without replacement, never repeating a string."""
        pool = list(
            dict.fromkeys(
                e.translation
                for e in entries
                if e.id != target.id and e.translation != target.translation
            )
        )
        needed = NUM_OPTIONS - 1
        if len(pool) < needed:
            raise InsufficientDataError(len(pool) + 1, NUM_OPTIONS)
        return self.rng.sample(pool, needed)


class RandomQuizGenerator(QuizGenerator):
    """Standard mode: every entry is equally likely to be asked."""

    def pick_target(self, entries: Sequence[VocabularyEntry]) -> VocabularyEntry:
        return self.rng.choice(list(entries))


class QuizFactory:
    """Factory to select the appropriate generator."""

    @staticmethod
    def create(mode: str = "standard", rng: Optional[random.Random] = None) -> QuizGenerator:
        if mode != "standard":
            logger.warning(f"Unknown quiz mode '{mode}', using standard")
        return RandomQuizGenerator(rng)


def generate_question(
    dataset: Sequence[VocabularyEntry], rng: Optional[random.Random] = None
) -> QuizQuestion:
    """Builds one question: a random target plus three distinct distractors.

    Raises InsufficientDataError when the dataset cannot supply four
    distinct translations.
    """
    return QuizFactory.create("standard", rng).generate(dataset)


def next_question(
    session: QuizSession,
    dataset: Sequence[VocabularyEntry],
    generator: Optional[QuizGenerator] = None,
) -> QuizQuestion:
    """Installs a fresh question in the session.

    Leaving an unanswered question counts as a skip: score and total are
    left alone.
    """
    generator = generator or QuizFactory.create()
    question = generator.generate(dataset)

    if session.current_question is not None and not session.answered:
        session.skipped += 1
        logger.info(f"Skipped question '{session.current_question.term}'")

    session.current_question = question
    session.answered = False
    session.last_answer_correct = False
    logger.debug(f"New question: {question.term} ({len(question.options)} options)")
    return question


def submit_answer(session: QuizSession, chosen_translation: str) -> SubmissionOutcome:
    """Scores an answer for the current question.

    Submitting with no question, or after the question was already answered,
    changes nothing and returns an outcome with ``recorded=False``.
    """
    question = session.current_question
    if question is None or session.answered:
        return SubmissionOutcome(
            recorded=False,
            correct_answer=question.correct_answer if question else None,
            user_answer=chosen_translation,
        )

    is_correct = chosen_translation == question.correct_answer

    session.answered = True
    session.last_answer_correct = is_correct
    session.total += 1
    if is_correct:
        session.score += 1

    session.answers.append(
        AnswerRecord(
            term=question.term,
            user_answer=chosen_translation,
            correct_answer=question.correct_answer,
            is_correct=is_correct,
        )
    )
    logger.info(
        f"Answer for '{question.term}': {'correct' if is_correct else 'wrong'} "
        f"({session.score}/{session.total})"
    )

    return SubmissionOutcome(
        recorded=True,
        is_correct=is_correct,
        correct_answer=question.correct_answer,
        user_answer=chosen_translation,
    )
