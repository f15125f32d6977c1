"""
In-memory store backing the mock API.

One ``id -> record`` table per entity family, seeded once from the
generators and guarded by a single asyncio lock. Records are immutable; a
write replaces the whole record.
"""
import asyncio
import logging
from datetime import datetime
from typing import Dict, Generic, Iterable, List, Optional, TypeVar

from ..core.config import Settings
from ..models.base import utcnow
from ..models.entities import ARContent, Question, Quiz, QuizAttempt, User
from . import generators

logger = logging.getLogger(__name__)

R = TypeVar("R")


class Table(Generic[R]):
    """Records of one family keyed by id, in insertion order."""

    def __init__(self, name: str, records: Iterable[R] = ()):
        self.name = name
        self._rows: Dict[int, R] = {}
        for record in records:
            self._rows[record.id] = record

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, record_id: int) -> bool:
        return record_id in self._rows

    def all(self) -> List[R]:
        return list(self._rows.values())

    def get(self, record_id: int) -> Optional[R]:
        return self._rows.get(record_id)

    def next_id(self) -> int:
        return max(self._rows, default=0) + 1

    def put(self, record: R) -> R:
        self._rows[record.id] = record
        return record

    def delete(self, record_id: int) -> bool:
        return self._rows.pop(record_id, None) is not None


class MockStore:
    """Tables for users, content, quizzes, questions and attempts."""

    def __init__(
        self,
        users: Iterable[User] = (),
        content: Iterable[ARContent] = (),
        quizzes: Iterable[Quiz] = (),
        questions: Iterable[Question] = (),
        attempts: Iterable[QuizAttempt] = (),
    ):
        self.users: Table[User] = Table("users", users)
        self.content: Table[ARContent] = Table("content", content)
        self.quizzes: Table[Quiz] = Table("quizzes", quizzes)
        self.questions: Table[Question] = Table("questions", questions)
        self.attempts: Table[QuizAttempt] = Table("quiz_attempts", attempts)
        self.lock = asyncio.Lock()

    @classmethod
    def seeded(cls, settings: Settings, now: Optional[datetime] = None) -> "MockStore":
        """Populate every table from the generators using the configured seed."""
        now = now or utcnow()
        seed = settings.MOCK_SEED

        users = generators.generate_users(settings.MOCK_USER_COUNT, seed, now)
        content = generators.generate_content(settings.MOCK_CONTENT_COUNT, seed, now)
        quizzes = generators.generate_quizzes(
            settings.MOCK_QUIZ_COUNT, seed, now, content_count=settings.MOCK_CONTENT_COUNT
        )

        questions: List[Question] = []
        attempts: List[QuizAttempt] = []
        for index, quiz in enumerate(quizzes):
            quiz_questions = generators.generate_questions(quiz.id, quiz.questions_count, seed)
            questions.extend(quiz_questions)
            if index < settings.MOCK_ATTEMPT_QUIZ_COUNT:
                attempts.extend(generators.generate_quiz_attempts(
                    quiz.id,
                    settings.MOCK_ATTEMPTS_PER_QUIZ,
                    seed,
                    now,
                    user_count=settings.MOCK_USER_COUNT,
                    questions=quiz_questions,
                ))

        store = cls(users, content, quizzes, questions, attempts)
        # Quiz totals follow the generated questions
        for quiz in quizzes:
            store.refresh_quiz_totals(quiz.id, touch=False)

        logger.debug(
            f"Seeded store (seed={seed}): {len(store.users)} users, "
            f"{len(store.content)} content, {len(store.quizzes)} quizzes, "
            f"{len(store.questions)} questions, {len(store.attempts)} attempts"
        )
        return store

    def questions_for(self, quiz_id: int) -> List[Question]:
        """Questions of one quiz ordered by their position."""
        return sorted(
            (q for q in self.questions.all() if q.quiz_id == quiz_id),
            key=lambda q: (q.order, q.id),
        )

    def refresh_quiz_totals(self, quiz_id: int, touch: bool = True) -> Optional[Quiz]:
        """Recompute ``questions_count`` and ``total_points`` from stored questions."""
        quiz = self.quizzes.get(quiz_id)
        if quiz is None:
            return None
        questions = self.questions_for(quiz_id)
        update = {
            "questions_count": len(questions),
            "total_points": sum(q.points for q in questions),
        }
        if touch:
            update["updated_at"] = utcnow()
        return self.quizzes.put(quiz.model_copy(update=update))

    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            user.email == email and user.id != exclude_id for user in self.users.all()
        )
