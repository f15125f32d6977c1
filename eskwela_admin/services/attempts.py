"""
Quiz attempt tracking: listing, starting and submitting attempts.
"""
import logging
from datetime import timedelta
from typing import List, Optional, Union

from ..core.exceptions import NotFoundError, ValidationFailure
from ..models.base import utcnow
from ..models.entities import QuizAnswer, QuizAttempt
from ..models.envelope import Envelope
from ..models.enums import AttemptStatus
from ..models.filters import QuizAttemptFilters
from ..models.payloads import SubmitAttemptData
from .base import BaseService, coerce, operation
from .generators import DEFAULT_ATTEMPT_TOTAL_POINTS, score_percentage
from .query import run_query

logger = logging.getLogger(__name__)


class AttemptService(BaseService):

    def _require(self, attempt_id: int) -> QuizAttempt:
        attempt = self.store.attempts.get(attempt_id)
        if attempt is None:
            raise NotFoundError("Quiz attempt", attempt_id)
        return attempt

    def _embed(self, attempt: QuizAttempt) -> QuizAttempt:
        return attempt.model_copy(update={
            "user": self.store.users.get(attempt.user_id),
            "quiz": self.store.quizzes.get(attempt.quiz_id),
        })

    @operation()
    async def get_quiz_attempts(
        self, params: Optional[Union[QuizAttemptFilters, dict]] = None
    ) -> Envelope[List[QuizAttempt]]:
        filters = coerce(QuizAttemptFilters, params)
        attempts, pagination = run_query(self.store.attempts.all(), filters)
        return Envelope.ok([self._embed(a) for a in attempts], pagination=pagination)

    @operation()
    async def get_quiz_attempt_by_id(self, attempt_id: int) -> Envelope[QuizAttempt]:
        return Envelope.ok(self._embed(self._require(attempt_id)))

    @operation()
    async def start_quiz_attempt(self, quiz_id: int, user_id: int) -> Envelope[QuizAttempt]:
        async with self.store.lock:
            quiz = self.store.quizzes.get(quiz_id)
            if quiz is None:
                raise NotFoundError("Quiz", quiz_id)
            if user_id not in self.store.users:
                raise NotFoundError("User", user_id)
            attempt = self.store.attempts.put(QuizAttempt(
                id=self.store.attempts.next_id(),
                quiz_id=quiz_id,
                user_id=user_id,
                started_at=utcnow(),
                total_points=quiz.total_points or DEFAULT_ATTEMPT_TOTAL_POINTS,
                status=AttemptStatus.IN_PROGRESS,
            ))
        logger.info(f"User {user_id} started attempt {attempt.id} on quiz {quiz_id}")
        return Envelope.ok(self._embed(attempt), message="Quiz attempt started successfully")

    @operation()
    async def submit_quiz_attempt(
        self,
        attempt_id: int,
        answers: Union[SubmitAttemptData, dict, List[Union[QuizAnswer, dict]]],
    ) -> Envelope[QuizAttempt]:
        if isinstance(answers, (SubmitAttemptData, dict)):
            payload = coerce(SubmitAttemptData, answers)
        else:
            payload = SubmitAttemptData(answers=list(answers))

        async with self.store.lock:
            existing = self._require(attempt_id)
            if existing.status != AttemptStatus.IN_PROGRESS:
                raise ValidationFailure(
                    "Quiz attempt is not in progress",
                    extra={"status": existing.status.value},
                )
            score = sum(a.points_earned for a in payload.answers)
            time_spent = sum(a.time_spent for a in payload.answers)
            attempt = self.store.attempts.put(existing.model_copy(update={
                "answers": payload.answers,
                "score": score,
                "time_spent": time_spent,
                "percentage": score_percentage(score, existing.total_points),
                "completed_at": existing.started_at + timedelta(seconds=time_spent),
                "status": AttemptStatus.COMPLETED,
            }))
        logger.info(
            f"Attempt {attempt_id} submitted: {score}/{attempt.total_points} "
            f"({attempt.percentage}%)"
        )
        return Envelope.ok(self._embed(attempt), message="Quiz attempt submitted successfully")
