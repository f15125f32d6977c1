"""
Quiz and question management.

Questions belong to a quiz through ``quiz_id``; every question mutation
recomputes the owning quiz's ``questions_count`` and ``total_points``.
"""
import logging
from typing import Any, List, Optional, Union

from ..core.exceptions import NotFoundError, ValidationFailure
from ..models.base import utcnow
from ..models.entities import Question, Quiz
from ..models.envelope import Envelope
from ..models.enums import QuizStatus
from ..models.filters import QuizFilters
from ..models.payloads import (
    CreateQuestionData,
    CreateQuizData,
    ReorderQuestionsData,
    UpdateQuestionData,
    UpdateQuizData,
)
from .base import BaseService, coerce, merge_record, operation
from .query import run_query

logger = logging.getLogger(__name__)

OPTIONS_PER_QUESTION = 4


def validate_question_fields(
    options: Optional[List[str]] = None, correct_answer: Optional[int] = None
) -> None:
    """Options come first: a short option list is reported before a bad index."""
    if options is not None and len(options) != OPTIONS_PER_QUESTION:
        raise ValidationFailure(
            f"Question must have exactly {OPTIONS_PER_QUESTION} options",
            extra={"options": len(options)},
        )
    if correct_answer is not None and not 0 <= correct_answer < OPTIONS_PER_QUESTION:
        raise ValidationFailure(
            f"Correct answer must be between 0 and {OPTIONS_PER_QUESTION - 1}",
            extra={"correct_answer": correct_answer},
        )


class QuizService(BaseService):

    def _require_quiz(self, quiz_id: int) -> Quiz:
        quiz = self.store.quizzes.get(quiz_id)
        if quiz is None:
            raise NotFoundError("Quiz", quiz_id)
        return quiz

    def _require_question(self, question_id: int) -> Question:
        question = self.store.questions.get(question_id)
        if question is None:
            raise NotFoundError("Question", question_id)
        return question

    def _embed(self, quiz: Quiz) -> Quiz:
        """Attach the referenced content record when it still exists."""
        content = None
        if quiz.associated_content_id is not None:
            content = self.store.content.get(quiz.associated_content_id)
        return quiz.model_copy(update={"associated_content": content})

    def _renumber(self, ordered: List[Question]) -> None:
        for position, question in enumerate(ordered, start=1):
            if question.order != position:
                self.store.questions.put(question.model_copy(update={"order": position}))

    # Quizzes

    @operation()
    async def get_quizzes(
        self, params: Optional[Union[QuizFilters, dict]] = None
    ) -> Envelope[List[Quiz]]:
        filters = coerce(QuizFilters, params)
        quizzes, pagination = run_query(self.store.quizzes.all(), filters)
        return Envelope.ok([self._embed(q) for q in quizzes], pagination=pagination)

    @operation()
    async def get_quiz_by_id(self, quiz_id: int) -> Envelope[Quiz]:
        return Envelope.ok(self._embed(self._require_quiz(quiz_id)))

    @operation()
    async def create_quiz(self, data: Union[CreateQuizData, dict]) -> Envelope[Quiz]:
        payload = coerce(CreateQuizData, data)
        async with self.store.lock:
            now = utcnow()
            quiz = self.store.quizzes.put(Quiz(
                id=self.store.quizzes.next_id(),
                **payload.model_dump(),
                status=QuizStatus.DRAFT,
                questions_count=0,
                total_points=0,
                created_at=now,
                updated_at=now,
                created_by=self.settings.MOCK_CURRENT_USER_ID,
            ))
        logger.info(f"Created quiz {quiz.id} '{quiz.title}'")
        return Envelope.ok(self._embed(quiz), message="Quiz created successfully")

    @operation()
    async def update_quiz(
        self, quiz_id: int, data: Union[UpdateQuizData, dict]
    ) -> Envelope[Quiz]:
        payload = coerce(UpdateQuizData, data)
        async with self.store.lock:
            existing = self._require_quiz(quiz_id)
            changes = payload.changes()
            changes["updated_at"] = utcnow()
            quiz = self.store.quizzes.put(merge_record(existing, changes))
        logger.info(f"Updated quiz {quiz_id}: {sorted(changes)}")
        return Envelope.ok(self._embed(quiz), message="Quiz updated successfully")

    @operation()
    async def delete_quiz(self, quiz_id: int) -> Envelope[Any]:
        async with self.store.lock:
            self._require_quiz(quiz_id)
            questions = self.store.questions_for(quiz_id)
            for question in questions:
                self.store.questions.delete(question.id)
            self.store.quizzes.delete(quiz_id)
        logger.info(f"Deleted quiz {quiz_id} and {len(questions)} questions")
        return Envelope.ok(message="Quiz deleted successfully")

    # Questions

    @operation()
    async def get_quiz_questions(self, quiz_id: int) -> Envelope[List[Question]]:
        self._require_quiz(quiz_id)
        return Envelope.ok(self.store.questions_for(quiz_id))

    @operation()
    async def create_question(
        self, quiz_id: int, data: Union[CreateQuestionData, dict]
    ) -> Envelope[Question]:
        payload = coerce(CreateQuestionData, data)
        validate_question_fields(payload.options, payload.correct_answer)

        async with self.store.lock:
            self._require_quiz(quiz_id)
            question = self.store.questions.put(Question(
                id=self.store.questions.next_id(),
                quiz_id=quiz_id,
                title=payload.title,
                options=payload.options,
                correct_answer=payload.correct_answer,
                order=len(self.store.questions_for(quiz_id)) + 1,
                points=payload.points,
                explanation=payload.explanation,
            ))
            self.store.refresh_quiz_totals(quiz_id)
        logger.info(f"Created question {question.id} on quiz {quiz_id}")
        return Envelope.ok(question, message="Question created successfully")

    @operation()
    async def update_question(
        self, question_id: int, data: Union[UpdateQuestionData, dict]
    ) -> Envelope[Question]:
        payload = coerce(UpdateQuestionData, data)
        validate_question_fields(payload.options, payload.correct_answer)

        async with self.store.lock:
            existing = self._require_question(question_id)
            changes = payload.changes()
            question = self.store.questions.put(merge_record(existing, changes))
            self.store.refresh_quiz_totals(question.quiz_id)
        logger.info(f"Updated question {question_id}: {sorted(changes)}")
        return Envelope.ok(question, message="Question updated successfully")

    @operation()
    async def delete_question(self, question_id: int) -> Envelope[Any]:
        async with self.store.lock:
            question = self._require_question(question_id)
            self.store.questions.delete(question_id)
            self._renumber(self.store.questions_for(question.quiz_id))
            self.store.refresh_quiz_totals(question.quiz_id)
        logger.info(f"Deleted question {question_id} from quiz {question.quiz_id}")
        return Envelope.ok(message="Question deleted successfully")

    @operation()
    async def reorder_questions(
        self, quiz_id: int, question_ids: Union[ReorderQuestionsData, dict, List[int]]
    ) -> Envelope[List[Question]]:
        if isinstance(question_ids, (ReorderQuestionsData, dict)):
            payload = coerce(ReorderQuestionsData, question_ids)
        else:
            payload = ReorderQuestionsData(question_ids=list(question_ids))
        requested = list(dict.fromkeys(payload.question_ids))
        listed_ids = set(requested)

        async with self.store.lock:
            self._require_quiz(quiz_id)
            current = self.store.questions_for(quiz_id)
            by_id = {q.id: q for q in current}
            foreign = [qid for qid in requested if qid not in by_id]
            if foreign:
                raise ValidationFailure(
                    f"Questions {foreign} do not belong to quiz {quiz_id}",
                    extra={"question_ids": foreign},
                )
            # Unlisted questions keep their relative order after the listed ones
            listed = [by_id[qid] for qid in requested]
            rest = [q for q in current if q.id not in listed_ids]
            self._renumber(listed + rest)
            self.store.refresh_quiz_totals(quiz_id)
            ordered = self.store.questions_for(quiz_id)
        logger.info(f"Reordered {len(requested)} questions on quiz {quiz_id}")
        return Envelope.ok(ordered, message="Questions reordered successfully")
