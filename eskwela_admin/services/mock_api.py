"""
Single entry point over the entity services.

``MockAPIService`` owns one seeded store and one latency simulator and hands
them to every entity service, so all operations see the same data.
"""
import logging
from typing import Optional

from ..core.config import Settings, get_settings
from ..core.latency import LatencySimulator
from .analytics import AnalyticsService
from .attempts import AttemptService
from .content import ContentService
from .dashboard import DashboardService
from .quizzes import QuizService
from .store import MockStore
from .users import UserService

logger = logging.getLogger(__name__)


class MockAPIService:
    """Asynchronous mock of the admin backend API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[MockStore] = None,
        latency: Optional[LatencySimulator] = None,
    ):
        self.settings = settings or get_settings()
        self.store = store if store is not None else MockStore.seeded(self.settings)
        self.latency = latency or LatencySimulator.from_settings(self.settings)

        parts = (self.store, self.latency, self.settings)
        self.dashboard = DashboardService(*parts)
        self.users = UserService(*parts)
        self.content = ContentService(*parts)
        self.quizzes = QuizService(*parts)
        self.attempts = AttemptService(*parts)
        self.analytics = AnalyticsService(*parts)

        logger.info(
            f"Mock API ready (seed={self.settings.MOCK_SEED}, "
            f"latency={'on' if self.latency.enabled else 'off'})"
        )

    # Dashboard
    async def get_dashboard_stats(self):
        return await self.dashboard.get_dashboard_stats()

    # Users
    async def get_users(self, filters=None):
        return await self.users.get_users(filters)

    async def get_user_by_id(self, user_id):
        return await self.users.get_user_by_id(user_id)

    async def create_user(self, data):
        return await self.users.create_user(data)

    async def update_user(self, user_id, data):
        return await self.users.update_user(user_id, data)

    async def delete_user(self, user_id):
        return await self.users.delete_user(user_id)

    # AR content
    async def get_content(self, filters=None):
        return await self.content.get_content(filters)

    async def get_content_by_id(self, content_id):
        return await self.content.get_content_by_id(content_id)

    async def create_content(self, data):
        return await self.content.create_content(data)

    async def update_content(self, content_id, data):
        return await self.content.update_content(content_id, data)

    async def delete_content(self, content_id):
        return await self.content.delete_content(content_id)

    async def upload_file(self, file, on_progress=None):
        return await self.content.upload_file(file, on_progress)

    async def generate_qr_code(self, content_id):
        return await self.content.generate_qr_code(content_id)

    # Quizzes
    async def get_quizzes(self, filters=None):
        return await self.quizzes.get_quizzes(filters)

    async def get_quiz_by_id(self, quiz_id):
        return await self.quizzes.get_quiz_by_id(quiz_id)

    async def create_quiz(self, data):
        return await self.quizzes.create_quiz(data)

    async def update_quiz(self, quiz_id, data):
        return await self.quizzes.update_quiz(quiz_id, data)

    async def delete_quiz(self, quiz_id):
        return await self.quizzes.delete_quiz(quiz_id)

    # Questions
    async def get_quiz_questions(self, quiz_id):
        return await self.quizzes.get_quiz_questions(quiz_id)

    async def create_question(self, quiz_id, data):
        return await self.quizzes.create_question(quiz_id, data)

    async def update_question(self, question_id, data):
        return await self.quizzes.update_question(question_id, data)

    async def delete_question(self, question_id):
        return await self.quizzes.delete_question(question_id)

    async def reorder_questions(self, quiz_id, question_ids):
        return await self.quizzes.reorder_questions(quiz_id, question_ids)

    # Quiz attempts
    async def get_quiz_attempts(self, filters=None):
        return await self.attempts.get_quiz_attempts(filters)

    async def get_quiz_attempt_by_id(self, attempt_id):
        return await self.attempts.get_quiz_attempt_by_id(attempt_id)

    async def start_quiz_attempt(self, quiz_id, user_id):
        return await self.attempts.start_quiz_attempt(quiz_id, user_id)

    async def submit_quiz_attempt(self, attempt_id, answers):
        return await self.attempts.submit_quiz_attempt(attempt_id, answers)

    # Analytics
    async def get_analytics(self, filters=None):
        return await self.analytics.get_analytics(filters)

    async def get_student_progress(self, user_id, date_range=None):
        return await self.analytics.get_student_progress(user_id, date_range)

    async def get_content_engagement(self, date_range=None):
        return await self.analytics.get_content_engagement(date_range)

    async def generate_report(self, report_type, filters=None):
        return await self.analytics.generate_report(report_type, filters)
