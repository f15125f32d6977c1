"""
Dashboard headline numbers derived from the store.
"""
import numpy as np

from ..models.entities import DashboardStats
from ..models.envelope import Envelope
from ..models.enums import AttemptStatus, RecordStatus, Role
from .base import BaseService, operation


class DashboardService(BaseService):

    @operation()
    async def get_dashboard_stats(self) -> Envelope[DashboardStats]:
        users = self.store.users.all()
        attempts = self.store.attempts.all()
        completed = [a for a in attempts if a.status == AttemptStatus.COMPLETED]

        completion_rate = len(completed) / len(attempts) * 100 if attempts else 0.0
        average_score = float(np.mean([a.percentage for a in completed])) if completed else 0.0

        stats = DashboardStats(
            total_users=len(users),
            total_students=sum(1 for u in users if u.role == Role.STUDENT),
            total_teachers=sum(1 for u in users if u.role == Role.TEACHER),
            total_admins=sum(1 for u in users if u.role == Role.ADMIN),
            total_content=len(self.store.content),
            total_quizzes=len(self.store.quizzes),
            total_sessions=len(attempts),
            active_users=sum(1 for u in users if u.status == RecordStatus.ACTIVE),
            completion_rate=round(completion_rate, 1),
            average_score=round(average_score, 1),
        )
        return Envelope.ok(stats)
