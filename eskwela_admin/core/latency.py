"""
Simulated network latency for the mock API.
"""
import asyncio
import logging
from typing import Callable, Optional

from .config import Settings

logger = logging.getLogger(__name__)

# Milliseconds per operation
LATENCY_MS = {
    "get_dashboard_stats": 300,
    "get_users": 500,
    "get_user_by_id": 300,
    "create_user": 800,
    "update_user": 600,
    "delete_user": 400,
    "get_content": 500,
    "get_content_by_id": 300,
    "create_content": 1200,
    "update_content": 800,
    "delete_content": 400,
    "generate_qr_code": 300,
    "get_quizzes": 500,
    "get_quiz_by_id": 300,
    "create_quiz": 800,
    "update_quiz": 600,
    "delete_quiz": 400,
    "get_quiz_questions": 400,
    "create_question": 600,
    "update_question": 500,
    "delete_question": 300,
    "reorder_questions": 400,
    "get_quiz_attempts": 500,
    "get_quiz_attempt_by_id": 300,
    "start_quiz_attempt": 400,
    "submit_quiz_attempt": 800,
    "get_analytics": 800,
    "get_student_progress": 500,
    "get_content_engagement": 600,
    "generate_report": 1500,
}

UPLOAD_STEP_MS = 100
UPLOAD_TOTAL_MS = 1000
UPLOAD_PROGRESS_STEP = 10


class LatencySimulator:
    """Suspends the calling coroutine to model a network round trip."""

    def __init__(
        self,
        enabled: bool = True,
        scale: float = 1.0,
        sleep: Callable = asyncio.sleep,
    ):
        self.enabled = enabled
        self.scale = scale
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings) -> "LatencySimulator":
        return cls(enabled=settings.LATENCY_ENABLED, scale=settings.LATENCY_SCALE)

    async def pause(self, milliseconds: int) -> None:
        """Sleep for the scaled duration; a zero duration still yields once."""
        seconds = milliseconds / 1000.0 * self.scale if self.enabled else 0.0
        await self._sleep(seconds)

    async def simulate(self, operation: str) -> None:
        """Sleep for the latency configured for an operation."""
        await self.pause(LATENCY_MS.get(operation, 0))

    async def simulate_upload(
        self, on_progress: Optional[Callable[[int], None]] = None
    ) -> None:
        """
        Model a file upload.

        With a progress sink the upload pauses before each 10% step from 0 to
        100 and reports the step; without one it sleeps once for the full
        duration.
        """
        if on_progress is None:
            await self.pause(UPLOAD_TOTAL_MS)
            return

        for progress in range(0, 101, UPLOAD_PROGRESS_STEP):
            await self.pause(UPLOAD_STEP_MS)
            on_progress(progress)
