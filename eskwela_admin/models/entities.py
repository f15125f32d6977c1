"""
Stored records for the five entity families plus the auxiliary upload,
QR-code and dashboard shapes.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import CamelModel, RecordModel
from .enums import (
    AttemptStatus,
    ContentType,
    QuizStatus,
    RecordStatus,
    Role,
    ScoringMethod,
    Subject,
)


class User(RecordModel):
    id: int
    name: str
    email: str
    role: Role
    grade_level: Optional[str] = None
    avatar: Optional[str] = None
    last_active: datetime
    created_at: datetime
    status: RecordStatus = RecordStatus.ACTIVE


class ARContent(RecordModel):
    id: int
    title: str
    description: Optional[str] = None
    subject: Subject
    grade_level: str
    type: ContentType
    qr_code: str
    thumbnail: Optional[str] = None
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    file_size: str
    created_at: datetime
    updated_at: datetime
    status: RecordStatus = RecordStatus.ACTIVE


class Quiz(RecordModel):
    id: int
    title: str
    description: Optional[str] = None
    subject: Subject
    grade_level: str
    time_limit: int  # minutes
    max_attempts: int
    scoring_method: ScoringMethod
    status: QuizStatus = QuizStatus.DRAFT
    associated_content_id: Optional[int] = None
    associated_content: Optional[ARContent] = None
    questions_count: int = 0
    total_points: int = 0
    created_at: datetime
    updated_at: datetime
    created_by: int


class Question(RecordModel):
    id: int
    quiz_id: int
    title: str
    options: List[str] = Field(min_length=4, max_length=4)
    correct_answer: int = Field(ge=0, le=3)
    order: int
    points: int
    explanation: Optional[str] = None


class QuizAnswer(RecordModel):
    question_id: int
    selected_answer: int
    is_correct: bool
    points_earned: int
    time_spent: int  # seconds


class QuizAttempt(RecordModel):
    id: int
    quiz_id: int
    user_id: int
    user: Optional[User] = None
    quiz: Optional[Quiz] = None
    started_at: datetime
    completed_at: Optional[datetime] = None
    score: int = 0
    total_points: int
    percentage: int = 0
    time_spent: int = 0  # seconds
    answers: List[QuizAnswer] = Field(default_factory=list)
    status: AttemptStatus = AttemptStatus.IN_PROGRESS


class FileHandle(CamelModel):
    """Opaque uploaded file plus the metadata the service inspects."""

    name: str
    size: int = Field(default=0, ge=0)
    type: str = "application/octet-stream"
    content: Optional[bytes] = Field(default=None, exclude=True, repr=False)

    @property
    def extension(self) -> str:
        """Lower-cased extension including the dot ('' when absent)."""
        if "." not in self.name:
            return ""
        return "." + self.name.rsplit(".", 1)[-1].lower()

    @property
    def size_label(self) -> str:
        return f"{self.size / (1024 * 1024):.1f}MB"


class FileUpload(RecordModel):
    id: str
    file_name: str
    file_size: int
    file_type: str
    url: str
    uploaded_at: datetime


class QRCode(RecordModel):
    id: int
    content_id: int
    code: str
    image_url: str
    generated_at: datetime


class DashboardStats(RecordModel):
    total_users: int
    total_students: int
    total_teachers: int
    total_admins: int
    total_content: int
    total_quizzes: int
    total_sessions: int
    active_users: int
    completion_rate: float
    average_score: float
