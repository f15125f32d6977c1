"""
Create/update payloads.

Update payloads only carry the fields the caller set; ``changes()`` returns
exactly those, keyed by record field name.
"""
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import CamelModel
from .entities import FileHandle, QuizAnswer
from .enums import ContentType, QuizStatus, RecordStatus, Role, ScoringMethod, Subject


class UpdatePayload(CamelModel):
    def changes(self, exclude: Optional[set] = None) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude=exclude)


class CreateUserData(CamelModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    role: Role
    grade_level: Optional[str] = None
    password: str = Field(repr=False)


class UpdateUserData(UpdatePayload):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[Role] = None
    grade_level: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    status: Optional[RecordStatus] = None


class CreateContentData(CamelModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    subject: Subject
    grade_level: str
    type: ContentType
    file: FileHandle


class UpdateContentData(UpdatePayload):
    title: Optional[str] = None
    description: Optional[str] = None
    subject: Optional[Subject] = None
    grade_level: Optional[str] = None
    type: Optional[ContentType] = None
    file: Optional[FileHandle] = None
    status: Optional[RecordStatus] = None


class CreateQuizData(CamelModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    subject: Subject
    grade_level: str
    time_limit: int = Field(gt=0)
    max_attempts: int  # -1 means unlimited
    scoring_method: ScoringMethod
    associated_content_id: Optional[int] = None


class UpdateQuizData(UpdatePayload):
    title: Optional[str] = None
    description: Optional[str] = None
    subject: Optional[Subject] = None
    grade_level: Optional[str] = None
    time_limit: Optional[int] = Field(default=None, gt=0)
    max_attempts: Optional[int] = None
    scoring_method: Optional[ScoringMethod] = None
    status: Optional[QuizStatus] = None
    associated_content_id: Optional[int] = None


class CreateQuestionData(CamelModel):
    title: str = ""
    options: List[str]
    correct_answer: int
    points: int = Field(default=1, ge=0)
    explanation: Optional[str] = None


class UpdateQuestionData(UpdatePayload):
    title: Optional[str] = None
    options: Optional[List[str]] = None
    correct_answer: Optional[int] = None
    points: Optional[int] = Field(default=None, ge=0)
    explanation: Optional[str] = None
    order: Optional[int] = None


class SubmitAttemptData(CamelModel):
    answers: List[QuizAnswer]


class ReorderQuestionsData(CamelModel):
    question_ids: List[int]


class StartAttemptData(CamelModel):
    quiz_id: int = Field(gt=0)
    user_id: int = Field(gt=0)
