from .analytics import (
    AnalyticsData,
    AnalyticsFilters,
    ContentEngagementData,
    DateRange,
    OverviewMetrics,
    QuizAnalyticsData,
    ReportData,
    StudentProgressData,
)
from .entities import (
    ARContent,
    DashboardStats,
    FileHandle,
    FileUpload,
    QRCode,
    Question,
    Quiz,
    QuizAnswer,
    QuizAttempt,
    User,
)
from .enums import (
    ALLOWED_FILE_EXTENSIONS,
    GRADE_LEVELS,
    AttemptStatus,
    ContentType,
    DatePreset,
    QuizStatus,
    RecordStatus,
    ReportType,
    Role,
    ScoringMethod,
    SortOrder,
    Subject,
)
from .envelope import AnalyticsEnvelope, Envelope, Pagination
from .filters import ContentFilters, QuizAttemptFilters, QuizFilters, UserFilters
from .payloads import (
    CreateContentData,
    CreateQuestionData,
    CreateQuizData,
    CreateUserData,
    UpdateContentData,
    UpdateQuestionData,
    UpdateQuizData,
    UpdateUserData,
)

__all__ = [
    "AnalyticsData",
    "AnalyticsFilters",
    "ContentEngagementData",
    "DateRange",
    "OverviewMetrics",
    "QuizAnalyticsData",
    "ReportData",
    "StudentProgressData",
    "ARContent",
    "DashboardStats",
    "FileHandle",
    "FileUpload",
    "QRCode",
    "Question",
    "Quiz",
    "QuizAnswer",
    "QuizAttempt",
    "User",
    "ALLOWED_FILE_EXTENSIONS",
    "GRADE_LEVELS",
    "AttemptStatus",
    "ContentType",
    "DatePreset",
    "QuizStatus",
    "RecordStatus",
    "ReportType",
    "Role",
    "ScoringMethod",
    "SortOrder",
    "Subject",
    "AnalyticsEnvelope",
    "Envelope",
    "Pagination",
    "ContentFilters",
    "QuizAttemptFilters",
    "QuizFilters",
    "UserFilters",
    "CreateContentData",
    "CreateQuestionData",
    "CreateQuizData",
    "CreateUserData",
    "UpdateContentData",
    "UpdateQuestionData",
    "UpdateQuizData",
    "UpdateUserData",
]
