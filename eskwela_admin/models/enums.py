import enum


class Role(str, enum.Enum):
    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"


class RecordStatus(str, enum.Enum):
    """Status shared by users and AR content."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class Subject(str, enum.Enum):
    HISTORY = "History"
    SCIENCE = "Science"


class ContentType(str, enum.Enum):
    MODEL_3D = "3d_model"
    AUDIO = "audio"


class QuizStatus(str, enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class ScoringMethod(str, enum.Enum):
    POINTS = "points"
    PERCENTAGE = "percentage"


class AttemptStatus(str, enum.Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class SortOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


class DifficultyLevel(str, enum.Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class DatePreset(str, enum.Enum):
    LAST_7_DAYS = "last7days"
    LAST_30_DAYS = "last30days"
    LAST_3_MONTHS = "last3months"
    LAST_6_MONTHS = "last6months"
    CUSTOM = "custom"


class ReportType(str, enum.Enum):
    STUDENT_PROGRESS = "student_progress"
    CONTENT_ENGAGEMENT = "content_engagement"
    QUIZ_PERFORMANCE = "quiz_performance"


class ReportFormat(str, enum.Enum):
    PDF = "pdf"
    CSV = "csv"


GRADE_LEVELS = ["Grade 1", "Grade 2", "Grade 3", "Grade 4", "Grade 5", "Grade 6"]

ALLOWED_FILE_EXTENSIONS = {
    ContentType.MODEL_3D: [".gltf", ".glb"],
    ContentType.AUDIO: [".mp3", ".wav"],
}
