"""
Analytics rollups for the admin dashboard.
"""
from datetime import date, datetime, timedelta
from typing import Any, List, Optional

from pydantic import Field, model_validator

from .base import CamelModel, RecordModel
from .enums import ContentType, DatePreset, DifficultyLevel, ReportFormat, ReportType, Subject

PRESET_DAYS = {
    DatePreset.LAST_7_DAYS: 7,
    DatePreset.LAST_30_DAYS: 30,
    DatePreset.LAST_3_MONTHS: 90,
    DatePreset.LAST_6_MONTHS: 180,
}


class DateRange(CamelModel):
    start_date: date
    end_date: date
    preset: Optional[DatePreset] = None

    @model_validator(mode="before")
    @classmethod
    def resolve_preset(cls, values: Any) -> Any:
        """A bare fixed-span preset expands to start/end dates ending today."""
        if not isinstance(values, dict):
            return values
        preset = values.get("preset")
        has_dates = any(
            key in values for key in ("startDate", "start_date", "endDate", "end_date")
        )
        if preset and not has_dates:
            days = PRESET_DAYS.get(DatePreset(preset))
            if days is not None:
                today = date.today()
                return {
                    "start_date": today - timedelta(days=days),
                    "end_date": today,
                    "preset": preset,
                }
        return values

    @model_validator(mode="after")
    def check_order(self) -> "DateRange":
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self

    @classmethod
    def from_preset(cls, preset: DatePreset, today: Optional[date] = None) -> "DateRange":
        today = today or date.today()
        days = PRESET_DAYS.get(preset)
        if days is None:
            raise ValueError(f"Preset {preset.value} has no fixed span")
        return cls(start_date=today - timedelta(days=days), end_date=today, preset=preset)

    @classmethod
    def default(cls, today: Optional[date] = None) -> "DateRange":
        return cls.from_preset(DatePreset.LAST_30_DAYS, today)

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days

    def series_dates(self, limit: int = 30) -> List[date]:
        """One point per day from the start, capped at ``limit`` points."""
        return [self.start_date + timedelta(days=j) for j in range(min(self.days, limit))]


class AnalyticsFilters(CamelModel):
    date_range: DateRange = Field(default_factory=lambda: DateRange.default())
    grade_level: Optional[str] = None
    subject: Optional[Subject] = None
    content_type: Optional[ContentType] = None


class PeriodMetrics(RecordModel):
    total_students: int
    active_content: int
    quiz_completion_rate: float
    ar_sessions_this_month: int


class OverviewMetrics(PeriodMetrics):
    previous_period: PeriodMetrics


class ProgressPoint(RecordModel):
    date: date
    completion_rate: int
    score: float


class StudentProgressData(RecordModel):
    user_id: int
    user_name: str
    grade_level: str
    subject: Subject
    completion_rate: int
    average_score: int
    time_spent: int  # minutes
    last_activity: datetime
    quizzes_completed: int
    ar_sessions_count: int
    progress_over_time: List[ProgressPoint]


class EngagementPoint(RecordModel):
    date: date
    scans: int
    duration: int


class ContentEngagementData(RecordModel):
    content_id: int
    title: str
    subject: Subject
    grade_level: str
    type: ContentType
    qr_scans: int
    average_session_duration: int  # minutes
    completion_rate: int
    last_accessed: datetime
    popularity_rank: int
    engagement_trend: List[EngagementPoint]


class QuizPerformanceData(RecordModel):
    quiz_id: int
    title: str
    subject: Subject
    grade_level: str
    attempts: int
    average_score: int
    completion_rate: int
    average_time_spent: int  # minutes
    difficulty_rating: DifficultyLevel


class QuestionDifficultyData(RecordModel):
    question_id: int
    quiz_title: str
    question: str
    correct_answers: int
    total_answers: int
    accuracy_rate: int
    average_time_spent: int  # seconds
    difficulty_level: DifficultyLevel


class SubjectComparisonData(RecordModel):
    subject: Subject
    total_students: int
    average_score: float
    completion_rate: float
    time_spent: int  # minutes
    content_accessed: int
    quizzes_completed: int


class QuizAnalyticsData(RecordModel):
    total_quizzes: int
    total_attempts: int
    average_score: float
    completion_rate: float
    quiz_performance: List[QuizPerformanceData]
    question_difficulty: List[QuestionDifficultyData]
    subject_comparison: List[SubjectComparisonData]


class AnalyticsData(RecordModel):
    overview: OverviewMetrics
    student_progress: List[StudentProgressData]
    content_engagement: List[ContentEngagementData]
    quiz_analytics: QuizAnalyticsData
    date_range: DateRange


class ReportData(RecordModel):
    id: str
    type: ReportType
    title: str
    generated_at: datetime
    date_range: DateRange
    filters: AnalyticsFilters
    data: Any
    format: ReportFormat = ReportFormat.PDF
