"""
Analytics rollups.

Rows are synthesized with numpy from the configured seed, so a seeded service
returns the same rollup for the same date range on every call. Overview and
quiz-analytics totals are a fixed baseline; filters narrow only the row
collections.
"""
import logging
import uuid
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

import numpy as np

from ..core.exceptions import NotFoundError, ValidationFailure
from ..models.analytics import (
    AnalyticsData,
    AnalyticsFilters,
    ContentEngagementData,
    DateRange,
    EngagementPoint,
    OverviewMetrics,
    PeriodMetrics,
    ProgressPoint,
    QuestionDifficultyData,
    QuizAnalyticsData,
    QuizPerformanceData,
    ReportData,
    StudentProgressData,
    SubjectComparisonData,
)
from ..models.base import utcnow
from ..models.envelope import AnalyticsEnvelope
from ..models.enums import ContentType, DifficultyLevel, ReportType, Subject
from .base import BaseService, coerce, operation

logger = logging.getLogger(__name__)

STUDENT_ROWS = 20
CONTENT_ROWS = 15
QUIZ_ROWS = 10
QUESTION_ROWS = 15
SERIES_LIMIT = 30

CURRENT_PERIOD = dict(
    total_students=1156,
    active_content=156,
    quiz_completion_rate=78.5,
    ar_sessions_this_month=3421,
)
PREVIOUS_PERIOD = PeriodMetrics(
    total_students=1089,
    active_content=142,
    quiz_completion_rate=74.2,
    ar_sessions_this_month=2987,
)
QUIZ_TOTALS = dict(total_quizzes=89, total_attempts=2341, average_score=82.3, completion_rate=78.5)
SUBJECT_COMPARISON = [
    SubjectComparisonData(
        subject=Subject.HISTORY, total_students=578, average_score=81.2,
        completion_rate=76.8, time_spent=145, content_accessed=78, quizzes_completed=234,
    ),
    SubjectComparisonData(
        subject=Subject.SCIENCE, total_students=578, average_score=83.4,
        completion_rate=80.2, time_spent=162, content_accessed=78, quizzes_completed=267,
    ),
]

SUBJECTS = list(Subject)
CONTENT_TYPES = list(ContentType)
DIFFICULTIES = list(DifficultyLevel)


class AnalyticsGenerator:
    """Builds one ``AnalyticsData`` snapshot for a date range."""

    def __init__(self, seed: Optional[int] = None, now: Optional[datetime] = None):
        self.rng = np.random.default_rng(seed)
        self.now = now or utcnow()

    def _ints(self, low: int, high: int, size: int) -> List[int]:
        """``size`` integers in [low, high) as plain Python ints."""
        return self.rng.integers(low, high, size=size).tolist()

    def _grades(self, size: int) -> List[str]:
        return [f"Grade {n}" for n in self._ints(1, 7, size)]

    def _subjects(self, size: int) -> List[Subject]:
        return [SUBJECTS[i] for i in self._ints(0, len(SUBJECTS), size)]

    def _recent(self, size: int, days: int = 7) -> List[datetime]:
        offsets = self.rng.random(size) * days * 24 * 60 * 60
        return [self.now - timedelta(seconds=float(s)) for s in offsets]

    def student_progress(self, dates: List[date]) -> List[StudentProgressData]:
        n = STUDENT_ROWS
        grades, subjects = self._grades(n), self._subjects(n)
        completion, scores = self._ints(60, 100, n), self._ints(70, 100, n)
        minutes, quizzes = self._ints(30, 150, n), self._ints(5, 20, n)
        sessions, last_activity = self._ints(10, 35, n), self._recent(n)
        steps = np.arange(len(dates))

        rows = []
        for i in range(n):
            rates = (self.rng.integers(0, 20, size=len(dates)) + 60 + steps).tolist()
            points = (self.rng.integers(0, 20, size=len(dates)) + 70 + steps * 0.5).tolist()
            rows.append(StudentProgressData(
                user_id=i + 1,
                user_name=f"Student {i + 1}",
                grade_level=grades[i],
                subject=subjects[i],
                completion_rate=completion[i],
                average_score=scores[i],
                time_spent=minutes[i],
                last_activity=last_activity[i],
                quizzes_completed=quizzes[i],
                ar_sessions_count=sessions[i],
                progress_over_time=[
                    ProgressPoint(date=day, completion_rate=int(rate), score=float(score))
                    for day, rate, score in zip(dates, rates, points)
                ],
            ))
        return rows

    def content_engagement(self, dates: List[date]) -> List[ContentEngagementData]:
        n = CONTENT_ROWS
        grades, subjects = self._grades(n), self._subjects(n)
        types = [CONTENT_TYPES[i] for i in self._ints(0, len(CONTENT_TYPES), n)]
        scans, durations = self._ints(100, 600, n), self._ints(5, 20, n)
        completion, last_accessed = self._ints(60, 100, n), self._recent(n)

        rows = []
        for i in range(n):
            trend_scans = self._ints(10, 60, len(dates))
            trend_durations = self._ints(5, 15, len(dates))
            rows.append(ContentEngagementData(
                content_id=i + 1,
                title=f"Content Item {i + 1}",
                subject=subjects[i],
                grade_level=grades[i],
                type=types[i],
                qr_scans=scans[i],
                average_session_duration=durations[i],
                completion_rate=completion[i],
                last_accessed=last_accessed[i],
                popularity_rank=i + 1,
                engagement_trend=[
                    EngagementPoint(date=day, scans=s, duration=d)
                    for day, s, d in zip(dates, trend_scans, trend_durations)
                ],
            ))
        return rows

    def quiz_analytics(self) -> QuizAnalyticsData:
        n = QUIZ_ROWS
        grades, subjects = self._grades(n), self._subjects(n)
        attempts, scores = self._ints(50, 150, n), self._ints(70, 100, n)
        completion, minutes = self._ints(60, 100, n), self._ints(10, 30, n)
        ratings = self._ints(0, len(DIFFICULTIES), n)
        performance = [
            QuizPerformanceData(
                quiz_id=i + 1,
                title=f"Quiz {i + 1}",
                subject=subjects[i],
                grade_level=grades[i],
                attempts=attempts[i],
                average_score=scores[i],
                completion_rate=completion[i],
                average_time_spent=minutes[i],
                difficulty_rating=DIFFICULTIES[ratings[i]],
            )
            for i in range(n)
        ]

        m = QUESTION_ROWS
        correct, total = self._ints(20, 100, m), self._ints(100, 150, m)
        accuracy, seconds = self._ints(60, 100, m), self._ints(30, 90, m)
        levels = self._ints(0, len(DIFFICULTIES), m)
        difficulty = [
            QuestionDifficultyData(
                question_id=i + 1,
                quiz_title=f"Quiz {i // 3 + 1}",
                question=f"Question {i + 1}",
                correct_answers=correct[i],
                total_answers=total[i],
                accuracy_rate=accuracy[i],
                average_time_spent=seconds[i],
                difficulty_level=DIFFICULTIES[levels[i]],
            )
            for i in range(m)
        ]

        return QuizAnalyticsData(
            **QUIZ_TOTALS,
            quiz_performance=performance,
            question_difficulty=difficulty,
            subject_comparison=list(SUBJECT_COMPARISON),
        )

    def build(self, date_range: DateRange) -> AnalyticsData:
        dates = date_range.series_dates(SERIES_LIMIT)
        return AnalyticsData(
            overview=OverviewMetrics(**CURRENT_PERIOD, previous_period=PREVIOUS_PERIOD),
            student_progress=self.student_progress(dates),
            content_engagement=self.content_engagement(dates),
            quiz_analytics=self.quiz_analytics(),
            date_range=date_range,
        )


def apply_filters(data: AnalyticsData, filters: AnalyticsFilters) -> AnalyticsData:
    """Narrow the row collections; overview and totals stay untouched."""
    students = data.student_progress
    content = data.content_engagement
    performance = data.quiz_analytics.quiz_performance

    if filters.grade_level:
        students = [s for s in students if s.grade_level == filters.grade_level]
        content = [c for c in content if c.grade_level == filters.grade_level]
    if filters.subject:
        students = [s for s in students if s.subject == filters.subject]
        content = [c for c in content if c.subject == filters.subject]
        performance = [q for q in performance if q.subject == filters.subject]
    if filters.content_type:
        content = [c for c in content if c.type == filters.content_type]

    return data.model_copy(update={
        "student_progress": students,
        "content_engagement": content,
        "quiz_analytics": data.quiz_analytics.model_copy(
            update={"quiz_performance": performance}
        ),
    })


def report_title(report_type: ReportType) -> str:
    return f"{report_type.value.replace('_', ' ').title()} Report"


class AnalyticsService(BaseService):

    def _snapshot(self, date_range: DateRange) -> AnalyticsData:
        data = AnalyticsGenerator(self.settings.MOCK_SEED).build(date_range)
        logger.debug(
            f"Analytics snapshot {date_range.start_date}..{date_range.end_date}: "
            f"{len(data.student_progress)} students, {len(data.content_engagement)} content"
        )
        return data

    @operation(envelope=AnalyticsEnvelope)
    async def get_analytics(
        self, filters: Optional[Union[AnalyticsFilters, dict]] = None
    ) -> AnalyticsEnvelope[AnalyticsData]:
        filters = coerce(AnalyticsFilters, filters)
        data = apply_filters(self._snapshot(filters.date_range), filters)
        return AnalyticsEnvelope.ok(data).with_cache_expiry(
            self.settings.ANALYTICS_CACHE_MINUTES
        )

    @operation(envelope=AnalyticsEnvelope)
    async def get_student_progress(
        self, user_id: int, date_range: Optional[Union[DateRange, dict]] = None
    ) -> AnalyticsEnvelope[StudentProgressData]:
        date_range = coerce(DateRange, date_range) if date_range else DateRange.default()
        for student in self._snapshot(date_range).student_progress:
            if student.user_id == user_id:
                return AnalyticsEnvelope.ok(student)
        raise NotFoundError("Student", user_id)

    @operation(envelope=AnalyticsEnvelope)
    async def get_content_engagement(
        self, date_range: Optional[Union[DateRange, dict]] = None
    ) -> AnalyticsEnvelope[List[ContentEngagementData]]:
        date_range = coerce(DateRange, date_range) if date_range else DateRange.default()
        return AnalyticsEnvelope.ok(self._snapshot(date_range).content_engagement)

    @operation(envelope=AnalyticsEnvelope)
    async def generate_report(
        self,
        report_type: Union[ReportType, str],
        filters: Optional[Union[AnalyticsFilters, dict]] = None,
    ) -> AnalyticsEnvelope[ReportData]:
        try:
            report_type = ReportType(report_type)
        except ValueError:
            raise ValidationFailure(f"Unknown report type: {report_type}") from None
        filters = coerce(AnalyticsFilters, filters)
        data = self._snapshot(filters.date_range)

        if report_type == ReportType.STUDENT_PROGRESS:
            payload = data.student_progress
        elif report_type == ReportType.CONTENT_ENGAGEMENT:
            payload = data.content_engagement
        else:
            payload = data.quiz_analytics

        report = ReportData(
            id=uuid.uuid4().hex[:13],
            type=report_type,
            title=report_title(report_type),
            generated_at=utcnow(),
            date_range=filters.date_range,
            filters=filters,
            data=payload,
        )
        logger.info(f"Generated {report_type.value} report {report.id}")
        return AnalyticsEnvelope.ok(report, message="Report generated successfully")
