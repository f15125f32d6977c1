from datetime import date, timedelta

import pytest

from eskwela_admin.models.analytics import DateRange
from eskwela_admin.models.enums import ContentType, DatePreset, ReportType, Subject


async def test_overview_is_fixed_baseline(api):
    result = await api.get_analytics()
    overview = result.data.overview
    assert overview.total_students == 1156
    assert overview.active_content == 156
    assert overview.quiz_completion_rate == 78.5
    assert overview.ar_sessions_this_month == 3421
    previous = overview.previous_period
    assert (previous.total_students, previous.active_content) == (1089, 142)
    assert (previous.quiz_completion_rate, previous.ar_sessions_this_month) == (74.2, 2987)

    quiz = result.data.quiz_analytics
    assert (quiz.total_quizzes, quiz.total_attempts) == (89, 2341)
    assert [s.subject for s in quiz.subject_comparison] == [Subject.HISTORY, Subject.SCIENCE]


async def test_default_range_and_row_counts(api):
    result = await api.get_analytics()
    data = result.data
    assert data.date_range.preset == DatePreset.LAST_30_DAYS
    assert data.date_range.days == 30
    assert len(data.student_progress) == 20
    assert len(data.content_engagement) == 15
    assert len(data.quiz_analytics.quiz_performance) == 10
    assert len(data.quiz_analytics.question_difficulty) == 15
    assert all(len(s.progress_over_time) == 30 for s in data.student_progress)


async def test_cache_expiry(api):
    result = await api.get_analytics()
    assert result.generated_at is not None
    assert result.cache_expiry - result.generated_at == timedelta(minutes=5)
    body = result.to_wire()
    assert {"generatedAt", "cacheExpiry"} <= set(body)


@pytest.mark.parametrize("preset, points", [
    (DatePreset.LAST_7_DAYS, 7),
    (DatePreset.LAST_30_DAYS, 30),
    (DatePreset.LAST_3_MONTHS, 30),
])
async def test_series_length_is_capped(api, preset, points):
    result = await api.get_analytics({"dateRange": {"preset": preset.value}})
    trend = result.data.content_engagement[0].engagement_trend
    assert len(trend) == points
    assert trend[0].date == result.data.date_range.start_date


def test_presets_resolve_to_dates():
    today = date(2024, 3, 31)
    assert DateRange.from_preset(DatePreset.LAST_7_DAYS, today).start_date == date(2024, 3, 24)
    assert DateRange.from_preset(DatePreset.LAST_6_MONTHS, today).days == 180


def test_date_range_order_is_checked():
    with pytest.raises(ValueError):
        DateRange(start_date=date(2024, 3, 2), end_date=date(2024, 3, 1))


async def test_filters_narrow_rows_only(api):
    result = await api.get_analytics({"subject": "History", "contentType": "audio"})
    data = result.data
    assert all(s.subject == Subject.HISTORY for s in data.student_progress)
    assert all(
        c.subject == Subject.HISTORY and c.type == ContentType.AUDIO
        for c in data.content_engagement
    )
    assert all(q.subject == Subject.HISTORY for q in data.quiz_analytics.quiz_performance)
    assert len(data.quiz_analytics.question_difficulty) == 15
    assert data.overview.total_students == 1156


async def test_seeded_snapshots_repeat(api):
    first = (await api.get_content_engagement()).data
    second = (await api.get_content_engagement()).data
    assert [c.qr_scans for c in first] == [c.qr_scans for c in second]


async def test_student_progress(api):
    custom = {"startDate": "2024-01-01", "endDate": "2024-01-11"}
    result = await api.get_student_progress(4, custom)
    assert result.success
    assert result.data.user_id == 4
    assert len(result.data.progress_over_time) == 10

    missing = await api.get_student_progress(21)
    assert not missing.success
    assert missing.message == "Student not found"


async def test_generate_report(api):
    result = await api.generate_report("student_progress")
    assert result.success
    assert result.message == "Report generated successfully"
    report = result.data
    assert report.type == ReportType.STUDENT_PROGRESS
    assert report.title == "Student Progress Report"
    assert report.format.value == "pdf"
    assert len(report.data) == 20

    quiz_report = (await api.generate_report(ReportType.QUIZ_PERFORMANCE)).data
    assert quiz_report.title == "Quiz Performance Report"
    assert quiz_report.to_wire()["data"]["totalQuizzes"] == 89

    assert not (await api.generate_report("attendance")).success
