from datetime import timedelta

from eskwela_admin.models.enums import AttemptStatus
from eskwela_admin.services.generators import score_percentage
from tests.factories import NOW


def answers(count, points, seconds):
    return [
        {
            "questionId": i + 1,
            "selectedAnswer": 0,
            "isCorrect": points > 0,
            "pointsEarned": points,
            "timeSpent": seconds,
        }
        for i in range(count)
    ]


async def new_quiz(api):
    result = await api.create_quiz({
        "title": "Pop Quiz",
        "subject": "Science",
        "gradeLevel": "Grade 3",
        "timeLimit": 10,
        "maxAttempts": 1,
        "scoringMethod": "percentage",
    })
    return result.data


async def test_submit_scores_attempt(api):
    quiz = await new_quiz(api)
    started = await api.start_quiz_attempt(quiz.id, 2)
    assert started.success
    assert started.message == "Quiz attempt started successfully"
    attempt = started.data
    assert attempt.status == AttemptStatus.IN_PROGRESS
    assert attempt.total_points == 20

    result = await api.submit_quiz_attempt(attempt.id, answers(7, 2, 30))
    assert result.success
    assert result.message == "Quiz attempt submitted successfully"
    submitted = result.data
    assert submitted.score == 14
    assert submitted.percentage == 70
    assert submitted.status == AttemptStatus.COMPLETED
    assert submitted.time_spent == 210
    assert submitted.completed_at == attempt.started_at + timedelta(seconds=210)
    assert len(submitted.answers) == 7


async def test_submit_twice_is_rejected(api):
    quiz = await new_quiz(api)
    attempt = (await api.start_quiz_attempt(quiz.id, 1)).data
    await api.submit_quiz_attempt(attempt.id, {"answers": answers(1, 1, 10)})

    again = await api.submit_quiz_attempt(attempt.id, answers(1, 1, 10))
    assert not again.success
    assert again.message == "Quiz attempt is not in progress"


async def test_start_attempt_uses_quiz_points(api):
    quiz = (await api.get_quiz_by_id(1)).data
    attempt = (await api.start_quiz_attempt(1, 3)).data
    assert attempt.total_points == quiz.total_points
    assert attempt.user.id == 3
    assert attempt.quiz.id == 1


async def test_start_attempt_missing_references(api):
    assert (await api.start_quiz_attempt(999, 1)).message == "Quiz not found"
    assert (await api.start_quiz_attempt(1, 999)).message == "User not found"


async def test_get_attempt_by_id(api):
    attempt = (await api.get_quiz_attempt_by_id(1001)).data
    assert attempt.quiz_id == 1
    assert attempt.user.id == attempt.user_id
    assert attempt.quiz.id == 1

    missing = await api.get_quiz_attempt_by_id(1)
    assert missing.message == "Quiz attempt not found"
    assert (await api.submit_quiz_attempt(1, [])).message == "Quiz attempt not found"


async def test_attempts_newest_first_by_default(api):
    result = await api.get_quiz_attempts({"per_page": 50})
    started = [a.started_at for a in result.data]
    assert started == sorted(started, reverse=True)
    assert result.pagination.total == 50


async def test_attempt_filters(api):
    result = await api.get_quiz_attempts({"quizId": 2, "status": "completed", "per_page": 50})
    assert all(a.quiz_id == 2 and a.status == AttemptStatus.COMPLETED for a in result.data)

    window = await api.get_quiz_attempts({
        "dateFrom": (NOW - timedelta(days=3)).isoformat(),
        "dateTo": NOW.isoformat(),
        "per_page": 50,
    })
    assert all(NOW - timedelta(days=3) <= a.started_at <= NOW for a in window.data)


async def test_sort_attempts_by_score(api):
    result = await api.get_quiz_attempts({"sortBy": "score", "sortOrder": "asc", "per_page": 50})
    scores = [a.score for a in result.data]
    assert scores == sorted(scores)


def test_score_percentage_rounds_halves_up():
    assert score_percentage(1, 8) == 13
    assert score_percentage(5, 8) == 63
    assert score_percentage(7, 8) == 88
    assert score_percentage(3, 0) == 0


async def test_submitted_percentage_rounds_half_up(api):
    quiz = await new_quiz(api)
    for _ in range(4):
        await api.create_question(quiz.id, {
            "title": "Which planet is closest to the sun?",
            "options": ["Mercury", "Venus", "Earth", "Mars"],
            "correctAnswer": 0,
            "points": 2,
        })
    attempt = (await api.start_quiz_attempt(quiz.id, 2)).data
    assert attempt.total_points == 8

    result = await api.submit_quiz_attempt(attempt.id, answers(1, 1, 15))
    assert result.data.score == 1
    assert result.data.percentage == 13
