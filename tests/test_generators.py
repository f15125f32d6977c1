import pytest

from eskwela_admin.models.enums import AttemptStatus, ContentType, Role, Subject
from eskwela_admin.services import generators
from eskwela_admin.services.generators import generate, qr_code_for
from tests.factories import NOW


def test_same_seed_same_records():
    first = generate("users", 20, seed=7, now=NOW)
    second = generate("users", 20, seed=7, now=NOW)
    assert first == second


def test_different_seeds_differ():
    assert generate("content", 20, seed=1, now=NOW) != generate("content", 20, seed=2, now=NOW)


def test_count_and_sequential_ids():
    users = generate("users", 12, seed=3, now=NOW)
    assert [u.id for u in users] == list(range(1, 13))
    assert len({u.email for u in users}) == 12


def test_only_students_have_grade_levels():
    for user in generate("users", 50, seed=5, now=NOW):
        if user.role != Role.STUDENT:
            assert user.grade_level is None
        else:
            assert user.grade_level.startswith("Grade ")


def test_content_fields_are_derived():
    for item in generate("content", 20, seed=11, now=NOW):
        assert item.qr_code == qr_code_for(item.subject, item.id)
        assert item.file_url == f"/content/{item.file_name}"
        expected = ".glb" if item.type == ContentType.MODEL_3D else ".mp3"
        assert item.file_name.endswith(expected)
        assert item.file_size.endswith("MB")


def test_qr_code_format():
    assert qr_code_for(Subject.HISTORY, 7) == "ESK_HIST_007"
    assert qr_code_for(Subject.SCIENCE, 123) == "ESK_SCIE_123"


def test_question_ids_follow_quiz():
    questions = generate("questions", 5, seed=1, quiz_id=7)
    assert [q.id for q in questions] == [701, 702, 703, 704, 705]
    assert all(q.quiz_id == 7 for q in questions)
    assert [q.order for q in questions] == [1, 2, 3, 4, 5]
    assert all(len(q.options) == 4 and 0 <= q.correct_answer <= 3 for q in questions)


def test_completed_attempts_are_consistent():
    questions = generators.generate_questions(3, 8, seed=9)
    attempts = generators.generate_quiz_attempts(3, 40, seed=9, now=NOW, questions=questions)
    total = sum(q.points for q in questions)

    assert [a.id for a in attempts][:2] == [3001, 3002]
    for attempt in attempts:
        assert attempt.quiz_id == 3
        assert attempt.total_points == total
        if attempt.status == AttemptStatus.COMPLETED:
            assert [a.question_id for a in attempt.answers] == [q.id for q in questions]
            assert attempt.score == sum(a.points_earned for a in attempt.answers)
            assert attempt.percentage == int(attempt.score * 100 / total + 0.5)
            assert attempt.time_spent == sum(a.time_spent for a in attempt.answers)
            assert (attempt.completed_at - attempt.started_at).total_seconds() == attempt.time_spent
        else:
            assert attempt.completed_at is None
            assert attempt.answers == []


def test_unknown_entity_type():
    with pytest.raises(ValueError, match="Unknown entity type"):
        generate("badges", 3, seed=1)
