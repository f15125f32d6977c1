from eskwela_admin.models.enums import QuizStatus


def question_payload(**overrides):
    payload = {
        "title": "Who founded the Katipunan?",
        "options": ["Andres Bonifacio", "Jose Rizal", "Apolinario Mabini", "Juan Luna"],
        "correctAnswer": 0,
        "points": 2,
    }
    payload.update(overrides)
    return payload


async def test_list_quizzes_embeds_content(api, store):
    result = await api.get_quizzes({"per_page": 50})
    assert len(result.data) == 50
    linked = [q for q in result.data if q.associated_content_id is not None]
    assert linked
    for quiz in linked:
        assert quiz.associated_content == store.content.get(quiz.associated_content_id)


async def test_sort_by_questions_count(api):
    result = await api.get_quizzes({"sortBy": "questionsCount", "sortOrder": "desc", "per_page": 50})
    counts = [q.questions_count for q in result.data]
    assert counts == sorted(counts, reverse=True)


async def test_seeded_totals_match_questions(api, store):
    quiz = (await api.get_quiz_by_id(4)).data
    questions = (await api.get_quiz_questions(4)).data
    assert quiz.questions_count == len(questions)
    assert quiz.total_points == sum(q.points for q in questions)
    assert [q.order for q in questions] == list(range(1, len(questions) + 1))


async def test_create_quiz_starts_as_draft(api, settings):
    result = await api.create_quiz({
        "title": "Mga Bayani",
        "subject": "History",
        "gradeLevel": "Grade 4",
        "timeLimit": 20,
        "maxAttempts": -1,
        "scoringMethod": "points",
        "associatedContentId": 2,
    })
    assert result.success
    assert result.message == "Quiz created successfully"
    quiz = result.data
    assert quiz.id == 51
    assert quiz.status == QuizStatus.DRAFT
    assert quiz.questions_count == 0
    assert quiz.total_points == 0
    assert quiz.created_by == settings.MOCK_CURRENT_USER_ID
    assert quiz.associated_content.id == 2


async def test_update_quiz(api):
    before = (await api.get_quiz_by_id(2)).data
    result = await api.update_quiz(2, {"status": "archived", "timeLimit": 45})
    assert result.data.status == QuizStatus.ARCHIVED
    assert result.data.time_limit == 45
    assert result.data.title == before.title
    assert result.data.updated_at > before.updated_at

    assert (await api.update_quiz(999, {"title": "x"})).message == "Quiz not found"


async def test_delete_quiz_drops_questions(api, store):
    assert store.questions_for(5)
    assert (await api.delete_quiz(5)).success
    assert store.questions_for(5) == []
    assert (await api.delete_quiz(5)).message == "Quiz not found"
    assert (await api.get_quiz_questions(5)).message == "Quiz not found"


async def test_create_question_needs_four_options(api):
    result = await api.create_question(7, {"options": ["a", "b"], "correctAnswer": 0, "points": 1})
    assert not result.success
    assert result.data is None
    assert result.message == "Question must have exactly 4 options"


async def test_create_question_answer_bounds(api):
    for bad in (-1, 4):
        result = await api.create_question(7, question_payload(correctAnswer=bad))
        assert result.message == "Correct answer must be between 0 and 3"


async def test_create_question_updates_quiz(api):
    before = (await api.get_quiz_by_id(7)).data
    result = await api.create_question(7, question_payload())
    assert result.success
    assert result.message == "Question created successfully"
    assert result.data.quiz_id == 7
    assert result.data.order == before.questions_count + 1

    after = (await api.get_quiz_by_id(7)).data
    assert after.questions_count == before.questions_count + 1
    assert after.total_points == before.total_points + 2


async def test_create_question_on_missing_quiz(api):
    assert (await api.create_question(999, question_payload())).message == "Quiz not found"


async def test_update_question(api):
    question = (await api.get_quiz_questions(3)).data[0]
    result = await api.update_question(question.id, {"points": 3, "correctAnswer": 2})
    assert result.data.points == 3
    assert result.data.correct_answer == 2

    bad = await api.update_question(question.id, {"options": ["only one"]})
    assert bad.message == "Question must have exactly 4 options"
    assert (await api.update_question(1, {"points": 1})).message == "Question not found"


async def test_delete_question_renumbers(api):
    questions = (await api.get_quiz_questions(6)).data
    assert (await api.delete_question(questions[0].id)).success

    remaining = (await api.get_quiz_questions(6)).data
    assert [q.id for q in remaining] == [q.id for q in questions[1:]]
    assert [q.order for q in remaining] == list(range(1, len(questions)))
    assert (await api.get_quiz_by_id(6)).data.questions_count == len(questions) - 1
    assert (await api.delete_question(questions[0].id)).message == "Question not found"


async def test_reorder_questions(api):
    ids = [q.id for q in (await api.get_quiz_questions(8)).data]
    result = await api.reorder_questions(8, [ids[2], ids[0]])
    assert result.message == "Questions reordered successfully"
    expected = [ids[2], ids[0], ids[1]] + ids[3:]
    assert [q.id for q in result.data] == expected
    assert [q.order for q in result.data] == list(range(1, len(ids) + 1))


async def test_reorder_rejects_foreign_question(api):
    foreign = (await api.get_quiz_questions(9)).data[0].id
    result = await api.reorder_questions(8, {"questionIds": [foreign]})
    assert not result.success
    assert result.error_code == "VALIDATION_ERROR"


async def test_update_quiz_rejects_null_required_fields(api, store):
    before = store.quizzes.get(1)
    result = await api.update_quiz(1, {"title": None})
    assert not result.success
    assert result.error_code == "VALIDATION_ERROR"
    assert store.quizzes.get(1) == before

    listed = await api.get_quizzes({"sortBy": "title", "per_page": 50})
    assert listed.success

    assert (await api.update_quiz(1, {"timeLimit": 0})).error_code == "VALIDATION_ERROR"

    cleared = await api.update_quiz(1, {"description": None})
    assert cleared.success
    assert cleared.data.description is None


async def test_update_question_keeps_options_and_answer(api, store):
    question = (await api.get_quiz_questions(3)).data[0]

    cleared = await api.update_question(question.id, {"options": None, "correctAnswer": None})
    assert not cleared.success
    assert cleared.error_code == "VALIDATION_ERROR"

    out_of_range = await api.update_question(question.id, {"correctAnswer": 4})
    assert out_of_range.message == "Correct answer must be between 0 and 3"

    negative = await api.update_question(question.id, {"points": -1})
    assert negative.error_code == "VALIDATION_ERROR"

    stored = store.questions.get(question.id)
    assert stored.options == question.options
    assert stored.correct_answer == question.correct_answer
    assert stored.points == question.points
