from eskwela_admin.models.enums import AttemptStatus, Role


async def test_stats_follow_store(api, store):
    stats = (await api.get_dashboard_stats()).data
    users = store.users.all()
    assert stats.total_users == 100
    assert stats.total_students == sum(1 for u in users if u.role == Role.STUDENT)
    assert stats.total_content == 50
    assert stats.total_quizzes == 50
    assert stats.total_sessions == 50

    completed = [a for a in store.attempts.all() if a.status == AttemptStatus.COMPLETED]
    assert stats.completion_rate == round(len(completed) / 50 * 100, 1)


async def test_stats_track_mutations(api):
    before = (await api.get_dashboard_stats()).data
    await api.delete_user(1)
    after = (await api.get_dashboard_stats()).data
    assert after.total_users == before.total_users - 1


async def test_empty_store(make_api):
    stats = (await make_api().get_dashboard_stats()).data
    assert stats.total_users == 0
    assert stats.completion_rate == 0.0
    assert stats.average_score == 0.0
