import pytest

from eskwela_admin.core.latency import LATENCY_MS, LatencySimulator


class RecordingSleep:
    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def sleep():
    return RecordingSleep()


async def test_operation_latency(sleep):
    latency = LatencySimulator(sleep=sleep)
    await latency.simulate("create_content")
    await latency.simulate("get_user_by_id")
    assert sleep.calls == pytest.approx([1.2, 0.3])


async def test_scale(sleep):
    latency = LatencySimulator(scale=0.5, sleep=sleep)
    await latency.simulate("generate_report")
    assert sleep.calls == pytest.approx([0.75])


async def test_disabled_still_yields(sleep):
    latency = LatencySimulator(enabled=False, sleep=sleep)
    await latency.simulate("get_users")
    assert sleep.calls == [0.0]


async def test_upload_with_progress(sleep):
    latency = LatencySimulator(sleep=sleep)
    seen = []
    await latency.simulate_upload(seen.append)
    assert seen == list(range(0, 101, 10))
    assert sleep.calls == pytest.approx([0.1] * 11)


async def test_upload_without_progress(sleep):
    latency = LatencySimulator(sleep=sleep)
    await latency.simulate_upload()
    assert sleep.calls == pytest.approx([1.0])


def test_latency_table():
    assert LATENCY_MS["get_users"] == 500
    assert LATENCY_MS["create_content"] == 1200
    assert LATENCY_MS["generate_report"] == 1500
    assert LATENCY_MS["get_dashboard_stats"] == 300
