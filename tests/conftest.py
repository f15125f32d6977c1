import pytest

from eskwela_admin.core.config import Settings
from eskwela_admin.core.latency import LatencySimulator
from eskwela_admin.services.mock_api import MockAPIService
from eskwela_admin.services.store import MockStore
from tests.factories import NOW


@pytest.fixture
def settings():
    return Settings(MOCK_SEED=42, LATENCY_ENABLED=False, ENVIRONMENT="testing")


@pytest.fixture
def store(settings):
    return MockStore.seeded(settings, now=NOW)


@pytest.fixture
def api(settings, store):
    return MockAPIService(settings, store=store)


@pytest.fixture
def make_api(settings):
    """Service over a hand-built store."""
    def factory(**tables):
        return MockAPIService(
            settings,
            store=MockStore(**tables),
            latency=LatencySimulator(enabled=False),
        )
    return factory
