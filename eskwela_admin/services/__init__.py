from .generators import generate
from .mock_api import MockAPIService
from .store import MockStore

__all__ = ["MockAPIService", "MockStore", "generate"]
