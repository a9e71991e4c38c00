# Test configuration
import pytest
from fastapi.testclient import TestClient

from random_api.deps import get_random_source
from random_api.main import app


class FakeSource:
    """Scripted random source: lowest (or highest) integer, fixed float."""

    def __init__(self, pick_high=False, float_value=0.5, secure_indices=()):
        self.pick_high = pick_high
        self.float_value = float_value
        self._secure = list(secure_indices)
        self.int_calls = []
        self.secure_calls = []

    def uniform_int(self, low, high_exclusive):
        self.int_calls.append((low, high_exclusive))
        return high_exclusive - 1 if self.pick_high else low

    def uniform_float01(self):
        return self.float_value

    def secure_uniform_int(self, low, high_exclusive):
        self.secure_calls.append((low, high_exclusive))
        return self._secure.pop(0) if self._secure else low


@pytest.fixture
def fake_source():
    return FakeSource()


@pytest.fixture
def client_with():
    """Build a TestClient whose requests draw from the given source."""

    def _build(source):
        app.dependency_overrides[get_random_source] = lambda: source
        return TestClient(app)

    yield _build
    app.dependency_overrides.clear()
