"""
Shared test fixtures: test client and input builders.
"""

import pytest
from fastapi.testclient import TestClient

from handfat_roi.main import app
from handfat_roi.normalizer import InputNormalizer
from handfat_roi.schemas import RawInput


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def default_raw():
    """The calculator's default input snapshot."""
    return RawInput()


@pytest.fixture
def make_params():
    """Build a NormalizedInput from defaults plus overrides (snake_case keys)."""
    normalizer = InputNormalizer()

    def _make(**overrides):
        return normalizer.normalize(RawInput(**overrides))

    return _make
