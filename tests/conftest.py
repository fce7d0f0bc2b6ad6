# tests/conftest.py
import math
import os
import sys

# Ensure src/ is importable when running from the repo root without installing
SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import pytest

@pytest.fixture(autouse=True)
def _fresh_settings():
    from stream_smoother.infrastructure.config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

@pytest.fixture
def smoother_factory():
    from stream_smoother import make_smoother
    def make(method, coefficients, initial_state=math.nan):
        s = make_smoother(method, coefficients, initial_state)
        assert s is not None
        return s
    return make
