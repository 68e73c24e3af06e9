"""
- Provide a fixed random source so secrets and hints are predictable.
- Provide a client fixture (TestClient(app)) whose single session uses it.
"""
from itertools import cycle

import pytest
from fastapi.testclient import TestClient

from bullscows.main import app
from bullscows.session import GameSession


@pytest.fixture
def fixed_draws():
    """
    Factory: fixed_draws(1, 1, 2) returns a randbelow(n) that yields 1, 1, 2, 1, 1, 2, ...
    (the bound n is ignored, the values must already be valid for each call).
    """
    def _make(*values):
        seq = cycle(values)
        return lambda n: next(seq)
    return _make


@pytest.fixture
def client(fixed_draws):
    # Every draw is 0: with repeats off the length-4 secret is [0, 1, 2, 3]
    # and every hint reveals position 0.
    app.state.session = GameSession(randbelow=fixed_draws(0), max_hints=3)
    yield TestClient(app)
    app.state.session = GameSession()
