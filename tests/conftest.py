import importlib
import sys
from pathlib import Path

import pytest

# Ensure the package under test is importable without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


class FakeTx:
    """
    Stand-in for a neo4j transaction.

    ``responses`` is a list of (marker, records); the first marker found in
    the query text decides which records are returned. Every call is kept
    in ``calls`` as (query, params).
    """

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    def run(self, query, parameters=None, **kwparameters):
        params = {**(parameters or {}), **kwparameters}
        self.calls.append((query, params))
        for marker, records in self.responses:
            if marker in query:
                return iter([dict(r) for r in records])
        return iter([])


class FakeSession:
    def __init__(self, tx, database=None):
        self.tx = tx
        self.database = database
        self.read_transactions = 0
        self.closed = False

    def execute_read(self, work, *args, **kwargs):
        self.read_transactions += 1
        return work(self.tx, *args, **kwargs)

    def close(self):
        self.closed = True


class FakeDriver:
    def __init__(self, responses=None):
        self.tx = FakeTx(responses)
        self.sessions = []
        self.closed = False

    def session(self, database=None):
        session = FakeSession(self.tx, database)
        self.sessions.append(session)
        return session

    def close(self):
        self.closed = True


@pytest.fixture
def fake_tx():
    return FakeTx


@pytest.fixture
def fake_driver():
    return FakeDriver


@pytest.fixture
def fresh_config(monkeypatch):
    """
    Reload config so env overrides set with monkeypatch take effect, and
    reload again afterwards so later tests see the real environment.
    """
    import movie_graph.config as config

    def _reload():
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)
