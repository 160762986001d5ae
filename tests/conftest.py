"""Pytest configuration and shared fixtures for BudgetKeeper tests.

Provides an isolated SQLite database per test, repositories bound to it, and a
Flask application/test client whose clock is pinned to a known month.
"""

from __future__ import annotations

import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest
from sqlmodel import Session, create_engine

from budgetkeeper import create_app
from budgetkeeper.extensions import EXTENSION_KEY, shutdown_db
from budgetkeeper.infra.database import create_session_factory, init_database
from budgetkeeper.infra.repositories import Repositories

FIXED_NOW = datetime(2025, 3, 15, 10, 30, tzinfo=timezone.utc)

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to the test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    init_database(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one repositories receive in the app."""

    return create_session_factory(db_engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """A plain session for assertions that bypass the repositories."""

    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repositories(session_factory) -> Repositories:
    return Repositories.from_session_factory(session_factory)


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture()
def app(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BUDGETKEEPER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BUDGETKEEPER_DATABASE_URL", f"sqlite:///{tmp_path / 'budget.db'}")
    monkeypatch.delenv("BUDGETKEEPER_LOCALE", raising=False)
    monkeypatch.delenv("BUDGETKEEPER_CURRENCY", raising=False)
    flask_app = create_app("testing")
    flask_app.extensions[EXTENSION_KEY].clock = lambda: FIXED_NOW

    yield flask_app

    shutdown_db(flask_app)


@pytest.fixture()
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def set_clock(app):
    """Move the application clock, e.g. into the next month."""

    def _set(moment: datetime) -> None:
        app.extensions[EXTENSION_KEY].clock = lambda: moment

    return _set


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.001):
    """Assert that two floats are equal within a tolerance (default a tenth of a cent)."""
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
