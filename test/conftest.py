"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database (sqlite+aiosqlite) shared by the whole run
- Table cleanup before every integration test
- A session-scoped TestClient plus user/admin fixtures

Architecture:
- Unit tests (marked `unit`): no database, no HTTP client
- Integration tests: real SQLAlchemy against the SQLite file
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (src.platform.config.core_setting)
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Point the app at a temp SQLite file before application modules load."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_dir = Path(tempfile.mkdtemp(prefix='course_booking_test_'))
    db_path = db_dir / f'test_{worker_id}.db'
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_path}'
    os.environ['TEST_DB_PATH'] = str(db_path)
    os.environ['DEBUG'] = 'true'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import create_engine, text  # noqa: E402

from src.platform.database.db_setting import Base  # noqa: E402
import src.service.course_booking.driven_adapter.model  # noqa: E402, F401
from test.bdd_steps_loader import *  # noqa: E402, F403
from test.shared.utils import create_user, login_user  # noqa: E402
from test.util_constant import (  # noqa: E402
    ADMIN_EMAIL,
    ADMIN_NAME,
    ANOTHER_STUDENT_EMAIL,
    ANOTHER_STUDENT_NAME,
    DEFAULT_PASSWORD,
    STUDENT_EMAIL,
    STUDENT_NAME,
)


# =============================================================================
# Database Setup and Cleanup (sync driver on the same file)
# =============================================================================
def _sync_database_url() -> str:
    return f'sqlite:///{os.environ["TEST_DB_PATH"]}'


def _setup_test_database() -> None:
    engine = create_engine(_sync_database_url())
    try:
        Base.metadata.drop_all(engine)
        Base.metadata.create_all(engine)
    finally:
        engine.dispose()


def _clean_all_tables() -> None:
    engine = create_engine(_sync_database_url())
    try:
        with engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                conn.execute(text(f'DELETE FROM "{table.name}"'))
    finally:
        engine.dispose()


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_sessionstart(session: pytest.Session) -> None:
    _setup_test_database()


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
def clean_database() -> Generator[None, None, None]:
    _clean_all_tables()
    yield


@pytest.fixture
def context() -> dict[str, Any]:
    """Shared state between the Given/When/Then steps of one scenario"""
    return {}


@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_client_cookies(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    # Only tests that already asked for the HTTP client get their cookies reset
    if 'client' not in request.fixturenames:
        yield
        return
    client = request.getfixturevalue('client')
    client.cookies.clear()
    yield
    client.cookies.clear()


@pytest.fixture
def student_user(client: TestClient) -> dict[str, Any]:
    return create_user(client, STUDENT_EMAIL, DEFAULT_PASSWORD, STUDENT_NAME, 'student')


@pytest.fixture
def another_student_user(client: TestClient) -> dict[str, Any]:
    return create_user(
        client, ANOTHER_STUDENT_EMAIL, DEFAULT_PASSWORD, ANOTHER_STUDENT_NAME, 'student'
    )


@pytest.fixture
def admin_user(client: TestClient) -> dict[str, Any]:
    return create_user(client, ADMIN_EMAIL, DEFAULT_PASSWORD, ADMIN_NAME, 'admin')


@pytest.fixture
def logged_in_student(client: TestClient, student_user: dict[str, Any]) -> dict[str, Any]:
    login_user(client, STUDENT_EMAIL, DEFAULT_PASSWORD)
    return student_user


@pytest.fixture
def logged_in_admin(client: TestClient, admin_user: dict[str, Any]) -> dict[str, Any]:
    login_user(client, ADMIN_EMAIL, DEFAULT_PASSWORD)
    return admin_user
