"""
Test Configuration and Fixtures

This module provides:
- Test environment setup (SQLite database file, log directory)
- Schema creation through Alembic migrations at session start
- Database cleanup before every non-unit test
- HTTP client and authenticated header fixtures

Architecture:
- Unit tests (test/**/unit/): Override fixtures with no-ops in their own conftest.py
- Integration and API tests: Use the real SQLite database with cleanup
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time by src.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path


TEST_DIR = Path(__file__).parent
TEST_DB_PATH = TEST_DIR / 'test_cinema.db'


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{TEST_DB_PATH}'
    os.environ['SEED_ADMIN_ON_STARTUP'] = 'true'
    os.environ['ADMIN_USERNAME'] = 'admin'
    os.environ['ADMIN_PASSWORD'] = 'admin123'
    os.environ['SEAT_ROW_LETTERS'] = 'ABCDEFGHIJ'
    os.environ['SEAT_COLUMNS_PER_ROW'] = '20'
    os.environ.setdefault('OTEL_CONSOLE_EXPORT', 'false')

    test_log_dir = TEST_DIR / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import create_engine, text  # noqa: E402

from test.shared.utils import login_user, signup_user  # noqa: E402
from test.util_constant import (  # noqa: E402
    ADMIN_PASSWORD,
    ADMIN_USERNAME,
    ANOTHER_USERNAME,
    DEFAULT_PASSWORD,
    TEST_USERNAME,
)


# =============================================================================
# Pytest Hooks
# =============================================================================
def _is_unit_test_only_run(config: pytest.Config) -> bool:
    markexpr = config.getoption('markexpr', default='')
    if markexpr and 'unit' in str(markexpr) and 'not unit' not in str(markexpr):
        return True

    args = config.args or []
    test_paths = [arg for arg in args if arg and not arg.startswith('-')]
    return bool(test_paths and all('/unit/' in path or '\\unit\\' in path for path in test_paths))


def pytest_sessionstart(session: pytest.Session) -> None:
    if _is_unit_test_only_run(session.config):
        return
    _setup_test_database()


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
# Children first; users other than the seeded admin are removed too
_CLEAN_STATEMENTS = (
    'DELETE FROM reservation_seats',
    'DELETE FROM reservations',
    'DELETE FROM showtimes',
    'DELETE FROM movies',
    'DELETE FROM users WHERE username != :admin_username',
)


def _sync_database_url() -> str:
    return f'sqlite:///{TEST_DB_PATH}'


def _setup_test_database() -> None:
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()

    alembic_cfg = Config(str(TEST_DIR.parent / 'alembic.ini'))
    alembic_cfg.set_main_option('sqlalchemy.url', os.environ['DATABASE_URL'])
    command.upgrade(alembic_cfg, 'head')


def _clean_all_tables() -> None:
    engine = create_engine(_sync_database_url())
    try:
        with engine.begin() as conn:
            for statement in _CLEAN_STATEMENTS:
                conn.execute(text(statement), {'admin_username': ADMIN_USERNAME})
    finally:
        engine.dispose()


@pytest.fixture(autouse=True, scope='function')
def clean_database() -> Generator[None, None, None]:
    _clean_all_tables()
    yield


@pytest.fixture
def execute_sql_statement():
    def _execute(
        statement: str, params: dict[str, Any] | None = None, fetch: bool = False
    ) -> list[dict[str, Any]] | None:
        engine = create_engine(_sync_database_url())
        try:
            with engine.begin() as conn:
                result = conn.execute(text(statement), params or {})
                if fetch:
                    return [dict(row._mapping) for row in result]
            return None
        finally:
            engine.dispose()

    return _execute


# =============================================================================
# HTTP Client Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client: TestClient) -> dict[str, str]:
    token = login_user(client, ADMIN_USERNAME, ADMIN_PASSWORD)['token']
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def test_user(client: TestClient) -> dict[str, Any]:
    return signup_user(client, TEST_USERNAME, DEFAULT_PASSWORD)


@pytest.fixture
def user_headers(client: TestClient, test_user: dict[str, Any]) -> dict[str, str]:
    token = login_user(client, TEST_USERNAME, DEFAULT_PASSWORD)['token']
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def another_user(client: TestClient) -> dict[str, Any]:
    return signup_user(client, ANOTHER_USERNAME, DEFAULT_PASSWORD)


@pytest.fixture
def another_user_headers(client: TestClient, another_user: dict[str, Any]) -> dict[str, str]:
    token = login_user(client, ANOTHER_USERNAME, DEFAULT_PASSWORD)['token']
    return {'Authorization': f'Bearer {token}'}
