"""
Unit test configuration for the cinema service.

Overrides database fixtures from the root conftest so unit tests run
without the SQLite test database.
"""

from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.service.cinema.domain.value_object.seat_layout_policy import SeatLayoutPolicy


@pytest.fixture(autouse=True, scope='function')
def clean_database() -> Generator[None, None, None]:
    """No-op override for unit tests - no real database needed"""
    yield


@pytest.fixture
def layout_policy() -> SeatLayoutPolicy:
    return SeatLayoutPolicy(row_letters='ABCDEFGHIJ', columns_per_row=20)


@pytest.fixture
def mock_uow():
    """Unit of work double exposing the command repositories as AsyncMocks"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)
    uow.commit = AsyncMock()
    uow.showtime_command_repo = MagicMock()
    uow.showtime_command_repo.get_by_id = AsyncMock()
    uow.showtime_command_repo.adjust_reserved = AsyncMock()
    uow.reservation_command_repo = MagicMock()
    uow.reservation_command_repo.get_by_id = AsyncMock()
    uow.reservation_command_repo.list_committed_seats = AsyncMock(return_value=set())
    uow.reservation_command_repo.create = AsyncMock()
    uow.reservation_command_repo.delete = AsyncMock(return_value=True)
    uow.movie_command_repo = MagicMock()
    uow.movie_command_repo.get_by_id = AsyncMock()
    return uow
