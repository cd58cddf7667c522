"""
Unit tests for ReserveSeatsUseCase

Test coverage:
1. Successful booking creates the reservation and bumps the reserved counter
2. Overlapping seats raise SeatConflictError and leave storage untouched
3. Unknown showtime, unknown seats and movie mismatch are rejected
4. A stalled transaction surfaces as StorageFailureError
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import anyio
import pytest

from src.platform.exception.exceptions import (
    NotFoundError,
    SeatConflictError,
    StorageFailureError,
    ValidationError,
)
from src.service.cinema.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.cinema.domain.entity.reservation_entity import ReservationEntity
from src.service.cinema.domain.entity.showtime_entity import ShowtimeEntity


pytestmark = pytest.mark.unit


@pytest.fixture
def showtime() -> ShowtimeEntity:
    return ShowtimeEntity(
        id=10,
        movie_id=5,
        start_time=datetime(2099, 1, 1, tzinfo=timezone.utc),
        capacity=4,
        reserved=0,
    )


@pytest.fixture
def use_case(mock_uow, layout_policy, showtime):
    mock_uow.showtime_command_repo.get_by_id.return_value = showtime

    async def _create(*, reservation: ReservationEntity) -> ReservationEntity:
        reservation.id = 99
        return reservation

    mock_uow.reservation_command_repo.create.side_effect = _create
    return ReserveSeatsUseCase(uow_factory=lambda: mock_uow, layout_policy=layout_policy)


class TestReserveSeatsSuccess:
    @pytest.mark.asyncio
    async def test_books_seats_and_adjusts_counter(self, use_case, mock_uow):
        reservation = await use_case.reserve(
            user_id=1, movie_id=5, showtime_id=10, seats=['A1', 'A2']
        )

        assert reservation.id == 99
        assert reservation.seats == ['A1', 'A2']
        mock_uow.showtime_command_repo.get_by_id.assert_awaited_once_with(
            showtime_id=10, for_update=True
        )
        mock_uow.showtime_command_repo.adjust_reserved.assert_awaited_once_with(
            showtime_id=10, delta=2
        )
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_movie_defaults_to_showtime_movie(self, use_case):
        reservation = await use_case.reserve(
            user_id=1, movie_id=None, showtime_id=10, seats=['A3']
        )
        assert reservation.movie_id == 5


class TestReserveSeatsRejected:
    @pytest.mark.asyncio
    async def test_overlap_raises_seat_conflict(self, use_case, mock_uow):
        mock_uow.reservation_command_repo.list_committed_seats.return_value = {'A1', 'A2'}

        with pytest.raises(SeatConflictError) as exc_info:
            await use_case.reserve(user_id=1, movie_id=5, showtime_id=10, seats=['A2', 'A3'])

        assert 'A2' in exc_info.value.message
        mock_uow.reservation_command_repo.create.assert_not_awaited()
        mock_uow.showtime_command_repo.adjust_reserved.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_showtime(self, use_case, mock_uow):
        mock_uow.showtime_command_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.reserve(user_id=1, movie_id=5, showtime_id=404, seats=['A1'])
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_seat_outside_layout(self, use_case, mock_uow):
        with pytest.raises(ValidationError):
            await use_case.reserve(user_id=1, movie_id=5, showtime_id=10, seats=['A5'])
        mock_uow.reservation_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_movie_mismatch(self, use_case, mock_uow):
        with pytest.raises(ValidationError):
            await use_case.reserve(user_id=1, movie_id=6, showtime_id=10, seats=['A1'])
        mock_uow.reservation_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_seats_never_touch_storage(self, use_case, mock_uow):
        with pytest.raises(ValidationError):
            await use_case.reserve(user_id=1, movie_id=5, showtime_id=10, seats=[])
        mock_uow.showtime_command_repo.get_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_timeout_surfaces_as_storage_failure(self, mock_uow, layout_policy):
        async def _stall(**_kwargs):
            await anyio.sleep(5)

        mock_uow.showtime_command_repo.get_by_id = AsyncMock(side_effect=_stall)
        use_case = ReserveSeatsUseCase(
            uow_factory=lambda: mock_uow, layout_policy=layout_policy, timeout_seconds=0.05
        )

        with pytest.raises(StorageFailureError):
            await use_case.reserve(user_id=1, movie_id=5, showtime_id=10, seats=['A1'])
        mock_uow.commit.assert_not_awaited()
