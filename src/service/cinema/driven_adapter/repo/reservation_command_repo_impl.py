"""
Reservation Command Repository - storage side of the reservation ledger

Every method runs on the unit-of-work session; nothing here commits.
"""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import SeatConflictError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.cinema.domain.entity.reservation_entity import ReservationEntity
from src.service.cinema.driven_adapter.model.reservation_model import ReservationModel
from src.service.cinema.driven_adapter.model.reservation_seat_model import ReservationSeatModel
from src.service.cinema.driven_adapter.repo._mapper import reservation_model_to_entity


class ReservationCommandRepoImpl(IReservationCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_id(
        self, *, reservation_id: int, for_update: bool = False
    ) -> Optional[ReservationEntity]:
        stmt = select(ReservationModel).where(ReservationModel.id == reservation_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt.execution_options(populate_existing=True))
        reservation_model = result.scalar_one_or_none()
        return reservation_model_to_entity(reservation_model) if reservation_model else None

    @Logger.io
    async def list_committed_seats(self, *, showtime_id: int) -> set[str]:
        result = await self.session.execute(
            select(ReservationModel.seats).where(ReservationModel.showtime_id == showtime_id)
        )
        committed: set[str] = set()
        for seats in result.scalars():
            committed.update(seats)
        return committed

    @Logger.io
    async def create(self, *, reservation: ReservationEntity) -> ReservationEntity:
        reservation_model = ReservationModel(
            user_id=reservation.user_id,
            movie_id=reservation.movie_id,
            showtime_id=reservation.showtime_id,
            seats=list(reservation.seats),
        )
        self.session.add(reservation_model)
        await self.session.flush()

        self.session.add_all(
            ReservationSeatModel(
                showtime_id=reservation.showtime_id,
                seat_label=seat,
                reservation_id=reservation_model.id,
            )
            for seat in reservation.seats
        )
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise SeatConflictError() from e

        return reservation_model_to_entity(reservation_model)

    @Logger.io
    async def delete(self, *, reservation_id: int) -> bool:
        await self.session.execute(
            delete(ReservationSeatModel).where(
                ReservationSeatModel.reservation_id == reservation_id
            )
        )
        result = await self.session.execute(
            delete(ReservationModel).where(ReservationModel.id == reservation_id)
        )
        return result.rowcount > 0
