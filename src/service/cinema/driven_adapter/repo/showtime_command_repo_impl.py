from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_showtime_command_repo import IShowtimeCommandRepo
from src.service.cinema.domain.entity.showtime_entity import ShowtimeEntity
from src.service.cinema.driven_adapter.model.reservation_model import ReservationModel
from src.service.cinema.driven_adapter.model.reservation_seat_model import ReservationSeatModel
from src.service.cinema.driven_adapter.model.showtime_model import ShowtimeModel
from src.service.cinema.driven_adapter.repo._mapper import showtime_model_to_entity


class ShowtimeCommandRepoImpl(IShowtimeCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_id(
        self, *, showtime_id: int, for_update: bool = False
    ) -> Optional[ShowtimeEntity]:
        stmt = select(ShowtimeModel).where(ShowtimeModel.id == showtime_id)
        if for_update:
            stmt = stmt.with_for_update()
        # populate_existing: a locked read must not be served from the identity map
        result = await self.session.execute(stmt.execution_options(populate_existing=True))
        showtime_model = result.scalar_one_or_none()
        return showtime_model_to_entity(showtime_model) if showtime_model else None

    @Logger.io
    async def create(self, *, showtime: ShowtimeEntity) -> ShowtimeEntity:
        showtime_model = ShowtimeModel(
            movie_id=showtime.movie_id,
            start_time=showtime.start_time,
            capacity=showtime.capacity,
            reserved=0,
        )
        self.session.add(showtime_model)
        await self.session.flush()
        return showtime_model_to_entity(showtime_model)

    @Logger.io
    async def update_schedule(self, *, showtime: ShowtimeEntity) -> ShowtimeEntity:
        await self.session.execute(
            update(ShowtimeModel)
            .where(ShowtimeModel.id == showtime.id)
            .values(
                movie_id=showtime.movie_id,
                start_time=showtime.start_time,
                capacity=showtime.capacity,
            )
        )
        updated = await self.get_by_id(showtime_id=showtime.id)  # type: ignore[arg-type]
        if updated is None:
            raise ValueError(f'Showtime {showtime.id} does not exist')
        return updated

    @Logger.io
    async def adjust_reserved(self, *, showtime_id: int, delta: int) -> int:
        result = await self.session.execute(
            update(ShowtimeModel)
            .where(ShowtimeModel.id == showtime_id)
            .values(reserved=ShowtimeModel.reserved + delta)
            .returning(ShowtimeModel.reserved)
        )
        return result.scalar_one()

    @Logger.io
    async def delete(self, *, showtime_id: int) -> bool:
        # Same lock as the ledger, so no booking lands between the deletes below
        await self.session.execute(
            select(ShowtimeModel.id).where(ShowtimeModel.id == showtime_id).with_for_update()
        )
        await self.session.execute(
            delete(ReservationSeatModel).where(ReservationSeatModel.showtime_id == showtime_id)
        )
        await self.session.execute(
            delete(ReservationModel).where(ReservationModel.showtime_id == showtime_id)
        )
        result = await self.session.execute(
            delete(ShowtimeModel).where(ShowtimeModel.id == showtime_id)
        )
        return result.rowcount > 0
