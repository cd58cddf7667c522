from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import Select, distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.reservation_report_dto import MovieReservationSummary
from src.service.cinema.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.cinema.domain.entity.reservation_entity import ReservationEntity
from src.service.cinema.driven_adapter.model.movie_model import MovieModel
from src.service.cinema.driven_adapter.model.reservation_model import ReservationModel
from src.service.cinema.driven_adapter.model.reservation_seat_model import ReservationSeatModel
from src.service.cinema.driven_adapter.repo._mapper import reservation_model_to_entity


class ReservationQueryRepoImpl(IReservationQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_by_user(self, *, user_id: int) -> List[ReservationEntity]:
        stmt = (
            select(ReservationModel)
            .where(ReservationModel.user_id == user_id)
            .order_by(ReservationModel.id)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [reservation_model_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def list_all(self) -> List[ReservationEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(ReservationModel).order_by(ReservationModel.id))
            return [reservation_model_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def summarize_movie(self, *, movie_id: int) -> Optional[MovieReservationSummary]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._summary_stmt().where(MovieModel.id == movie_id)
            )
            row = result.one_or_none()
            return self._row_to_summary(row) if row else None

    @Logger.io
    async def summarize_all_movies(self) -> List[MovieReservationSummary]:
        async with self.session_factory() as session:
            result = await session.execute(self._summary_stmt().order_by(MovieModel.id))
            return [self._row_to_summary(row) for row in result.all()]

    @staticmethod
    def _summary_stmt() -> Select:
        # Seat totals come from the per-seat table, one row per booked seat
        return (
            select(
                MovieModel.id,
                MovieModel.title,
                func.count(distinct(ReservationModel.id)),
                func.count(ReservationSeatModel.seat_label),
            )
            .select_from(MovieModel)
            .outerjoin(ReservationModel, ReservationModel.movie_id == MovieModel.id)
            .outerjoin(
                ReservationSeatModel, ReservationSeatModel.reservation_id == ReservationModel.id
            )
            .group_by(MovieModel.id, MovieModel.title)
        )

    @staticmethod
    def _row_to_summary(row) -> MovieReservationSummary:
        movie_id, title, reservation_count, total_seats = row
        return MovieReservationSummary(
            movie_id=movie_id,
            title=title,
            reservation_count=reservation_count or 0,
            total_seats=total_seats or 0,
        )
