from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_showtime_query_repo import IShowtimeQueryRepo
from src.service.cinema.domain.entity.showtime_entity import ShowtimeEntity
from src.service.cinema.driven_adapter.model.showtime_model import ShowtimeModel
from src.service.cinema.driven_adapter.repo._mapper import showtime_model_to_entity


class ShowtimeQueryRepoImpl(IShowtimeQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, showtime_id: int) -> Optional[ShowtimeEntity]:
        async with self.session_factory() as session:
            showtime_model = await session.get(ShowtimeModel, showtime_id)
            return showtime_model_to_entity(showtime_model) if showtime_model else None

    @Logger.io
    async def list_showtimes(self, *, movie_id: Optional[int] = None) -> List[ShowtimeEntity]:
        stmt = select(ShowtimeModel).order_by(ShowtimeModel.start_time, ShowtimeModel.id)
        if movie_id is not None:
            stmt = stmt.where(ShowtimeModel.movie_id == movie_id)

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [showtime_model_to_entity(model) for model in result.scalars()]
