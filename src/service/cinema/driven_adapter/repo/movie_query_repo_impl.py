from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_movie_query_repo import IMovieQueryRepo
from src.service.cinema.domain.entity.movie_entity import MovieEntity
from src.service.cinema.driven_adapter.model.movie_model import MovieModel
from src.service.cinema.driven_adapter.repo._mapper import movie_model_to_entity


class MovieQueryRepoImpl(IMovieQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, movie_id: int) -> Optional[MovieEntity]:
        async with self.session_factory() as session:
            movie_model = await session.get(MovieModel, movie_id)
            return movie_model_to_entity(movie_model) if movie_model else None

    @Logger.io
    async def list_movies(self, *, genre: Optional[str] = None) -> List[MovieEntity]:
        stmt = select(MovieModel).order_by(MovieModel.id)
        if genre:
            stmt = stmt.where(MovieModel.genre.ilike(f'%{genre}%'))

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [movie_model_to_entity(movie_model) for movie_model in result.scalars()]
