from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_movie_command_repo import IMovieCommandRepo
from src.service.cinema.domain.entity.movie_entity import MovieEntity
from src.service.cinema.driven_adapter.model.movie_model import MovieModel
from src.service.cinema.driven_adapter.model.reservation_model import ReservationModel
from src.service.cinema.driven_adapter.model.reservation_seat_model import ReservationSeatModel
from src.service.cinema.driven_adapter.model.showtime_model import ShowtimeModel
from src.service.cinema.driven_adapter.repo._mapper import movie_model_to_entity


class MovieCommandRepoImpl(IMovieCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_id(self, *, movie_id: int) -> Optional[MovieEntity]:
        movie_model = await self.session.get(MovieModel, movie_id)
        return movie_model_to_entity(movie_model) if movie_model else None

    @Logger.io
    async def create(self, *, movie: MovieEntity) -> MovieEntity:
        movie_model = MovieModel(
            title=movie.title,
            description=movie.description,
            genre=movie.genre,
            poster_image=movie.poster_image,
        )
        self.session.add(movie_model)
        await self._flush_unique_title(movie.title)
        return movie_model_to_entity(movie_model)

    @Logger.io
    async def update(self, *, movie: MovieEntity) -> MovieEntity:
        movie_model = await self.session.get(MovieModel, movie.id)
        if movie_model is None:
            raise ValueError(f'Movie {movie.id} does not exist')

        movie_model.title = movie.title
        movie_model.description = movie.description
        movie_model.genre = movie.genre
        movie_model.poster_image = movie.poster_image
        await self._flush_unique_title(movie.title)
        return movie_model_to_entity(movie_model)

    @Logger.io
    async def delete(self, *, movie_id: int) -> bool:
        showtime_ids = select(ShowtimeModel.id).where(ShowtimeModel.movie_id == movie_id)
        await self.session.execute(showtime_ids.with_for_update())
        await self.session.execute(
            delete(ReservationSeatModel).where(ReservationSeatModel.showtime_id.in_(showtime_ids))
        )
        await self.session.execute(
            delete(ReservationModel).where(ReservationModel.movie_id == movie_id)
        )
        await self.session.execute(delete(ShowtimeModel).where(ShowtimeModel.movie_id == movie_id))
        result = await self.session.execute(delete(MovieModel).where(MovieModel.id == movie_id))
        return result.rowcount > 0

    async def _flush_unique_title(self, title: str) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise ConflictError(f'Movie titled {title!r} already exists') from e
