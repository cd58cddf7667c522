from typing import List, Optional

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_movie_query_repo import IMovieQueryRepo
from src.service.cinema.app.interface.i_showtime_query_repo import IShowtimeQueryRepo
from src.service.cinema.domain.entity.movie_entity import MovieEntity
from src.service.cinema.domain.entity.showtime_entity import ShowtimeEntity


class CatalogQueryUseCase:
    def __init__(
        self,
        *,
        movie_query_repo: IMovieQueryRepo,
        showtime_query_repo: IShowtimeQueryRepo,
    ) -> None:
        self.movie_query_repo = movie_query_repo
        self.showtime_query_repo = showtime_query_repo

    @Logger.io
    async def list_movies(self, *, genre: Optional[str] = None) -> List[MovieEntity]:
        return await self.movie_query_repo.list_movies(genre=genre)

    @Logger.io
    async def get_movie(self, *, movie_id: int) -> MovieEntity:
        movie = await self.movie_query_repo.get_by_id(movie_id=movie_id)
        if movie is None:
            raise NotFoundError(f'Movie {movie_id} not found')
        return movie

    @Logger.io
    async def list_showtimes(self, *, movie_id: Optional[int] = None) -> List[ShowtimeEntity]:
        return await self.showtime_query_repo.list_showtimes(movie_id=movie_id)

    @Logger.io
    async def get_showtime(self, *, showtime_id: int) -> ShowtimeEntity:
        showtime = await self.showtime_query_repo.get_by_id(showtime_id=showtime_id)
        if showtime is None:
            raise NotFoundError(f'Showtime {showtime_id} not found')
        return showtime
