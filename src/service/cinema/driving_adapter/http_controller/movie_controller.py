from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.command.movie_command_use_case import MovieCommandUseCase
from src.service.cinema.app.interface.i_movie_query_repo import IMovieQueryRepo
from src.service.cinema.app.interface.i_showtime_query_repo import IShowtimeQueryRepo
from src.service.cinema.app.query.catalog_query_use_case import CatalogQueryUseCase
from src.service.cinema.domain.entity.movie_entity import MovieEntity
from src.service.cinema.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
    require_user,
)
from src.service.cinema.driving_adapter.http_controller.schema.movie_schema import (
    MovieRequest,
    MovieResponse,
)


router = APIRouter()


@inject
def get_catalog_query_use_case(
    movie_query_repo: IMovieQueryRepo = Depends(Provide[Container.movie_query_repo]),
    showtime_query_repo: IShowtimeQueryRepo = Depends(Provide[Container.showtime_query_repo]),
) -> CatalogQueryUseCase:
    return CatalogQueryUseCase(
        movie_query_repo=movie_query_repo, showtime_query_repo=showtime_query_repo
    )


def _to_response(movie: MovieEntity) -> MovieResponse:
    return MovieResponse(
        id=movie.id or 0,
        title=movie.title,
        description=movie.description,
        genre=movie.genre,
        poster_image=movie.poster_image,
        created_at=movie.created_at,
        updated_at=movie.updated_at,
    )


@router.get('', response_model=List[MovieResponse], dependencies=[Depends(require_user)])
@Logger.io
async def list_movies(
    genre: Optional[str] = None,
    use_case: CatalogQueryUseCase = Depends(get_catalog_query_use_case),
) -> List[MovieResponse]:
    return [_to_response(movie) for movie in await use_case.list_movies(genre=genre)]


@router.post(
    '/add',
    response_model=MovieResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
@Logger.io
async def add_movie(
    request: MovieRequest,
    use_case: MovieCommandUseCase = Depends(MovieCommandUseCase.depends),
) -> MovieResponse:
    movie = await use_case.create_movie(**request.model_dump())
    return _to_response(movie)


@router.put(
    '/update/{movie_id}', response_model=MovieResponse, dependencies=[Depends(require_admin)]
)
@Logger.io
async def update_movie(
    movie_id: int,
    request: MovieRequest,
    use_case: MovieCommandUseCase = Depends(MovieCommandUseCase.depends),
) -> MovieResponse:
    movie = await use_case.update_movie(movie_id=movie_id, **request.model_dump())
    return _to_response(movie)


@router.delete('/delete/{movie_id}', dependencies=[Depends(require_admin)])
@Logger.io
async def delete_movie(
    movie_id: int,
    use_case: MovieCommandUseCase = Depends(MovieCommandUseCase.depends),
) -> dict[str, str]:
    await use_case.delete_movie(movie_id=movie_id)
    return {'message': 'Movie deleted successfully'}


@router.get('/{movie_id}', response_model=MovieResponse, dependencies=[Depends(require_user)])
@Logger.io
async def get_movie(
    movie_id: int,
    use_case: CatalogQueryUseCase = Depends(get_catalog_query_use_case),
) -> MovieResponse:
    return _to_response(await use_case.get_movie(movie_id=movie_id))
