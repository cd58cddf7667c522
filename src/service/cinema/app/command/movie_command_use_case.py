from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.entity.movie_entity import MovieEntity


class MovieCommandUseCase:
    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
    ) -> Self:
        return cls(uow_factory=uow_factory)

    @Logger.io
    async def create_movie(
        self, *, title: str, description: str = '', genre: str = '', poster_image: str = ''
    ) -> MovieEntity:
        movie = MovieEntity.create(
            title=title, description=description, genre=genre, poster_image=poster_image
        )
        async with self.uow_factory() as uow:
            created = await uow.movie_command_repo.create(movie=movie)
            await uow.commit()
        return created

    @Logger.io
    async def update_movie(
        self,
        *,
        movie_id: int,
        title: str,
        description: str = '',
        genre: str = '',
        poster_image: str = '',
    ) -> MovieEntity:
        changes = MovieEntity.create(
            title=title, description=description, genre=genre, poster_image=poster_image
        )
        async with self.uow_factory() as uow:
            if await uow.movie_command_repo.get_by_id(movie_id=movie_id) is None:
                raise NotFoundError(f'Movie {movie_id} not found')
            changes.id = movie_id
            updated = await uow.movie_command_repo.update(movie=changes)
            await uow.commit()
        return updated

    @Logger.io
    async def delete_movie(self, *, movie_id: int) -> None:
        async with self.uow_factory() as uow:
            if not await uow.movie_command_repo.delete(movie_id=movie_id):
                raise NotFoundError(f'Movie {movie_id} not found')
            await uow.commit()
