from abc import ABC, abstractmethod
from typing import Optional

from src.service.cinema.domain.entity.movie_entity import MovieEntity


class IMovieCommandRepo(ABC):
    """Movie write operations, bound to the unit-of-work session"""

    @abstractmethod
    async def get_by_id(self, *, movie_id: int) -> Optional[MovieEntity]:
        pass

    @abstractmethod
    async def create(self, *, movie: MovieEntity) -> MovieEntity:
        """Raises ConflictError when the title is taken"""
        pass

    @abstractmethod
    async def update(self, *, movie: MovieEntity) -> MovieEntity:
        pass

    @abstractmethod
    async def delete(self, *, movie_id: int) -> bool:
        """Delete the movie with its showtimes and their reservations"""
        pass
