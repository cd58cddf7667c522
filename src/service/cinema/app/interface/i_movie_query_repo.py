from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.cinema.domain.entity.movie_entity import MovieEntity


class IMovieQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, movie_id: int) -> Optional[MovieEntity]:
        pass

    @abstractmethod
    async def list_movies(self, *, genre: Optional[str] = None) -> List[MovieEntity]:
        """Case-insensitive substring match on genre when given"""
        pass
