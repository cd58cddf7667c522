from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.cinema.domain.entity.showtime_entity import ShowtimeEntity


class IShowtimeQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, showtime_id: int) -> Optional[ShowtimeEntity]:
        pass

    @abstractmethod
    async def list_showtimes(self, *, movie_id: Optional[int] = None) -> List[ShowtimeEntity]:
        pass
