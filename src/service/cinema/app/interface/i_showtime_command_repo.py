from abc import ABC, abstractmethod
from typing import Optional

from src.service.cinema.domain.entity.showtime_entity import ShowtimeEntity


class IShowtimeCommandRepo(ABC):
    """Showtime write operations, bound to the unit-of-work session"""

    @abstractmethod
    async def get_by_id(
        self, *, showtime_id: int, for_update: bool = False
    ) -> Optional[ShowtimeEntity]:
        """With for_update the row stays locked until the unit of work ends"""
        pass

    @abstractmethod
    async def create(self, *, showtime: ShowtimeEntity) -> ShowtimeEntity:
        pass

    @abstractmethod
    async def update_schedule(self, *, showtime: ShowtimeEntity) -> ShowtimeEntity:
        """Persist movie_id, start_time and capacity; never the reserved counter"""
        pass

    @abstractmethod
    async def adjust_reserved(self, *, showtime_id: int, delta: int) -> int:
        """Apply delta to the reserved counter and return the new value"""
        pass

    @abstractmethod
    async def delete(self, *, showtime_id: int) -> bool:
        """Delete the showtime with its reservations"""
        pass
