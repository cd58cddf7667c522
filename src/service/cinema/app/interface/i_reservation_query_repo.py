from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.cinema.app.dto.reservation_report_dto import (
    MovieReservationSummary,
)
from src.service.cinema.domain.entity.reservation_entity import ReservationEntity


class IReservationQueryRepo(ABC):
    @abstractmethod
    async def list_by_user(self, *, user_id: int) -> List[ReservationEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> List[ReservationEntity]:
        pass

    @abstractmethod
    async def summarize_movie(self, *, movie_id: int) -> Optional[MovieReservationSummary]:
        """None when the movie does not exist"""
        pass

    @abstractmethod
    async def summarize_all_movies(self) -> List[MovieReservationSummary]:
        pass
