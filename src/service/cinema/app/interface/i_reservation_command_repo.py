from abc import ABC, abstractmethod
from typing import Optional

from src.service.cinema.domain.entity.reservation_entity import ReservationEntity


class IReservationCommandRepo(ABC):
    """Reservation ledger storage, bound to the unit-of-work session"""

    @abstractmethod
    async def get_by_id(
        self, *, reservation_id: int, for_update: bool = False
    ) -> Optional[ReservationEntity]:
        pass

    @abstractmethod
    async def list_committed_seats(self, *, showtime_id: int) -> set[str]:
        """Union of the seats of every reservation for the showtime"""
        pass

    @abstractmethod
    async def create(self, *, reservation: ReservationEntity) -> ReservationEntity:
        """Insert the reservation and one seat row per label.

        Raises SeatConflictError when a seat row already exists for the showtime.
        """
        pass

    @abstractmethod
    async def delete(self, *, reservation_id: int) -> bool:
        pass
