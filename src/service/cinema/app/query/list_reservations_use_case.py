from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.cinema.domain.entity.reservation_entity import ReservationEntity


class ListReservationsUseCase:
    def __init__(self, *, reservation_query_repo: IReservationQueryRepo) -> None:
        self.reservation_query_repo = reservation_query_repo

    @Logger.io
    async def list_user_reservations(self, *, user_id: int) -> List[ReservationEntity]:
        return await self.reservation_query_repo.list_by_user(user_id=user_id)

    @Logger.io
    async def list_all_reservations(self) -> List[ReservationEntity]:
        return await self.reservation_query_repo.list_all()
