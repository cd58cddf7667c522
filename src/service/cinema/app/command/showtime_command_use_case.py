from datetime import datetime
from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.entity.showtime_entity import ShowtimeEntity
from src.service.cinema.domain.value_object.seat_layout_policy import SeatLayoutPolicy


class ShowtimeCommandUseCase:
    """Schedule administration; the reserved counter belongs to the reservation ledger"""

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        layout_policy: SeatLayoutPolicy,
    ) -> None:
        self.uow_factory = uow_factory
        self.layout_policy = layout_policy

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
        layout_policy: SeatLayoutPolicy = Depends(Provide[Container.seat_layout_policy]),
    ) -> Self:
        return cls(uow_factory=uow_factory, layout_policy=layout_policy)

    @Logger.io
    async def create_showtime(
        self, *, movie_id: int, start_time: datetime, capacity: int
    ) -> ShowtimeEntity:
        showtime = ShowtimeEntity.create(
            movie_id=movie_id, start_time=start_time, capacity=capacity
        )
        async with self.uow_factory() as uow:
            if await uow.movie_command_repo.get_by_id(movie_id=movie_id) is None:
                raise NotFoundError(f'Movie {movie_id} not found')
            created = await uow.showtime_command_repo.create(showtime=showtime)
            await uow.commit()
        return created

    @Logger.io
    async def update_showtime(
        self, *, showtime_id: int, movie_id: int, start_time: datetime, capacity: int
    ) -> ShowtimeEntity:
        async with self.uow_factory() as uow:
            showtime = await uow.showtime_command_repo.get_by_id(
                showtime_id=showtime_id, for_update=True
            )
            if showtime is None:
                raise NotFoundError(f'Showtime {showtime_id} not found')
            if await uow.movie_command_repo.get_by_id(movie_id=movie_id) is None:
                raise NotFoundError(f'Movie {movie_id} not found')

            showtime.reschedule(movie_id=movie_id, start_time=start_time, capacity=capacity)

            # Booked seats must survive a capacity change
            committed = await uow.reservation_command_repo.list_committed_seats(
                showtime_id=showtime_id
            )
            stranded = self.layout_policy.unknown_seats(capacity=capacity, seats=sorted(committed))
            if stranded:
                raise ValidationError(
                    f'Capacity {capacity} would drop reserved seats: {", ".join(stranded)}'
                )

            updated = await uow.showtime_command_repo.update_schedule(showtime=showtime)
            await uow.commit()
        return updated

    @Logger.io
    async def delete_showtime(self, *, showtime_id: int) -> None:
        async with self.uow_factory() as uow:
            if not await uow.showtime_command_repo.delete(showtime_id=showtime_id):
                raise NotFoundError(f'Showtime {showtime_id} not found')
            await uow.commit()
