from typing import Callable, List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.ledger_deadline import ledger_deadline
from src.service.cinema.domain.seat_availability import calculate_available_seats
from src.service.cinema.domain.value_object.seat_layout_policy import SeatLayoutPolicy


class GetAvailableSeatsUseCase:
    """Free seats of a showtime: its layout minus every committed seat, in layout order"""

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        layout_policy: SeatLayoutPolicy,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        self.uow_factory = uow_factory
        self.layout_policy = layout_policy
        self.timeout_seconds = timeout_seconds or settings.LEDGER_TIMEOUT_SECONDS
        self.tracer = trace.get_tracer(__name__)

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
    async def get_available_seats(self, *, showtime_id: int) -> List[str]:
        with self.tracer.start_as_current_span(
            'use_case.get_available_seats', attributes={'showtime.id': showtime_id}
        ):
            # Capacity and committed seats are read in the same transaction
            with ledger_deadline(timeout_seconds=self.timeout_seconds, operation='Seat lookup'):
                async with self.uow_factory() as uow:
                    showtime = await uow.showtime_command_repo.get_by_id(showtime_id=showtime_id)
                    if showtime is None:
                        raise NotFoundError(f'Showtime {showtime_id} not found')
                    committed = await uow.reservation_command_repo.list_committed_seats(
                        showtime_id=showtime_id
                    )

            return calculate_available_seats(
                capacity=showtime.capacity,
                committed_seats=committed,
                layout_policy=self.layout_policy,
            )
