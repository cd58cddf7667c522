from datetime import datetime, timezone
import time
from typing import Callable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ForbiddenError, NotFoundError, PastShowtimeError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.cinema_metrics import metrics
from src.service.cinema.app.ledger_deadline import ledger_deadline
from src.service.cinema.domain.entity.reservation_entity import ReservationEntity


class CancelReservationUseCase:
    """
    Cancel a reservation - reverses a booking atomically

    Locks follow the same order as booking and catalog deletes: the showtime
    row first, then the reservation row. The reservation is re-read under
    the lock, so a second cancel of the same id finds nothing to cancel.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        timeout_seconds: Optional[float] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self.uow_factory = uow_factory
        self.timeout_seconds = timeout_seconds or settings.LEDGER_TIMEOUT_SECONDS
        self.clock = clock
        self.tracer = trace.get_tracer(__name__)

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
    async def cancel(
        self, *, reservation_id: int, acting_user_id: Optional[int] = None
    ) -> ReservationEntity:
        """
        Args:
            reservation_id: reservation to cancel
            acting_user_id: when given, only that user's reservation may be cancelled

        Raises:
            NotFoundError: reservation (or its showtime) does not exist
            ForbiddenError: reservation belongs to someone else
            PastShowtimeError: showtime already started
            StorageFailureError: timeout or database failure
        """
        started = time.perf_counter()
        result = 'success'
        with self.tracer.start_as_current_span(
            'use_case.cancel_reservation', attributes={'reservation.id': reservation_id}
        ):
            try:
                return await self._cancel(
                    reservation_id=reservation_id, acting_user_id=acting_user_id
                )
            except Exception as e:
                result = type(e).__name__
                raise
            finally:
                metrics.record_reservation_operation(
                    operation='cancel', result=result, duration=time.perf_counter() - started
                )

    async def _cancel(
        self, *, reservation_id: int, acting_user_id: Optional[int]
    ) -> ReservationEntity:
        with ledger_deadline(timeout_seconds=self.timeout_seconds, operation='Cancellation'):
            async with self.uow_factory() as uow:
                # Unlocked read only to learn which showtime to lock
                located = await uow.reservation_command_repo.get_by_id(
                    reservation_id=reservation_id
                )
                if located is None:
                    raise NotFoundError(f'Reservation {reservation_id} not found')

                showtime = await uow.showtime_command_repo.get_by_id(
                    showtime_id=located.showtime_id, for_update=True
                )
                if showtime is None:
                    raise NotFoundError(f'Showtime {located.showtime_id} not found')

                reservation = await uow.reservation_command_repo.get_by_id(
                    reservation_id=reservation_id, for_update=True
                )
                if reservation is None:
                    raise NotFoundError(f'Reservation {reservation_id} not found')
                if acting_user_id is not None and reservation.user_id != acting_user_id:
                    raise ForbiddenError('Cannot cancel a reservation owned by another user')
                if showtime.has_started(now=self.clock()):
                    raise PastShowtimeError()

                await uow.showtime_command_repo.adjust_reserved(
                    showtime_id=reservation.showtime_id, delta=-reservation.seat_count
                )
                await uow.reservation_command_repo.delete(reservation_id=reservation_id)
                await uow.commit()

        Logger.base.info(
            f'↩️  [Ledger] Reservation {reservation_id} cancelled, '
            f'{reservation.seat_count} seats released'
        )
        return reservation
