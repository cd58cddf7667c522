import time
from typing import Callable, List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError, SeatConflictError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.cinema_metrics import metrics
from src.service.cinema.app.ledger_deadline import ledger_deadline
from src.service.cinema.domain.entity.reservation_entity import ReservationEntity
from src.service.cinema.domain.seat_availability import find_seat_conflicts
from src.service.cinema.domain.value_object.seat_layout_policy import SeatLayoutPolicy


class ReserveSeatsUseCase:
    """
    Book seats for a showtime - all or nothing

    Flow (one transaction):
    1. Validate the request (seats, user, showtime) before touching storage
    2. Lock the showtime row; every booking and cancellation of it queues here
    3. Reject seats outside the showtime layout
    4. Intersect requested seats with every committed seat -> SeatConflict
    5. Insert reservation + per-seat rows (primary key rejects overlap too)
    6. reserved += len(seats), then commit
    """

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
    async def reserve(
        self,
        *,
        user_id: Optional[int],
        movie_id: Optional[int],
        showtime_id: Optional[int],
        seats: Optional[List[str]],
    ) -> ReservationEntity:
        started = time.perf_counter()
        result = 'success'
        with self.tracer.start_as_current_span(
            'use_case.reserve_seats',
            attributes={'showtime.id': showtime_id or 0, 'seat.count': len(seats or [])},
        ):
            try:
                return await self._reserve(
                    user_id=user_id, movie_id=movie_id, showtime_id=showtime_id, seats=seats
                )
            except Exception as e:
                result = type(e).__name__
                raise
            finally:
                metrics.record_reservation_operation(
                    operation='book',
                    result=result,
                    duration=time.perf_counter() - started,
                    seat_count=len(seats or []),
                )

    async def _reserve(
        self,
        *,
        user_id: Optional[int],
        movie_id: Optional[int],
        showtime_id: Optional[int],
        seats: Optional[List[str]],
    ) -> ReservationEntity:
        reservation = ReservationEntity.create(
            user_id=user_id, movie_id=movie_id, showtime_id=showtime_id, seats=seats
        )

        with ledger_deadline(timeout_seconds=self.timeout_seconds, operation='Reservation'):
            async with self.uow_factory() as uow:
                showtime = await uow.showtime_command_repo.get_by_id(
                    showtime_id=reservation.showtime_id, for_update=True
                )
                if showtime is None:
                    raise NotFoundError(f'Showtime {reservation.showtime_id} not found')

                if reservation.movie_id and reservation.movie_id != showtime.movie_id:
                    raise ValidationError(
                        f'Showtime {showtime.id} does not screen movie {reservation.movie_id}'
                    )
                reservation.movie_id = showtime.movie_id

                unknown = self.layout_policy.unknown_seats(
                    capacity=showtime.capacity, seats=reservation.seats
                )
                if unknown:
                    raise ValidationError(
                        f'Seats do not exist for this showtime: {", ".join(unknown)}'
                    )

                committed = await uow.reservation_command_repo.list_committed_seats(
                    showtime_id=showtime.id  # type: ignore[arg-type]
                )
                conflicts = find_seat_conflicts(
                    requested_seats=reservation.seats, committed_seats=committed
                )
                if conflicts:
                    taken = [seat for seat in reservation.seats if seat in conflicts]
                    raise SeatConflictError(f'Seats already reserved: {", ".join(taken)}')

                created = await uow.reservation_command_repo.create(reservation=reservation)
                await uow.showtime_command_repo.adjust_reserved(
                    showtime_id=showtime.id,  # type: ignore[arg-type]
                    delta=created.seat_count,
                )
                await uow.commit()

        Logger.base.info(
            f'🎟️  [Ledger] Reservation {created.id} booked {created.seats} '
            f'for showtime {created.showtime_id}'
        )
        return created
