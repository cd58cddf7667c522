from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.command.cancel_reservation_use_case import CancelReservationUseCase
from src.service.cinema.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.cinema.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.cinema.app.query.list_reservations_use_case import ListReservationsUseCase
from src.service.cinema.app.query.reservation_report_use_case import ReservationReportUseCase
from src.service.cinema.domain.entity.reservation_entity import ReservationEntity
from src.service.cinema.domain.enum.user_role import UserRole
from src.service.cinema.driving_adapter.http_controller.auth.jwt_auth import TokenIdentity
from src.service.cinema.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
    require_user,
)
from src.service.cinema.driving_adapter.http_controller.schema.reservation_schema import (
    CancelReservationResponse,
    MovieReservationSummaryResponse,
    ReservationResponse,
    ReserveSeatsRequest,
    ReserveSeatsResponse,
    RevenueResponse,
)


router = APIRouter()
report_router = APIRouter()
tracer = trace.get_tracer(__name__)


@inject
def get_list_reservations_use_case(
    reservation_query_repo: IReservationQueryRepo = Depends(
        Provide[Container.reservation_query_repo]
    ),
) -> ListReservationsUseCase:
    return ListReservationsUseCase(reservation_query_repo=reservation_query_repo)


@inject
def get_reservation_report_use_case(
    reservation_query_repo: IReservationQueryRepo = Depends(
        Provide[Container.reservation_query_repo]
    ),
) -> ReservationReportUseCase:
    return ReservationReportUseCase(reservation_query_repo=reservation_query_repo)


def _to_response(reservation: ReservationEntity) -> ReservationResponse:
    return ReservationResponse(
        id=reservation.id or 0,
        user_id=reservation.user_id,
        movie_id=reservation.movie_id,
        showtime_id=reservation.showtime_id,
        seats=reservation.seats,
        created_at=reservation.created_at,
    )


@router.post('/add', response_model=ReserveSeatsResponse)
@Logger.io
async def reserve_seats(
    request: ReserveSeatsRequest,
    identity: TokenIdentity = Depends(require_user),
    use_case: ReserveSeatsUseCase = Depends(ReserveSeatsUseCase.depends),
) -> ReserveSeatsResponse:
    with tracer.start_as_current_span('controller.reserve_seats') as span:
        span.set_attribute('showtime_id', request.showtime_id)
        span.set_attribute('user_id', request.user_id)

        if identity.role != UserRole.ADMIN and request.user_id != identity.user_id:
            raise ForbiddenError('Cannot reserve seats on behalf of another user')

        reservation = await use_case.reserve(
            user_id=request.user_id,
            movie_id=request.movie_id,
            showtime_id=request.showtime_id,
            seats=request.seats,
        )
        return ReserveSeatsResponse(
            message='Seats reserved successfully', reservation_id=reservation.id or 0
        )


@router.delete('/delete/{reservation_id}', response_model=CancelReservationResponse)
@Logger.io
async def cancel_reservation(
    reservation_id: int,
    identity: TokenIdentity = Depends(require_user),
    use_case: CancelReservationUseCase = Depends(CancelReservationUseCase.depends),
) -> CancelReservationResponse:
    acting_user_id = None if identity.role == UserRole.ADMIN else identity.user_id
    await use_case.cancel(reservation_id=reservation_id, acting_user_id=acting_user_id)
    return CancelReservationResponse(message='Reservation cancelled successfully')


@router.get('', response_model=List[ReservationResponse])
@Logger.io
async def list_my_reservations(
    identity: TokenIdentity = Depends(require_user),
    use_case: ListReservationsUseCase = Depends(get_list_reservations_use_case),
) -> List[ReservationResponse]:
    reservations = await use_case.list_user_reservations(user_id=identity.user_id or 0)
    return [_to_response(reservation) for reservation in reservations]


@router.get(
    '/all', response_model=List[ReservationResponse], dependencies=[Depends(require_admin)]
)
@Logger.io
async def list_all_reservations(
    use_case: ListReservationsUseCase = Depends(get_list_reservations_use_case),
) -> List[ReservationResponse]:
    return [_to_response(reservation) for reservation in await use_case.list_all_reservations()]


@router.get(
    '/movie/{movie_id}',
    response_model=MovieReservationSummaryResponse,
    dependencies=[Depends(require_admin)],
)
@Logger.io
async def get_movie_reservation_summary(
    movie_id: int,
    use_case: ReservationReportUseCase = Depends(get_reservation_report_use_case),
) -> MovieReservationSummaryResponse:
    summary = await use_case.summarize_movie(movie_id=movie_id)
    return MovieReservationSummaryResponse(
        movie_id=summary.movie_id,
        title=summary.title,
        reservation_count=summary.reservation_count,
        total_seats=summary.total_seats,
    )


@report_router.get('', response_model=RevenueResponse, dependencies=[Depends(require_admin)])
@Logger.io
async def get_revenue(
    use_case: ReservationReportUseCase = Depends(get_reservation_report_use_case),
) -> RevenueResponse:
    report = await use_case.revenue()
    return RevenueResponse(
        total_seats=report.total_seats,
        total_revenue=report.total_revenue,
        revenue_per_movie=report.revenue_per_movie,
    )
