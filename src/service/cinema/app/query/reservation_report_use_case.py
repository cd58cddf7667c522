from typing import Optional

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.reservation_report_dto import (
    MovieReservationSummary,
    RevenueReport,
)
from src.service.cinema.app.interface.i_reservation_query_repo import IReservationQueryRepo


class ReservationReportUseCase:
    """Admin reporting over committed reservations, flat price per seat"""

    def __init__(
        self,
        *,
        reservation_query_repo: IReservationQueryRepo,
        ticket_price: Optional[int] = None,
    ) -> None:
        self.reservation_query_repo = reservation_query_repo
        self.ticket_price = settings.TICKET_PRICE if ticket_price is None else ticket_price

    @Logger.io
    async def summarize_movie(self, *, movie_id: int) -> MovieReservationSummary:
        summary = await self.reservation_query_repo.summarize_movie(movie_id=movie_id)
        if summary is None:
            raise NotFoundError(f'Movie {movie_id} not found')
        return summary

    @Logger.io
    async def revenue(self) -> RevenueReport:
        summaries = await self.reservation_query_repo.summarize_all_movies()
        revenue_per_movie = {
            summary.title: summary.total_seats * self.ticket_price for summary in summaries
        }
        total_seats = sum(summary.total_seats for summary in summaries)
        return RevenueReport(
            total_seats=total_seats,
            total_revenue=total_seats * self.ticket_price,
            revenue_per_movie=revenue_per_movie,
        )
