from unittest.mock import AsyncMock, Mock

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.cinema.app.dto.reservation_report_dto import MovieReservationSummary
from src.service.cinema.app.query.reservation_report_use_case import ReservationReportUseCase


pytestmark = pytest.mark.unit


@pytest.fixture
def mock_reservation_query_repo():
    repo = Mock()
    repo.summarize_movie = AsyncMock()
    repo.summarize_all_movies = AsyncMock()
    return repo


@pytest.fixture
def use_case(mock_reservation_query_repo):
    return ReservationReportUseCase(
        reservation_query_repo=mock_reservation_query_repo, ticket_price=5
    )


@pytest.mark.asyncio
async def test_revenue_is_price_times_seats(use_case, mock_reservation_query_repo):
    mock_reservation_query_repo.summarize_all_movies.return_value = [
        MovieReservationSummary(movie_id=1, title='Inception', reservation_count=2, total_seats=3),
        MovieReservationSummary(
            movie_id=2, title='Interstellar', reservation_count=0, total_seats=0
        ),
    ]

    report = await use_case.revenue()

    assert report.total_seats == 3
    assert report.total_revenue == 15
    assert report.revenue_per_movie == {'Inception': 15, 'Interstellar': 0}


@pytest.mark.asyncio
async def test_summarize_unknown_movie(use_case, mock_reservation_query_repo):
    mock_reservation_query_repo.summarize_movie.return_value = None

    with pytest.raises(NotFoundError):
        await use_case.summarize_movie(movie_id=404)
