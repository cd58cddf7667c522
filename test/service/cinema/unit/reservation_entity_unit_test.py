import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.cinema.domain.entity.reservation_entity import ReservationEntity


pytestmark = pytest.mark.unit


def test_create_normalizes_seat_labels():
    reservation = ReservationEntity.create(
        user_id=1, movie_id=2, showtime_id=3, seats=[' a1', 'b2 ']
    )
    assert reservation.seats == ['A1', 'B2']
    assert reservation.seat_count == 2


def test_missing_movie_is_resolved_later():
    reservation = ReservationEntity.create(user_id=1, movie_id=None, showtime_id=3, seats=['A1'])
    assert reservation.movie_id == 0


@pytest.mark.parametrize(
    'kwargs',
    [
        {'user_id': None, 'showtime_id': 1, 'seats': ['A1']},
        {'user_id': 0, 'showtime_id': 1, 'seats': ['A1']},
        {'user_id': 1, 'showtime_id': None, 'seats': ['A1']},
        {'user_id': 1, 'showtime_id': 1, 'seats': []},
        {'user_id': 1, 'showtime_id': 1, 'seats': None},
        {'user_id': 1, 'showtime_id': 1, 'seats': ['A1', ' ']},
        {'user_id': 1, 'showtime_id': 1, 'seats': ['A1', 'a1']},
    ],
)
def test_invalid_requests_are_rejected(kwargs):
    with pytest.raises(ValidationError):
        ReservationEntity.create(movie_id=1, **kwargs)
