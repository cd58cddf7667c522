"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.cinema.driven_adapter.model.movie_model import MovieModel
from src.service.cinema.driven_adapter.model.reservation_model import ReservationModel
from src.service.cinema.driven_adapter.model.reservation_seat_model import ReservationSeatModel
from src.service.cinema.driven_adapter.model.showtime_model import ShowtimeModel
from src.service.cinema.driven_adapter.model.user_model import UserModel


__all__ = [
    'MovieModel',
    'ReservationModel',
    'ReservationSeatModel',
    'ShowtimeModel',
    'UserModel',
]
