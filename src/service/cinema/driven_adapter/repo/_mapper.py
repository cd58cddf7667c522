"""ORM model -> domain entity conversion shared by command and query repositories"""

from src.service.cinema.domain.entity.movie_entity import MovieEntity
from src.service.cinema.domain.entity.reservation_entity import ReservationEntity
from src.service.cinema.domain.entity.showtime_entity import ShowtimeEntity
from src.service.cinema.driven_adapter.model.movie_model import MovieModel
from src.service.cinema.driven_adapter.model.reservation_model import ReservationModel
from src.service.cinema.driven_adapter.model.showtime_model import ShowtimeModel


def movie_model_to_entity(movie_model: MovieModel) -> MovieEntity:
    return MovieEntity(
        id=movie_model.id,
        title=movie_model.title,
        description=movie_model.description,
        genre=movie_model.genre,
        poster_image=movie_model.poster_image,
        created_at=movie_model.created_at,
        updated_at=movie_model.updated_at,
    )


def showtime_model_to_entity(showtime_model: ShowtimeModel) -> ShowtimeEntity:
    return ShowtimeEntity(
        id=showtime_model.id,
        movie_id=showtime_model.movie_id,
        start_time=showtime_model.start_time,
        capacity=showtime_model.capacity,
        reserved=showtime_model.reserved,
    )


def reservation_model_to_entity(reservation_model: ReservationModel) -> ReservationEntity:
    return ReservationEntity(
        id=reservation_model.id,
        user_id=reservation_model.user_id,
        movie_id=reservation_model.movie_id,
        showtime_id=reservation_model.showtime_id,
        seats=list(reservation_model.seats),
        created_at=reservation_model.created_at,
    )
