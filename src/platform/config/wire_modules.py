"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.cinema.app.command import (
    cancel_reservation_use_case,
    movie_command_use_case,
    reserve_seats_use_case,
    showtime_command_use_case,
    user_command_use_case,
)
from src.service.cinema.app.query import get_available_seats_use_case
from src.service.cinema.driving_adapter.http_controller import (
    movie_controller,
    reservation_controller,
    showtime_controller,
    user_controller,
)
from src.service.cinema.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    reserve_seats_use_case,
    cancel_reservation_use_case,
    movie_command_use_case,
    showtime_command_use_case,
    user_command_use_case,
    get_available_seats_use_case,
    role_auth,
    user_controller,
    movie_controller,
    showtime_controller,
    reservation_controller,
]
