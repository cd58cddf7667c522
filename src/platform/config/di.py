"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.cinema.domain.value_object.seat_layout_policy import SeatLayoutPolicy
from src.service.cinema.driven_adapter.repo.movie_query_repo_impl import MovieQueryRepoImpl
from src.service.cinema.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)
from src.service.cinema.driven_adapter.repo.showtime_query_repo_impl import (
    ShowtimeQueryRepoImpl,
)
from src.service.cinema.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.cinema.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.cinema.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.cinema.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Storage handle owned by the composition root
    database = providers.Singleton(
        Database, database_url=config_service.provided.DATABASE_URL_ASYNC
    )

    # One transaction per call; use cases receive the factory and open a fresh UoW per operation
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Repositories (stateless - use session_factory per call)
    user_command_repo = providers.Factory(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Factory(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    movie_query_repo = providers.Factory(
        MovieQueryRepoImpl, session_factory=database.provided.session
    )
    showtime_query_repo = providers.Factory(
        ShowtimeQueryRepoImpl, session_factory=database.provided.session
    )
    reservation_query_repo = providers.Factory(
        ReservationQueryRepoImpl, session_factory=database.provided.session
    )

    # Domain policy and security
    seat_layout_policy = providers.Singleton(
        SeatLayoutPolicy,
        row_letters=config_service.provided.SEAT_ROW_LETTERS,
        columns_per_row=config_service.provided.SEAT_COLUMNS_PER_ROW,
    )
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()
