"""
Integration fixtures: use cases wired to a real SQLite database.

Each test gets its own Database handle bound to the test's event loop.
"""

from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timedelta, timezone

import pytest

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.cinema.app.command.movie_command_use_case import MovieCommandUseCase
from src.service.cinema.app.command.showtime_command_use_case import ShowtimeCommandUseCase
from src.service.cinema.domain.entity.showtime_entity import ShowtimeEntity
from src.service.cinema.domain.entity.user_entity import UserEntity
from src.service.cinema.domain.enum.user_role import UserRole
from src.service.cinema.domain.value_object.seat_layout_policy import SeatLayoutPolicy
from src.service.cinema.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    database = Database(database_url=settings.DATABASE_URL_ASYNC)
    yield database
    await database.dispose()


@pytest.fixture
def uow_factory(database: Database) -> Callable[[], SqlAlchemyUnitOfWork]:
    return lambda: SqlAlchemyUnitOfWork(session_factory=database.session)


@pytest.fixture
def layout_policy() -> SeatLayoutPolicy:
    """Row letters A,B with two columns: capacity 4 lays out A1, A2, B1, B2"""
    return SeatLayoutPolicy(row_letters='AB', columns_per_row=2)


async def _create_user(database: Database, username: str) -> int:
    repo = UserCommandRepoImpl(database.session)
    user = await repo.create(
        user_entity=UserEntity(
            username=username, hashed_password='not-a-real-hash', role=UserRole.USER
        )
    )
    assert user.id is not None
    return user.id


@pytest.fixture
async def user_id(database: Database) -> int:
    return await _create_user(database, 'ledger_user')


@pytest.fixture
async def another_user_id(database: Database) -> int:
    return await _create_user(database, 'another_ledger_user')


@pytest.fixture
async def movie_id(uow_factory) -> int:
    movie = await MovieCommandUseCase(uow_factory=uow_factory).create_movie(
        title='Ledger Movie', genre='Drama'
    )
    assert movie.id is not None
    return movie.id


@pytest.fixture
def create_showtime(uow_factory, layout_policy, movie_id):
    async def _create(
        *, capacity: int = 4, start_time: datetime | None = None
    ) -> ShowtimeEntity:
        use_case = ShowtimeCommandUseCase(uow_factory=uow_factory, layout_policy=layout_policy)
        return await use_case.create_showtime(
            movie_id=movie_id,
            start_time=start_time or datetime.now(timezone.utc) + timedelta(days=1),
            capacity=capacity,
        )

    return _create


@pytest.fixture
async def showtime(create_showtime) -> ShowtimeEntity:
    return await create_showtime(capacity=4)
