"""
Unit of Work Pattern - one database transaction shared by several repositories

Architecture:
- UoW owns the session lifecycle (opened on enter, closed on exit)
- UoW owns commit/rollback; leaving the block without commit rolls back
- Repositories receive the shared session from the UoW
- Storage errors escaping the block surface as StorageFailureError
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager, AsyncExitStack
from typing import TYPE_CHECKING, Any, Callable, Optional

import anyio
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import StorageFailureError
from src.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from src.service.cinema.app.interface.i_movie_command_repo import IMovieCommandRepo
    from src.service.cinema.app.interface.i_reservation_command_repo import (
        IReservationCommandRepo,
    )
    from src.service.cinema.app.interface.i_showtime_command_repo import IShowtimeCommandRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        async with uow:
            showtime = await uow.showtime_command_repo.get_by_id(showtime_id=1, for_update=True)
            await uow.reservation_command_repo.create(reservation=...)
            await uow.commit()
    """

    movie_command_repo: IMovieCommandRepo
    showtime_command_repo: IShowtimeCommandRepo
    reservation_command_repo: IReservationCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation; each `async with` opens a fresh session,
    so one instance may be entered again after the previous block ends.
    """

    def __init__(
        self, *, session_factory: Callable[..., AbstractAsyncContextManager[AsyncSession]]
    ) -> None:
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None
        self._exit_stack: Optional[AsyncExitStack] = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.cinema.driven_adapter.repo.movie_command_repo_impl import (
            MovieCommandRepoImpl,
        )
        from src.service.cinema.driven_adapter.repo.reservation_command_repo_impl import (
            ReservationCommandRepoImpl,
        )
        from src.service.cinema.driven_adapter.repo.showtime_command_repo_impl import (
            ShowtimeCommandRepoImpl,
        )

        self._exit_stack = AsyncExitStack()
        self.session = await self._exit_stack.enter_async_context(self.session_factory())

        # Repositories share the UoW session
        self.movie_command_repo = MovieCommandRepoImpl(session=self.session)
        self.showtime_command_repo = ShowtimeCommandRepoImpl(session=self.session)
        self.reservation_command_repo = ReservationCommandRepoImpl(session=self.session)
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        try:
            # Shielded so a timeout cancelling the block still releases locks
            with anyio.CancelScope(shield=True):
                await self.rollback()
                if self._exit_stack is not None:
                    await self._exit_stack.aclose()
        finally:
            self.session = None
            self._exit_stack = None

        if isinstance(exc, SQLAlchemyError):
            Logger.base.error(f'💥 [UoW] Transaction rolled back: {type(exc).__name__}: {exc}')
            raise StorageFailureError() from exc

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('Unit of work is not active')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
