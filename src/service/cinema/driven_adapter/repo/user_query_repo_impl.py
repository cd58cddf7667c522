from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.cinema.domain.entity.user_entity import UserEntity
from src.service.cinema.domain.enum.user_role import UserRole
from src.service.cinema.driven_adapter.model.user_model import UserModel


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_username(self, *, username: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.username == username))
            user_model = result.scalar_one_or_none()
            return self._model_to_entity(user_model) if user_model else None

    @Logger.io
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            user_model = await session.get(UserModel, user_id)
            return self._model_to_entity(user_model) if user_model else None

    def _model_to_entity(self, user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            username=user_model.username,
            hashed_password=user_model.hashed_password,
            role=UserRole(user_model.role),
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )
