from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.cinema.domain.entity.user_entity import UserEntity
from src.service.cinema.domain.enum.user_role import UserRole
from src.service.cinema.driven_adapter.model.user_model import UserModel


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                username=user_entity.username,
                hashed_password=user_entity.hashed_password,
                role=user_entity.role.value,
            )
            session.add(user_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError(f'Username {user_entity.username!r} already exists') from e

            return self._model_to_entity(user_model)

    def _model_to_entity(self, user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            username=user_model.username,
            hashed_password=user_model.hashed_password,
            role=UserRole(user_model.role),
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )
