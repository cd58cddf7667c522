"""
User registration and admin bootstrap
"""

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_password_hasher import IPasswordHasher
from src.service.cinema.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.cinema.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.cinema.domain.entity.user_entity import UserEntity
from src.service.cinema.domain.enum.user_role import UserRole


class UserCommandUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def register_user(self, *, username: str, password: SecretStr) -> UserEntity:
        """Public signup always creates a regular user"""
        user_entity = UserEntity.register(
            username=username,
            plain_password=password,
            password_hasher=self.password_hasher,
            role=UserRole.USER,
        )
        return await self.user_command_repo.create(user_entity=user_entity)

    @Logger.io
    async def ensure_admin(self, *, username: str, password: SecretStr) -> UserEntity:
        existing = await self.user_query_repo.get_by_username(username=username)
        if existing is not None:
            return existing

        admin = UserEntity.register(
            username=username,
            plain_password=password,
            password_hasher=self.password_hasher,
            role=UserRole.ADMIN,
        )
        created = await self.user_command_repo.create(user_entity=admin)
        Logger.base.info(f'👤 [User] Admin account {username!r} created')
        return created
