from pydantic import SecretStr

from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_password_hasher import IPasswordHasher
from src.service.cinema.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.cinema.domain.entity.user_entity import UserEntity


class AuthenticateUserUseCase:
    def __init__(
        self, *, user_query_repo: IUserQueryRepo, password_hasher: IPasswordHasher
    ) -> None:
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @Logger.io
    async def authenticate(self, *, username: str, password: SecretStr) -> UserEntity:
        user = UserEntity.validate_user_exists(
            await self.user_query_repo.get_by_username(username=username)
        )
        if not self.password_hasher.verify_password(
            plain_password=password, hashed_password=user.hashed_password
        ):
            raise AuthenticationError('Invalid credentials')
        return user
