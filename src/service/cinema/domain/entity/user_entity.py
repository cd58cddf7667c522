from datetime import datetime
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import AuthenticationError, ValidationError
from src.service.cinema.app.interface.i_password_hasher import IPasswordHasher
from src.service.cinema.domain.enum.user_role import UserRole


MIN_PASSWORD_LENGTH = 6


@attrs.define
class UserEntity:
    username: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    role: UserRole = UserRole.USER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def register(
        cls,
        *,
        username: str,
        plain_password: SecretStr,
        password_hasher: IPasswordHasher,
        role: UserRole = UserRole.USER,
    ) -> 'UserEntity':
        username = username.strip()
        if not username:
            raise ValidationError('Username is required')
        if len(plain_password.get_secret_value()) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f'Password must be at least {MIN_PASSWORD_LENGTH} characters long'
            )
        return cls(
            username=username,
            hashed_password=password_hasher.hash_password(plain_password=plain_password),
            role=role,
        )

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise AuthenticationError('Invalid credentials')
        return user_entity
