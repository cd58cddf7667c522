"""
Credential Service

Signs and validates bearer tokens carrying a username and a role.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import attrs
import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import InvalidTokenError
from src.service.cinema.domain.enum.user_role import UserRole


@attrs.frozen
class TokenIdentity:
    username: str
    role: UserRole
    user_id: Optional[int] = None


class JwtAuth:
    def __init__(
        self,
        *,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        expire_hours: Optional[int] = None,
    ) -> None:
        self.secret = secret or settings.SECRET_KEY.get_secret_value()
        self.algorithm = algorithm or settings.ALGORITHM
        self.token_expire_hours = (
            expire_hours if expire_hours is not None else settings.ACCESS_TOKEN_EXPIRE_HOURS
        )

    def issue_token(self, *, username: str, role: UserRole, user_id: Optional[int] = None) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': username,
            'username': username,
            'role': UserRole(role).value,
            'iat': now,
            'exp': now + timedelta(hours=self.token_expire_hours),
        }
        if user_id is not None:
            payload['user_id'] = user_id
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def validate_and_extract(self, token: Optional[str]) -> TokenIdentity:
        if not token:
            raise InvalidTokenError('Not authenticated')

        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={'require': ['exp', 'username', 'role']},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError('Token has expired') from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e

        username = payload.get('username')
        if not isinstance(username, str) or not username:
            raise InvalidTokenError()

        try:
            role = UserRole(payload.get('role'))
        except ValueError as e:
            raise InvalidTokenError('Token carries an unknown role') from e

        user_id = payload.get('user_id')
        if user_id is not None and not isinstance(user_id, int):
            raise InvalidTokenError()

        return TokenIdentity(username=username, role=role, user_id=user_id)
