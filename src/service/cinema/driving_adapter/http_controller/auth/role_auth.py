from typing import Awaitable, Callable, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, InvalidTokenError
from src.service.cinema.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.cinema.domain.enum.user_role import UserRole
from src.service.cinema.driving_adapter.http_controller.auth.jwt_auth import (
    JwtAuth,
    TokenIdentity,
)


bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
) -> TokenIdentity:
    identity = jwt_auth.validate_and_extract(credentials.credentials if credentials else None)
    if identity.user_id is not None:
        return identity

    # Tokens without an id claim resolve the account by username
    user = await user_query_repo.get_by_username(username=identity.username)
    if user is None or user.id is None:
        raise InvalidTokenError('Token user no longer exists')
    return TokenIdentity(username=identity.username, role=identity.role, user_id=user.id)


def require_role(required: UserRole) -> Callable[..., Awaitable[TokenIdentity]]:
    async def _require_role(
        identity: TokenIdentity = Depends(get_current_identity),
    ) -> TokenIdentity:
        tracer = trace.get_tracer(__name__)
        with tracer.start_as_current_span(
            'auth.require_role',
            attributes={'user.role': identity.role.value, 'required.role': required.value},
        ):
            if not identity.role.is_authorized(required):
                raise ForbiddenError(f'Requires {required.value} role')
            return identity

    return _require_role


require_user = require_role(UserRole.USER)
require_admin = require_role(UserRole.ADMIN)
