from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.command.user_command_use_case import UserCommandUseCase
from src.service.cinema.app.interface.i_password_hasher import IPasswordHasher
from src.service.cinema.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.cinema.app.query.authenticate_user_use_case import AuthenticateUserUseCase
from src.service.cinema.driving_adapter.http_controller.auth.jwt_auth import (
    JwtAuth,
    TokenIdentity,
)
from src.service.cinema.driving_adapter.http_controller.auth.role_auth import require_user
from src.service.cinema.driving_adapter.http_controller.schema.user_schema import (
    LoginRequest,
    SignupRequest,
    TokenResponse,
    UserResponse,
)


router = APIRouter()


@router.post('/signup', response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def signup(
    request: SignupRequest,
    use_case: UserCommandUseCase = Depends(UserCommandUseCase.depends),
) -> UserResponse:
    user = await use_case.register_user(username=request.username, password=request.password)
    return UserResponse(id=user.id or 0, username=user.username, role=user.role)


@router.post('/login', response_model=TokenResponse)
@Logger.io
@inject
async def login(
    request: LoginRequest,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> TokenResponse:
    use_case = AuthenticateUserUseCase(
        user_query_repo=user_query_repo, password_hasher=password_hasher
    )
    user = await use_case.authenticate(username=request.username, password=request.password)
    token = jwt_auth.issue_token(username=user.username, role=user.role, user_id=user.id)
    return TokenResponse(token=token, role=user.role)


@router.get('/me', response_model=UserResponse)
@Logger.io
async def get_me(identity: TokenIdentity = Depends(require_user)) -> UserResponse:
    return UserResponse(id=identity.user_id or 0, username=identity.username, role=identity.role)
