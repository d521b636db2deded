from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Cookie, Depends, Response, status

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.course_booking.app.command.create_user_use_case import CreateUserUseCase
from src.service.course_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.course_booking.domain.entity.user_entity import UserEntity
from src.service.course_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.course_booking.driving_adapter.http_controller.schema.common_schema import (
    ApiResponse,
)
from src.service.course_booking.driving_adapter.http_controller.schema.user_schema import (
    CreateUserRequest,
    LoginRequest,
    UserResponse,
)


# === API Router ===

router = APIRouter()


@inject
async def get_current_user(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
) -> UserEntity:
    """Resolve the caller from the auth cookie (stateless, no DB query)"""
    return jwt_auth.get_current_user_info_from_jwt(token)


def _to_user_response(user_entity: UserEntity) -> UserResponse:
    return UserResponse(
        id=user_entity.id or 0,
        email=user_entity.email,
        name=user_entity.name,
        role=user_entity.role,
        is_active=user_entity.is_active,
    )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(CreateUserUseCase.depends),
) -> ApiResponse[UserResponse]:
    user_entity = await use_case.create_user(
        email=request.email,
        password=request.password.get_secret_value(),
        name=request.name,
        role=request.role,
    )
    return ApiResponse.ok(_to_user_response(user_entity), 'User created successfully')


@router.post('/login')
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> ApiResponse[UserResponse]:
    user_entity = await jwt_auth.authenticate_user(
        user_query_repo=user_query_repo,
        email=request.email,
        password=request.password.get_secret_value(),
    )

    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=jwt_auth.create_jwt_token(user_entity),
        max_age=jwt_auth.max_age_seconds,
        httponly=True,
        samesite='lax',
        secure=not settings.DEBUG,
    )

    return ApiResponse.ok(_to_user_response(user_entity), 'Login successful')


@router.get('')
@Logger.io
async def get_me(
    current_user: UserEntity = Depends(get_current_user),
) -> ApiResponse[UserResponse]:
    return ApiResponse.ok(_to_user_response(current_user), 'User retrieved successfully')
