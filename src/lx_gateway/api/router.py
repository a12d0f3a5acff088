"""Auth endpoints: register, login, refresh.

Tokens issued here authenticate the /listing routes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.lx_common.database import get_db_session
from src.lx_common.response import ApiResponse, success_response
from src.lx_gateway.user.schemas import (
    LoginRequest,
    LoginResponse,
    RefreshRequest,
    RefreshResponse,
    RegisterRequest,
    RegisterResponse,
    UserInfo,
)
from src.lx_gateway.user.service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])
_service = UserService()

_ACCESS_TTL_SECONDS = settings.JWT_EXPIRE_MINUTES * 60


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse,
    summary="User registration",
)
async def register(
    request: Request,
    body: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    async with db.begin():
        user = await _service.register(body.username, body.email, body.password, db)

    data = RegisterResponse(
        user_id=str(user.id),
        username=user.username,
        email=user.email,
        created_at=user.created_at.isoformat(),
    )
    return success_response(data.model_dump(), "User registered successfully", request)


@router.post("/login", response_model=ApiResponse, summary="User login")
async def login(
    request: Request,
    body: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    user, access_token, refresh_token = await _service.login(body.username, body.password, db)

    data = LoginResponse(
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=_ACCESS_TTL_SECONDS,
        user=UserInfo(user_id=str(user.id), username=user.username, email=user.email),
    )
    return success_response(data.model_dump(), "Login successful", request)


@router.post("/refresh", response_model=ApiResponse, summary="Refresh access token")
async def refresh_token(request: Request, body: RefreshRequest) -> ApiResponse:
    access_token = await _service.refresh(body.refresh_token)
    data = RefreshResponse(access_token=access_token, expires_in=_ACCESS_TTL_SECONDS)
    return success_response(data.model_dump(), "Token refreshed", request)
