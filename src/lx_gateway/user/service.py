"""User service: register, login, refresh.

Owns the principals that listings are bound to. Transactions are opened by
the router (`async with db.begin()`), never here.
"""

import logging

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.lx_common.errors import (
    AccountDisabledError,
    EmailExistsError,
    InvalidCredentialsError,
    UsernameExistsError,
)
from src.lx_gateway.auth.jwt_handler import (
    REFRESH,
    create_access_token,
    create_refresh_token,
    decode_token,
)
from src.lx_gateway.auth.password import hash_password, verify_password
from src.lx_gateway.user.db_models import UserModel

logger = logging.getLogger(__name__)


class UserService:
    """Stateless; one module-level instance per router."""

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        db: AsyncSession,
    ) -> UserModel:
        # DB UNIQUE constraints remain the final guard against races
        result = await db.execute(
            select(UserModel).where(
                or_(UserModel.username == username, UserModel.email == email)
            )
        )
        for existing in result.scalars().all():
            if existing.username == username:
                raise UsernameExistsError()
            raise EmailExistsError()

        user = UserModel(
            username=username,
            email=email,
            password_hash=hash_password(password),
            is_active=True,
        )
        db.add(user)
        await db.flush()  # populate server defaults (id) before commit
        await db.refresh(user)
        logger.info("Registered user %s", user.id)
        return user

    async def login(
        self,
        username: str,
        password: str,
        db: AsyncSession,
    ) -> tuple[UserModel, str, str]:
        """Return (user, access_token, refresh_token).

        Unknown username and wrong password raise the same error.
        """
        result = await db.execute(
            select(UserModel).where(UserModel.username == username)
        )
        user = result.scalar_one_or_none()

        if user is None or not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()
        if not user.is_active:
            raise AccountDisabledError()

        user_id = str(user.id)
        return user, create_access_token(user_id), create_refresh_token(user_id)

    async def refresh(self, refresh_token: str) -> str:
        claims = decode_token(refresh_token, expected_type=REFRESH)
        return create_access_token(str(claims["sub"]))
