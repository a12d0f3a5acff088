"""FastAPI dependency resolving the requesting principal.

Every listing route declares:

    current_user: Annotated[UserModel, Depends(get_current_user)]

and passes ``str(current_user.id)`` to the service explicitly.
"""

import uuid

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.lx_common.database import get_db_session
from src.lx_common.errors import AccountDisabledError, InvalidCredentialsError
from src.lx_gateway.auth.jwt_handler import ACCESS, decode_token
from src.lx_gateway.user.db_models import UserModel

# tokenUrl drives the Swagger UI "Authorize" button
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")

_CREDENTIALS_EXCEPTION = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Invalid or expired token",
    headers={"WWW-Authenticate": "Bearer"},
)


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db_session),
) -> UserModel:
    """Resolve the Bearer token to an active UserModel.

    401 for a missing/invalid/expired token or an unknown subject;
    AccountDisabledError (403) for a disabled account.
    """
    try:
        claims = decode_token(token, expected_type=ACCESS)
        user_id = uuid.UUID(claims.get("sub") or "")
    except (InvalidCredentialsError, ValueError):
        raise _CREDENTIALS_EXCEPTION from None

    result = await db.execute(select(UserModel).where(UserModel.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise _CREDENTIALS_EXCEPTION
    if not user.is_active:
        raise AccountDisabledError()
    return user
