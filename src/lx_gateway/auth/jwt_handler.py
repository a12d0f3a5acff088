"""JWT issue/verify for the listing API.

Tokens are HS256-signed with the shared JWT_SECRET and carry a ``type``
claim ("access" or "refresh") that decode_token checks strictly, so a
refresh token can never authenticate a listing request.

No revocation list: a token stays valid until ``exp``.
"""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from config.settings import settings
from src.lx_common.errors import InvalidCredentialsError, InvalidRefreshTokenError

ACCESS = "access"
REFRESH = "refresh"

_ALGORITHM = settings.JWT_ALGORITHM
_LIFETIMES = {
    ACCESS: timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
    REFRESH: timedelta(days=settings.JWT_REFRESH_EXPIRE_DAYS),
}


def _issue(user_id: str, token_type: str) -> str:
    now = datetime.now(UTC)
    claims = {
        "sub": user_id,
        "type": token_type,
        "iat": now,
        "exp": now + _LIFETIMES[token_type],
    }
    return str(jwt.encode(claims, settings.JWT_SECRET, algorithm=_ALGORITHM))


def create_access_token(user_id: str) -> str:
    """Short-lived token sent as ``Authorization: Bearer`` on listing routes."""
    return _issue(user_id, ACCESS)


def create_refresh_token(user_id: str) -> str:
    """Long-lived token accepted only by POST /auth/refresh."""
    return _issue(user_id, REFRESH)


def decode_token(token: str, expected_type: str) -> dict[str, str]:
    """Verify signature, expiry and token type.

    Raises:
        InvalidCredentialsError: bad access token.
        InvalidRefreshTokenError: bad refresh token.
    """
    error = InvalidCredentialsError if expected_type == ACCESS else InvalidRefreshTokenError
    try:
        claims: dict[str, str] = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[_ALGORITHM],  # explicit list prevents algorithm confusion
        )
    except JWTError:
        raise error() from None

    if claims.get("type") != expected_type:
        raise error()
    return claims
