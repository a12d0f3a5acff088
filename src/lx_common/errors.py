"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Auth/User
  2xxx: Listing

Every AppError is turned into an ApiResponse envelope by the single
exception handler registered in src/main.py.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Auth/User ---

class UsernameExistsError(AppError):
    def __init__(self) -> None:
        super().__init__(1001, "Username already exists", 409)


class EmailExistsError(AppError):
    def __init__(self) -> None:
        super().__init__(1002, "Email already exists", 409)


class InvalidCredentialsError(AppError):
    def __init__(self) -> None:
        super().__init__(1003, "Invalid username or password", 401)


class AccountDisabledError(AppError):
    def __init__(self) -> None:
        super().__init__(1004, "Account is disabled", 403)


class InvalidRefreshTokenError(AppError):
    def __init__(self) -> None:
        super().__init__(1005, "Refresh token is invalid or expired", 401)


# --- 2xxx: Listing ---

class ListingNotFoundError(AppError):
    """Raised for a missing listing AND for an inactive listing seen by a non-owner.

    The message carries no id so both cases look the same to the caller.
    """

    def __init__(self) -> None:
        super().__init__(2001, "Listing not found", 404)


class MinVolumeError(AppError):
    def __init__(self, volume: int, min_volume: int) -> None:
        super().__init__(
            2002,
            f"Volume must equal minimum volume unless partial fills are allowed: "
            f"volume {volume}, min_volume {min_volume}",
            422,
        )

