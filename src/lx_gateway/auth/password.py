"""bcrypt password hashing for the users table.

Calls the ``bcrypt`` package directly; passlib is not used (it does not work
with bcrypt >= 4).
"""

import bcrypt

_ENCODING = "utf-8"


def hash_password(plain: str) -> str:
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(plain.encode(_ENCODING), salt).decode(_ENCODING)


def verify_password(plain: str, hashed: str) -> bool:
    """True when ``plain`` matches the stored ``hashed`` value."""
    try:
        return bcrypt.checkpw(plain.encode(_ENCODING), hashed.encode(_ENCODING))
    except ValueError:
        # malformed stored hash
        return False
