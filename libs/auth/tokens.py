"""Token issuing and password hashing helpers."""

from datetime import timedelta

import bcrypt
from jose import jwt

from libs.common.config import get_settings
from libs.common.datetime_utils import utc_now

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def create_access_token(subject: str, email: str | None = None) -> str:
    """Issue a signed access token whose ``sub`` claim is the volunteer id."""
    settings = get_settings()
    expires = utc_now() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {"sub": subject, "exp": int(expires.timestamp())}
    if email:
        claims["email"] = email
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def hash_password(password: str) -> str:
    """Return a bcrypt hash (salt and cost included) for storage."""
    rounds = get_settings().PASSWORD_HASH_ROUNDS
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, stored: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), stored.encode("utf-8"))
    except ValueError:
        # Malformed stored hash, or a password bcrypt refuses outright
        return False
