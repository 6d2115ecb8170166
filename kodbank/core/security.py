"""Password hashing and session-token issuance/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt
from pydantic import BaseModel, Field

from kodbank.core.errors import InvalidTokenError

if TYPE_CHECKING:
    from kodbank.core.config import Settings

# Bcrypt cost (rounds). Fixed; the hash string records it so verification needs no config.
BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of the input.
BCRYPT_MAX_BYTES = 72


class SessionClaims(BaseModel):
    """Identity carried inside a session token."""

    subject: str = Field(..., description="Account username")
    account_id: int = Field(..., description="Account id")
    role: str = Field(..., description="Account role")


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def issue_token(
    claims: SessionClaims,
    settings: "Settings",
    ttl: timedelta | None = None,
    now: datetime | None = None,
) -> str:
    """Create a signed JWT with sub (username), uid (account id), role, iat and exp (now + ttl)."""
    if now is None:
        now = datetime.now(UTC)
    if ttl is None:
        ttl = timedelta(minutes=settings.SESSION_TTL_MINUTES)
    payload: dict[str, Any] = {
        "sub": claims.subject,
        "uid": claims.account_id,
        "role": claims.role,
        "iat": now,
        "exp": now + ttl,
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def verify_token(token: str, settings: "Settings") -> SessionClaims:
    """
    Check signature and expiry and return the embedded claims.

    Raises InvalidTokenError for every failure (malformed, bad signature, expired,
    missing claims) so callers cannot tell which check failed.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.PyJWTError as e:
        raise InvalidTokenError() from e

    sub = payload.get("sub")
    uid = payload.get("uid")
    role = payload.get("role")
    if not isinstance(sub, str) or not isinstance(role, str):
        raise InvalidTokenError()
    # bool is an int subclass; reject it explicitly
    if not isinstance(uid, int) or isinstance(uid, bool):
        raise InvalidTokenError()
    return SessionClaims(subject=sub, account_id=uid, role=role)
