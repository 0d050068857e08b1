"""Security Primitives — password hashing (passlib/argon2) and signed tokens (python-jose).

Invariants:
    - Plaintext passwords never leave hash_password / verify_password
    - Tokens carry exactly {"userId", "exp"}; exp = issue time + ttl
    - TokenService.verify raises InvalidTokenError for bad signature, bad shape, or expiry
    - The signing secret is injected; there is no fallback constant

Design Decisions:
    - argon2 via passlib CryptContext: deprecated="auto" lets stored hashes migrate schemes
    - TokenService as a small class: secret/algorithm/ttl bound once, easy to build in tests
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import JOSEError, jwt
from passlib.context import CryptContext

from todo_app.core.domain_types import UserId
from todo_app.core.errors import InvalidTokenError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be parsed")
        return False


class TokenService:
    """Issues and verifies signed, expiring identity tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", ttl_days: int = 7):
        if not secret:
            raise ValueError("Token signing secret is required")
        self._secret = secret
        self._algorithm = algorithm
        self.ttl = timedelta(days=ttl_days)

    def issue(self, user_id: UserId, now: datetime | None = None) -> str:
        """Sign a token for user_id that expires exactly ttl after `now`."""
        issued_at = now or datetime.now(timezone.utc)
        expire = issued_at + self.ttl
        payload = {"userId": str(user_id), "exp": int(expire.timestamp())}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> UserId:
        """Return the embedded user id or raise InvalidTokenError."""
        try:
            payload = jwt.decode(
                token, self._secret, algorithms=[self._algorithm],
                options={"require_exp": True},
            )
        except JOSEError as e:
            raise InvalidTokenError(str(e)) from e
        raw_id = payload.get("userId")
        try:
            return UserId(UUID(str(raw_id)))
        except (ValueError, TypeError):
            raise InvalidTokenError("Token payload has no valid userId")
