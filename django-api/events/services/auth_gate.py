"""Admin authentication: credential check and signed, time-limited tokens.

Tokens are HS256 JWTs carrying ``{"username", "role": "admin", "iat", "exp"}``.
Nothing is stored server-side; a token is valid until it expires.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings
from django.utils.crypto import constant_time_compare

from events.domain import AdminIdentity, AdminSession
from events.domain.errors import (
    InvalidCredentialsError,
    InvalidTokenError,
    UnauthenticatedError,
)

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


class AuthGate:
    """Decides whether a caller may perform admin-only operations."""

    def __init__(
        self,
        *,
        username: str,
        password: str,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
    ) -> None:
        self._username = username
        self._password = password
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    @classmethod
    def from_settings(cls) -> "AuthGate":
        return cls(
            username=settings.RSVP_ADMIN_USERNAME,
            password=settings.RSVP_ADMIN_PASSWORD,
            secret=settings.RSVP_JWT_SECRET,
            algorithm=settings.RSVP_JWT_ALGORITHM,
            ttl=timedelta(hours=settings.RSVP_TOKEN_TTL_HOURS),
        )

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def login(self, username: str, password: str) -> AdminSession:
        """Exchange the admin credential pair for a signed token.

        Raises:
            InvalidCredentialsError: If the pair does not match the configured
                admin account, or no admin password is configured.
        """
        if not self._password:
            logger.warning("Admin login attempted but no admin password is configured")
            raise InvalidCredentialsError()
        # Both comparisons always run.
        username_ok = constant_time_compare(username or "", self._username)
        password_ok = constant_time_compare(password or "", self._password)
        if not (username_ok and password_ok):
            logger.warning("Rejected admin login for %r", username)
            raise InvalidCredentialsError()

        identity = AdminIdentity(username=self._username, role=ADMIN_ROLE)
        issued_at = datetime.now(tz=timezone.utc)
        expires_at = issued_at + self._ttl
        token = jwt.encode(
            {
                "username": identity.username,
                "role": identity.role,
                "iat": issued_at,
                "exp": expires_at,
            },
            self._secret,
            algorithm=self._algorithm,
        )
        logger.info("Admin %s logged in", identity.username)
        return AdminSession(token=token, identity=identity, expires_at=expires_at)

    def verify(self, token: str | None) -> AdminIdentity:
        """Return the identity a token asserts.

        Raises:
            UnauthenticatedError: If no token was presented.
            InvalidTokenError: If the signature, expiry or claims are invalid.
        """
        if not token:
            raise UnauthenticatedError()
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.PyJWTError as exc:
            logger.warning("Rejected admin token: %s", exc)
            raise InvalidTokenError() from None

        username = claims.get("username")
        if not username or claims.get("role") != ADMIN_ROLE:
            logger.warning("Rejected admin token with unexpected claims")
            raise InvalidTokenError()
        return AdminIdentity(username=username, role=ADMIN_ROLE)

    def logout(self) -> None:
        """Nothing to revoke server-side; the caller discards its credential."""
        return None
