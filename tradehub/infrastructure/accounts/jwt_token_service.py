"""
Adapter: JWT bearer tokens.

Implements TokenService port with PyJWT.
Tokens are HS256-signed with a static secret and carry the
user's ID and email. There are no refresh tokens and no revocation.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from tradehub.domain.accounts.entities import TokenClaims, User
from tradehub.domain.accounts.errors import InvalidTokenError
from tradehub.domain.accounts.ports import TokenService

logger = logging.getLogger(__name__)


class JwtTokenService(TokenService):
    """Issues and verifies signed JWTs.

    Claims: userId, email, iat, exp.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_hours: int = 24,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = timedelta(hours=expire_hours)
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def issue(self, user: User) -> str:
        now = self._clock()
        payload = {
            "userId": user.id,
            "email": user.email,
            "iat": now,
            "exp": now + self._expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode and check a token.

        Args:
            token: The raw bearer token.

        Returns:
            The identity carried by the token.

        Raises:
            InvalidTokenError: On a bad signature, expiry, malformed token
                or missing claims.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.warning("Rejected expired token")
            raise InvalidTokenError("expired") from exc
        except jwt.InvalidTokenError as exc:
            logger.warning("Rejected invalid token: %s", type(exc).__name__)
            raise InvalidTokenError(type(exc).__name__) from exc

        user_id = payload.get("userId")
        email = payload.get("email")
        if not isinstance(user_id, str) or not isinstance(email, str):
            logger.warning("Rejected token without identity claims")
            raise InvalidTokenError("missing claims")

        return TokenClaims(user_id=user_id, email=email)
