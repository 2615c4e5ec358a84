"""
Use case: Authenticate a request from its bearer token.

Input: raw token string (or None when the header is absent)
Output: TokenClaims
Side effects: None.
Failure cases: MissingTokenError, InvalidTokenError.
"""

from typing import Optional

from tradehub.domain.accounts.entities import TokenClaims
from tradehub.domain.accounts.errors import MissingTokenError
from tradehub.domain.accounts.ports import TokenService


class AuthenticateUseCase:
    """Turns a bearer token into the caller's identity.

    Tokens are verified statelessly. There is no revocation list.
    """

    def __init__(self, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, token: Optional[str]) -> TokenClaims:
        if not token:
            raise MissingTokenError()
        return self._tokens.verify(token)
