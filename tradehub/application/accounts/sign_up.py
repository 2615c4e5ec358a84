"""
Use case: Register a new user.

Input: SignUpCommand (email, password, full_name)
Output: AuthResult
Side effects: Inserts a row into the user store.
Failure cases: EmailAlreadyRegisteredError.
"""

import logging

from tradehub.application.accounts.dtos import AuthResult, SignUpCommand, UserResult
from tradehub.domain.accounts.entities import normalize_email
from tradehub.domain.accounts.errors import EmailAlreadyRegisteredError
from tradehub.domain.accounts.ports import PasswordHasher, TokenService, UserRepository

logger = logging.getLogger(__name__)


class SignUpUseCase:
    """Orchestrates user registration.

    Rejects duplicate emails, hashes the password, stores the user
    and issues a bearer token so the client is signed in immediately.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._tokens = tokens

    def execute(self, command: SignUpCommand) -> AuthResult:
        """Run the sign-up use case.

        Args:
            command: The registration request.

        Returns:
            The created user and a fresh token.

        Raises:
            EmailAlreadyRegisteredError: If the email already has an account.
        """
        email = normalize_email(command.email)

        if self._user_repo.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        user = self._user_repo.create(
            email=email,
            password_hash=self._hasher.hash(command.password),
            full_name=command.full_name.strip(),
        )
        logger.info("Registered user id=%s", user.id)

        return AuthResult(user=UserResult.from_entity(user), token=self._tokens.issue(user))
