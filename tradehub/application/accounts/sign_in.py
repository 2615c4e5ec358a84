"""
Use case: Sign in with email and password.

Input: SignInCommand (email, password)
Output: AuthResult
Side effects: None.
Failure cases: InvalidCredentialsError.
"""

import logging

from tradehub.application.accounts.dtos import AuthResult, SignInCommand, UserResult
from tradehub.domain.accounts.entities import normalize_email
from tradehub.domain.accounts.errors import InvalidCredentialsError
from tradehub.domain.accounts.ports import PasswordHasher, TokenService, UserRepository

logger = logging.getLogger(__name__)


class SignInUseCase:
    """Validates credentials and issues a bearer token.

    Unknown emails and wrong passwords produce the same error so the
    response does not reveal which accounts exist.
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

    def execute(self, command: SignInCommand) -> AuthResult:
        """Run the sign-in use case.

        Raises:
            InvalidCredentialsError: If the email or password is wrong.
        """
        user = self._user_repo.get_by_email(normalize_email(command.email))

        if user is None:
            self._hasher.verify_dummy(command.password)
            valid = False
        else:
            valid = self._hasher.verify(command.password, user.password_hash)

        if user is None or not valid:
            logger.warning("Failed sign-in attempt")
            raise InvalidCredentialsError()

        logger.info("User id=%s signed in", user.id)
        return AuthResult(user=UserResult.from_entity(user), token=self._tokens.issue(user))
