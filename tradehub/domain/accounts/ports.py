"""
Port interfaces (ABCs) for the accounts bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional

from tradehub.domain.accounts.entities import AccountProfile, TokenClaims, User

DUMMY_PASSWORD = "no-such-account"


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def create(self, email: str, password_hash: str, full_name: str) -> User:
        """Persist a new user and return it.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """Return the user with this ID, or None."""
        raise NotImplementedError

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user registered under this email, or None."""
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        raise NotImplementedError

    def verify_dummy(self, password: str) -> None:
        """Spend the cost of one verify() when there is no stored hash."""
        self.verify(password, self.hash(DUMMY_PASSWORD))


class TokenService(ABC):
    """Port for issuing and verifying bearer tokens."""

    @abstractmethod
    def issue(self, user: User) -> str:
        """Return a signed token identifying the user."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """Decode a token.

        Raises:
            InvalidTokenError: If the token cannot be trusted.
        """
        raise NotImplementedError


class AccountProfileProvider(ABC):
    """Port for account standing that is not stored with the user."""

    @abstractmethod
    def get_profile(self, user: User) -> AccountProfile:
        raise NotImplementedError
