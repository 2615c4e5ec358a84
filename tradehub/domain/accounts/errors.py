"""
Domain-specific errors for the accounts bounded context.

These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from tradehub.domain.errors import DomainError


class AccountsDomainError(DomainError):
    """Base error for all accounts domain errors."""


class EmailAlreadyRegisteredError(AccountsDomainError):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str) -> None:
        super().__init__("User with this email already exists")
        self.email = email


class InvalidCredentialsError(AccountsDomainError):
    """Raised when the email is unknown or the password does not match."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class UserNotFoundError(AccountsDomainError):
    """Raised when a token refers to a user that no longer exists."""

    def __init__(self, user_id: str) -> None:
        super().__init__("User not found")
        self.user_id = user_id


class MissingTokenError(AccountsDomainError):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self) -> None:
        super().__init__("Access token required")


class InvalidTokenError(AccountsDomainError):
    """Raised when a bearer token is malformed, forged or expired."""

    def __init__(self, reason: str) -> None:
        super().__init__("Invalid or expired token")
        self.reason = reason
