"""
Domain-specific errors for the wallet bounded context.

These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from tradehub.domain.errors import DomainError


class WalletDomainError(DomainError):
    """Base error for all wallet domain errors."""


class WithdrawalValidationError(WalletDomainError):
    """Raised when a withdrawal request breaks one or more rules.

    Attributes:
        errors: Mapping of field name to the message for that field.
    """

    def __init__(self, message: str, errors: dict[str, str]) -> None:
        super().__init__(message)
        self.errors = errors
