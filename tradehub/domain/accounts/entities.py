"""
Domain entities for the accounts bounded context.

The user is the only durable entity in the system.
No framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    """A registered user.

    Attributes:
        id: UUID4 string primary key.
        email: Unique, normalized email address.
        password_hash: bcrypt hash. Never leaves the server.
        full_name: Display name.
        created_at: Registration time (UTC).
    """

    id: str
    email: str
    password_hash: str
    full_name: str
    created_at: datetime


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried inside a verified bearer token."""

    user_id: str
    email: str


def normalize_email(email: str) -> str:
    """Return the canonical form used for storage and lookup."""
    return email.strip().lower()


@dataclass(frozen=True)
class AccountProfile:
    """Account standing shown on the profile page."""

    account_type: str
    member_since: str
    total_trades: int
    success_rate: float
    verification_status: str
    two_factor_enabled: bool
    last_login: str
