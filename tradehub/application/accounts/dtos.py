"""
Data Transfer Objects for the accounts application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime

from tradehub.domain.accounts.entities import AccountProfile, User
from tradehub.domain.trading.entities import (
    IndexQuote,
    PortfolioSnapshot,
    RecentTrade,
    WatchlistItem,
)


@dataclass(frozen=True)
class SignUpCommand:
    """Input DTO for registering a new user.

    Attributes:
        email: Email address, unique across users.
        password: Plain-text password. Hashed before storage.
        full_name: Display name.
    """

    email: str
    password: str
    full_name: str


@dataclass(frozen=True)
class SignInCommand:
    """Input DTO for signing in with email and password."""

    email: str
    password: str


@dataclass(frozen=True)
class UserResult:
    """Public view of a user. Never carries the password hash."""

    id: str
    email: str
    full_name: str
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResult":
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            created_at=user.created_at,
        )


@dataclass(frozen=True)
class AuthResult:
    """Output DTO for sign-up and sign-in.

    Attributes:
        user: The authenticated user.
        token: Signed bearer token for subsequent requests.
    """

    user: UserResult
    token: str


@dataclass(frozen=True)
class DashboardResult:
    """Output DTO for the dashboard page."""

    user: UserResult
    portfolio: PortfolioSnapshot
    recent_trades: list[RecentTrade]
    watchlist: list[WatchlistItem]
    market_overview: dict[str, IndexQuote]


@dataclass(frozen=True)
class ProfileResult:
    """Output DTO for the profile page."""

    user: UserResult
    profile: AccountProfile
