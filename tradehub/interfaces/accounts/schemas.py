"""
Pydantic schemas for the auth and user API.

Sign-up and sign-in are the only payloads with enforced shapes.
No business logic belongs here.
"""

import re
from datetime import datetime

from pydantic import Field, field_validator

from tradehub.application.accounts.dtos import DashboardResult, ProfileResult, UserResult
from tradehub.domain.trading.entities import IndexQuote
from tradehub.interfaces.schemas import CamelModel

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 72
FULL_NAME_MAX_LEN = 100


def _check_email(value: str) -> str:
    value = value.strip()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email address")
    return value


class SignUpRequest(CamelModel):
    """Request schema for POST /api/auth/signup.

    Attributes:
        email: Email address (local@domain.tld).
        password: 6-72 characters.
        full_name: 1-100 characters after trimming. JSON key `fullName`.
    """

    email: str
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    full_name: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Full name is required")
        if len(value) > FULL_NAME_MAX_LEN:
            raise ValueError(f"Full name must be at most {FULL_NAME_MAX_LEN} characters")
        return value


class SignInRequest(CamelModel):
    """Request schema for POST /api/auth/signin.

    The email is not format-checked: a malformed one simply matches no account.
    """

    email: str
    password: str = Field(..., min_length=1)


class UserSchema(CamelModel):
    """Public user representation. Never includes the password."""

    id: str
    email: str
    full_name: str
    created_at: datetime

    @classmethod
    def from_result(cls, user: UserResult) -> "UserSchema":
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            created_at=user.created_at,
        )


class AuthResponse(CamelModel):
    """Response schema for sign-up and sign-in."""

    message: str
    user: UserSchema
    token: str


class DashboardUser(CamelModel):
    id: str
    email: str
    full_name: str


class PortfolioSchema(CamelModel):
    total_value: float
    daily_pnl: float = Field(..., alias="dailyPnL")
    daily_pnl_percent: float = Field(..., alias="dailyPnLPercent")
    open_positions: int
    buying_power: float


class RecentTradeSchema(CamelModel):
    id: int
    symbol: str
    action: str
    price: float
    pnl: float
    timestamp: datetime


class WatchlistItemSchema(CamelModel):
    symbol: str
    name: str
    price: float
    change: float


class IndexQuoteSchema(CamelModel):
    value: float
    change: float

    @classmethod
    def from_entity(cls, quote: IndexQuote) -> "IndexQuoteSchema":
        return cls(value=float(quote.value), change=quote.change)


class DashboardResponse(CamelModel):
    """Response schema for GET /api/user/dashboard."""

    user: DashboardUser
    portfolio: PortfolioSchema
    recent_trades: list[RecentTradeSchema]
    watchlist: list[WatchlistItemSchema]
    market_overview: dict[str, IndexQuoteSchema]

    @classmethod
    def from_result(cls, result: DashboardResult) -> "DashboardResponse":
        portfolio = result.portfolio
        return cls(
            user=DashboardUser(
                id=result.user.id,
                email=result.user.email,
                full_name=result.user.full_name,
            ),
            portfolio=PortfolioSchema(
                total_value=float(portfolio.total_value),
                daily_pnl=float(portfolio.daily_pnl),
                daily_pnl_percent=portfolio.daily_pnl_percent,
                open_positions=portfolio.open_positions,
                buying_power=float(portfolio.buying_power),
            ),
            recent_trades=[
                RecentTradeSchema(
                    id=trade.id,
                    symbol=trade.symbol,
                    action=trade.action,
                    price=float(trade.price),
                    pnl=float(trade.pnl),
                    timestamp=trade.timestamp,
                )
                for trade in result.recent_trades
            ],
            watchlist=[
                WatchlistItemSchema(
                    symbol=item.symbol,
                    name=item.name,
                    price=float(item.price),
                    change=item.change,
                )
                for item in result.watchlist
            ],
            market_overview={
                name: IndexQuoteSchema.from_entity(quote)
                for name, quote in result.market_overview.items()
            },
        )


class ProfileResponse(CamelModel):
    """Response schema for GET /api/user/profile."""

    id: str
    email: str
    full_name: str
    account_type: str
    member_since: str
    total_trades: int
    success_rate: float
    verification_status: str
    two_factor_enabled: bool
    last_login: str

    @classmethod
    def from_result(cls, result: ProfileResult) -> "ProfileResponse":
        profile = result.profile
        return cls(
            id=result.user.id,
            email=result.user.email,
            full_name=result.user.full_name,
            account_type=profile.account_type,
            member_since=profile.member_since,
            total_trades=profile.total_trades,
            success_rate=profile.success_rate,
            verification_status=profile.verification_status,
            two_factor_enabled=profile.two_factor_enabled,
            last_login=profile.last_login,
        )
