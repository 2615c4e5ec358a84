"""
Tests for the trading and accounts domain layers.

Tests domain entities and error classes in isolation.
No external dependencies or IO required.
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from tradehub.domain.accounts.errors import (
    AccountsDomainError,
    EmailAlreadyRegisteredError,
    InvalidTokenError,
    MissingTokenError,
    UserNotFoundError,
)
from tradehub.domain.errors import DomainError
from tradehub.domain.trading.entities import Bot, BotPerformance, BotStatus
from tradehub.domain.wallet.entities import Currency, WalletBalance
from tradehub.domain.wallet.errors import WithdrawalValidationError


class TestBotEntity:
    """Tests for the Bot entity."""

    def test_default_performance_is_zeroed(self) -> None:
        perf = BotPerformance()
        assert (perf.total_trades, perf.win_rate, perf.monthly_return) == (0, 0.0, 0.0)
        assert perf.total_pnl == Decimal("0")

    def test_bot_is_immutable(self) -> None:
        bot = Bot(
            id="bot1",
            name="Momentum Trader",
            status=BotStatus.ACTIVE,
            strategy="momentum",
            capital=Decimal("10000"),
            max_risk=2,
            profit_target=10,
            stop_loss=5,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        with pytest.raises(FrozenInstanceError):
            bot.status = BotStatus.PAUSED  # type: ignore[misc]


class TestWalletBalance:
    def test_available_per_currency(self) -> None:
        balance = WalletBalance(btc=Decimal("0.5"), usd=Decimal("100"))
        assert balance.available(Currency.BTC) == Decimal("0.5")
        assert balance.available(Currency.USD) == Decimal("100")


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_email_taken_message(self) -> None:
        error = EmailAlreadyRegisteredError("jane@example.com")
        assert error.message == "User with this email already exists"
        assert error.email == "jane@example.com"

    def test_token_errors(self) -> None:
        assert MissingTokenError().message == "Access token required"
        error = InvalidTokenError("expired")
        assert error.message == "Invalid or expired token"
        assert error.reason == "expired"

    def test_user_not_found_keeps_id(self) -> None:
        error = UserNotFoundError("u1")
        assert error.message == "User not found"
        assert error.user_id == "u1"

    def test_hierarchy(self) -> None:
        assert issubclass(UserNotFoundError, AccountsDomainError)
        assert issubclass(AccountsDomainError, DomainError)
        assert issubclass(WithdrawalValidationError, DomainError)

    def test_withdrawal_error_carries_field_errors(self) -> None:
        error = WithdrawalValidationError("Invalid amount", {"amount": "Invalid amount"})
        assert str(error) == "Invalid amount"
        assert error.errors == {"amount": "Invalid amount"}
