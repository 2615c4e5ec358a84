"""
Tests for the wallet domain layer.

Tests the withdrawal rules in isolation.
No external dependencies or IO required.
"""

from decimal import Decimal

import pytest

from tradehub.domain.wallet.entities import Currency, WalletBalance
from tradehub.domain.wallet.errors import WithdrawalValidationError
from tradehub.domain.wallet.withdrawal_policy import (
    ADDRESS_REQUIRED,
    INVALID_AMOUNT,
    INVALID_BTC_ADDRESS,
    UNSUPPORTED_CURRENCY,
    WithdrawalPolicy,
    format_amount,
    is_valid_bitcoin_address,
    parse_amount,
    parse_currency,
)

BALANCE = WalletBalance(btc=Decimal("0.05423789"), usd=Decimal("15420.50"))
BECH32 = "bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh"
LEGACY = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"
P2SH = "3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy"


@pytest.fixture
def policy() -> WithdrawalPolicy:
    return WithdrawalPolicy()


class TestParsing:
    """Tests for loose JSON input parsing."""

    def test_parse_amount_accepts_numbers_and_strings(self) -> None:
        assert parse_amount(0.01) == Decimal("0.01")
        assert parse_amount(25) == Decimal("25")
        assert parse_amount(" 1.5 ") == Decimal("1.5")

    def test_parse_amount_rejects_non_numeric(self) -> None:
        assert parse_amount("abc") is None
        assert parse_amount(None) is None
        assert parse_amount(True) is None
        assert parse_amount([1]) is None

    def test_format_amount_drops_trailing_zeros(self) -> None:
        assert format_amount(Decimal("15420.50")) == "15420.5"
        assert format_amount(Decimal("0.05423789")) == "0.05423789"
        assert format_amount(Decimal("100")) == "100"

    def test_parse_currency_is_case_insensitive(self) -> None:
        assert parse_currency("BTC") is Currency.BTC
        assert parse_currency(" usd ") is Currency.USD

    def test_parse_currency_unknown(self) -> None:
        assert parse_currency("eth") is None
        assert parse_currency(None) is None


class TestBitcoinAddress:
    """Tests for the Bitcoin address format check."""

    @pytest.mark.parametrize("address", [BECH32, LEGACY, P2SH])
    def test_known_formats_accepted(self, address: str) -> None:
        assert is_valid_bitcoin_address(address)

    @pytest.mark.parametrize(
        "address",
        [
            "not-an-address",
            "2NBFNJTktNa7GZusGbDbGKRZTxdK9VVez3n",
            "1short",
            "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfOa",
            BECH32 + "!",
        ],
    )
    def test_malformed_addresses_rejected(self, address: str) -> None:
        assert not is_valid_bitcoin_address(address)


class TestWithdrawalPolicy:
    """Tests for WithdrawalPolicy.assess and enforce."""

    def test_valid_btc_withdrawal(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("0.01", "btc", BECH32, BALANCE)
        assert result.is_valid
        assert result.amount == Decimal("0.01")
        assert result.currency is Currency.BTC
        assert result.fee == Decimal("0.0005")
        assert result.net_amount == Decimal("0.0095")

    def test_valid_usd_withdrawal_skips_address_format(
        self, policy: WithdrawalPolicy
    ) -> None:
        result = policy.assess(100, "usd", "Bank Account ****1234", BALANCE)
        assert result.is_valid
        assert result.fee == Decimal("5")

    @pytest.mark.parametrize("amount", [None, "", "abc", 0, -1, "NaN", "Infinity"])
    def test_invalid_amount(self, policy: WithdrawalPolicy, amount: object) -> None:
        result = policy.assess(amount, "btc", BECH32, BALANCE)
        assert result.errors == {"amount": INVALID_AMOUNT}

    def test_missing_address(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("0.01", "btc", "   ", BALANCE)
        assert result.errors == {"address": ADDRESS_REQUIRED}

    def test_below_minimum_btc(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("0.0008", "btc", BECH32, BALANCE)
        assert result.errors["amount"] == "Minimum withdrawal: 0.001 BTC"

    def test_below_minimum_usd(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("8", "usd", "Bank", BALANCE)
        assert result.errors["amount"] == "Minimum withdrawal: $10"

    def test_fee_message_replaces_minimum_message(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("0.0005", "btc", BECH32, BALANCE)
        assert result.errors["amount"] == (
            "Amount must be greater than network fee of 0.0005 BTC"
        )

    def test_usd_fee(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("5", "usd", "Bank", BALANCE)
        assert result.errors["amount"] == "Amount must be greater than network fee of $5"

    def test_insufficient_balance(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("1", "btc", BECH32, BALANCE)
        assert result.errors["amount"] == "Insufficient balance. Available: 0.05423789 BTC"

    def test_insufficient_usd_balance(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("20000", "usd", "Bank", BALANCE)
        assert result.errors["amount"] == "Insufficient balance. Available: 15420.5 USD"

    def test_exact_balance_allowed(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("0.05423789", "btc", BECH32, BALANCE)
        assert result.is_valid

    def test_invalid_btc_address(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("0.01", "btc", "not-an-address", BALANCE)
        assert result.errors == {"address": INVALID_BTC_ADDRESS}

    def test_non_string_address_counts_as_missing(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("20", "usd", 12345, BALANCE)
        assert result.errors == {"address": ADDRESS_REQUIRED}

    def test_unsupported_currency(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("0.01", "eth", BECH32, BALANCE)
        assert result.errors == {"currency": UNSUPPORTED_CURRENCY}
        assert result.fee is None
        assert result.net_amount is None

    def test_errors_reported_per_field(self, policy: WithdrawalPolicy) -> None:
        result = policy.assess("1", "btc", "bogus", BALANCE)
        assert set(result.errors) == {"amount", "address"}
        assert result.first_error.startswith("Insufficient balance")

    def test_enforce_raises_with_first_error(self, policy: WithdrawalPolicy) -> None:
        with pytest.raises(WithdrawalValidationError) as exc_info:
            policy.enforce(None, "btc", "", BALANCE)
        assert exc_info.value.message == INVALID_AMOUNT
        assert exc_info.value.errors == {
            "amount": INVALID_AMOUNT,
            "address": ADDRESS_REQUIRED,
        }

    def test_enforce_returns_assessment(self, policy: WithdrawalPolicy) -> None:
        result = policy.enforce("0.01", "BTC", f"  {BECH32}  ", BALANCE)
        assert result.address == BECH32
