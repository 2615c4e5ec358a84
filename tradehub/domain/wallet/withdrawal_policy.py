"""
Domain service: Withdrawal validation rules.

Pure business logic deciding whether a withdrawal request is acceptable.
No framework imports. No IO. No side effects.

Rules (evaluated in order, later messages replace earlier ones on the same field):
    - Amount must be a finite number greater than zero
    - Address must be present
    - Currency must be supported (btc, usd)
    - Amount must reach the per-currency minimum
    - Amount must exceed the fixed network fee
    - Amount must not exceed the available balance
    - Bitcoin addresses must look like legacy, P2SH or Bech32 addresses
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Optional

from tradehub.domain.wallet.entities import Currency, WalletBalance, WithdrawalLimits
from tradehub.domain.wallet.errors import WithdrawalValidationError

WITHDRAWAL_LIMITS: dict[Currency, WithdrawalLimits] = {
    Currency.BTC: WithdrawalLimits(
        minimum=Decimal("0.001"),
        fee=Decimal("0.0005"),
        minimum_display="0.001 BTC",
        fee_display="0.0005 BTC",
        estimated_arrival="30-60 minutes",
    ),
    Currency.USD: WithdrawalLimits(
        minimum=Decimal("10"),
        fee=Decimal("5"),
        minimum_display="$10",
        fee_display="$5",
        estimated_arrival="1-3 business days",
    ),
}

# Prefix check only (1..., 3..., bc1...). No checksum validation.
BTC_ADDRESS_PATTERN = re.compile(r"(bc1|[13])[a-zA-HJ-NP-Z0-9]{25,62}")

FIELD_ORDER = ("amount", "address", "currency")

INVALID_AMOUNT = "Invalid amount"
ADDRESS_REQUIRED = "Address is required"
UNSUPPORTED_CURRENCY = "Unsupported currency"
INVALID_BTC_ADDRESS = (
    "Invalid Bitcoin address format. Please enter a valid Bitcoin address."
)


def parse_amount(raw: object) -> Optional[Decimal]:
    """Convert a loosely typed JSON amount to Decimal.

    Returns None for anything that is not a number or numeric string.
    Booleans are rejected even though they are ints in Python.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, (int, float)):
        return Decimal(str(raw))
    if isinstance(raw, str):
        try:
            return Decimal(raw.strip())
        except InvalidOperation:
            return None
    return None


def parse_currency(raw: object) -> Optional[Currency]:
    """Return the Currency for a code such as "btc" or "USD", or None."""
    if not isinstance(raw, str):
        return None
    try:
        return Currency(raw.strip().lower())
    except ValueError:
        return None


def is_valid_bitcoin_address(address: str) -> bool:
    return BTC_ADDRESS_PATTERN.fullmatch(address.strip()) is not None


def format_amount(value: Decimal) -> str:
    """Render an amount without trailing zeros or exponent, e.g. 15420.5."""
    return f"{value.normalize():f}"


@dataclass(frozen=True)
class WithdrawalAssessment:
    """Outcome of running the withdrawal rules over a request.

    Attributes:
        errors: Field name to message, empty when the request is valid.
        amount: Parsed amount, or None when it could not be parsed.
        currency: Parsed currency, or None when unsupported.
        address: Trimmed address.
        fee: Network fee for the currency, if known.
    """

    errors: dict[str, str] = field(default_factory=dict)
    amount: Optional[Decimal] = None
    currency: Optional[Currency] = None
    address: str = ""
    fee: Optional[Decimal] = None

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def first_error(self) -> Optional[str]:
        for field_name in FIELD_ORDER:
            if field_name in self.errors:
                return self.errors[field_name]
        return None

    @property
    def net_amount(self) -> Optional[Decimal]:
        """Amount that arrives after the fee, when both are known."""
        if self.amount is None or self.fee is None:
            return None
        return self.amount - self.fee


class WithdrawalPolicy:
    """Domain service applying the withdrawal rules.

    The same rules drive the form feedback and the authoritative
    check on submission.
    """

    def __init__(
        self, limits: Optional[dict[Currency, WithdrawalLimits]] = None
    ) -> None:
        self._limits = limits or WITHDRAWAL_LIMITS

    def limits_for(self, currency: Currency) -> WithdrawalLimits:
        return self._limits[currency]

    def assess(
        self,
        amount: object,
        currency: object,
        address: object,
        balance: WalletBalance,
    ) -> WithdrawalAssessment:
        """Run every rule and collect per-field messages.

        Args:
            amount: Raw amount as received (number, numeric string or None).
            currency: Raw currency code.
            address: Destination address or bank reference. Non-strings count as missing.
            balance: The user's available balances.

        Returns:
            A WithdrawalAssessment. Never raises for bad input.
        """
        errors: dict[str, str] = {}

        value = parse_amount(amount)
        if value is None or not value.is_finite() or value <= 0:
            errors["amount"] = INVALID_AMOUNT
            value = None

        destination = address.strip() if isinstance(address, str) else ""
        if not destination:
            errors["address"] = ADDRESS_REQUIRED

        parsed_currency = parse_currency(currency)
        if parsed_currency is None:
            errors["currency"] = UNSUPPORTED_CURRENCY
            return WithdrawalAssessment(
                errors=errors, amount=value, address=destination
            )

        limits = self.limits_for(parsed_currency)

        if value is not None:
            if value < limits.minimum:
                errors["amount"] = f"Minimum withdrawal: {limits.minimum_display}"

            if value <= limits.fee:
                errors["amount"] = (
                    f"Amount must be greater than network fee of {limits.fee_display}"
                )

            available = balance.available(parsed_currency)
            if value > available:
                errors["amount"] = (
                    f"Insufficient balance. Available: {format_amount(available)} "
                    f"{parsed_currency.value.upper()}"
                )

        if (
            parsed_currency is Currency.BTC
            and destination
            and not is_valid_bitcoin_address(destination)
        ):
            errors["address"] = INVALID_BTC_ADDRESS

        return WithdrawalAssessment(
            errors=errors,
            amount=value,
            currency=parsed_currency,
            address=destination,
            fee=limits.fee,
        )

    def enforce(
        self,
        amount: object,
        currency: object,
        address: object,
        balance: WalletBalance,
    ) -> WithdrawalAssessment:
        """Like assess(), but raise when any rule fails.

        Raises:
            WithdrawalValidationError: Carrying the first message and all field errors.
        """
        assessment = self.assess(amount, currency, address, balance)
        if not assessment.is_valid:
            raise WithdrawalValidationError(
                assessment.first_error or INVALID_AMOUNT, dict(assessment.errors)
            )
        return assessment
