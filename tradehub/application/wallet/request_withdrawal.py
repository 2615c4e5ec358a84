"""
Use case: Submit a withdrawal request.

Input: WithdrawalCommand (amount, currency, address)
Output: Withdrawal (status pending)
Side effects: None. The request is acknowledged but not stored or sent.
Failure cases: WithdrawalValidationError.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from tradehub.application.wallet.dtos import WithdrawalCommand
from tradehub.domain.wallet.entities import TransferStatus, Withdrawal
from tradehub.domain.wallet.ports import WalletRepository
from tradehub.domain.wallet.withdrawal_policy import WithdrawalPolicy

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RequestWithdrawalUseCase:
    """Validates a withdrawal against the user's balance and acknowledges it.

    The policy is the authoritative check; the client runs the same
    rules only to give early feedback.
    """

    def __init__(
        self,
        wallet_repo: WalletRepository,
        policy: WithdrawalPolicy,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._wallet_repo = wallet_repo
        self._policy = policy
        self._clock = clock or _utc_now

    def execute(self, command: WithdrawalCommand) -> Withdrawal:
        """Run the withdrawal use case.

        Args:
            command: The withdrawal request.

        Returns:
            A pending Withdrawal with the fee for its currency.

        Raises:
            WithdrawalValidationError: If any withdrawal rule fails.
        """
        balance = self._wallet_repo.get_balance(command.user_id)
        assessment = self._policy.enforce(
            amount=command.amount,
            currency=command.currency,
            address=command.address,
            balance=balance,
        )

        now = self._clock()
        withdrawal = Withdrawal(
            id=f"with{int(now.timestamp() * 1000)}",
            amount=assessment.amount,
            currency=assessment.currency,
            address=assessment.address,
            fee=assessment.fee,
            status=TransferStatus.PENDING,
            created_at=now,
        )
        logger.info(
            "Accepted withdrawal id=%s currency=%s for user id=%s",
            withdrawal.id,
            withdrawal.currency.value,
            command.user_id,
        )
        return withdrawal
