"""
Use case: Dry-run the withdrawal rules for form feedback.

Input: WithdrawalCommand
Output: WithdrawalCheckResult
Side effects: None.
Failure cases: None. Rule failures are reported in the result.
"""

from tradehub.application.wallet.dtos import WithdrawalCheckResult, WithdrawalCommand
from tradehub.domain.wallet.ports import WalletRepository
from tradehub.domain.wallet.withdrawal_policy import WithdrawalPolicy


class CheckWithdrawalUseCase:
    """Reports every failing rule at once, keyed by form field."""

    def __init__(self, wallet_repo: WalletRepository, policy: WithdrawalPolicy) -> None:
        self._wallet_repo = wallet_repo
        self._policy = policy

    def execute(self, command: WithdrawalCommand) -> WithdrawalCheckResult:
        assessment = self._policy.assess(
            amount=command.amount,
            currency=command.currency,
            address=command.address,
            balance=self._wallet_repo.get_balance(command.user_id),
        )
        arrival = None
        if assessment.currency is not None:
            arrival = self._policy.limits_for(assessment.currency).estimated_arrival

        return WithdrawalCheckResult(
            valid=assessment.is_valid,
            errors=dict(assessment.errors),
            fee=assessment.fee,
            net_amount=assessment.net_amount,
            estimated_arrival=arrival,
        )
