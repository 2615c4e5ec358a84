"""
Dependency injection for the wallet bounded context.
"""

from tradehub.application.wallet.check_withdrawal import CheckWithdrawalUseCase
from tradehub.application.wallet.query_wallet import (
    GetBalanceUseCase,
    GetBitcoinWalletUseCase,
    ListDepositsUseCase,
    ListWithdrawalsUseCase,
)
from tradehub.application.wallet.request_withdrawal import RequestWithdrawalUseCase
from tradehub.domain.wallet.withdrawal_policy import WithdrawalPolicy
from tradehub.infrastructure.wallet.mock_wallet_repository import MockWalletRepository


def get_balance_use_case() -> GetBalanceUseCase:
    return GetBalanceUseCase(wallet_repo=MockWalletRepository())


def get_bitcoin_wallet_use_case() -> GetBitcoinWalletUseCase:
    return GetBitcoinWalletUseCase(wallet_repo=MockWalletRepository())


def get_list_deposits_use_case() -> ListDepositsUseCase:
    return ListDepositsUseCase(wallet_repo=MockWalletRepository())


def get_list_withdrawals_use_case() -> ListWithdrawalsUseCase:
    return ListWithdrawalsUseCase(wallet_repo=MockWalletRepository())


def get_request_withdrawal_use_case() -> RequestWithdrawalUseCase:
    """Build RequestWithdrawalUseCase with its infrastructure dependencies."""
    return RequestWithdrawalUseCase(
        wallet_repo=MockWalletRepository(),
        policy=WithdrawalPolicy(),
    )


def get_check_withdrawal_use_case() -> CheckWithdrawalUseCase:
    """Build CheckWithdrawalUseCase with its infrastructure dependencies."""
    return CheckWithdrawalUseCase(
        wallet_repo=MockWalletRepository(),
        policy=WithdrawalPolicy(),
    )
