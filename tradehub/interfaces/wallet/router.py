"""
FastAPI router for the wallet bounded context.

All routes require a bearer token and delegate to use cases.
Withdrawal rule failures are mapped to 400 by the central error handlers.
"""

from fastapi import APIRouter, Depends

from tradehub.application.wallet.check_withdrawal import CheckWithdrawalUseCase
from tradehub.application.wallet.dtos import WithdrawalCommand
from tradehub.application.wallet.query_wallet import (
    GetBalanceUseCase,
    GetBitcoinWalletUseCase,
    ListDepositsUseCase,
    ListWithdrawalsUseCase,
)
from tradehub.application.wallet.request_withdrawal import RequestWithdrawalUseCase
from tradehub.domain.accounts.entities import TokenClaims
from tradehub.interfaces.accounts.dependencies import get_current_user
from tradehub.interfaces.schemas import ErrorResponse, WithdrawalErrorResponse
from tradehub.interfaces.wallet.dependencies import (
    get_balance_use_case,
    get_bitcoin_wallet_use_case,
    get_check_withdrawal_use_case,
    get_list_deposits_use_case,
    get_list_withdrawals_use_case,
    get_request_withdrawal_use_case,
)
from tradehub.interfaces.wallet.schemas import (
    BalanceResponse,
    BitcoinWalletResponse,
    DepositItem,
    WithdrawalCheckResponse,
    WithdrawalItem,
    WithdrawalRequest,
    WithdrawalResponse,
)

router = APIRouter(
    prefix="/wallet",
    tags=["wallet"],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)


def _to_command(claims: TokenClaims, request: WithdrawalRequest) -> WithdrawalCommand:
    return WithdrawalCommand(
        user_id=claims.user_id,
        amount=request.amount,
        currency=request.currency,
        address=request.address,
    )


@router.get("/bitcoin", response_model=BitcoinWalletResponse, summary="Bitcoin wallet")
def get_bitcoin_wallet(
    claims: TokenClaims = Depends(get_current_user),
    use_case: GetBitcoinWalletUseCase = Depends(get_bitcoin_wallet_use_case),
) -> BitcoinWalletResponse:
    """Return the deposit address and Bitcoin balance."""
    return BitcoinWalletResponse.from_entity(use_case.execute(claims.user_id))


@router.get(
    "/bitcoin/deposits", response_model=list[DepositItem], summary="Deposit history"
)
def list_deposits(
    claims: TokenClaims = Depends(get_current_user),
    use_case: ListDepositsUseCase = Depends(get_list_deposits_use_case),
) -> list[DepositItem]:
    """Return Bitcoin deposits, newest first."""
    return [DepositItem.from_entity(d) for d in use_case.execute(claims.user_id)]


@router.get("/balance", response_model=BalanceResponse, summary="Balances")
def get_balance(
    claims: TokenClaims = Depends(get_current_user),
    use_case: GetBalanceUseCase = Depends(get_balance_use_case),
) -> BalanceResponse:
    """Return the spendable BTC and USD balances."""
    return BalanceResponse.from_entity(use_case.execute(claims.user_id))


@router.get(
    "/withdrawals", response_model=list[WithdrawalItem], summary="Withdrawal history"
)
def list_withdrawals(
    claims: TokenClaims = Depends(get_current_user),
    use_case: ListWithdrawalsUseCase = Depends(get_list_withdrawals_use_case),
) -> list[WithdrawalItem]:
    """Return withdrawal requests, newest first."""
    return [WithdrawalItem.from_entity(w) for w in use_case.execute(claims.user_id)]


@router.post(
    "/withdraw",
    response_model=WithdrawalResponse,
    status_code=201,
    responses={400: {"model": WithdrawalErrorResponse}},
    summary="Request a withdrawal",
    description=(
        "Validate a withdrawal against the per-currency minimum, network fee, "
        "available balance and, for BTC, the address format."
    ),
)
def request_withdrawal(
    request: WithdrawalRequest,
    claims: TokenClaims = Depends(get_current_user),
    use_case: RequestWithdrawalUseCase = Depends(get_request_withdrawal_use_case),
) -> WithdrawalResponse:
    """Submit a withdrawal request."""
    withdrawal = use_case.execute(_to_command(claims, request))
    return WithdrawalResponse(
        message="Withdrawal request submitted successfully",
        withdrawal=WithdrawalItem.from_entity(withdrawal),
    )


@router.post(
    "/withdraw/validate",
    response_model=WithdrawalCheckResponse,
    summary="Check a withdrawal",
    description="Run the withdrawal rules without submitting; reports every failing field.",
)
def check_withdrawal(
    request: WithdrawalRequest,
    claims: TokenClaims = Depends(get_current_user),
    use_case: CheckWithdrawalUseCase = Depends(get_check_withdrawal_use_case),
) -> WithdrawalCheckResponse:
    """Dry-run the withdrawal rules."""
    return WithdrawalCheckResponse.from_result(use_case.execute(_to_command(claims, request)))
