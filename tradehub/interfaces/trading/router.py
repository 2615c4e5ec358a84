"""
FastAPI routers for the trading bounded context.

Bots, signals, copy-trading experts and market data.
All routes require a bearer token and delegate to use cases.
Ids in the path are echoed back; unknown ids are not rejected.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from tradehub.application.trading.bots import (
    ChangeBotStatusUseCase,
    CreateBotUseCase,
    ListBotsUseCase,
)
from tradehub.application.trading.copy_trading import (
    CopyExpertUseCase,
    FollowExpertUseCase,
    ListExpertsUseCase,
)
from tradehub.application.trading.dtos import CopyExpertCommand, CreateBotCommand
from tradehub.application.trading.market import (
    GetMarketAnalysisUseCase,
    GetMarketIndicesUseCase,
    ListAssetsUseCase,
)
from tradehub.application.trading.signals import (
    ExecuteSignalUseCase,
    ListSignalsUseCase,
)
from tradehub.domain.accounts.entities import TokenClaims
from tradehub.interfaces.accounts.dependencies import get_current_user
from tradehub.interfaces.accounts.schemas import IndexQuoteSchema
from tradehub.interfaces.schemas import ErrorResponse
from tradehub.interfaces.trading.dependencies import (
    get_copy_expert_use_case,
    get_create_bot_use_case,
    get_execute_signal_use_case,
    get_follow_expert_use_case,
    get_list_assets_use_case,
    get_list_bots_use_case,
    get_list_experts_use_case,
    get_list_signals_use_case,
    get_market_analysis_use_case,
    get_market_indices_use_case,
    get_pause_bot_use_case,
    get_start_bot_use_case,
)
from tradehub.interfaces.trading.schemas import (
    AssetSchema,
    BotActionResponse,
    BotSchema,
    CopyExpertRequest,
    CopyExpertResponse,
    CreateBotRequest,
    CreateBotResponse,
    ExpertSchema,
    FollowExpertResponse,
    MarketAnalysisSchema,
    SignalActionResponse,
    SignalSchema,
)

AUTH_RESPONSES = {401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}}

bots_router = APIRouter(prefix="/bots", tags=["bots"], responses=AUTH_RESPONSES)
signals_router = APIRouter(prefix="/signals", tags=["signals"], responses=AUTH_RESPONSES)
experts_router = APIRouter(
    prefix="/copy-experts", tags=["copy-trading"], responses=AUTH_RESPONSES
)
market_router = APIRouter(prefix="/market", tags=["market"], responses=AUTH_RESPONSES)


# ------------------------------------------------------------------
# Bots
# ------------------------------------------------------------------


@bots_router.get("", response_model=list[BotSchema], summary="List bots")
def list_bots(
    claims: TokenClaims = Depends(get_current_user),
    use_case: ListBotsUseCase = Depends(get_list_bots_use_case),
) -> list[BotSchema]:
    """Return the user's trading bots."""
    return [BotSchema.from_entity(b) for b in use_case.execute(claims.user_id)]


@bots_router.post(
    "",
    response_model=CreateBotResponse,
    status_code=201,
    summary="Create a bot",
    description="Configure a new bot. It starts in the stopped state with zeroed performance.",
)
def create_bot(
    request: CreateBotRequest,
    claims: TokenClaims = Depends(get_current_user),
    use_case: CreateBotUseCase = Depends(get_create_bot_use_case),
) -> CreateBotResponse:
    command = CreateBotCommand(
        user_id=claims.user_id,
        name=request.name,
        strategy=request.strategy,
        capital=request.capital,
        max_risk=request.max_risk,
        profit_target=request.profit_target,
        stop_loss=request.stop_loss,
    )
    return CreateBotResponse(
        message="Bot created successfully",
        bot=BotSchema.from_entity(use_case.execute(command)),
    )


@bots_router.post("/{bot_id}/start", response_model=BotActionResponse, summary="Start a bot")
def start_bot(
    bot_id: str,
    claims: TokenClaims = Depends(get_current_user),
    use_case: ChangeBotStatusUseCase = Depends(get_start_bot_use_case),
) -> BotActionResponse:
    change = use_case.execute(bot_id)
    return BotActionResponse(message="Bot started successfully", bot_id=change.bot_id)


@bots_router.post("/{bot_id}/pause", response_model=BotActionResponse, summary="Pause a bot")
def pause_bot(
    bot_id: str,
    claims: TokenClaims = Depends(get_current_user),
    use_case: ChangeBotStatusUseCase = Depends(get_pause_bot_use_case),
) -> BotActionResponse:
    change = use_case.execute(bot_id)
    return BotActionResponse(message="Bot paused successfully", bot_id=change.bot_id)


# ------------------------------------------------------------------
# Signals
# ------------------------------------------------------------------


@signals_router.get("", response_model=list[SignalSchema], summary="List signals")
def list_signals(
    claims: TokenClaims = Depends(get_current_user),
    use_case: ListSignalsUseCase = Depends(get_list_signals_use_case),
) -> list[SignalSchema]:
    """Return active and recently executed signals."""
    return [SignalSchema.from_entity(s) for s in use_case.execute()]


@signals_router.post(
    "/{signal_id}/execute", response_model=SignalActionResponse, summary="Execute a signal"
)
def execute_signal(
    signal_id: str,
    claims: TokenClaims = Depends(get_current_user),
    use_case: ExecuteSignalUseCase = Depends(get_execute_signal_use_case),
) -> SignalActionResponse:
    result = use_case.execute(claims.user_id, signal_id)
    return SignalActionResponse(
        message="Signal executed successfully", signal_id=result.signal_id
    )


# ------------------------------------------------------------------
# Copy trading
# ------------------------------------------------------------------


@experts_router.get("", response_model=list[ExpertSchema], summary="List experts")
def list_experts(
    claims: TokenClaims = Depends(get_current_user),
    use_case: ListExpertsUseCase = Depends(get_list_experts_use_case),
) -> list[ExpertSchema]:
    """Return copy-trading experts, flagged if already followed."""
    return [ExpertSchema.from_entity(e) for e in use_case.execute(claims.user_id)]


@experts_router.post(
    "/{expert_id}/follow", response_model=FollowExpertResponse, summary="Follow an expert"
)
def follow_expert(
    expert_id: str,
    claims: TokenClaims = Depends(get_current_user),
    use_case: FollowExpertUseCase = Depends(get_follow_expert_use_case),
) -> FollowExpertResponse:
    result = use_case.execute(claims.user_id, expert_id)
    return FollowExpertResponse(
        message="Expert followed successfully", expert_id=result.expert_id
    )


@experts_router.post(
    "/{expert_id}/copy",
    response_model=CopyExpertResponse,
    summary="Copy an expert",
    description="Start mirroring an expert's trades. The amount is echoed back as sent.",
)
def copy_expert(
    expert_id: str,
    request: Optional[CopyExpertRequest] = Body(default=None),
    claims: TokenClaims = Depends(get_current_user),
    use_case: CopyExpertUseCase = Depends(get_copy_expert_use_case),
) -> CopyExpertResponse:
    command = CopyExpertCommand(
        user_id=claims.user_id,
        expert_id=expert_id,
        amount=request.amount if request else None,
    )
    result = use_case.execute(command)
    return CopyExpertResponse(
        message="Copy trading started successfully",
        expert_id=result.expert_id,
        amount=result.amount,
    )


# ------------------------------------------------------------------
# Market
# ------------------------------------------------------------------


@market_router.get(
    "/analysis", response_model=list[MarketAnalysisSchema], summary="Market analysis"
)
def get_market_analysis(
    claims: TokenClaims = Depends(get_current_user),
    use_case: GetMarketAnalysisUseCase = Depends(get_market_analysis_use_case),
) -> list[MarketAnalysisSchema]:
    """Return quotes, technicals and headlines per instrument."""
    return [MarketAnalysisSchema.from_entity(a) for a in use_case.execute()]


@market_router.get(
    "/indices", response_model=dict[str, IndexQuoteSchema], summary="Market indices"
)
def get_market_indices(
    claims: TokenClaims = Depends(get_current_user),
    use_case: GetMarketIndicesUseCase = Depends(get_market_indices_use_case),
) -> dict[str, IndexQuoteSchema]:
    return {
        name: IndexQuoteSchema.from_entity(quote)
        for name, quote in use_case.execute().items()
    }


@market_router.get("/assets", response_model=list[AssetSchema], summary="Assets")
def list_assets(
    claims: TokenClaims = Depends(get_current_user),
    use_case: ListAssetsUseCase = Depends(get_list_assets_use_case),
) -> list[AssetSchema]:
    """Return the user's holdings across asset classes."""
    return [AssetSchema.from_entity(a) for a in use_case.execute(claims.user_id)]
