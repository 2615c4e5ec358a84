"""
Dependency injection for the trading bounded context.

Provides FastAPI dependency functions that wire the mock catalogs
into use cases via constructor injection.
"""

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
from tradehub.application.trading.market import (
    GetMarketAnalysisUseCase,
    GetMarketIndicesUseCase,
    ListAssetsUseCase,
)
from tradehub.application.trading.signals import (
    ExecuteSignalUseCase,
    ListSignalsUseCase,
)
from tradehub.domain.trading.entities import BotStatus
from tradehub.infrastructure.trading.mock_bot_catalog import MockBotCatalog
from tradehub.infrastructure.trading.mock_expert_directory import MockExpertDirectory
from tradehub.infrastructure.trading.mock_market_data import MockMarketDataProvider
from tradehub.infrastructure.trading.mock_signal_feed import MockSignalFeed


def get_list_bots_use_case() -> ListBotsUseCase:
    return ListBotsUseCase(catalog=MockBotCatalog())


def get_create_bot_use_case() -> CreateBotUseCase:
    return CreateBotUseCase()


def get_start_bot_use_case() -> ChangeBotStatusUseCase:
    return ChangeBotStatusUseCase(target=BotStatus.ACTIVE)


def get_pause_bot_use_case() -> ChangeBotStatusUseCase:
    return ChangeBotStatusUseCase(target=BotStatus.PAUSED)


def get_list_signals_use_case() -> ListSignalsUseCase:
    return ListSignalsUseCase(feed=MockSignalFeed())


def get_execute_signal_use_case() -> ExecuteSignalUseCase:
    return ExecuteSignalUseCase()


def get_list_experts_use_case() -> ListExpertsUseCase:
    return ListExpertsUseCase(directory=MockExpertDirectory())


def get_follow_expert_use_case() -> FollowExpertUseCase:
    return FollowExpertUseCase()


def get_copy_expert_use_case() -> CopyExpertUseCase:
    return CopyExpertUseCase()


def get_market_analysis_use_case() -> GetMarketAnalysisUseCase:
    return GetMarketAnalysisUseCase(market_data=MockMarketDataProvider())


def get_market_indices_use_case() -> GetMarketIndicesUseCase:
    return GetMarketIndicesUseCase(market_data=MockMarketDataProvider())


def get_list_assets_use_case() -> ListAssetsUseCase:
    return ListAssetsUseCase(market_data=MockMarketDataProvider())
