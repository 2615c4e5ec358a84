"""
Tests for the trading application layer (use cases).

Bots, signals, copy trading and market data over the demo catalogs.
"""

from datetime import datetime, timezone
from decimal import Decimal

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
from tradehub.application.trading.signals import ExecuteSignalUseCase, ListSignalsUseCase
from tradehub.domain.trading.entities import BotStatus, SignalStatus
from tradehub.infrastructure.trading.mock_bot_catalog import MockBotCatalog
from tradehub.infrastructure.trading.mock_expert_directory import MockExpertDirectory
from tradehub.infrastructure.trading.mock_market_data import MockMarketDataProvider
from tradehub.infrastructure.trading.mock_signal_feed import MockSignalFeed

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestBots:
    """Tests for the bot use cases."""

    def test_list_bots(self) -> None:
        bots = ListBotsUseCase(catalog=MockBotCatalog()).execute("u1")
        assert [b.status for b in bots] == [BotStatus.ACTIVE, BotStatus.PAUSED]

    def test_created_bot_is_stopped_with_zeroed_performance(self) -> None:
        bot = CreateBotUseCase(clock=lambda: NOW).execute(
            CreateBotCommand(
                user_id="u1",
                name="Grid Runner",
                strategy="grid",
                capital=Decimal("2500"),
                max_risk=2.0,
            )
        )
        assert bot.id == f"bot{int(NOW.timestamp() * 1000)}"
        assert bot.status is BotStatus.STOPPED
        assert bot.capital == Decimal("2500")
        assert bot.performance.total_trades == 0
        assert bot.performance.total_pnl == Decimal("0")

    def test_created_bot_not_added_to_catalog(self) -> None:
        CreateBotUseCase().execute(CreateBotCommand(user_id="u1", name="Ephemeral"))
        names = [b.name for b in ListBotsUseCase(catalog=MockBotCatalog()).execute("u1")]
        assert "Ephemeral" not in names

    def test_start_and_pause(self) -> None:
        started = ChangeBotStatusUseCase(target=BotStatus.ACTIVE).execute("bot2")
        paused = ChangeBotStatusUseCase(target=BotStatus.PAUSED).execute("bot1")
        assert (started.bot_id, started.status) == ("bot2", BotStatus.ACTIVE)
        assert (paused.bot_id, paused.status) == ("bot1", BotStatus.PAUSED)


class TestSignals:
    """Tests for the signal use cases."""

    def test_list_signals(self) -> None:
        signals = ListSignalsUseCase(feed=MockSignalFeed(clock=lambda: NOW)).execute()
        executed = [s for s in signals if s.status is SignalStatus.EXECUTED]
        assert len(signals) == 3
        assert [s.id for s in executed] == ["signal3"]
        assert executed[0].pnl == Decimal("342.18")

    def test_execute_echoes_id(self) -> None:
        assert ExecuteSignalUseCase().execute("u1", "anything").signal_id == "anything"


class TestCopyTrading:
    """Tests for the copy-trading use cases."""

    def test_list_experts(self) -> None:
        experts = ListExpertsUseCase(directory=MockExpertDirectory()).execute("u1")
        assert {e.id: e.following for e in experts} == {"expert1": False, "expert2": True}

    def test_follow(self) -> None:
        assert FollowExpertUseCase().execute("u1", "expert1").expert_id == "expert1"

    def test_copy_echoes_amount(self) -> None:
        result = CopyExpertUseCase().execute(
            CopyExpertCommand(user_id="u1", expert_id="expert2", amount=1500.0)
        )
        assert (result.expert_id, result.amount) == ("expert2", 1500.0)


class TestMarket:
    """Tests for the market data use cases."""

    def test_indices(self) -> None:
        indices = GetMarketIndicesUseCase(market_data=MockMarketDataProvider()).execute()
        assert set(indices) == {"sp500", "nasdaq", "dow", "vix"}

    def test_analysis(self) -> None:
        analyses = GetMarketAnalysisUseCase(market_data=MockMarketDataProvider()).execute()
        assert [a.symbol for a in analyses] == ["AAPL", "TSLA", "MSFT", "BTC"]

    def test_assets(self) -> None:
        assets = ListAssetsUseCase(market_data=MockMarketDataProvider()).execute("u1")
        assert len(assets) == 6
