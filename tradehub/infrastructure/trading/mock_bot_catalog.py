"""
Adapter: Trading bot catalog.

Implements BotCatalog port with two demo bots.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Optional

from tradehub.domain.trading.entities import Bot, BotPerformance, BotStatus
from tradehub.domain.trading.ports import BotCatalog


class MockBotCatalog(BotCatalog):
    """Every user sees the same two bots."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def list_bots(self, user_id: str) -> list[Bot]:
        now = self._clock()
        return [
            Bot(
                id="bot1",
                name="Momentum Trader",
                status=BotStatus.ACTIVE,
                strategy="Momentum Trading",
                capital=Decimal("10000"),
                max_risk=2,
                profit_target=10,
                stop_loss=5,
                created_at=now,
                performance=BotPerformance(
                    total_trades=245,
                    win_rate=73.5,
                    total_pnl=Decimal("2847.32"),
                    monthly_return=12.4,
                ),
            ),
            Bot(
                id="bot2",
                name="Scalper Pro",
                status=BotStatus.PAUSED,
                strategy="Scalping",
                capital=Decimal("5000"),
                max_risk=1.5,
                profit_target=5,
                stop_loss=3,
                created_at=now,
                performance=BotPerformance(
                    total_trades=567,
                    win_rate=68.2,
                    total_pnl=Decimal("1234.56"),
                    monthly_return=8.7,
                ),
            ),
        ]
