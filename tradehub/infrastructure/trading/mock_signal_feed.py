"""
Adapter: Trading signal feed.

Implements SignalFeed port with three demo signals,
one of which has already been executed.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable, Optional

from tradehub.domain.trading.entities import SignalAction, SignalStatus, TradingSignal
from tradehub.domain.trading.ports import SignalFeed


class MockSignalFeed(SignalFeed):
    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def list_signals(self) -> list[TradingSignal]:
        now = self._clock()
        return [
            TradingSignal(
                id="signal1",
                symbol="AAPL",
                action=SignalAction.BUY,
                price=Decimal("175.32"),
                target_price=Decimal("185.00"),
                stop_loss=Decimal("168.50"),
                confidence=87,
                timeframe="4H",
                strategy="Breakout Pattern",
                status=SignalStatus.ACTIVE,
                created_at=now,
            ),
            TradingSignal(
                id="signal2",
                symbol="TSLA",
                action=SignalAction.SELL,
                price=Decimal("267.89"),
                target_price=Decimal("250.00"),
                stop_loss=Decimal("275.00"),
                confidence=73,
                timeframe="1D",
                strategy="RSI Overbought",
                status=SignalStatus.ACTIVE,
                created_at=now,
            ),
            TradingSignal(
                id="signal3",
                symbol="GOOGL",
                action=SignalAction.BUY,
                price=Decimal("2847.63"),
                target_price=Decimal("2950.00"),
                stop_loss=Decimal("2780.00"),
                confidence=92,
                timeframe="1W",
                strategy="Support Bounce",
                status=SignalStatus.EXECUTED,
                pnl=Decimal("342.18"),
                created_at=now - timedelta(days=1),
            ),
        ]
