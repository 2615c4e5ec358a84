"""
Adapter: Dashboard portfolio widgets.

Implements PortfolioProvider port with fixed figures.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Optional

from tradehub.domain.trading.entities import PortfolioSnapshot, RecentTrade, WatchlistItem
from tradehub.domain.trading.ports import PortfolioProvider

SNAPSHOT = PortfolioSnapshot(
    total_value=Decimal("127532.84"),
    daily_pnl=Decimal("1847.92"),
    daily_pnl_percent=1.47,
    open_positions=12,
    buying_power=Decimal("45267.13"),
)

WATCHLIST = (
    WatchlistItem(symbol="AAPL", name="Apple Inc.", price=Decimal("175.32"), change=2.4),
    WatchlistItem(symbol="GOOGL", name="Alphabet Inc.", price=Decimal("2847.63"), change=-0.8),
    WatchlistItem(symbol="AMZN", name="Amazon.com Inc.", price=Decimal("3134.26"), change=1.7),
)


class MockPortfolioProvider(PortfolioProvider):
    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def get_snapshot(self, user_id: str) -> PortfolioSnapshot:
        return SNAPSHOT

    def list_recent_trades(self, user_id: str) -> list[RecentTrade]:
        now = self._clock()
        return [
            RecentTrade(
                id=1,
                symbol="AAPL",
                action="Buy 100 shares",
                price=Decimal("175.32"),
                pnl=Decimal("247.50"),
                timestamp=now,
            ),
            RecentTrade(
                id=2,
                symbol="TSLA",
                action="Sell 50 shares",
                price=Decimal("267.89"),
                pnl=Decimal("-132.75"),
                timestamp=now,
            ),
            RecentTrade(
                id=3,
                symbol="MSFT",
                action="Buy 75 shares",
                price=Decimal("387.45"),
                pnl=Decimal("421.13"),
                timestamp=now,
            ),
        ]

    def get_watchlist(self, user_id: str) -> list[WatchlistItem]:
        return list(WATCHLIST)
