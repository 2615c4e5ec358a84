"""
Adapter: Market data.

Implements MarketDataProvider port with fixed quotes, technicals,
headlines, index levels and holdings. No exchange or data vendor
is contacted.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable, Optional

from tradehub.domain.trading.entities import (
    Asset,
    AssetType,
    IndexQuote,
    MarketAnalysis,
    MarketSentiment,
    NewsImpact,
    NewsItem,
    Recommendation,
    TechnicalAnalysis,
)
from tradehub.domain.trading.ports import MarketDataProvider

INDICES = {
    "sp500": IndexQuote(value=Decimal("4327.81"), change=0.82),
    "nasdaq": IndexQuote(value=Decimal("13567.98"), change=-0.34),
    "dow": IndexQuote(value=Decimal("34721.12"), change=1.15),
    "vix": IndexQuote(value=Decimal("18.24"), change=-2.10),
}

HOLDINGS = (
    Asset(
        id="1",
        symbol="AAPL",
        name="Apple Inc.",
        type=AssetType.STOCK,
        price=Decimal("175.24"),
        change=Decimal("2.15"),
        change_percent=1.24,
        market_cap="2.8T",
        volume="45.2M",
        holdings=Decimal("10"),
        value=Decimal("1752.40"),
        icon="🍎",
    ),
    Asset(
        id="2",
        symbol="BTC",
        name="Bitcoin",
        type=AssetType.CRYPTO,
        price=Decimal("67234.12"),
        change=Decimal("1542.33"),
        change_percent=2.34,
        market_cap="1.3T",
        volume="28.5B",
        holdings=Decimal("0.025"),
        value=Decimal("1680.85"),
        icon="₿",
    ),
    Asset(
        id="3",
        symbol="TSLA",
        name="Tesla Inc.",
        type=AssetType.STOCK,
        price=Decimal("242.68"),
        change=Decimal("-5.42"),
        change_percent=-2.18,
        market_cap="773B",
        volume="78.3M",
        holdings=Decimal("5"),
        value=Decimal("1213.40"),
        icon="🚗",
    ),
    Asset(
        id="4",
        symbol="ETH",
        name="Ethereum",
        type=AssetType.CRYPTO,
        price=Decimal("3456.78"),
        change=Decimal("89.23"),
        change_percent=2.65,
        market_cap="415B",
        volume="15.2B",
        holdings=Decimal("0.8"),
        value=Decimal("2765.42"),
        icon="Ξ",
    ),
    Asset(
        id="5",
        symbol="GOVT",
        name="US Treasury Bond ETF",
        type=AssetType.BOND,
        price=Decimal("23.45"),
        change=Decimal("0.12"),
        change_percent=0.51,
        market_cap="4.2B",
        volume="2.1M",
        holdings=Decimal("100"),
        value=Decimal("2345.00"),
        icon="🏛️",
    ),
    Asset(
        id="6",
        symbol="GLD",
        name="Gold ETF",
        type=AssetType.COMMODITY,
        price=Decimal("189.23"),
        change=Decimal("3.45"),
        change_percent=1.86,
        market_cap="67B",
        volume="8.9M",
        holdings=Decimal("15"),
        value=Decimal("2838.45"),
        icon="🥇",
    ),
)


class MockMarketDataProvider(MarketDataProvider):
    """Serves the demo market. News timestamps are relative to the clock."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def list_analyses(self) -> list[MarketAnalysis]:
        now = self._clock()
        return [
            MarketAnalysis(
                symbol="AAPL",
                name="Apple Inc.",
                price=Decimal("175.32"),
                change=Decimal("4.12"),
                change_percent=2.41,
                volume=52_436_100,
                market_cap=2_750_000_000_000,
                analysis=TechnicalAnalysis(
                    recommendation=Recommendation.BUY,
                    confidence=85,
                    support_level=Decimal("168.50"),
                    resistance_level=Decimal("182.00"),
                    rsi=62.4,
                    macd="Bullish crossover",
                    sentiment=MarketSentiment.BULLISH,
                ),
                news=(
                    NewsItem(
                        title="Apple beats quarterly revenue estimates",
                        summary="Services revenue hit a record high, offsetting softer hardware sales.",
                        impact=NewsImpact.POSITIVE,
                        timestamp=now - timedelta(hours=2),
                    ),
                    NewsItem(
                        title="New product event scheduled",
                        summary="Analysts expect updates across the wearables line.",
                        impact=NewsImpact.NEUTRAL,
                        timestamp=now - timedelta(hours=6),
                    ),
                ),
            ),
            MarketAnalysis(
                symbol="TSLA",
                name="Tesla Inc.",
                price=Decimal("267.89"),
                change=Decimal("-6.03"),
                change_percent=-2.20,
                volume=98_215_400,
                market_cap=851_000_000_000,
                analysis=TechnicalAnalysis(
                    recommendation=Recommendation.SELL,
                    confidence=71,
                    support_level=Decimal("250.00"),
                    resistance_level=Decimal("281.50"),
                    rsi=74.8,
                    macd="Bearish divergence",
                    sentiment=MarketSentiment.BEARISH,
                ),
                news=(
                    NewsItem(
                        title="Delivery numbers miss expectations",
                        summary="Quarterly deliveries came in below consensus forecasts.",
                        impact=NewsImpact.NEGATIVE,
                        timestamp=now - timedelta(hours=3),
                    ),
                ),
            ),
            MarketAnalysis(
                symbol="MSFT",
                name="Microsoft Corporation",
                price=Decimal("387.45"),
                change=Decimal("1.22"),
                change_percent=0.32,
                volume=21_873_900,
                market_cap=2_880_000_000_000,
                analysis=TechnicalAnalysis(
                    recommendation=Recommendation.HOLD,
                    confidence=64,
                    support_level=Decimal("375.00"),
                    resistance_level=Decimal("395.00"),
                    rsi=55.1,
                    macd="Neutral",
                    sentiment=MarketSentiment.NEUTRAL,
                ),
                news=(
                    NewsItem(
                        title="Cloud growth steady quarter over quarter",
                        summary="Azure growth was in line with guidance.",
                        impact=NewsImpact.NEUTRAL,
                        timestamp=now - timedelta(hours=5),
                    ),
                ),
            ),
            MarketAnalysis(
                symbol="BTC",
                name="Bitcoin",
                price=Decimal("67234.12"),
                change=Decimal("1542.33"),
                change_percent=2.34,
                volume=28_500_000_000,
                market_cap=1_320_000_000_000,
                analysis=TechnicalAnalysis(
                    recommendation=Recommendation.BUY,
                    confidence=78,
                    support_level=Decimal("64000.00"),
                    resistance_level=Decimal("69000.00"),
                    rsi=66.0,
                    macd="Bullish",
                    sentiment=MarketSentiment.BULLISH,
                ),
                news=(
                    NewsItem(
                        title="Spot ETF inflows continue",
                        summary="Net inflows extended for a fifth consecutive session.",
                        impact=NewsImpact.POSITIVE,
                        timestamp=now - timedelta(hours=1),
                    ),
                ),
            ),
        ]

    def get_indices(self) -> dict[str, IndexQuote]:
        return dict(INDICES)

    def list_assets(self, user_id: str) -> list[Asset]:
        return list(HOLDINGS)
