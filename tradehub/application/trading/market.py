"""
Use cases: Market data.

Per-instrument analysis, index levels and the user's asset holdings.
Side effects: None.
"""

from tradehub.domain.trading.entities import Asset, IndexQuote, MarketAnalysis
from tradehub.domain.trading.ports import MarketDataProvider


class GetMarketAnalysisUseCase:
    def __init__(self, market_data: MarketDataProvider) -> None:
        self._market_data = market_data

    def execute(self) -> list[MarketAnalysis]:
        return self._market_data.list_analyses()


class GetMarketIndicesUseCase:
    def __init__(self, market_data: MarketDataProvider) -> None:
        self._market_data = market_data

    def execute(self) -> dict[str, IndexQuote]:
        return self._market_data.get_indices()


class ListAssetsUseCase:
    def __init__(self, market_data: MarketDataProvider) -> None:
        self._market_data = market_data

    def execute(self, user_id: str) -> list[Asset]:
        return self._market_data.list_assets(user_id)
