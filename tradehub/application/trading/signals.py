"""
Use cases: Trading signals.

Side effects: None. Executing a signal is acknowledged only.
"""

import logging

from tradehub.application.trading.dtos import SignalExecution
from tradehub.domain.trading.entities import TradingSignal
from tradehub.domain.trading.ports import SignalFeed

logger = logging.getLogger(__name__)


class ListSignalsUseCase:
    def __init__(self, feed: SignalFeed) -> None:
        self._feed = feed

    def execute(self) -> list[TradingSignal]:
        return self._feed.list_signals()


class ExecuteSignalUseCase:
    """Acknowledges a request to trade on a signal."""

    def execute(self, user_id: str, signal_id: str) -> SignalExecution:
        logger.info("User id=%s executed signal id=%s", user_id, signal_id)
        return SignalExecution(signal_id=signal_id)
