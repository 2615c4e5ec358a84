"""
Use cases: Trading bots.

List the user's bots, configure a new one, start or pause one.
Side effects: None. New bots and status changes are acknowledged, not stored.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from tradehub.application.trading.dtos import BotStatusChange, CreateBotCommand
from tradehub.domain.trading.entities import Bot, BotPerformance, BotStatus
from tradehub.domain.trading.ports import BotCatalog

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ListBotsUseCase:
    def __init__(self, catalog: BotCatalog) -> None:
        self._catalog = catalog

    def execute(self, user_id: str) -> list[Bot]:
        return self._catalog.list_bots(user_id)


class CreateBotUseCase:
    """Builds a stopped bot with zeroed performance from the submitted form.

    The bot is returned once and is not added to the catalog.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or _utc_now

    def execute(self, command: CreateBotCommand) -> Bot:
        now = self._clock()
        bot = Bot(
            id=f"bot{int(now.timestamp() * 1000)}",
            name=command.name,
            status=BotStatus.STOPPED,
            strategy=command.strategy,
            capital=command.capital,
            max_risk=command.max_risk,
            profit_target=command.profit_target,
            stop_loss=command.stop_loss,
            created_at=now,
            performance=BotPerformance(),
        )
        logger.info("Configured bot id=%s for user id=%s", bot.id, command.user_id)
        return bot


class ChangeBotStatusUseCase:
    """Acknowledges a request to move a bot to another run state.

    Args:
        target: The status this use case moves bots to (ACTIVE to start,
            PAUSED to pause).
    """

    def __init__(self, target: BotStatus) -> None:
        self._target = target

    def execute(self, bot_id: str) -> BotStatusChange:
        logger.info("Bot id=%s -> %s", bot_id, self._target.value)
        return BotStatusChange(bot_id=bot_id, status=self._target)
