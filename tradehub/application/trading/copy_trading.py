"""
Use cases: Copy trading.

Browse experts, follow one, or start mirroring one's trades.
Side effects: None. Follow and copy requests are acknowledged only.
"""

import logging

from tradehub.application.trading.dtos import (
    CopyExpertCommand,
    CopyExpertResult,
    FollowExpertResult,
)
from tradehub.domain.trading.entities import CopyExpert
from tradehub.domain.trading.ports import ExpertDirectory

logger = logging.getLogger(__name__)


class ListExpertsUseCase:
    def __init__(self, directory: ExpertDirectory) -> None:
        self._directory = directory

    def execute(self, user_id: str) -> list[CopyExpert]:
        return self._directory.list_experts(user_id)


class FollowExpertUseCase:
    def execute(self, user_id: str, expert_id: str) -> FollowExpertResult:
        logger.info("User id=%s followed expert id=%s", user_id, expert_id)
        return FollowExpertResult(expert_id=expert_id)


class CopyExpertUseCase:
    """Acknowledges a copy-trading allocation.

    The amount is echoed back as posted.
    """

    def execute(self, command: CopyExpertCommand) -> CopyExpertResult:
        logger.info(
            "User id=%s started copying expert id=%s",
            command.user_id,
            command.expert_id,
        )
        return CopyExpertResult(expert_id=command.expert_id, amount=command.amount)
