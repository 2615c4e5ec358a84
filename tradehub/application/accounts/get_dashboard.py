"""
Use case: Assemble the dashboard for the signed-in user.

Input: user ID from the verified token
Output: DashboardResult
Side effects: None.
Failure cases: UserNotFoundError.
"""

import logging

from tradehub.application.accounts.dtos import DashboardResult, UserResult
from tradehub.domain.accounts.errors import UserNotFoundError
from tradehub.domain.accounts.ports import UserRepository
from tradehub.domain.trading.ports import MarketDataProvider, PortfolioProvider

logger = logging.getLogger(__name__)

# The dashboard shows the three headline indices, not the VIX.
OVERVIEW_INDICES = ("sp500", "nasdaq", "dow")


class GetDashboardUseCase:
    """Combines the stored user with portfolio and market widgets."""

    def __init__(
        self,
        user_repo: UserRepository,
        portfolio: PortfolioProvider,
        market_data: MarketDataProvider,
    ) -> None:
        self._user_repo = user_repo
        self._portfolio = portfolio
        self._market_data = market_data

    def execute(self, user_id: str) -> DashboardResult:
        """Build the dashboard.

        Raises:
            UserNotFoundError: If the token refers to a deleted user.
        """
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        indices = self._market_data.get_indices()
        logger.debug("Building dashboard for user id=%s", user_id)

        return DashboardResult(
            user=UserResult.from_entity(user),
            portfolio=self._portfolio.get_snapshot(user_id),
            recent_trades=self._portfolio.list_recent_trades(user_id),
            watchlist=self._portfolio.get_watchlist(user_id),
            market_overview={
                name: indices[name] for name in OVERVIEW_INDICES if name in indices
            },
        )
