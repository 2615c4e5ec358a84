"""
Adapter: Copy-trading expert directory.

Implements ExpertDirectory port with two demo experts.
"""

from decimal import Decimal

from tradehub.domain.trading.entities import CopyExpert, ExpertPerformance
from tradehub.domain.trading.ports import ExpertDirectory

EXPERTS = (
    CopyExpert(
        id="expert1",
        name="Sarah Johnson",
        username="cryptoqueen",
        avatar="/avatars/sarah.jpg",
        rating=4.8,
        followers=12450,
        following=False,
        performance=ExpertPerformance(
            total_return=247.8,
            monthly_return=18.2,
            win_rate=76.3,
            total_trades=1024,
            risk_score=3.2,
        ),
        strategies=("Swing Trading", "Technical Analysis", "Risk Management"),
        description=(
            "Professional trader with 8+ years experience in crypto and forex "
            "markets. Specializes in medium-term swing trades with excellent "
            "risk management."
        ),
        copy_fee=20,
        min_copy_amount=Decimal("500"),
    ),
    CopyExpert(
        id="expert2",
        name="Michael Chen",
        username="tradingpro",
        rating=4.6,
        followers=8934,
        following=True,
        performance=ExpertPerformance(
            total_return=189.4,
            monthly_return=14.7,
            win_rate=68.9,
            total_trades=756,
            risk_score=2.8,
        ),
        strategies=("Day Trading", "Scalping", "News Trading"),
        description=(
            "Full-time day trader focusing on high-frequency strategies and "
            "news-based trading. Conservative risk approach with consistent "
            "returns."
        ),
        copy_fee=15,
        min_copy_amount=Decimal("1000"),
    ),
)


class MockExpertDirectory(ExpertDirectory):
    def list_experts(self, user_id: str) -> list[CopyExpert]:
        return list(EXPERTS)
