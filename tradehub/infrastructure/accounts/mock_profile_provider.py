"""
Adapter: Account standing for the profile page.

Implements AccountProfileProvider port with fixed figures.
"""

from tradehub.domain.accounts.entities import AccountProfile, User
from tradehub.domain.accounts.ports import AccountProfileProvider


class MockAccountProfileProvider(AccountProfileProvider):
    """Every account is a verified Premium account with 2FA shown as on.

    Two-factor authentication is display data only; sign-in never asks for it.
    """

    def get_profile(self, user: User) -> AccountProfile:
        return AccountProfile(
            account_type="Premium",
            member_since=user.created_at.strftime("%B %Y"),
            total_trades=247,
            success_rate=73.6,
            verification_status="Verified",
            two_factor_enabled=True,
            last_login="Today at 10:23 AM",
        )
