"""
Use case: Load the profile page for the signed-in user.

Input: user ID from the verified token
Output: ProfileResult
Side effects: None.
Failure cases: UserNotFoundError.
"""

from tradehub.application.accounts.dtos import ProfileResult, UserResult
from tradehub.domain.accounts.errors import UserNotFoundError
from tradehub.domain.accounts.ports import AccountProfileProvider, UserRepository


class GetProfileUseCase:
    """Combines the stored user with account standing."""

    def __init__(
        self,
        user_repo: UserRepository,
        profile_provider: AccountProfileProvider,
    ) -> None:
        self._user_repo = user_repo
        self._profile_provider = profile_provider

    def execute(self, user_id: str) -> ProfileResult:
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return ProfileResult(
            user=UserResult.from_entity(user),
            profile=self._profile_provider.get_profile(user),
        )
