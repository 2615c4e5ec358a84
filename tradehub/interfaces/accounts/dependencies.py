"""
Dependency injection for the accounts bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
Also hosts the bearer-token guard every protected router depends on.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.engine import Engine

from tradehub.application.accounts.authenticate import AuthenticateUseCase
from tradehub.application.accounts.get_dashboard import GetDashboardUseCase
from tradehub.application.accounts.get_profile import GetProfileUseCase
from tradehub.application.accounts.sign_in import SignInUseCase
from tradehub.application.accounts.sign_up import SignUpUseCase
from tradehub.core.config import settings
from tradehub.domain.accounts.entities import TokenClaims
from tradehub.infrastructure.accounts.jwt_token_service import JwtTokenService
from tradehub.infrastructure.accounts.mock_profile_provider import (
    MockAccountProfileProvider,
)
from tradehub.infrastructure.accounts.password_hasher import BcryptPasswordHasher
from tradehub.infrastructure.accounts.user_repository import SqlAlchemyUserRepository
from tradehub.infrastructure.database import build_engine
from tradehub.infrastructure.trading.mock_market_data import MockMarketDataProvider
from tradehub.infrastructure.trading.mock_portfolio import MockPortfolioProvider

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return build_engine(settings.database_url)


@lru_cache
def get_token_service() -> JwtTokenService:
    return JwtTokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_hours=settings.jwt_expire_hours,
    )


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def get_user_repository() -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(engine=get_engine())


def get_sign_up_use_case() -> SignUpUseCase:
    """Build SignUpUseCase with its infrastructure dependencies."""
    return SignUpUseCase(
        user_repo=get_user_repository(),
        hasher=get_password_hasher(),
        tokens=get_token_service(),
    )


def get_sign_in_use_case() -> SignInUseCase:
    """Build SignInUseCase with its infrastructure dependencies."""
    return SignInUseCase(
        user_repo=get_user_repository(),
        hasher=get_password_hasher(),
        tokens=get_token_service(),
    )


def get_authenticate_use_case() -> AuthenticateUseCase:
    return AuthenticateUseCase(tokens=get_token_service())


def get_dashboard_use_case() -> GetDashboardUseCase:
    """Build GetDashboardUseCase with its infrastructure dependencies."""
    return GetDashboardUseCase(
        user_repo=get_user_repository(),
        portfolio=MockPortfolioProvider(),
        market_data=MockMarketDataProvider(),
    )


def get_profile_use_case() -> GetProfileUseCase:
    """Build GetProfileUseCase with its infrastructure dependencies."""
    return GetProfileUseCase(
        user_repo=get_user_repository(),
        profile_provider=MockAccountProfileProvider(),
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    use_case: AuthenticateUseCase = Depends(get_authenticate_use_case),
) -> TokenClaims:
    """Resolve the caller from the `Authorization: Bearer` header.

    Raises:
        MissingTokenError: No bearer token was sent (401).
        InvalidTokenError: The token failed verification (403).
    """
    token = credentials.credentials if credentials else None
    return use_case.execute(token)
