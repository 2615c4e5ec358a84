"""
FastAPI routers for the accounts bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request

from tradehub.application.accounts.dtos import SignInCommand, SignUpCommand
from tradehub.application.accounts.get_dashboard import GetDashboardUseCase
from tradehub.application.accounts.get_profile import GetProfileUseCase
from tradehub.application.accounts.sign_in import SignInUseCase
from tradehub.application.accounts.sign_up import SignUpUseCase
from tradehub.core.config import settings
from tradehub.domain.accounts.entities import TokenClaims
from tradehub.interfaces.accounts.dependencies import (
    get_current_user,
    get_dashboard_use_case,
    get_profile_use_case,
    get_sign_in_use_case,
    get_sign_up_use_case,
)
from tradehub.interfaces.accounts.schemas import (
    AuthResponse,
    DashboardResponse,
    ProfileResponse,
    SignInRequest,
    SignUpRequest,
    UserSchema,
)
from tradehub.interfaces.schemas import ErrorResponse
from tradehub.shared.security.rate_limiting import limiter

auth_router = APIRouter(prefix="/auth", tags=["auth"])
user_router = APIRouter(prefix="/user", tags=["user"])

PROTECTED_RESPONSES = {
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@auth_router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}},
    summary="Create an account",
    description="Register with email, password and full name. Returns a bearer token.",
)
@limiter.limit(settings.rate_limit_auth)
def sign_up(
    request: Request,
    payload: SignUpRequest,
    use_case: SignUpUseCase = Depends(get_sign_up_use_case),
) -> AuthResponse:
    """Register a new user and sign them in."""
    result = use_case.execute(
        SignUpCommand(
            email=payload.email,
            password=payload.password,
            full_name=payload.full_name,
        )
    )
    return AuthResponse(
        message="User created successfully",
        user=UserSchema.from_result(result.user),
        token=result.token,
    )


@auth_router.post(
    "/signin",
    response_model=AuthResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
    },
    summary="Sign in",
    description="Exchange email and password for a bearer token.",
)
@limiter.limit(settings.rate_limit_auth)
def sign_in(
    request: Request,
    payload: SignInRequest,
    use_case: SignInUseCase = Depends(get_sign_in_use_case),
) -> AuthResponse:
    """Authenticate with email and password."""
    result = use_case.execute(SignInCommand(email=payload.email, password=payload.password))
    return AuthResponse(
        message="Sign in successful",
        user=UserSchema.from_result(result.user),
        token=result.token,
    )


@user_router.get(
    "/dashboard",
    response_model=DashboardResponse,
    responses=PROTECTED_RESPONSES,
    summary="Dashboard",
    description="Portfolio summary, recent trades, watchlist and market overview.",
)
def get_dashboard(
    claims: TokenClaims = Depends(get_current_user),
    use_case: GetDashboardUseCase = Depends(get_dashboard_use_case),
) -> DashboardResponse:
    """Return the dashboard for the signed-in user."""
    return DashboardResponse.from_result(use_case.execute(claims.user_id))


@user_router.get(
    "/profile",
    response_model=ProfileResponse,
    responses=PROTECTED_RESPONSES,
    summary="Profile",
    description="Account details and standing for the signed-in user.",
)
def get_profile(
    claims: TokenClaims = Depends(get_current_user),
    use_case: GetProfileUseCase = Depends(get_profile_use_case),
) -> ProfileResponse:
    """Return the profile for the signed-in user."""
    return ProfileResponse.from_result(use_case.execute(claims.user_id))
