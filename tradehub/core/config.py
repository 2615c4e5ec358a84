"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. No scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "your-secret-key"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (serves /docs and /redoc). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy URL of the user store.
        jwt_secret: HMAC secret used to sign bearer tokens.
        jwt_algorithm: JWT signing algorithm.
        jwt_expire_hours: Lifetime of an issued token.
        bcrypt_rounds: bcrypt cost factor (4-31).
        rate_limit_enabled: Turn slowapi rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_auth: Rate limit for sign-up and sign-in.
        cors_origins: Origins allowed to call the API from a browser.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "TradeHub"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./tradehub.db"

    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24
    bcrypt_rounds: int = 12

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"
    rate_limit_auth: str = "10/minute"

    cors_origins: list[str] = ["*"]

    @property
    def uses_default_jwt_secret(self) -> bool:
        """True when tokens are signed with the development fallback secret."""
        return self.jwt_secret == DEFAULT_JWT_SECRET


settings = Settings()
