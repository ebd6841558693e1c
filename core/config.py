import logging
import secrets

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class AuthSettings(BaseSettings):
    # No default - must be set via .env or environment variable
    SECRET_KEY: str = ""
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class CacheSettings(BaseSettings):
    # "memory://" for a single process, "redis://host:6379/0" when running several workers
    ROUTE_CACHE_URL: str = "memory://"
    ROUTE_CACHE_TTL_SECONDS: int = 3600  # 1 hour
    ROUTE_CACHE_PREFIX: str = "routes"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class Settings(BaseSettings):
    # Database - No default password for security
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""  # Required via .env
    POSTGRES_DB: str = "flight_routes_dev"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432

    # Full SQLAlchemy URL, takes precedence over the POSTGRES_* parts (e.g. sqlite:// in tests)
    DATABASE_URL_OVERRIDE: str = ""

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False  # Default to False for security
    LOG_LEVEL: str = "INFO"

    # Frontend
    FRONTEND_URL: str = "http://localhost:5173"

    # Auth settings (nested)
    auth: AuthSettings = AuthSettings()

    # Route cache settings (nested)
    cache: CacheSettings = CacheSettings()

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.FRONTEND_URL.split(",") if origin.strip()]

    def validate_production_settings(self) -> None:
        """Validate critical settings for production environment.

        Raises ValueError if production settings are invalid.
        """
        errors = []

        if self.is_production:
            if not self.auth.SECRET_KEY or len(self.auth.SECRET_KEY) < 32:
                errors.append(
                    "SECRET_KEY must be set to a secure value (min 32 chars) in production"
                )

            if not self.DATABASE_URL_OVERRIDE and (
                not self.POSTGRES_PASSWORD or self.POSTGRES_PASSWORD == "postgres"
            ):
                errors.append(
                    "POSTGRES_PASSWORD must be set to a secure value in production"
                )

            if self.DEBUG:
                errors.append("DEBUG must be False in production")

        if errors:
            raise ValueError(
                "Production configuration errors:\n" + "\n".join(f"  - {e}" for e in errors)
            )

    def validate_development_settings(self) -> None:
        """Set sensible defaults for development if not configured."""
        if not self.auth.SECRET_KEY:
            self.auth.SECRET_KEY = secrets.token_urlsafe(32)
            logger.warning("Using auto-generated SECRET_KEY for development")

        if not self.POSTGRES_PASSWORD:
            self.POSTGRES_PASSWORD = "postgres"
            logger.warning("Using default POSTGRES_PASSWORD for development")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Create settings instance
settings = Settings()

# Validate based on environment
if settings.is_production:
    settings.validate_production_settings()
else:
    settings.validate_development_settings()
