from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be configured via .env file or environment variables.
    Integration secrets are SecretStr so they never show up in reprs or logs.
    """

    # Database
    DATABASE_URL: str
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # JWT Authentication (shared with the external auth service)
    SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"

    # Playback devices authenticate with a per-screen token in this header
    DEVICE_TOKEN_HEADER: str = "X-Device-Token"

    # Application
    APP_NAME: str = "Signage Control Plane API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = ""
    CORS_ALLOW_CREDENTIALS: bool = True

    # Zoho Cliq integration
    CLIQ_API_BASE_URL: str = "https://cliq.zoho.com/api/v2"
    ZOHO_ACCOUNTS_URL: str = "https://accounts.zoho.com"
    ZOHO_CLIENT_ID: str = ""
    ZOHO_CLIENT_SECRET: SecretStr = SecretStr("")
    UPSTREAM_TIMEOUT_SECONDS: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS from comma-separated string"""
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
