from typing import Optional, Any, Union
from pathlib import Path

from dateutil import tz
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, PostgresDsn, ValidationInfo, field_validator

# Define the root directory of the forum_insights service
SERVICE_ROOT_DIR = Path(__file__).parent.parent.resolve()
# Path to the repository root (two levels up from this settings.py)
PROJECT_ROOT_DIR = SERVICE_ROOT_DIR.parent


class Settings(BaseSettings):
    # Application settings
    APP_NAME: str = "ForumInsightsService"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8002

    # Security settings
    CORS_ORIGINS: Union[str, list[str]] = "http://localhost:3000,http://localhost:8080"
    CORS_ALLOW_CREDENTIALS: bool = True

    # Database settings
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "user"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "forum_db"
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    # Day boundaries for the daily activity series are taken in this zone
    REPORTING_TIMEZONE: str = "UTC"

    # Logging configuration path (can be overridden by env var)
    LOGGING_CONFIG_PATH: str = str(SERVICE_ROOT_DIR / "config" / "logging_config.yaml")

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT_DIR / ".env"),
        env_file_encoding='utf-8',
        extra='ignore'
    )

    @field_validator("DATABASE_URL", mode='before')
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> Any:
        if isinstance(v, str):
            return v
        db_name = info.data.get("DB_NAME")
        return str(PostgresDsn.build(
            scheme="postgresql+asyncpg",
            username=info.data.get("DB_USER"),
            password=info.data.get("DB_PASSWORD"),
            host=info.data.get("DB_HOST"),
            port=int(info.data.get("DB_PORT")),
            path=db_name or '',
        ))

    @field_validator("REPORTING_TIMEZONE")
    @classmethod
    def check_reporting_timezone(cls, v: str) -> str:
        # gettz("") resolves to the host's local zone
        if not v.strip():
            raise ValueError("REPORTING_TIMEZONE must not be blank")
        if tz.gettz(v) is None:
            raise ValueError(f"Unknown timezone: {v}")
        return v

    def model_post_init(self, __context) -> None:
        """Parse comma-separated strings into lists after model initialization."""
        if isinstance(self.CORS_ORIGINS, str):
            self.CORS_ORIGINS = [origin.strip() for origin in self.CORS_ORIGINS.split(',') if origin.strip()]

    @property
    def reporting_tzinfo(self):
        """tzinfo used to cut calendar days for the insights window."""
        return tz.gettz(self.REPORTING_TIMEZONE)


# Instantiate settings
settings = Settings()
