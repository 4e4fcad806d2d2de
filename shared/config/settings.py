"""
Settings Module
===============

Pydantic-based configuration with environment variable loading.

Version: 0.1.0
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class MongoSettings(BaseSettings):
    """MongoDB configuration."""

    model_config = SettingsConfigDict(env_prefix="MONGODB_")

    host: str = "localhost"
    port: int = 27017
    user: str = "forge"
    password: SecretStr = SecretStr("forge_mongo_password")
    db: str = Field(default="forge_bbbee", alias="MONGODB_DB")

    @property
    def uri(self) -> str:
        """Generate MongoDB connection URI."""
        pwd = self.password.get_secret_value()
        return f"mongodb://{self.user}:{pwd}@{self.host}:{self.port}/{self.db}?authSource=admin"


class JWTSettings(BaseSettings):
    """JWT authentication configuration."""

    model_config = SettingsConfigDict(env_prefix="JWT_")

    secret_key: SecretStr = SecretStr("your-jwt-secret-key-min-32-chars-long")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30
    refresh_token_expire_days: int = 7


class CORSSettings(BaseSettings):
    """CORS configuration."""

    model_config = SettingsConfigDict(env_prefix="CORS_")

    origins: str = "http://localhost:3000,http://localhost:5173"
    allow_credentials: bool = True

    @property
    def origins_list(self) -> list[str]:
        """Parse origins string into list."""
        return [o.strip() for o in self.origins.split(",") if o.strip()]


class ScoringSettings(BaseSettings):
    """Scoring defaults.

    `default_sector` applies when neither the request nor the profile names one.
    """

    model_config = SettingsConfigDict(env_prefix="SCORING_")

    default_sector: str = "Generic"


class PasswordSettings(BaseSettings):
    """Password hashing configuration."""

    model_config = SettingsConfigDict(env_prefix="PASSWORD_")

    bcrypt_rounds: int = Field(default=12, ge=4, le=31)


class ServicePorts(BaseSettings):
    """Service port configuration."""

    bbbee_scoring: int = Field(default=5000, alias="BBBEE_SCORING_PORT")


class Settings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables with sensible defaults.
    Use the global `settings` singleton or call `get_settings()`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = True
    log_level: LogLevel = LogLevel.INFO

    # Project paths
    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)

    # Service ports
    ports: ServicePorts = Field(default_factory=ServicePorts)

    # Database connections
    mongodb: MongoSettings = Field(default_factory=MongoSettings)

    # Authentication
    jwt: JWTSettings = Field(default_factory=JWTSettings)
    password: PasswordSettings = Field(default_factory=PasswordSettings)

    # Security
    cors: CORSSettings = Field(default_factory=CORSSettings)

    # Scoring
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Ensure log level is uppercase."""
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.environment == Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings singleton.
    """
    return Settings()
