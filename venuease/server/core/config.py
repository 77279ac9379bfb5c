"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class DatabaseConfig(BaseModel):
    """Relational database connection configuration."""

    url: Optional[str] = Field(
        default=None,
        alias="DATABASE_URL",
        description="Full connection URL. Overrides the individual connection parameters when set.",
    )
    driver: str = Field(default="postgresql", alias="DB_DRIVER", description="Database backend (postgresql, mysql)")
    host: str = Field(default="localhost", alias="DB_HOST", description="Database host address")
    port: int = Field(default=5432, alias="DB_PORT", description="Database port number")
    user: str = Field(default="venuease", alias="DB_USER", description="Database user")
    password: SecretStr = Field(default=SecretStr("changeme"), alias="DB_PASSWORD", description="Database password")
    name: str = Field(default="venuease", alias="DB_NAME", description="Database name")
    pool_size: int = Field(default=10, ge=1, alias="DB_POOL_SIZE", description="Connection pool size")
    create_tables: bool = Field(
        default=True,
        alias="DB_CREATE_TABLES",
        description="Create missing tables from ORM metadata on startup",
    )

    model_config = {"populate_by_name": True}

    @property
    def connection_url(self) -> str:
        """Connection URL built from the individual parameters unless overridden."""
        if self.url:
            return self.url
        return URL.create(
            drivername=self.driver,
            username=self.user,
            password=self.password.get_secret_value(),
            host=self.host,
            port=self.port,
            database=self.name,
        ).render_as_string(hide_password=False)


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =====================================================================
    # VenuEase Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="VenuEase server host address to bind to",
        alias="VENUEASE_SERVER_HOST",
    )
    server_port: int = Field(
        default=5000,
        description="VenuEase server port number",
        alias="VENUEASE_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="VENUEASE_LOG_LEVEL",
    )
    log_format: str = Field(default="detailed", description="Log format (simple, detailed, json)", alias="LOG_FORMAT")
    log_file_dir: str = Field(default="logs", description="Directory for the log file", alias="LOG_FILE_DIR")
    enable_file_logging: bool = Field(default=False, description="Write logs to a file", alias="ENABLE_FILE_LOGGING")

    # =====================================================================
    # Database Configuration (flat env vars, grouped below)
    # =====================================================================
    DATABASE_URL: Optional[str] = Field(default=None)
    DB_DRIVER: str = Field(default="postgresql")
    DB_HOST: str = Field(default="localhost")
    DB_PORT: int = Field(default=5432)
    DB_USER: str = Field(default="venuease")
    DB_PASSWORD: SecretStr = Field(default=SecretStr("changeme"))
    DB_NAME: str = Field(default="venuease")
    DB_POOL_SIZE: int = Field(default=10, ge=1)
    DB_CREATE_TABLES: bool = Field(default=True)

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    CORS_ORIGINS: list[str] = Field(default=["*"])
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True)
    CORS_ALLOW_METHODS: list[str] = Field(default=["*"])
    CORS_ALLOW_HEADERS: list[str] = Field(default=["*"])

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration from environment variables."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
