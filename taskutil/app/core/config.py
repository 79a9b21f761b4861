from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# The listening port is part of the service contract and is not read from env.
LISTEN_PORT = 8787


class AppEnv(str, Enum):
    LOCAL = "local"
    DEV = "dev"
    PROD = "prod"


class AppSettings(BaseModel):
    name: str = Field(default="TaskUtilServer")
    env: AppEnv = Field(default=AppEnv.DEV)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=LISTEN_PORT)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not (1 <= value <= 65535):
            raise ValueError("port must be between 1 and 65535")
        return value


class OTELSettings(BaseModel):
    enabled: bool = False
    service_name: str = Field(default="taskutil-server")
    exporter_otlp_endpoint: str = Field(default="http://localhost:4317")


class Settings(BaseSettings):
    """
    Top-level settings loaded from TASKUTIL_* environment variables only
    (no .env or other config file is read).

    Nothing here is required; every value falls back to the defaults of the
    grouped models below.
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKUTIL_",
        extra="ignore",
    )

    # App
    app_name: Optional[str] = None
    app_env: Optional[str] = None
    app_host: Optional[str] = None
    log_level: Optional[str] = None

    # OTEL
    otel_enabled: Optional[bool] = None
    otel_service_name: Optional[str] = None
    otel_exporter_otlp_endpoint: Optional[str] = None

    @property
    def app(self) -> AppSettings:
        defaults = AppSettings()
        return AppSettings(
            name=self.app_name or defaults.name,
            env=AppEnv(self.app_env or defaults.env),
            host=self.app_host or defaults.host,
            port=LISTEN_PORT,
            log_level=(self.log_level or defaults.log_level).upper(),
        )

    @property
    def otel(self) -> OTELSettings:
        defaults = OTELSettings()
        return OTELSettings(
            enabled=(
                self.otel_enabled
                if self.otel_enabled is not None
                else defaults.enabled
            ),
            service_name=self.otel_service_name or defaults.service_name,
            exporter_otlp_endpoint=(
                self.otel_exporter_otlp_endpoint or defaults.exporter_otlp_endpoint
            ),
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance to avoid re-parsing env on every import.

    Usage:
        from taskutil.app.core.config import get_settings
        settings = get_settings()
        settings.app.name, settings.app.port, ...
    """
    return Settings()


settings = get_settings()
