from __future__ import annotations

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STORE_DELEGATE = "petstore.delegates.default:DefaultStoreApiDelegate"
APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "petstore-store-api"
    app_env: str = "development"
    app_debug: bool = False
    app_host: str = "0.0.0.0"
    app_port: int = 8080
    app_log_level: str = "INFO"

    # API
    api_base_path: str = "/v2"

    # Delegate holding the store business logic, as "module:attribute"
    store_delegate: str = DEFAULT_STORE_DELEGATE

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @field_validator("api_base_path")
    @classmethod
    def normalize_base_path(cls, value: str) -> str:
        """Base path always starts with a slash and never ends with one."""
        value = value.strip().rstrip("/")
        if value and not value.startswith("/"):
            value = f"/{value}"
        return value

    @model_validator(mode="after")
    def validate_production_delegate(self) -> Settings:
        if self.is_production and self.store_delegate == DEFAULT_STORE_DELEGATE:
            raise ValueError("store_delegate must be set to a real implementation in production")
        return self


settings = Settings()
