# programhub/shared/config.py
from enum import Enum
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "programhub"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"
    OTEL_SERVICE_NAME: str = "programhub"

    # --- Persistence ---
    # "filesystem" keeps one JSON document per storage key on disk,
    # "memory" keeps it for the lifetime of the process only.
    STORAGE_BACKEND: Literal["filesystem", "memory"] = "filesystem"
    FILESYSTEM_STORE_PATH: str = "data/store"

    # Bump the key suffix (and SCHEMA_VERSION) when the document shape breaks,
    # older documents stored under the previous key are then ignored.
    STORAGE_KEY: str = "class2class_prototype_db_v1"
    SCHEMA_VERSION: int = 1

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
