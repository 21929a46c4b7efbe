from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PROVISIONING_")

    # Pending launch bookkeeping
    DATABASE_URL: str = "sqlite+pysqlite:///:memory:"

    # Diagnostics
    LOG_LEVEL: str = "INFO"
    TRACE_ENABLED: bool = False
    TELEMETRY_JSONL_PATH: Optional[str] = None


settings = Settings()
