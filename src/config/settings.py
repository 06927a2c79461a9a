from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    hf_token: str = ""
    vite_huggingface_api_key: str = ""
    app_host: str = "0.0.0.0"
    app_port: int = 3001
    log_level: LogLevel = "INFO"
    upstream_timeout: float | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def api_key(self) -> str | None:
        # First non-empty source wins
        return self.hf_token or self.vite_huggingface_api_key or None


settings = Settings()
