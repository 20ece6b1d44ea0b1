"""Configuration management using Pydantic Settings"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_prefix="WLENV_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"

    # Initialization: first round lists the globals, second lets the handlers
    # finish binding whatever they requested during the first
    INIT_ROUNDTRIPS: int = 2

    @field_validator("INIT_ROUNDTRIPS")
    @classmethod
    def _at_least_two_rounds(cls, value: int) -> int:
        if value < 2:
            raise ValueError("INIT_ROUNDTRIPS must be at least 2")
        return value


settings = Settings()
