from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings. Any attribute can be overridden via ``RECEIPT_<NAME>``."""

    model_config = SettingsConfigDict(
        env_prefix="RECEIPT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Point values
    retailerNameMultiplier: int = Field(default=1)
    roundDollarBonus: int = Field(default=50)
    multipleOf025Bonus: int = Field(default=25)
    itemsBonusPerTwo: int = Field(default=5)
    itemDescriptionMultiplier: float = Field(default=0.2)
    oddDayBonus: int = Field(default=6)
    timeBonus: int = Field(default=10)

    # Logging
    logFilePath: str = Field(default="./logs/logs.out")
    logLevel: str = Field(default="DEBUG")
    logMaxBytes: int = Field(default=1024 * 1024)
    logBackupCount: int = Field(default=3)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)


settings = Settings()

CONFIG = settings.model_dump()
