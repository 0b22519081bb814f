from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class TelegramConnectionSettings(BaseSettings):
    TOKEN: str = Field(description="Telegram Bot Token")
    WEBHOOK_URL: Optional[str] = Field(
        default=None,
        description="Public base URL the Telegram webhook is registered under",
    )
    WEBHOOK_SECRET: Optional[str] = Field(
        default=None,
        description="Value expected in the X-Telegram-Bot-Api-Secret-Token header",
    )
    ADMIN_CHAT_ID: Optional[int] = Field(
        default=None,
        description="Telegram user id allowed to use /stats",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TELEGRAM_",
        extra="ignore",
    )
