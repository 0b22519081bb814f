from __future__ import annotations

from weekly_schedule_bot.settings.calendar_settings import CalendarSettings
from weekly_schedule_bot.settings.storage_settings import StorageSettings
from weekly_schedule_bot.settings.telegram_settings import TelegramConnectionSettings

__all__ = ["CalendarSettings", "StorageSettings", "TelegramConnectionSettings"]
