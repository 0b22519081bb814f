from __future__ import annotations

from typing import List

from telegram.ext import BaseHandler
from telegram.ext import CallbackQueryHandler
from telegram.ext import CommandHandler

from weekly_schedule_bot.use_cases.interfaces.telegram_handler_interface import (
    TelegramHandlerInterface,
)
from weekly_schedule_bot.use_cases.telegram_commands.keyboards import WEEK_STATUS_CALLBACK
from weekly_schedule_bot.use_cases.telegram_commands.week_status import WeekStatus


class WeekStatusHandler(TelegramHandlerInterface):
    def __init__(self, week_status_use_case: WeekStatus):
        self.week_status_use_case = week_status_use_case

    def get_handlers(self) -> List[BaseHandler]:
        return [
            CommandHandler("week", self.week_status_use_case.show_week_status),
            CallbackQueryHandler(
                self.week_status_use_case.show_week_status,
                pattern=f"^{WEEK_STATUS_CALLBACK}$",
            ),
            CommandHandler("status", self.week_status_use_case.show_status),
            CommandHandler("today", self.week_status_use_case.show_today),
        ]
