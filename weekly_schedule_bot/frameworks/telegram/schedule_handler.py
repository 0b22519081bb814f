from __future__ import annotations

from typing import List

from telegram.ext import BaseHandler
from telegram.ext import CallbackQueryHandler
from telegram.ext import CommandHandler

from weekly_schedule_bot.use_cases.interfaces.telegram_handler_interface import (
    TelegramHandlerInterface,
)
from weekly_schedule_bot.use_cases.telegram_commands.keyboards import SCHEDULE_VIEW_CALLBACK
from weekly_schedule_bot.use_cases.telegram_commands.schedule_management import (
    ScheduleManagement,
)


class ScheduleHandler(TelegramHandlerInterface):
    def __init__(self, schedule_management_use_case: ScheduleManagement):
        self.schedule_management_use_case = schedule_management_use_case

    def get_handlers(self) -> List[BaseHandler]:
        use_case = self.schedule_management_use_case
        return [
            CommandHandler("schedule", use_case.view_schedule),
            CallbackQueryHandler(use_case.view_schedule, pattern=f"^{SCHEDULE_VIEW_CALLBACK}$"),
            CommandHandler("add_lesson", use_case.add_lesson),
            CommandHandler("delete_lesson", use_case.delete_lesson),
            CommandHandler("clear_day", use_case.clear_day),
            CommandHandler("clear_week", use_case.clear_week),
            CommandHandler("clear_schedule", use_case.clear_schedule),
        ]
