from __future__ import annotations

from typing import List

from telegram.ext import BaseHandler
from telegram.ext import CallbackQueryHandler
from telegram.ext import CommandHandler

from weekly_schedule_bot.use_cases.interfaces.telegram_handler_interface import (
    TelegramHandlerInterface,
)
from weekly_schedule_bot.use_cases.telegram_commands.keyboards import HELP_CALLBACK
from weekly_schedule_bot.use_cases.telegram_commands.main_menu import MainMenu


class MainMenuHandler(TelegramHandlerInterface):
    def __init__(self, main_menu_use_case: MainMenu):
        self.main_menu_use_case = main_menu_use_case

    def get_handlers(self) -> List[BaseHandler]:
        return [
            CommandHandler("start", self.main_menu_use_case.start),
            CommandHandler("help", self.main_menu_use_case.help),
            CallbackQueryHandler(self.main_menu_use_case.help, pattern=f"^{HELP_CALLBACK}$"),
        ]
