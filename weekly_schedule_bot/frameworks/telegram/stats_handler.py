from __future__ import annotations

from typing import List

from telegram.ext import BaseHandler
from telegram.ext import CommandHandler

from weekly_schedule_bot.use_cases.interfaces.telegram_handler_interface import (
    TelegramHandlerInterface,
)
from weekly_schedule_bot.use_cases.telegram_commands.stats import BotStats


class StatsHandler(TelegramHandlerInterface):
    def __init__(self, bot_stats_use_case: BotStats):
        self.bot_stats_use_case = bot_stats_use_case

    def get_handlers(self) -> List[BaseHandler]:
        return [CommandHandler("stats", self.bot_stats_use_case.show_stats)]
