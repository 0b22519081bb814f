from __future__ import annotations

from typing import List

from telegram.ext import BaseHandler
from telegram.ext import CommandHandler

from weekly_schedule_bot.use_cases.interfaces.telegram_handler_interface import (
    TelegramHandlerInterface,
)
from weekly_schedule_bot.use_cases.telegram_commands.teleport import Teleport


class TeleportHandler(TelegramHandlerInterface):
    def __init__(self, teleport_use_case: Teleport):
        self.teleport_use_case = teleport_use_case

    def get_handlers(self) -> List[BaseHandler]:
        return [CommandHandler("teleport", self.teleport_use_case.teleport)]
