from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import List

from telegram.ext import BaseHandler


class TelegramHandlerInterface(ABC):
    @abstractmethod
    def get_handlers(self) -> List[BaseHandler]:
        """Handlers to register on the Telegram application."""
        pass
