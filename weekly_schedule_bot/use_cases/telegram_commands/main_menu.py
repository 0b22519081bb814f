from __future__ import annotations

from telegram import Update
from telegram.ext import CallbackContext

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.use_cases.telegram_commands import messages
from weekly_schedule_bot.use_cases.telegram_commands.common import escape
from weekly_schedule_bot.use_cases.telegram_commands.common import is_private_chat
from weekly_schedule_bot.use_cases.telegram_commands.common import reply
from weekly_schedule_bot.use_cases.telegram_commands.keyboards import main_menu_keyboard


class MainMenu:
    async def start(self, update: Update, context: CallbackContext) -> None:
        user = update.effective_user
        if is_private_chat(update):
            await reply(
                update,
                messages.WELCOME_PRIVATE.format(first_name=escape(user.first_name)),
                main_menu_keyboard(),
            )
        else:
            await reply(
                update,
                messages.WELCOME_GROUP.format(bot_username=escape(context.bot.username)),
            )
        LOGGER.info(f"/start from user {user.id if user else None}")

    async def help(self, update: Update, context: CallbackContext) -> None:
        await reply(
            update,
            messages.HELP,
            main_menu_keyboard() if is_private_chat(update) else None,
        )
