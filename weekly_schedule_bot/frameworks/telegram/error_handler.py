from __future__ import annotations

import traceback

from telegram import Update
from telegram.ext import CallbackContext

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.use_cases.telegram_commands import messages


async def error(update: object, context: CallbackContext) -> None:
    """Handle errors that occur during handling of updates.

    Args:
        update: The update object from Telegram
        context: The context object from Telegram containing the error
    """
    LOGGER.warning(f'Update \n\n "{update}" caused error "\n {context.error}"')
    if context.error and context.error.__traceback__:
        for line in traceback.format_tb(context.error.__traceback__):
            LOGGER.error(line)

    try:
        if isinstance(update, Update) and update.effective_message:
            await update.effective_message.reply_text(messages.ERROR_OCCURRED)
        else:
            LOGGER.error(
                "Error occurred without an associated update or message.",
            )
    except Exception as e:
        LOGGER.error(f"Failed to send error message to user: {e}")
