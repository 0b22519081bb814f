"""Tests for the shared reply helper."""

import unittest
from unittest import IsolatedAsyncioTestCase
from unittest.mock import AsyncMock, MagicMock

from telegram.constants import ParseMode
from telegram.error import BadRequest

from weekly_schedule_bot.use_cases.telegram_commands.common import reply


def _make_button_update():
    update = MagicMock()
    update.callback_query.answer = AsyncMock()
    update.callback_query.edit_message_text = AsyncMock()
    update.effective_message.reply_text = AsyncMock()
    return update


class TestReply(IsolatedAsyncioTestCase):
    async def test_command_sends_new_message(self):
        update = MagicMock()
        update.callback_query = None
        update.effective_message.reply_text = AsyncMock()

        await reply(update, "hello")

        update.effective_message.reply_text.assert_awaited_once_with(
            "hello", reply_markup=None, parse_mode=ParseMode.MARKDOWN
        )

    async def test_button_press_edits_message(self):
        update = _make_button_update()

        await reply(update, "hello")

        update.callback_query.answer.assert_awaited_once()
        update.callback_query.edit_message_text.assert_awaited_once_with(
            "hello", reply_markup=None, parse_mode=ParseMode.MARKDOWN
        )
        update.effective_message.reply_text.assert_not_awaited()

    async def test_unchanged_message_is_ignored(self):
        update = _make_button_update()
        update.callback_query.edit_message_text.side_effect = BadRequest(
            "Message is not modified: specified new message content and reply markup "
            "are exactly the same as a current content and reply markup of the message"
        )

        await reply(update, "same text")

        update.callback_query.answer.assert_awaited_once()
        update.effective_message.reply_text.assert_not_awaited()

    async def test_other_bad_requests_propagate(self):
        update = _make_button_update()
        update.callback_query.edit_message_text.side_effect = BadRequest(
            "Can't parse entities: can't find end of the entity"
        )

        with self.assertRaises(BadRequest):
            await reply(update, "*broken")


if __name__ == "__main__":
    unittest.main()
