"""Helpers shared by the Telegram command use cases."""

from __future__ import annotations

from typing import List
from typing import Optional

from telegram import InlineKeyboardMarkup
from telegram import Update
from telegram.constants import ChatType
from telegram.constants import ParseMode
from telegram.error import BadRequest
from telegram.helpers import escape_markdown

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.constants import ENGLISH_WEEKDAYS
from weekly_schedule_bot.entities.constants import PERSIAN_WEEKDAYS
from weekly_schedule_bot.entities.schedule import ScheduleLesson
from weekly_schedule_bot.use_cases.telegram_commands import messages
from weekly_schedule_bot.utils.time_utils import class_slot_label


async def reply(
    update: Update,
    text: str,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> None:
    """Answer a command with a new message, or a button press by editing its message."""
    query = update.callback_query
    if query is not None:
        await query.answer()
        try:
            await query.edit_message_text(
                text, reply_markup=reply_markup, parse_mode=ParseMode.MARKDOWN
            )
        except BadRequest as e:
            # pressing refresh twice on the same day renders identical content
            if "not modified" not in str(e).lower():
                raise
            LOGGER.debug("Skipped edit of unchanged message")
        return
    await update.effective_message.reply_text(
        text, reply_markup=reply_markup, parse_mode=ParseMode.MARKDOWN
    )


def is_private_chat(update: Update) -> bool:
    chat = update.effective_chat
    return chat is not None and chat.type == ChatType.PRIVATE


def escape(text: Optional[str]) -> str:
    return escape_markdown(text or "-", version=1)


def _day_key(text: str) -> str:
    # users type سه‌شنبه with a space, a ZWNJ, or nothing in between
    return text.strip().lower().replace("‌", "").replace(" ", "")


_DAY_ALIASES = {
    **{_day_key(name): key for name, key in zip(PERSIAN_WEEKDAYS, ENGLISH_WEEKDAYS)},
    **{key: key for key in ENGLISH_WEEKDAYS},
}


def resolve_day(text: Optional[str]) -> Optional[str]:
    """English schedule key for a Persian or English teaching-day name."""
    if not text:
        return None
    return _DAY_ALIASES.get(_day_key(text))


def format_lessons(lessons: List[ScheduleLesson], with_slots: bool = False) -> str:
    lines = []
    for index, lesson in enumerate(lessons, start=1):
        lines.append(
            messages.LESSON_LINE.format(
                index=index,
                slot=class_slot_label(lesson.start_time) if with_slots else "",
                lesson=escape(lesson.lesson),
                start_time=lesson.start_time,
                end_time=lesson.end_time,
                location=escape(lesson.location),
            )
        )
    return "".join(lines)
