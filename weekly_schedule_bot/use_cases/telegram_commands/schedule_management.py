from __future__ import annotations

from typing import List
from typing import Optional
from typing import Tuple

from telegram import Update
from telegram.ext import CallbackContext

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.constants import ENGLISH_WEEKDAYS
from weekly_schedule_bot.entities.constants import PERSIAN_WEEKDAYS
from weekly_schedule_bot.entities.parity import Parity
from weekly_schedule_bot.entities.schedule import ScheduleLesson
from weekly_schedule_bot.entities.schedule import UserSchedule
from weekly_schedule_bot.use_cases.interfaces.schedule_repository_interface import (
    ScheduleRepositoryInterface,
)
from weekly_schedule_bot.use_cases.telegram_commands import messages
from weekly_schedule_bot.use_cases.telegram_commands.common import escape
from weekly_schedule_bot.use_cases.telegram_commands.common import is_private_chat
from weekly_schedule_bot.use_cases.telegram_commands.common import reply
from weekly_schedule_bot.use_cases.telegram_commands.common import resolve_day
from weekly_schedule_bot.use_cases.telegram_commands.keyboards import back_to_menu_keyboard
from weekly_schedule_bot.utils.persian_text import normalize_digits
from weekly_schedule_bot.utils.time_utils import calculate_idle_time
from weekly_schedule_bot.utils.time_utils import is_valid_time_format
from weekly_schedule_bot.utils.time_utils import parse_time


def _read_week_and_day(args: List[str]) -> Optional[Tuple[Parity, str, List[str]]]:
    """Split ``<parity> <day> rest...`` command arguments.

    A two-word day such as ``سه شنبه`` is accepted as well.
    """
    if len(args) < 2:
        return None
    try:
        parity = Parity.from_text(args[0])
    except ValueError:
        return None
    day = resolve_day(args[1])
    rest = args[2:]
    if day is None and len(args) > 2:
        day = resolve_day(args[1] + args[2])
        rest = args[3:]
    if day is None:
        return None
    return parity, day, rest


def render_schedule(schedule: UserSchedule) -> str:
    if schedule.is_empty():
        return messages.NO_SCHEDULE

    text = messages.SCHEDULE_TITLE
    for parity in (Parity.ODD, Parity.EVEN):
        text += messages.SCHEDULE_WEEK_HEADER.format(emoji=parity.emoji, label=parity.label)
        week = schedule.for_parity(parity)
        if not any(week.values()):
            text += f"{messages.NO_SCHEDULE}\n"
            continue
        for day, day_name in zip(ENGLISH_WEEKDAYS, PERSIAN_WEEKDAYS):
            lessons = week.get(day, [])
            if not lessons:
                continue
            text += messages.SCHEDULE_DAY_HEADER.format(day_name=day_name)
            for index, lesson in enumerate(lessons):
                if index > 0:
                    idle = calculate_idle_time(lessons[index - 1], lesson)
                    if idle != "-":
                        text += messages.SCHEDULE_IDLE_LINE.format(idle=idle)
                text += messages.LESSON_LINE.format(
                    index=index + 1,
                    slot="",
                    lesson=escape(lesson.lesson),
                    start_time=lesson.start_time,
                    end_time=lesson.end_time,
                    location=escape(lesson.location),
                )
    return text


class ScheduleManagement:
    """Viewing and editing the weekly schedule with one-shot commands."""

    def __init__(self, schedule_repository: ScheduleRepositoryInterface):
        self.schedule_repository = schedule_repository

    async def _ensure_private(self, update: Update, context: CallbackContext) -> bool:
        if is_private_chat(update):
            return True
        await reply(
            update, messages.PRIVATE_ONLY.format(bot_username=escape(context.bot.username))
        )
        return False

    async def view_schedule(self, update: Update, context: CallbackContext) -> None:
        if not await self._ensure_private(update, context):
            return
        schedule = await self.schedule_repository.get_user_schedule(update.effective_user.id)
        await reply(update, render_schedule(schedule), back_to_menu_keyboard())

    async def add_lesson(self, update: Update, context: CallbackContext) -> None:
        if not await self._ensure_private(update, context):
            return
        parsed = _read_week_and_day(context.args or [])
        if parsed is None:
            await reply(update, messages.ADD_LESSON_USAGE)
            return
        parity, day, rest = parsed

        parts = [part.strip() for part in " ".join(rest).split("-")]
        if len(parts) not in (3, 4) or not parts[0]:
            await reply(update, messages.ADD_LESSON_USAGE)
            return
        name = parts[0]
        start_time, end_time = normalize_digits(parts[1]), normalize_digits(parts[2])
        location = parts[3] if len(parts) == 4 else ""

        if not is_valid_time_format(start_time) or not is_valid_time_format(end_time):
            await reply(update, messages.INVALID_TIME)
            return
        if parse_time(start_time) >= parse_time(end_time):
            await reply(update, messages.INVALID_TIME_ORDER)
            return

        await self.schedule_repository.add_lesson(
            update.effective_user.id,
            parity,
            day,
            ScheduleLesson(
                lesson=name, start_time=start_time, end_time=end_time, location=location
            ),
        )
        await reply(update, messages.CLASS_ADDED)

    async def delete_lesson(self, update: Update, context: CallbackContext) -> None:
        if not await self._ensure_private(update, context):
            return
        parsed = _read_week_and_day(context.args or [])
        if parsed is None or len(parsed[2]) != 1:
            await reply(update, messages.DELETE_LESSON_USAGE)
            return
        parity, day, rest = parsed
        try:
            index = int(normalize_digits(rest[0])) - 1
        except ValueError:
            await reply(update, messages.DELETE_LESSON_USAGE)
            return

        deleted = await self.schedule_repository.delete_lesson(
            update.effective_user.id, parity, day, index
        )
        await reply(update, messages.CLASS_DELETED if deleted else messages.LESSON_NOT_FOUND)

    async def clear_day(self, update: Update, context: CallbackContext) -> None:
        if not await self._ensure_private(update, context):
            return
        parsed = _read_week_and_day(context.args or [])
        if parsed is None or parsed[2]:
            await reply(update, messages.CLEAR_DAY_USAGE)
            return
        parity, day, _ = parsed
        day_name = PERSIAN_WEEKDAYS[ENGLISH_WEEKDAYS.index(day)]
        cleared = await self.schedule_repository.clear_day(update.effective_user.id, parity, day)
        template = messages.DAY_CLEARED if cleared else messages.DAY_ALREADY_EMPTY
        await reply(update, template.format(day_name=day_name, label=parity.label))

    async def clear_week(self, update: Update, context: CallbackContext) -> None:
        if not await self._ensure_private(update, context):
            return
        args = context.args or []
        try:
            parity = Parity.from_text(args[0]) if len(args) == 1 else None
        except ValueError:
            parity = None
        if parity is None:
            await reply(update, messages.CLEAR_WEEK_USAGE)
            return
        cleared = await self.schedule_repository.clear_week(update.effective_user.id, parity)
        template = messages.WEEK_CLEARED if cleared else messages.WEEK_ALREADY_EMPTY
        await reply(update, template.format(label=parity.label))

    async def clear_schedule(self, update: Update, context: CallbackContext) -> None:
        if not await self._ensure_private(update, context):
            return
        user_id = update.effective_user.id
        await self.schedule_repository.delete_schedule(user_id)
        LOGGER.info(f"User {user_id} cleared their schedule")
        await reply(update, messages.SCHEDULE_CLEARED)
