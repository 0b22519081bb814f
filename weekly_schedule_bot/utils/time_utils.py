from __future__ import annotations

import re
from typing import Optional

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.constants import CLASS_SLOTS
from weekly_schedule_bot.entities.constants import LUNCH_END_MINUTES
from weekly_schedule_bot.entities.constants import LUNCH_START_MINUTES
from weekly_schedule_bot.entities.schedule import ScheduleLesson

# HH:MM, single-digit 8 and 9 allowed for morning classes
SCHEDULE_TIME_REGEX = re.compile(r"^(?:[01]\d|2[0-3]|[89]):[0-5]\d$")


def is_valid_time_format(time_str: str) -> bool:
    return bool(time_str) and bool(SCHEDULE_TIME_REGEX.match(time_str))


def parse_time(time_str: Optional[str]) -> Optional[int]:
    """Minutes since midnight for an ``HH:MM`` string, ``None`` if malformed."""
    if not time_str or not is_valid_time_format(time_str):
        LOGGER.warning(f"Invalid time format for parsing: {time_str}")
        return None
    hours, minutes = (int(part) for part in time_str.split(":"))
    return hours * 60 + minutes


def format_duration(total_minutes: int) -> str:
    """Persian text for a duration, ``-`` when there is none."""
    if total_minutes <= 0:
        return "-"
    hours, minutes = divmod(total_minutes, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours} ساعت")
    if minutes > 0:
        parts.append(f"{minutes} دقیقه")
    return " و ".join(parts) or "-"


def calculate_idle_time(
    previous: Optional[ScheduleLesson],
    current: Optional[ScheduleLesson],
) -> str:
    """Free time between two consecutive lessons, lunch break excluded."""
    previous_end = parse_time(previous.end_time if previous else None)
    current_start = parse_time(current.start_time if current else None)
    if previous_end is None or current_start is None or previous_end >= current_start:
        return "-"

    if previous_end < LUNCH_END_MINUTES and current_start > LUNCH_START_MINUTES:
        idle_minutes = max(0, LUNCH_START_MINUTES - previous_end) + max(
            0, current_start - LUNCH_END_MINUTES
        )
    else:
        idle_minutes = current_start - previous_end
    return format_duration(idle_minutes) if idle_minutes > 0 else "-"


def class_slot_label(start_time: str) -> str:
    """``(کلاس اول) `` style prefix for the slot a lesson starts in."""
    start = parse_time(start_time)
    if start is None:
        return ""
    for slot_start, slot_end, label in CLASS_SLOTS:
        if slot_start <= start < slot_end:
            return f"({label}) "
    return ""
