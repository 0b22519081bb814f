from __future__ import annotations

import math
from datetime import date
from datetime import datetime
from typing import Any
from typing import Optional

import jdatetime

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.calendar import JalaliDate
from weekly_schedule_bot.entities.constants import INVALID_MONTH_NAME
from weekly_schedule_bot.entities.constants import JALALI_LEAP_REMAINDERS
from weekly_schedule_bot.entities.constants import MAX_JALALI_YEAR
from weekly_schedule_bot.entities.constants import MIN_JALALI_YEAR
from weekly_schedule_bot.entities.constants import PERSIAN_MONTHS
from weekly_schedule_bot.entities.constants import PERSIAN_WEEKDAYS_FULL

# day counts of the Gregorian chunks peeled off during conversion
DAYS_IN_400_YEARS = 146097
DAYS_IN_100_YEARS = 36524
DAYS_IN_4_YEARS = 1461
DAYS_IN_YEAR = 365


# ─────────── 1. validation ───────────
def is_jalali_leap_year(year: int) -> bool:
    """Leap years of the 33-year cycle (8 leap years per cycle)."""
    return year % 33 in JALALI_LEAP_REMAINDERS


def jalali_month_length(year: int, month: int) -> int:
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_jalali_leap_year(year) else 29


def is_valid_jalali_date(year: Any, month: Any, day: Any) -> bool:
    """True if the components form a real Jalali date between 1300 and 1500.

    Never raises: non-integer components (floats, strings, bools, NaN)
    simply make the date invalid.
    """
    try:
        for value in (year, month, day):
            if isinstance(value, bool) or not isinstance(value, int):
                return False
        if not MIN_JALALI_YEAR <= year <= MAX_JALALI_YEAR:
            return False
        if not 1 <= month <= 12 or day < 1:
            return False
        return day <= jalali_month_length(year, month)
    except Exception as e:
        LOGGER.error(f"Error in is_valid_jalali_date({year}, {month}, {day}): {e}")
        return False


# ─────────── 2. conversions ───────────
def _is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _coerce(value: Any) -> int:
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"non-finite value {value}")
    return int(value)


def jalali_to_gregorian(year: Any, month: Any, day: Any) -> Optional[date]:
    """Convert a Jalali date to a Gregorian :class:`datetime.date`.

    The returned month is 1-indexed (``datetime.date`` convention). Returns
    ``None`` instead of raising for anything that cannot be converted, such
    as NaN, non-numeric strings or a month outside 1..12.
    """
    try:
        jy, jm, jd = _coerce(year), _coerce(month), _coerce(day)
    except (TypeError, ValueError, OverflowError) as e:
        LOGGER.warning(f"Invalid input to jalali_to_gregorian({year!r}, {month!r}, {day!r}): {e}")
        return None

    if jy < 1 or not 1 <= jm <= 12 or not 1 <= jd <= 31:
        LOGGER.warning(f"Out of range input to jalali_to_gregorian({jy}, {jm}, {jd})")
        return None

    try:
        if jy <= 979:
            gy = 621
        else:
            gy = 1600
            jy -= 979

        days = (
            365 * jy
            + (jy // 33) * 8
            + ((jy % 33) + 3) // 4
            + 78
            + jd
            + ((jm - 1) * 31 if jm < 7 else (jm - 7) * 30 + 186)
        )

        gy += 400 * (days // DAYS_IN_400_YEARS)
        days %= DAYS_IN_400_YEARS

        if days > DAYS_IN_100_YEARS:
            # the first year of a non-400 century is not leap
            days -= 1
            gy += 100 * (days // DAYS_IN_100_YEARS)
            days %= DAYS_IN_100_YEARS
            if days >= DAYS_IN_YEAR:
                days += 1

        gy += 4 * (days // DAYS_IN_4_YEARS)
        days %= DAYS_IN_4_YEARS

        # the first year of each 4-year chunk is the 366-day one
        if days > DAYS_IN_YEAR:
            gy += (days - 1) // DAYS_IN_YEAR
            days = (days - 1) % DAYS_IN_YEAR

        gd = days + 1
        month_lengths = [
            31,
            29 if _is_gregorian_leap_year(gy) else 28,
            31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
        ]
        gm = 1
        for length in month_lengths:
            if gd <= length:
                break
            gd -= length
            gm += 1

        return date(gy, gm, gd)
    except (ArithmeticError, ValueError) as e:
        LOGGER.error(f"Error in jalali_to_gregorian({year}, {month}, {day}): {e}")
        return None


def gregorian_to_jalali(value: date | datetime) -> JalaliDate:
    """Jalali form of a Gregorian date, for display."""
    if isinstance(value, datetime):
        value = value.date()
    jalali = jdatetime.date.fromgregorian(date=value)
    return JalaliDate(jalali.year, jalali.month, jalali.day)


# ─────────── 3. formatting ───────────
def get_persian_month_name(month: Any) -> str:
    try:
        month = int(month)
    except (TypeError, ValueError):
        return INVALID_MONTH_NAME
    return PERSIAN_MONTHS[month - 1] if 1 <= month <= 12 else INVALID_MONTH_NAME


def persian_weekday_index(value: date) -> int:
    """0 for Saturday through 6 for Friday."""
    return (value.weekday() + 2) % 7


def format_persian_date(value: date) -> str:
    """e.g. ``📅 امروز شنبه 20 بهمن سال 1403 است``."""
    jalali = gregorian_to_jalali(value)
    weekday = PERSIAN_WEEKDAYS_FULL[persian_weekday_index(value)]
    month = get_persian_month_name(jalali.month)
    return f"📅 امروز {weekday} {jalali.day} {month} سال {jalali.year} است"


__all__ = (
    "is_jalali_leap_year",
    "jalali_month_length",
    "is_valid_jalali_date",
    "jalali_to_gregorian",
    "gregorian_to_jalali",
    "get_persian_month_name",
    "persian_weekday_index",
    "format_persian_date",
)
