from __future__ import annotations

import re
from typing import List
from typing import Optional

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.calendar import JalaliDate
from weekly_schedule_bot.utils.jalali_calendar import is_valid_jalali_date

_PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
_ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
_DIGIT_TABLE = str.maketrans(
    _PERSIAN_DIGITS + _ARABIC_DIGITS,
    "0123456789" * 2,
)
_NOT_DATE_CHARS = re.compile(r"[^\d/\-.]")


def normalize_digits(text: str) -> str:
    """Replace Persian and Arabic-Indic digits with ASCII digits."""
    return text.translate(_DIGIT_TABLE)


def _split_date(text: str) -> Optional[List[str]]:
    for separator in ("/", "-", "."):
        if separator in text:
            return text.split(separator)
    if len(text) == 8:
        return [text[:4], text[4:6], text[6:]]
    if len(text) == 6:
        return ["14" + text[:2], text[2:4], text[4:]]
    return None


def parse_jalali_date(text: Optional[str]) -> Optional[JalaliDate]:
    """Read a user-typed Jalali date.

    Accepted shapes, after digit normalization: ``YYYY/MM/DD``,
    ``DD/MM/YYYY``, ``YYYY/DD/MM`` and ``YY/MM/DD`` (taken as 14YY), with
    ``/``, ``-`` or ``.`` separators, plus bare ``YYYYMMDD`` and ``YYMMDD``.
    Returns ``None`` when nothing valid can be read.
    """
    if not text:
        return None
    cleaned = _NOT_DATE_CHARS.sub("", normalize_digits(str(text).strip()))
    # \d also matches other unicode digits; keep ASCII only
    if not cleaned.isascii():
        return None

    parts = _split_date(cleaned)
    if parts is None or len(parts) != 3:
        return None
    try:
        p1, p2, p3 = (int(part) for part in parts)
    except ValueError:
        return None

    if 1300 <= p1 <= 1500 and 1 <= p2 <= 12 and 1 <= p3 <= 31:
        year, month, day = p1, p2, p3
    elif 1300 <= p3 <= 1500 and 1 <= p2 <= 12 and 1 <= p1 <= 31:
        year, month, day = p3, p2, p1
    elif 1300 <= p1 <= 1500 and 1 <= p3 <= 12 and 1 <= p2 <= 31:
        year, month, day = p1, p3, p2
    elif 0 <= p1 <= 99 and 1 <= p2 <= 12 and 1 <= p3 <= 31:
        year, month, day = 1400 + p1, p2, p3
    else:
        LOGGER.debug(f"Unrecognised date layout: {text!r}")
        return None

    if not is_valid_jalali_date(year, month, day):
        return None
    return JalaliDate(year, month, day)
