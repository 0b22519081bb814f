from __future__ import annotations

from enum import Enum


class WeekDay(Enum):
    """Teaching days, keyed the way schedules are stored."""
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"


# Persian week starts on Saturday (index 0)
PERSIAN_WEEKDAYS = ["شنبه", "یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه"]
PERSIAN_WEEKDAYS_FULL = [
    "شنبه",
    "یکشنبه",
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنج‌شنبه",
    "جمعه",
]
ENGLISH_WEEKDAYS = [day.value for day in WeekDay]

PERSIAN_MONTHS = [
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
]
INVALID_MONTH_NAME = "نامعتبر"

TEHRAN_TIMEZONE = "Asia/Tehran"

# Jalali year range accepted from users
MIN_JALALI_YEAR = 1300
MAX_JALALI_YEAR = 1500
JALALI_LEAP_REMAINDERS = frozenset({1, 5, 9, 13, 17, 22, 26, 30})

# Lunch break, minutes since midnight
LUNCH_START_MINUTES = 12 * 60
LUNCH_END_MINUTES = 13 * 60

# (start, end, label) windows in minutes used to number classes of a day
CLASS_SLOTS = [
    (8 * 60, 10 * 60, "کلاس اول"),
    (10 * 60, 12 * 60, "کلاس دوم"),
    (13 * 60, 15 * 60, "کلاس سوم"),
    (15 * 60, 17 * 60, "کلاس چهارم"),
    (17 * 60, 19 * 60, "کلاس پنجم"),
]

WEEK_STATUS_ERROR = "نامشخص (خطا)"
