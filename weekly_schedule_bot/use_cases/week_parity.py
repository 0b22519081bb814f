"""Odd/even academic week calculation."""

from __future__ import annotations

from datetime import date
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from functools import cached_property
from typing import Optional
from typing import Union
from zoneinfo import ZoneInfo

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.calendar import ReferenceAnchor
from weekly_schedule_bot.entities.constants import TEHRAN_TIMEZONE
from weekly_schedule_bot.entities.parity import Parity
from weekly_schedule_bot.utils.exceptions import ReferenceAnchorError
from weekly_schedule_bot.utils.jalali_calendar import is_valid_jalali_date
from weekly_schedule_bot.utils.jalali_calendar import jalali_to_gregorian

DateLike = Union[date, datetime]


def to_utc_day(value: DateLike) -> date:
    """Calendar day of ``value``; aware datetimes are read in UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def get_start_of_week(value: DateLike) -> date:
    """Saturday that starts the week containing ``value``."""
    day = to_utc_day(value)
    sunday_based_weekday = (day.weekday() + 1) % 7
    days_to_subtract = (sunday_based_weekday + 1) % 7
    return day - timedelta(days=days_to_subtract)


class WeekParityEngine:
    """Answers "is the week containing this date odd or even".

    Every answer is derived from a single :class:`ReferenceAnchor`. Weeks
    start on Saturday and alternate parity, so the parity of any date is the
    anchor's parity flipped once per week between the two week starts.

    Args:
        reference_anchor: known date and the parity of its week
        tz_name: IANA timezone that decides what "today" is
    """

    def __init__(
        self,
        reference_anchor: ReferenceAnchor,
        tz_name: str = TEHRAN_TIMEZONE,
    ) -> None:
        self.reference_anchor = reference_anchor
        self.timezone = ZoneInfo(tz_name)
        LOGGER.info(
            f"Week parity anchored at {reference_anchor.jalali_date} "
            f"({reference_anchor.parity.value}) -> {self.reference_date.isoformat()}"
        )

    @cached_property
    def reference_date(self) -> date:
        """Gregorian form of the anchor date.

        Raises:
            ReferenceAnchorError: if the anchor is not a convertible Jalali date
        """
        jalali = self.reference_anchor.jalali_date
        converted = None
        if is_valid_jalali_date(jalali.year, jalali.month, jalali.day):
            converted = jalali_to_gregorian(jalali.year, jalali.month, jalali.day)
        if converted is None:
            LOGGER.critical(f"Reference anchor {jalali} could not be converted")
            raise ReferenceAnchorError(self.reference_anchor)
        return converted

    @cached_property
    def reference_week_start(self) -> date:
        return get_start_of_week(self.reference_date)

    @staticmethod
    def weeks_between(start: DateLike, end: DateLike) -> int:
        """Whole weeks from the week of ``start`` to the week of ``end``.

        Negative when ``end`` is earlier; floor division keeps the count
        aligned with week boundaries in both directions.
        """
        days_difference = (get_start_of_week(end) - get_start_of_week(start)).days
        return days_difference // 7

    def weeks_since_reference(self, target: DateLike) -> int:
        return self.weeks_between(self.reference_week_start, target)

    def compute_parity(self, target: DateLike) -> Parity:
        """Parity of the week containing ``target``.

        ``target`` should already be the calendar day of interest; use
        :meth:`today` to obtain one in the configured timezone.
        """
        if self.weeks_since_reference(target) % 2 == 0:
            return self.reference_anchor.parity
        return self.reference_anchor.parity.flip()

    def today(self, now: Optional[datetime] = None) -> date:
        """Calendar day in the configured timezone."""
        now = now or datetime.now(self.timezone)
        if now.tzinfo is None:
            now = now.replace(tzinfo=self.timezone)
        return now.astimezone(self.timezone).date()

    def current_parity(self, now: Optional[datetime] = None) -> Parity:
        return self.compute_parity(self.today(now))

    def next_week_parity(self, now: Optional[datetime] = None) -> Parity:
        return self.compute_parity(self.today(now) + timedelta(days=7))
