from __future__ import annotations

from dataclasses import dataclass

from weekly_schedule_bot.entities.parity import Parity


@dataclass(frozen=True, slots=True)
class JalaliDate:
    """A Persian (solar Hijri) calendar date; month is 1-indexed."""

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"


@dataclass(frozen=True, slots=True)
class ReferenceAnchor:
    """The one known fact every parity is derived from.

    e.g. ``ReferenceAnchor(JalaliDate(1403, 11, 20), Parity.ODD)`` reads
    "the week containing 1403/11/20 is an odd week".
    """

    jalali_date: JalaliDate
    parity: Parity

    def __str__(self) -> str:
        return f"{self.jalali_date} ({self.parity.value})"
