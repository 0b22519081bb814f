from __future__ import annotations

from typing import Dict
from typing import List

from pydantic import BaseModel
from pydantic import Field

from weekly_schedule_bot.entities.parity import Parity


class ScheduleLesson(BaseModel):
    """One class in a day of the weekly schedule."""

    lesson: str
    start_time: str
    end_time: str
    location: str = ""


DaySchedule = Dict[str, List[ScheduleLesson]]


class UserSchedule(BaseModel):
    """Odd and even week schedules of a single user, keyed by English day name."""

    user_id: int
    odd_week_schedule: DaySchedule = Field(default_factory=dict)
    even_week_schedule: DaySchedule = Field(default_factory=dict)

    def for_parity(self, parity: Parity) -> DaySchedule:
        if parity is Parity.ODD:
            return self.odd_week_schedule
        return self.even_week_schedule

    def lessons_on(self, parity: Parity, day: str) -> List[ScheduleLesson]:
        return self.for_parity(parity).get(day, [])

    def is_empty(self) -> bool:
        return not any(self.odd_week_schedule.values()) and not any(
            self.even_week_schedule.values()
        )
