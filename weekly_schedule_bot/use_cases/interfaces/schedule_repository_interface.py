"""Interface for schedule persistence."""

from abc import ABC, abstractmethod

from weekly_schedule_bot.entities.parity import Parity
from weekly_schedule_bot.entities.schedule import ScheduleLesson
from weekly_schedule_bot.entities.schedule import UserSchedule


class ScheduleRepositoryInterface(ABC):
    """Interface for storing users' weekly schedules."""

    @abstractmethod
    async def get_user_schedule(self, user_id: int) -> UserSchedule:
        """Get the schedule of a user.

        Args:
            user_id: Telegram user id

        Returns:
            The stored schedule, or an empty one if the user has none
        """
        pass

    @abstractmethod
    async def save_user_schedule(self, schedule: UserSchedule) -> None:
        """Create or replace the schedule of ``schedule.user_id``."""
        pass

    @abstractmethod
    async def add_lesson(
        self, user_id: int, parity: Parity, day: str, lesson: ScheduleLesson
    ) -> UserSchedule:
        """Add a lesson to a day, keeping the day sorted by start time."""
        pass

    @abstractmethod
    async def delete_lesson(
        self, user_id: int, parity: Parity, day: str, index: int
    ) -> bool:
        """Delete the lesson at ``index`` (0-based) of a day.

        Returns:
            False if there is no such lesson
        """
        pass

    @abstractmethod
    async def clear_day(self, user_id: int, parity: Parity, day: str) -> bool:
        pass

    @abstractmethod
    async def clear_week(self, user_id: int, parity: Parity) -> bool:
        """Remove every lesson of the odd or the even week.

        Returns:
            False if that week had no lessons
        """
        pass

    @abstractmethod
    async def delete_schedule(self, user_id: int) -> bool:
        pass

    @abstractmethod
    async def count_schedules(self) -> int:
        """Number of users with at least one lesson."""
        pass
