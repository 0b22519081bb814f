"""File storage implementation of the schedule repository."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any
from typing import Dict

from pydantic import ValidationError

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.entities.parity import Parity
from weekly_schedule_bot.entities.schedule import ScheduleLesson
from weekly_schedule_bot.entities.schedule import UserSchedule
from weekly_schedule_bot.use_cases.interfaces.schedule_repository_interface import (
    ScheduleRepositoryInterface,
)
from weekly_schedule_bot.utils.time_utils import parse_time


class FileScheduleRepository(ScheduleRepositoryInterface):
    """JSON-file backed schedule store.

    The file maps the user id (as a string) to a serialized
    :class:`UserSchedule`. Every write rewrites the whole file under a lock.
    """

    def __init__(self, schedule_file_path: str):
        """Initialize the repository.

        Args:
            schedule_file_path: Path to the JSON file holding all schedules
        """
        self.schedule_file_path = Path(schedule_file_path)
        self._lock = asyncio.Lock()

    def _load(self) -> Dict[str, Any]:
        if not self.schedule_file_path.exists():
            return {}
        try:
            with open(self.schedule_file_path, "r", encoding="utf-8") as file:
                data = json.load(file)
        except json.JSONDecodeError:
            LOGGER.error(f"Failed to parse schedule file: {self.schedule_file_path}")
            return {}
        if not isinstance(data, dict):
            LOGGER.warning("Invalid schedule file format: top level is not an object")
            return {}
        return data

    def _dump(self, data: Dict[str, Any]) -> None:
        self.schedule_file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.schedule_file_path, "w", encoding="utf-8") as file:
            json.dump(data, file, ensure_ascii=False, indent=4)

    def _read_schedule(self, data: Dict[str, Any], user_id: int) -> UserSchedule:
        raw = data.get(str(user_id))
        if raw is None:
            return UserSchedule(user_id=user_id)
        try:
            return UserSchedule.model_validate({**raw, "user_id": user_id})
        except ValidationError as e:
            LOGGER.error(f"Corrupt schedule for user {user_id}: {e}")
            return UserSchedule(user_id=user_id)

    def _write_schedule(self, data: Dict[str, Any], schedule: UserSchedule) -> None:
        data[str(schedule.user_id)] = schedule.model_dump(exclude={"user_id"})
        self._dump(data)

    async def get_user_schedule(self, user_id: int) -> UserSchedule:
        return self._read_schedule(self._load(), user_id)

    async def save_user_schedule(self, schedule: UserSchedule) -> None:
        async with self._lock:
            self._write_schedule(self._load(), schedule)

    async def add_lesson(
        self, user_id: int, parity: Parity, day: str, lesson: ScheduleLesson
    ) -> UserSchedule:
        async with self._lock:
            data = self._load()
            schedule = self._read_schedule(data, user_id)
            lessons = schedule.for_parity(parity).setdefault(day, [])
            lessons.append(lesson)
            lessons.sort(key=lambda item: parse_time(item.start_time) or 0)
            self._write_schedule(data, schedule)
        LOGGER.info(f"User {user_id} added '{lesson.lesson}' to {parity.value}/{day}")
        return schedule

    async def delete_lesson(
        self, user_id: int, parity: Parity, day: str, index: int
    ) -> bool:
        async with self._lock:
            data = self._load()
            schedule = self._read_schedule(data, user_id)
            day_schedule = schedule.for_parity(parity)
            lessons = day_schedule.get(day, [])
            if not 0 <= index < len(lessons):
                return False
            removed = lessons.pop(index)
            if not lessons:
                day_schedule.pop(day, None)
            self._write_schedule(data, schedule)
        LOGGER.info(f"User {user_id} deleted '{removed.lesson}' from {parity.value}/{day}")
        return True

    async def clear_day(self, user_id: int, parity: Parity, day: str) -> bool:
        async with self._lock:
            data = self._load()
            schedule = self._read_schedule(data, user_id)
            if schedule.for_parity(parity).pop(day, None) is None:
                return False
            self._write_schedule(data, schedule)
        return True

    async def clear_week(self, user_id: int, parity: Parity) -> bool:
        async with self._lock:
            data = self._load()
            schedule = self._read_schedule(data, user_id)
            week = schedule.for_parity(parity)
            if not any(week.values()):
                return False
            week.clear()
            self._write_schedule(data, schedule)
        LOGGER.info(f"User {user_id} cleared their {parity.value} week")
        return True

    async def delete_schedule(self, user_id: int) -> bool:
        async with self._lock:
            data = self._load()
            if data.pop(str(user_id), None) is None:
                return False
            self._dump(data)
        LOGGER.info(f"Deleted schedule of user {user_id}")
        return True

    async def count_schedules(self) -> int:
        data = self._load()
        return sum(
            1
            for user_id in data
            if user_id.lstrip("-").isdigit()
            and not self._read_schedule(data, int(user_id)).is_empty()
        )
