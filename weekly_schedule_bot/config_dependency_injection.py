"""Dependency injection configuration for the weekly schedule bot."""

from __future__ import annotations

from lagom import Container, Singleton

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.adapters.repositories.file_storage.schedule_repository import (
    FileScheduleRepository,
)
from weekly_schedule_bot.settings.calendar_settings import CalendarSettings
from weekly_schedule_bot.settings.storage_settings import StorageSettings
from weekly_schedule_bot.settings.telegram_settings import TelegramConnectionSettings
from weekly_schedule_bot.use_cases.interfaces.schedule_repository_interface import (
    ScheduleRepositoryInterface,
)
from weekly_schedule_bot.use_cases.week_parity import WeekParityEngine


def configure_container() -> Container:
    """Configure the dependency injection container.

    Returns:
        Configured Lagom container
    """
    container = Container()

    # Configure settings
    container[TelegramConnectionSettings] = Singleton(lambda: TelegramConnectionSettings())
    container[CalendarSettings] = Singleton(lambda: CalendarSettings())
    container[StorageSettings] = Singleton(lambda: StorageSettings())

    # Week parity engine, anchored once for the whole process
    container[WeekParityEngine] = Singleton(
        lambda c: WeekParityEngine(
            c[CalendarSettings].reference_anchor,
            c[CalendarSettings].timezone,
        )
    )

    # Repositories
    container[ScheduleRepositoryInterface] = Singleton(
        lambda c: FileScheduleRepository(str(c[StorageSettings].schedule_path))
    )

    LOGGER.info("Base container configured")
    return container
