"""Application container for the weekly schedule bot."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Type

from lagom import Container, Singleton
from telegram.ext import Application

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.config_dependency_injection import configure_container
from weekly_schedule_bot.frameworks.api.endpoints import HealthCheckEndpoint
from weekly_schedule_bot.frameworks.api.endpoints import TelegramWebhookEndpoint
from weekly_schedule_bot.frameworks.api.endpoints import WeekStatusEndpoint
from weekly_schedule_bot.frameworks.api.registry import SubServiceEndpoints
from weekly_schedule_bot.frameworks.telegram.error_handler import error
from weekly_schedule_bot.frameworks.telegram.main_menu_handler import MainMenuHandler
from weekly_schedule_bot.frameworks.telegram.schedule_handler import ScheduleHandler
from weekly_schedule_bot.frameworks.telegram.stats_handler import StatsHandler
from weekly_schedule_bot.frameworks.telegram.teleport_handler import TeleportHandler
from weekly_schedule_bot.frameworks.telegram.week_status_handler import WeekStatusHandler
from weekly_schedule_bot.settings.storage_settings import StorageSettings
from weekly_schedule_bot.settings.telegram_settings import TelegramConnectionSettings
from weekly_schedule_bot.use_cases.interfaces.schedule_repository_interface import (
    ScheduleRepositoryInterface,
)
from weekly_schedule_bot.use_cases.interfaces.telegram_handler_interface import (
    TelegramHandlerInterface,
)
from weekly_schedule_bot.use_cases.telegram_commands.main_menu import MainMenu
from weekly_schedule_bot.use_cases.telegram_commands.schedule_management import (
    ScheduleManagement,
)
from weekly_schedule_bot.use_cases.telegram_commands.stats import BotStats
from weekly_schedule_bot.use_cases.telegram_commands.teleport import Teleport
from weekly_schedule_bot.use_cases.telegram_commands.week_status import WeekStatus
from weekly_schedule_bot.use_cases.webhooks import TelegramWebhookUseCase
from weekly_schedule_bot.use_cases.week_parity import WeekParityEngine


TELEGRAM_HANDLERS: List[Type[TelegramHandlerInterface]] = [
    MainMenuHandler,
    WeekStatusHandler,
    TeleportHandler,
    ScheduleHandler,
    StatsHandler,
]

# Global container instance
_container: Optional[Container] = None


def get_container() -> Container:
    """Get the global container instance.

    Returns:
        The configured container
    """
    global _container
    if _container is None:
        _container = setup_container()
    return _container


def build_telegram_application(container: Container) -> Application:
    """Build the Telegram application and attach every command handler.

    Args:
        container: Container resolving the handler classes

    Returns:
        Application ready for polling or for webhook updates
    """
    application = (
        Application.builder()
        .token(container[TelegramConnectionSettings].TOKEN)
        .read_timeout(20)
        .connect_timeout(20)
        .build()
    )
    for handler_type in TELEGRAM_HANDLERS:
        for handler in container[handler_type].get_handlers():
            application.add_handler(handler)
    application.add_error_handler(error)
    return application


def setup_container() -> Container:
    """Set up and configure the application container.

    Returns:
        Fully configured container
    """
    container = configure_container()
    child_container = Container(container)

    # Telegram command use cases
    child_container[MainMenu] = Singleton(lambda c: MainMenu())
    child_container[WeekStatus] = Singleton(
        lambda c: WeekStatus(
            c[WeekParityEngine],
            c[ScheduleRepositoryInterface],
        )
    )
    child_container[Teleport] = Singleton(
        lambda c: Teleport(
            c[WeekParityEngine],
            c[ScheduleRepositoryInterface],
        )
    )
    child_container[ScheduleManagement] = Singleton(
        lambda c: ScheduleManagement(c[ScheduleRepositoryInterface])
    )
    child_container[BotStats] = Singleton(
        lambda c: BotStats(
            c[WeekParityEngine],
            c[ScheduleRepositoryInterface],
            c[TelegramConnectionSettings].ADMIN_CHAT_ID,
        )
    )

    # Telegram handlers
    child_container[MainMenuHandler] = Singleton(lambda c: MainMenuHandler(c[MainMenu]))
    child_container[WeekStatusHandler] = Singleton(
        lambda c: WeekStatusHandler(c[WeekStatus])
    )
    child_container[TeleportHandler] = Singleton(lambda c: TeleportHandler(c[Teleport]))
    child_container[ScheduleHandler] = Singleton(
        lambda c: ScheduleHandler(c[ScheduleManagement])
    )
    child_container[StatsHandler] = Singleton(lambda c: StatsHandler(c[BotStats]))

    child_container[Application] = Singleton(lambda c: build_telegram_application(c))
    child_container[TelegramWebhookUseCase] = Singleton(
        lambda c: TelegramWebhookUseCase(c[Application])
    )

    # API endpoints
    child_container[SubServiceEndpoints] = Singleton(lambda c: SubServiceEndpoints())
    child_container[TelegramWebhookEndpoint] = Singleton(
        lambda c: TelegramWebhookEndpoint(
            c[TelegramWebhookUseCase],
            c[TelegramConnectionSettings].WEBHOOK_SECRET,
        )
    )
    child_container[WeekStatusEndpoint] = Singleton(
        lambda c: WeekStatusEndpoint(c[WeekParityEngine])
    )
    child_container[HealthCheckEndpoint] = Singleton(lambda c: HealthCheckEndpoint())

    registry = child_container[SubServiceEndpoints]
    registry.register(child_container[TelegramWebhookEndpoint])
    registry.register(child_container[WeekStatusEndpoint])
    registry.register(child_container[HealthCheckEndpoint])

    return child_container


def create_telegram_application() -> Application:
    """Return the shared Telegram application.

    Returns:
        Configured Telegram Application instance
    """
    return get_container()[Application]


def startup() -> None:
    """Run startup tasks for the application."""
    LOGGER.info("Starting Weekly Schedule Bot application")

    container = get_container()

    try:
        data_dir = Path(container[StorageSettings].data_dir)
        data_dir.mkdir(parents=True, exist_ok=True)
        LOGGER.info(f"Ensured data directory exists: {data_dir}")

        # Resolving the engine validates the reference anchor
        engine = container[WeekParityEngine]
        LOGGER.info(f"Week parity engine ready, reference date {engine.reference_date}")

        container[ScheduleRepositoryInterface]
        LOGGER.info("Initialized schedule repository")

    except Exception as e:
        LOGGER.error(f"Error during startup: {str(e)}")
        raise


async def shutdown() -> None:
    """Run shutdown tasks for the application."""
    LOGGER.info("Shutting down Weekly Schedule Bot application")

    application = create_telegram_application()
    try:
        if application.running:
            await application.stop()
        await application.shutdown()
        LOGGER.info("Stopped Telegram application")
    except Exception as e:
        LOGGER.error(f"Error during shutdown: {str(e)}")
