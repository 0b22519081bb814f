from __future__ import annotations

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.app_container import create_telegram_application
from weekly_schedule_bot.app_container import startup


def setup_and_run():
    """Set up and run the bot with long polling."""
    startup()
    application = create_telegram_application()

    LOGGER.info("Starting bot with polling...")
    application.run_polling(
        allowed_updates=["message", "callback_query"],
        poll_interval=1.0,
        timeout=30,
        drop_pending_updates=True,
    )


def main():
    """Run the weekly schedule bot."""
    try:
        setup_and_run()
    except KeyboardInterrupt:
        LOGGER.info("Application interrupted by user")
    except Exception as e:
        LOGGER.error(f"Application failed with error: {e}", exc_info=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
