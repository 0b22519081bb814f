#!/usr/bin/env python
"""Register or remove the Telegram webhook of the weekly schedule bot."""

import argparse
import asyncio
import sys
from typing import Optional
from urllib.parse import urljoin

from telegram import Bot

from weekly_schedule_bot import LOGGER
from weekly_schedule_bot.settings.telegram_settings import TelegramConnectionSettings


async def setup_telegram_webhook(
    base_url: str,
    token: str,
    secret_token: Optional[str] = None,
    remove: bool = False,
) -> bool:
    """Set up or remove the Telegram webhook.

    Args:
        base_url: Public base URL of the API server (e.g., https://example.com)
        token: Telegram bot token
        secret_token: Value Telegram echoes in X-Telegram-Bot-Api-Secret-Token
        remove: Whether to remove the webhook instead of setting it

    Returns:
        True if successful, False otherwise
    """
    bot = Bot(token=token)

    if remove:
        LOGGER.info("Removing Telegram webhook...")
        result = await bot.delete_webhook()
        LOGGER.info(f"Webhook removed: {result}")
        return result

    webhook_url = urljoin(base_url, "/webhook/telegram/")
    LOGGER.info(f"Setting Telegram webhook to: {webhook_url}")

    try:
        result = await bot.set_webhook(
            url=webhook_url,
            allowed_updates=["message", "callback_query"],
            secret_token=secret_token,
        )
        if result:
            LOGGER.info("Telegram webhook set successfully!")
            webhook_info = await bot.get_webhook_info()
            LOGGER.info(f"Webhook info: {webhook_info}")
        else:
            LOGGER.error("Failed to set Telegram webhook")
        return result
    except Exception as e:
        LOGGER.error(f"Error setting Telegram webhook: {str(e)}", exc_info=True)
        return False


async def main():
    parser = argparse.ArgumentParser(description="Configure the Telegram webhook")
    parser.add_argument(
        "--base-url",
        help="Base URL for the webhook, defaults to TELEGRAM_WEBHOOK_URL",
    )
    parser.add_argument(
        "--remove", action="store_true", help="Remove the webhook instead of setting it"
    )
    args = parser.parse_args()

    telegram_settings = TelegramConnectionSettings()
    base_url = args.base_url or telegram_settings.WEBHOOK_URL
    if not base_url and not args.remove:
        LOGGER.error("No base URL given and TELEGRAM_WEBHOOK_URL is not set")
        sys.exit(2)

    success = await setup_telegram_webhook(
        base_url,
        telegram_settings.TOKEN,
        telegram_settings.WEBHOOK_SECRET,
        args.remove,
    )

    if success:
        LOGGER.info("Webhook configuration completed successfully")
        sys.exit(0)
    else:
        LOGGER.error("Webhook configuration failed")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
