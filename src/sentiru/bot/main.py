"""Telegram bot entrypoint with handler registration and polling."""

from __future__ import annotations

import asyncio
import logging
import sys

from dotenv import load_dotenv
from telegram.ext import Application

from sentiru.analysis.analyzer import SentimentAnalyzer
from sentiru.bot.handlers.commands import build_command_handlers
from sentiru.config import LOG_FORMAT, Settings
from sentiru.lexicon.loader import load_lexicon


logger = logging.getLogger(__name__)


def build_application(settings: Settings, analyzer: SentimentAnalyzer | None = None) -> Application:
    """Build PTB Application with all handlers registered."""
    if analyzer is None:
        analyzer = SentimentAnalyzer(load_lexicon(settings.lexicon_path))

    application = Application.builder().token(settings.require_telegram_token()).build()

    # Handlers read the shared analyzer from bot_data
    application.bot_data["analyzer"] = analyzer

    for handler in build_command_handlers():
        application.add_handler(handler)

    logger.info("Registered command handlers: start, help, sentiment, debug, model")
    return application


async def run_bot(settings: Settings) -> None:
    """Run bot with polling and graceful shutdown."""
    application = build_application(settings)

    await application.initialize()
    logger.info("Bot initialized. Starting polling...")

    await application.start()
    updater = application.updater
    if updater is None:
        raise RuntimeError("Bot updater is not initialized")

    await updater.start_polling(allowed_updates=["message"])
    logger.info("Bot polling started. Press Ctrl+C to stop.")

    try:
        await asyncio.Event().wait()
    except (asyncio.CancelledError, KeyboardInterrupt, SystemExit):
        logger.info("Received stop signal. Shutting down...")
        raise
    finally:
        await updater.stop()
        await application.stop()
        await application.shutdown()
        logger.info("Bot stopped cleanly.")


def main() -> None:
    """Main entrypoint for Telegram bot."""
    load_dotenv()
    try:
        settings = Settings.from_env()
        settings.require_telegram_token()
    except ValueError as e:
        logging.basicConfig(format=LOG_FORMAT, level=logging.INFO)
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)
    logger.info("Loaded bot config: lexicon=%s", settings.lexicon_path)

    try:
        asyncio.run(run_bot(settings))
    except KeyboardInterrupt:
        logger.info("Bot interrupted by user.")
        sys.exit(0)


if __name__ == "__main__":
    main()
