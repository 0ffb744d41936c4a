"""Command handlers for /start, /help, /sentiment, /debug, and /model."""

from __future__ import annotations

import logging

from telegram import Update
from telegram.ext import CommandHandler, ContextTypes

from sentiru.bot.handlers.common import ConfigError, _resolve_analyzer, _resolve_command_text
from sentiru.bot.handlers.renderers import render_debug, render_lexicon_info, render_result

logger = logging.getLogger(__name__)

UNAVAILABLE_TEXT = "Анализ временно недоступен. Попробуйте позже."


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command with usage instructions."""
    del context
    if update.message is None:
        return

    text = (
        "Привет! Я определяю тональность русского текста.\n\n"
        "Используйте:\n"
        "• /sentiment <текст> — тональность и уверенность\n"
        "• /debug <текст> — какие слова нашлись в словаре\n"
        "• /model — размер словаря\n"
        "• /help — справка по командам\n\n"
        "Попробуйте: /sentiment Это отлично работает"
    )
    await update.message.reply_text(text)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command with detailed usage guidance."""
    del context
    if update.message is None:
        return

    text = (
        "Справка по командам:\n\n"
        "/start — приветствие и основные команды\n"
        "/sentiment <текст> — позитивная, негативная или нейтральная тональность\n"
        "  Пример: /sentiment Всё прекрасно\n\n"
        "/debug <текст> — очищенный текст, слова и совпадения со словарём\n"
        "  Пример: /debug Ужасная ситуация, всё плохо\n\n"
        "/model — сколько слов в каждой категории словаря\n\n"
        "Примечание: учитываются только точные совпадения слов, без учёта словоформ."
    )
    await update.message.reply_text(text)


async def sentiment_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /sentiment <text> command."""
    if update.message is None:
        return

    text = _resolve_command_text(update, context)
    if not text:
        await update.message.reply_text("Укажите текст: /sentiment <текст>")
        return

    try:
        analyzer = _resolve_analyzer(context)
    except ConfigError as error:
        logger.error("/sentiment failed due to configuration error: %s", error)
        await update.message.reply_text(UNAVAILABLE_TEXT)
        return

    result = analyzer.analyze(text)
    logger.debug("/sentiment scored %s with confidence %.2f", result.sentiment, result.confidence)
    await update.message.reply_text(render_result(result))


async def debug_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /debug <text> command."""
    if update.message is None:
        return

    text = _resolve_command_text(update, context)
    if not text:
        await update.message.reply_text("Укажите текст: /debug <текст>")
        return

    try:
        analyzer = _resolve_analyzer(context)
    except ConfigError as error:
        logger.error("/debug failed due to configuration error: %s", error)
        await update.message.reply_text(UNAVAILABLE_TEXT)
        return

    await update.message.reply_text(render_debug(analyzer.debug(text)))


async def model_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /model command with lexicon statistics."""
    if update.message is None:
        return

    try:
        analyzer = _resolve_analyzer(context)
    except ConfigError as error:
        logger.error("/model failed due to configuration error: %s", error)
        await update.message.reply_text(UNAVAILABLE_TEXT)
        return

    await update.message.reply_text(render_lexicon_info(analyzer.describe_lexicon()))


def build_command_handlers() -> list[CommandHandler]:
    """Build all command handlers."""
    return [
        CommandHandler("start", start_command),
        CommandHandler("help", help_command),
        CommandHandler("sentiment", sentiment_command),
        CommandHandler("debug", debug_command),
        CommandHandler("model", model_command),
    ]
