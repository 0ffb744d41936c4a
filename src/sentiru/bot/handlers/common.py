"""Shared bot handler context resolvers."""

from __future__ import annotations

from telegram import Update
from telegram.ext import ContextTypes

from sentiru.analysis.analyzer import SentimentAnalyzer


class ConfigError(RuntimeError):
    """Raised when required handler configuration is missing or invalid."""


def _resolve_analyzer(context: ContextTypes.DEFAULT_TYPE) -> SentimentAnalyzer:
    analyzer = context.bot_data.get("analyzer")
    if analyzer is None:
        raise ConfigError("Sentiment analyzer missing from context.bot_data['analyzer']")
    if not isinstance(analyzer, SentimentAnalyzer):
        raise ConfigError("context.bot_data['analyzer'] must be a SentimentAnalyzer")
    return analyzer


def _resolve_command_text(update: Update, context: ContextTypes.DEFAULT_TYPE) -> str:
    """Return the text following the command, keeping its original spacing."""
    raw = getattr(update.message, "text", None) or ""
    if raw.startswith("/"):
        parts = raw.split(maxsplit=1)
        return parts[1].strip() if len(parts) > 1 else ""

    args = getattr(context, "args", None) or []
    return " ".join(str(arg) for arg in args).strip()
