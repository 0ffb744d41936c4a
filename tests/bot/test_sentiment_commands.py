"""Tests for command handlers (/start, /help, /sentiment, /debug, /model)."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from typing import Any

from sentiru.analysis.analyzer import SentimentAnalyzer
from sentiru.bot.handlers.commands import (
    UNAVAILABLE_TEXT,
    debug_command,
    help_command,
    model_command,
    sentiment_command,
    start_command,
)
from sentiru.lexicon.model import FALLBACK_LEXICON


class DummyMessage:
    def __init__(self, text: str | None = None) -> None:
        self.text = text
        self.replies: list[dict[str, Any]] = []

    async def reply_text(self, text: str, reply_markup: Any = None) -> None:
        self.replies.append({"text": text, "reply_markup": reply_markup})


def _context(analyzer: object | None = None, args: list[str] | None = None) -> SimpleNamespace:
    bot_data: dict[str, object] = {}
    if analyzer is not None:
        bot_data["analyzer"] = analyzer
    return SimpleNamespace(bot_data=bot_data, user_data={}, args=args or [])


def _update(message: DummyMessage) -> SimpleNamespace:
    return SimpleNamespace(message=message, effective_user=SimpleNamespace(id=123))


def _analyzer() -> SentimentAnalyzer:
    return SentimentAnalyzer(FALLBACK_LEXICON)


def test_start_command_lists_commands() -> None:
    message = DummyMessage("/start")

    asyncio.run(start_command(_update(message), _context()))

    assert len(message.replies) == 1
    reply_text = message.replies[0]["text"]
    assert "/sentiment" in reply_text
    assert "/debug" in reply_text
    assert "/model" in reply_text
    assert "/help" in reply_text


def test_help_command_includes_examples() -> None:
    message = DummyMessage("/help")

    asyncio.run(help_command(_update(message), _context()))

    reply_text = message.replies[0]["text"]
    assert "/start" in reply_text
    assert "Пример: /sentiment" in reply_text
    assert "/model" in reply_text


def test_sentiment_command_replies_with_label_and_confidence() -> None:
    message = DummyMessage("/sentiment Всё отлично, прекрасно!")

    asyncio.run(
        sentiment_command(
            _update(message),
            _context(_analyzer(), args=["Всё", "отлично,", "прекрасно!"]),
        )
    )

    reply_text = message.replies[0]["text"]
    assert "Позитивная" in reply_text
    assert "1.00" in reply_text


def test_sentiment_command_uses_args_without_raw_command_text() -> None:
    message = DummyMessage(None)

    asyncio.run(sentiment_command(_update(message), _context(_analyzer(), args=["ужасно"])))

    assert "Негативная" in message.replies[0]["text"]


def test_sentiment_command_prompts_for_missing_text() -> None:
    message = DummyMessage("/sentiment")

    asyncio.run(sentiment_command(_update(message), _context(_analyzer())))

    assert message.replies == [{"text": "Укажите текст: /sentiment <текст>", "reply_markup": None}]


def test_sentiment_command_reports_missing_analyzer() -> None:
    message = DummyMessage("/sentiment хорошо")

    asyncio.run(sentiment_command(_update(message), _context(args=["хорошо"])))

    assert message.replies[0]["text"] == UNAVAILABLE_TEXT


def test_sentiment_command_rejects_wrong_analyzer_type() -> None:
    message = DummyMessage("/sentiment хорошо")

    asyncio.run(sentiment_command(_update(message), _context(analyzer="not-an-analyzer", args=["хорошо"])))

    assert message.replies[0]["text"] == UNAVAILABLE_TEXT


def test_debug_command_lists_matches() -> None:
    message = DummyMessage("/debug Ужасная ситуация, всё плохо")

    asyncio.run(debug_command(_update(message), _context(_analyzer())))

    reply_text = message.replies[0]["text"]
    assert "ужасная, ситуация, всё, плохо" in reply_text
    assert "1. плохо — negative (0.8)" in reply_text
    assert "Негативная" in reply_text


def test_debug_command_without_matches() -> None:
    message = DummyMessage("/debug Привет как дела")

    asyncio.run(debug_command(_update(message), _context(_analyzer())))

    reply_text = message.replies[0]["text"]
    assert "нет совпадений" in reply_text
    assert "Нейтральная" in reply_text
    assert "0.10" in reply_text


def test_model_command_reports_word_counts() -> None:
    message = DummyMessage("/model")

    asyncio.run(model_command(_update(message), _context(_analyzer())))

    reply_text = message.replies[0]["text"]
    assert "Словарь загружен" in reply_text
    assert "Позитивных слов: 3" in reply_text
    assert "Нейтральных слов: 2" in reply_text
    assert "Всего: 8" in reply_text


def test_handlers_ignore_updates_without_message() -> None:
    update = SimpleNamespace(message=None)

    asyncio.run(sentiment_command(update, _context(_analyzer())))
    asyncio.run(model_command(update, _context(_analyzer())))
