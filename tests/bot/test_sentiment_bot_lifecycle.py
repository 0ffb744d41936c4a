"""Tests for bot polling lifecycle and entrypoint configuration errors."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import pytest

from sentiru.bot import main as bot_main
from sentiru.config import Settings


class FakeUpdater:
    def __init__(self, calls: list[str]) -> None:
        self._calls = calls

    async def start_polling(self, allowed_updates: list[str] | None = None) -> None:
        self._calls.append("start_polling")

    async def stop(self) -> None:
        self._calls.append("updater_stop")


class FakeApplication:
    def __init__(self) -> None:
        self.calls: list[str] = []
        self.updater = FakeUpdater(self.calls)

    async def initialize(self) -> None:
        self.calls.append("initialize")

    async def start(self) -> None:
        self.calls.append("start")

    async def stop(self) -> None:
        self.calls.append("stop")

    async def shutdown(self) -> None:
        self.calls.append("shutdown")


def test_cancelled_polling_still_shuts_application_down(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    application = FakeApplication()
    monkeypatch.setattr(bot_main, "build_application", lambda settings: application)
    settings = Settings(lexicon_path=tmp_path / "missing.json", telegram_token="test_bot_token_12345")

    async def _run_and_cancel() -> None:
        task = asyncio.create_task(bot_main.run_bot(settings))
        while "start_polling" not in application.calls:
            await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    with caplog.at_level(logging.INFO, logger="sentiru.bot.main"):
        asyncio.run(_run_and_cancel())

    assert application.calls == [
        "initialize",
        "start",
        "start_polling",
        "updater_stop",
        "stop",
        "shutdown",
    ]
    assert "Bot stopped cleanly." in caplog.text


def test_main_exits_with_status_one_without_token(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(bot_main, "load_dotenv", lambda: False)
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    for name in ("SENTIRU_LEXICON_PATH", "SENTIRU_API_HOST", "SENTIRU_API_PORT", "SENTIRU_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    with caplog.at_level(logging.ERROR, logger="sentiru.bot.main"):
        with pytest.raises(SystemExit) as excinfo:
            bot_main.main()

    assert excinfo.value.code == 1
    assert "Configuration error" in caplog.text
    assert "TELEGRAM_BOT_TOKEN" in caplog.text


def test_main_exits_with_status_one_on_bad_log_level(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(bot_main, "load_dotenv", lambda: False)
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "test_bot_token_12345")
    monkeypatch.setenv("SENTIRU_LOG_LEVEL", "chatty")

    with pytest.raises(SystemExit) as excinfo:
        bot_main.main()

    assert excinfo.value.code == 1
    assert "SENTIRU_LOG_LEVEL" in caplog.text


def test_main_runs_bot_with_loaded_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[Settings] = []

    async def _fake_run_bot(settings: Settings) -> None:
        seen.append(settings)

    monkeypatch.setattr(bot_main, "load_dotenv", lambda: False)
    monkeypatch.setattr(bot_main, "run_bot", _fake_run_bot)
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "test_bot_token_12345")
    monkeypatch.delenv("SENTIRU_LOG_LEVEL", raising=False)

    bot_main.main()

    assert [s.telegram_token for s in seen] == ["test_bot_token_12345"]
