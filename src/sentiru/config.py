"""Runtime configuration shared by the CLI, HTTP API and Telegram bot."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping

from sentiru.lexicon.loader import DEFAULT_LEXICON_PATH


DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_port(*, name: str, raw_value: str) -> int:
    try:
        value = int(raw_value)
    except ValueError:
        raise ValueError(f"{name} must be an integer") from None
    if not 1 <= value <= 65535:
        raise ValueError(f"{name} must be between 1 and 65535")
    return value


@dataclass(frozen=True, slots=True)
class Settings:
    """Validated runtime settings."""

    lexicon_path: Path = DEFAULT_LEXICON_PATH
    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    telegram_token: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        lexicon_path_raw = source.get("SENTIRU_LEXICON_PATH", "").strip()
        api_host = source.get("SENTIRU_API_HOST", DEFAULT_API_HOST).strip()
        api_port_raw = source.get("SENTIRU_API_PORT", str(DEFAULT_API_PORT)).strip()
        log_level = source.get("SENTIRU_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        telegram_token = source.get("TELEGRAM_BOT_TOKEN", "").strip()

        if not api_host:
            raise ValueError("SENTIRU_API_HOST cannot be empty")
        if not api_port_raw:
            raise ValueError("SENTIRU_API_PORT cannot be empty")
        if log_level not in LOG_LEVELS:
            allowed = ", ".join(LOG_LEVELS)
            raise ValueError(f"SENTIRU_LOG_LEVEL must be one of: {allowed}")

        return cls(
            lexicon_path=Path(lexicon_path_raw) if lexicon_path_raw else DEFAULT_LEXICON_PATH,
            api_host=api_host,
            api_port=_parse_port(name="SENTIRU_API_PORT", raw_value=api_port_raw),
            log_level=log_level,
            telegram_token=telegram_token,
        )

    def require_telegram_token(self) -> str:
        if not self.telegram_token:
            raise ValueError("Missing required bot environment variable: TELEGRAM_BOT_TOKEN")
        return self.telegram_token
