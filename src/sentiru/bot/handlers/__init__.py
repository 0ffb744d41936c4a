"""Telegram bot command handler modules."""

from __future__ import annotations

from .commands import build_command_handlers

__all__ = ["build_command_handlers"]
