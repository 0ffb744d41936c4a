"""Text cleanup and tokenization ahead of lexicon lookup."""

from __future__ import annotations

import re


_NON_WORD_RE = re.compile(r"[^а-яёa-z0-9\s]")


def clean_text(text: str | None) -> str:
    """Lowercase *text* and replace every non-word character with a space.

    Each stripped character becomes its own space so neighbouring words never
    merge: ``"Привет!Мир"`` → ``"привет мир"``.
    """
    if not text:
        return ""
    return _NON_WORD_RE.sub(" ", text.lower())


def tokenize(text: str | None) -> list[str]:
    """Clean *text* and split it on whitespace runs."""
    return clean_text(text).split()
