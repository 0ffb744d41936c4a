"""Load the sentiment lexicon from JSON with a seed-data fallback."""

from __future__ import annotations

from functools import lru_cache
import json
import logging
import math
from pathlib import Path
from typing import Any

from sentiru.lexicon.model import FALLBACK_LEXICON, Category, Lexicon


logger = logging.getLogger(__name__)

DEFAULT_LEXICON_PATH = Path(__file__).parent / "sentiment_model.json"


class LexiconFormatError(ValueError):
    """Raised when a lexicon document does not match the expected layout."""


def _parse_category(name: str, raw: Any) -> dict[str, float]:
    if not isinstance(raw, dict):
        raise LexiconFormatError(f"category '{name}' must be an object of word -> weight")

    words: dict[str, float] = {}
    for raw_word, raw_weight in raw.items():
        word = str(raw_word)
        if not word.strip():
            raise LexiconFormatError(f"category '{name}' contains an empty word")
        if word != word.strip().lower():
            raise LexiconFormatError(f"word '{word}' in '{name}' must be lowercase without surrounding spaces")
        if isinstance(raw_weight, bool) or not isinstance(raw_weight, (int, float)):
            raise LexiconFormatError(f"weight for '{word}' in '{name}' must be a number")
        weight = float(raw_weight)
        if not math.isfinite(weight) or weight < 0.0:
            raise LexiconFormatError(f"weight for '{word}' in '{name}' must be a non-negative number")
        words[word] = weight
    return words


def parse_lexicon(document: Any, *, source: str = "<memory>") -> Lexicon:
    """Validate a decoded JSON document and build a Lexicon from it.

    Unknown top-level keys are ignored and a missing category is treated as
    empty.
    """
    if not isinstance(document, dict):
        raise LexiconFormatError("lexicon document must be a JSON object")

    data = {
        category.value: _parse_category(category.value, document.get(category.value, {}))
        for category in Category
    }
    return Lexicon.from_mapping(data, loaded=True, source=source)


def load_lexicon(path: str | Path | None = None) -> Lexicon:
    """Read the lexicon file at *path* (the bundled one by default).

    Never raises: any read, decode or validation failure is logged and the
    built-in fallback lexicon is returned instead.
    """
    lexicon_path = DEFAULT_LEXICON_PATH if path is None else Path(path)

    try:
        document = json.loads(lexicon_path.read_text(encoding="utf-8"))
        lexicon = parse_lexicon(document, source=str(lexicon_path))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, LexiconFormatError) as error:
        logger.warning("Failed to load sentiment lexicon from %s: %s. Using fallback lexicon.", lexicon_path, error)
        return FALLBACK_LEXICON

    logger.info(
        "Loaded sentiment lexicon from %s: positive=%d negative=%d neutral=%d",
        lexicon_path,
        lexicon.size(Category.POSITIVE),
        lexicon.size(Category.NEGATIVE),
        lexicon.size(Category.NEUTRAL),
    )
    return lexicon


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    """Return the bundled lexicon, loaded once per process."""
    return load_lexicon(DEFAULT_LEXICON_PATH)
