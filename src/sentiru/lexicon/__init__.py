"""Sentiment lexicon model and loading."""

from .loader import DEFAULT_LEXICON_PATH, LexiconFormatError, default_lexicon, load_lexicon, parse_lexicon
from .model import FALLBACK_LEXICON, Category, Lexicon

__all__ = [
    "Category",
    "DEFAULT_LEXICON_PATH",
    "FALLBACK_LEXICON",
    "Lexicon",
    "LexiconFormatError",
    "default_lexicon",
    "load_lexicon",
    "parse_lexicon",
]
