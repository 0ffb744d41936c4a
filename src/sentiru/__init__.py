"""Lexicon-based sentiment analysis for Russian-language text."""

__version__ = "1.0.0"
