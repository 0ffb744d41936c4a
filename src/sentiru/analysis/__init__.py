"""Text normalization and sentiment scoring."""

from .analyzer import (
    AnalysisResult,
    DebugReport,
    LexiconInfo,
    LexiconMatch,
    ScoreAccumulator,
    SentimentAnalyzer,
    analyze,
    match_token,
)
from .normalize import clean_text, tokenize
from .samples import SAMPLE_TEXTS, run_samples

__all__ = [
    "AnalysisResult",
    "DebugReport",
    "LexiconInfo",
    "LexiconMatch",
    "SAMPLE_TEXTS",
    "ScoreAccumulator",
    "SentimentAnalyzer",
    "analyze",
    "clean_text",
    "match_token",
    "run_samples",
    "tokenize",
]
