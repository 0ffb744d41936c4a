"""Built-in demo phrases used as a quick end-to-end check."""

from __future__ import annotations

from sentiru.analysis.analyzer import AnalysisResult, SentimentAnalyzer


SAMPLE_TEXTS: dict[str, str] = {
    "test_positive": "Это отлично и прекрасно работает",
    "test_negative": "Ужасная ситуация, всё плохо",
    "test_neutral": "Обычный день, нормальная погода",
    "test_unknown": "Привет как дела",
}


def run_samples(analyzer: SentimentAnalyzer) -> dict[str, AnalysisResult]:
    return {key: analyzer.analyze(text) for key, text in SAMPLE_TEXTS.items()}
