"""Message rendering for analysis results."""

from __future__ import annotations

from sentiru.analysis.analyzer import AnalysisResult, DebugReport, LexiconInfo


SENTIMENT_LABELS = {
    "positive": "😊 Позитивная",
    "negative": "😞 Негативная",
    "neutral": "😐 Нейтральная",
}


def render_result(result: AnalysisResult) -> str:
    label = SENTIMENT_LABELS.get(result.sentiment, result.sentiment)
    return f"Тональность: {label}\nУверенность: {result.confidence:.2f}"


def render_debug(report: DebugReport) -> str:
    lines = [
        f"Очищенный текст: {report.cleaned_text.strip() or '—'}",
        f"Слова: {', '.join(report.words) if report.words else '—'}",
        "",
        "Совпадения со словарём:",
    ]
    if not report.matched_words:
        lines.append("нет совпадений")
    for idx, match in enumerate(report.matched_words, 1):
        lines.append(f"{idx}. {match.word} — {match.category} ({match.weight:g})")

    lines.extend(["", render_result(report.analysis_result)])
    return "\n".join(lines)


def render_lexicon_info(info: LexiconInfo) -> str:
    status = "загружен" if info.model_loaded else "пуст"
    return (
        f"Словарь {status}\n"
        f"Позитивных слов: {info.positive_words}\n"
        f"Негативных слов: {info.negative_words}\n"
        f"Нейтральных слов: {info.neutral_words}\n"
        f"Всего: {info.total_words}"
    )
