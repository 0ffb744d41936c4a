"""Lexicon-driven sentiment scoring."""

from __future__ import annotations

from dataclasses import asdict, dataclass
import math

from sentiru.analysis.normalize import clean_text, tokenize
from sentiru.lexicon.model import Category, Lexicon


MIN_TOKEN_LENGTH = 2
EMPTY_TEXT_CONFIDENCE = 0.5
NO_MATCH_CONFIDENCE = 0.1


@dataclass(slots=True)
class AnalysisResult:
    sentiment: str
    confidence: float
    text: str | None

    def to_dict(self) -> dict[str, object]:
        return {"sentiment": self.sentiment, "confidence": self.confidence, "text": self.text}


@dataclass(slots=True)
class LexiconMatch:
    word: str
    category: str
    weight: float

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(slots=True)
class LexiconInfo:
    positive_words: int
    negative_words: int
    neutral_words: int
    total_words: int
    model_loaded: bool

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(slots=True)
class DebugReport:
    original_text: str | None
    cleaned_text: str
    words: list[str]
    matched_words: list[LexiconMatch]
    analysis_result: AnalysisResult

    def to_dict(self) -> dict[str, object]:
        return {
            "original_text": self.original_text,
            "cleaned_text": self.cleaned_text,
            "words": list(self.words),
            "matched_words": [match.to_dict() for match in self.matched_words],
            "analysis_result": self.analysis_result.to_dict(),
        }


@dataclass(slots=True)
class ScoreAccumulator:
    """Per-call running sums; one match bumps ``matched`` once per category hit."""

    positive: float = 0.0
    negative: float = 0.0
    neutral: float = 0.0
    matched: int = 0

    def add(self, category: Category, weight: float) -> None:
        if category is Category.POSITIVE:
            self.positive += weight
        elif category is Category.NEGATIVE:
            self.negative += weight
        else:
            self.neutral += weight
        self.matched += 1

    def score(self, category: Category) -> float:
        if category is Category.POSITIVE:
            return self.positive
        if category is Category.NEGATIVE:
            return self.negative
        return self.neutral

    def dominant(self) -> Category:
        """Category whose sum strictly beats both others, else neutral.

        Ties for the maximum (including positive == negative) resolve to
        neutral, scored with the neutral sum.
        """
        if self.positive > self.negative and self.positive > self.neutral:
            return Category.POSITIVE
        if self.negative > self.positive and self.negative > self.neutral:
            return Category.NEGATIVE
        return Category.NEUTRAL


def _round_half_up(value: float) -> float:
    return math.floor(value * 100.0 + 0.5) / 100.0


def match_token(lexicon: Lexicon, token: str) -> list[tuple[Category, float]]:
    """Return every (category, weight) pair where *token* is a lexicon key."""
    if len(token) < MIN_TOKEN_LENGTH:
        return []

    hits: list[tuple[Category, float]] = []
    for category, words in lexicon.categories():
        weight = words.get(token)
        if weight is not None:
            hits.append((category, weight))
    return hits


class SentimentAnalyzer:
    """Stateless analyzer over a read-only lexicon; safe to share across threads."""

    def __init__(self, lexicon: Lexicon) -> None:
        self._lexicon = lexicon

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    def analyze(self, text: str | None) -> AnalysisResult:
        if text is None or not text.strip():
            return AnalysisResult(Category.NEUTRAL.value, EMPTY_TEXT_CONFIDENCE, text)

        accumulator = ScoreAccumulator()
        for token in tokenize(text):
            for category, weight in match_token(self._lexicon, token):
                accumulator.add(category, weight)

        if accumulator.matched == 0:
            return AnalysisResult(Category.NEUTRAL.value, NO_MATCH_CONFIDENCE, text)

        winner = accumulator.dominant()
        confidence = accumulator.score(winner) / accumulator.matched
        confidence = min(confidence, 1.0)
        return AnalysisResult(winner.value, _round_half_up(confidence), text)

    def describe_lexicon(self) -> LexiconInfo:
        positive = self._lexicon.size(Category.POSITIVE)
        negative = self._lexicon.size(Category.NEGATIVE)
        neutral = self._lexicon.size(Category.NEUTRAL)
        total = positive + negative + neutral
        return LexiconInfo(
            positive_words=positive,
            negative_words=negative,
            neutral_words=neutral,
            total_words=total,
            model_loaded=total > 0,
        )

    def debug(self, text: str | None) -> DebugReport:
        """Expose the intermediate steps of :meth:`analyze` for *text*."""
        words = tokenize(text)
        matches = [
            LexiconMatch(word=word, category=category.value, weight=weight)
            for word in words
            for category, weight in match_token(self._lexicon, word)
        ]
        return DebugReport(
            original_text=text,
            cleaned_text=clean_text(text),
            words=words,
            matched_words=matches,
            analysis_result=self.analyze(text),
        )


def analyze(text: str | None, lexicon: Lexicon) -> AnalysisResult:
    """Functional shortcut for ``SentimentAnalyzer(lexicon).analyze(text)``."""
    return SentimentAnalyzer(lexicon).analyze(text)
