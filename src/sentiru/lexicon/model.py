"""Immutable sentiment lexicon shared by all analysis calls."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class Category(str, Enum):
    """Sentiment buckets, declared in the order they are checked."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


def _freeze(words: Mapping[str, float] | None) -> Mapping[str, float]:
    return MappingProxyType({str(word): float(weight) for word, weight in (words or {}).items()})


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Fixed three-category word → weight record.

    ``loaded`` is true when the lexicon was read from a file and false for
    the built-in seed data.
    """

    positive: Mapping[str, float] = field(default_factory=dict)
    negative: Mapping[str, float] = field(default_factory=dict)
    neutral: Mapping[str, float] = field(default_factory=dict)
    loaded: bool = True
    source: str = "<memory>"

    def __post_init__(self) -> None:
        object.__setattr__(self, "positive", _freeze(self.positive))
        object.__setattr__(self, "negative", _freeze(self.negative))
        object.__setattr__(self, "neutral", _freeze(self.neutral))

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Mapping[str, float]],
        *,
        loaded: bool = True,
        source: str = "<memory>",
    ) -> "Lexicon":
        return cls(
            positive=data.get(Category.POSITIVE.value, {}),
            negative=data.get(Category.NEGATIVE.value, {}),
            neutral=data.get(Category.NEUTRAL.value, {}),
            loaded=loaded,
            source=source,
        )

    def words(self, category: Category) -> Mapping[str, float]:
        if category is Category.POSITIVE:
            return self.positive
        if category is Category.NEGATIVE:
            return self.negative
        return self.neutral

    def categories(self) -> Iterator[tuple[Category, Mapping[str, float]]]:
        for category in Category:
            yield category, self.words(category)

    def size(self, category: Category) -> int:
        return len(self.words(category))

    @property
    def total_words(self) -> int:
        return sum(len(words) for _, words in self.categories())

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {category.value: dict(words) for category, words in self.categories()}


FALLBACK_LEXICON = Lexicon(
    positive={"отлично": 1.0, "хорошо": 0.8, "прекрасно": 1.0},
    negative={"плохо": 0.8, "ужасно": 1.0, "кошмар": 1.0},
    neutral={"нормально": 0.5, "обычно": 0.5},
    loaded=False,
    source="<fallback>",
)
