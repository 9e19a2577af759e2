"""Dish name normalization."""

from dataclasses import dataclass

from calorie_counter.domain.errors import EmptyQueryError


@dataclass(frozen=True)
class NormalizedQuery:
    """Dish name in display and comparison forms."""

    original: str
    normalized: str

    @property
    def words(self) -> list[str]:
        """Return the whitespace-separated words of the comparison form."""
        return self.normalized.split()


def normalize_query(raw: str) -> NormalizedQuery:
    """Trim a raw dish name and lower-case it for matching."""
    trimmed = raw.strip()
    if not trimmed:
        raise EmptyQueryError()
    return NormalizedQuery(original=trimmed, normalized=trimmed.lower())
