"""Best-match selection among FDC search results."""

import logging
from collections.abc import Callable, Sequence

from calorie_counter.domain.errors import NoCandidatesError
from calorie_counter.domain.nutrition import Candidate, DataTier, MatchResult
from calorie_counter.services.nutrients import has_calories
from calorie_counter.services.query import NormalizedQuery

TIER_BONUS: dict[DataTier, float] = {
    DataTier.FOUNDATION: 20,
    DataTier.SR_LEGACY: 15,
    DataTier.SURVEY: 10,
    DataTier.BRANDED: 0,
}
CALORIES_BONUS = 10
LONG_DESCRIPTION_CHARS = 100
LONG_DESCRIPTION_PENALTY = 5
MIN_CONFIDENT_SCORE = 20

_logger = logging.getLogger(__name__)

TierEvaluator = Callable[[Sequence[Candidate], NormalizedQuery], MatchResult | None]


def _first_where(
    candidates: Sequence[Candidate],
    tier: str,
    predicate: Callable[[str], bool],
) -> MatchResult | None:
    for candidate in candidates:
        if predicate(candidate.description.lower()):
            return MatchResult(candidate=candidate, tier=tier)
    return None


def match_exact(
    candidates: Sequence[Candidate], query: NormalizedQuery
) -> MatchResult | None:
    """Return the first candidate whose description equals the query."""
    return _first_where(candidates, "exact", lambda text: text == query.normalized)


def match_starts_with(
    candidates: Sequence[Candidate], query: NormalizedQuery
) -> MatchResult | None:
    """Return the first candidate whose description starts with the query."""
    return _first_where(
        candidates, "starts_with", lambda text: text.startswith(query.normalized)
    )


def match_contains(
    candidates: Sequence[Candidate], query: NormalizedQuery
) -> MatchResult | None:
    """Return the first candidate whose description contains the query."""
    return _first_where(candidates, "contains", lambda text: query.normalized in text)


def score_candidate(candidate: Candidate, query_words: Sequence[str]) -> float:
    """Score a candidate by word overlap, data tier, and energy coverage."""
    description = candidate.description.lower()
    food_words = description.split()
    score = 0.0
    if query_words:
        matched = [
            word
            for word in query_words
            if any(word in food_word or food_word in word for food_word in food_words)
        ]
        score += len(matched) / len(query_words) * 100
    tier = candidate.tier
    if tier is not None:
        score += TIER_BONUS[tier]
    if has_calories(candidate):
        score += CALORIES_BONUS
    if len(description) > LONG_DESCRIPTION_CHARS:
        score -= LONG_DESCRIPTION_PENALTY
    return score


def match_scored(
    candidates: Sequence[Candidate], query: NormalizedQuery
) -> MatchResult | None:
    """Return the highest-scoring candidate, or the first one if none is confident.

    Ties go to the earliest candidate.
    """
    if not candidates:
        return None
    words = query.words
    scored = [
        (score_candidate(candidate, words), candidate) for candidate in candidates
    ]
    best_score, best = max(scored, key=lambda pair: pair[0])
    if best_score > MIN_CONFIDENT_SCORE:
        return MatchResult(candidate=best, tier="scored", score=best_score)
    _logger.warning(
        "Low-confidence match, falling back to first result: query=%s "
        "best_score=%s fallback=%s",
        query.normalized,
        best_score,
        candidates[0].description,
    )
    return MatchResult(candidate=candidates[0], tier="fallback", score=best_score)


TIER_EVALUATORS: tuple[TierEvaluator, ...] = (
    match_exact,
    match_starts_with,
    match_contains,
    match_scored,
)


def select_best_match(
    candidates: Sequence[Candidate], query: NormalizedQuery
) -> MatchResult:
    """Run the tier evaluators in order and return the first match found."""
    if not candidates:
        raise NoCandidatesError(query.original)
    for evaluator in TIER_EVALUATORS:
        result = evaluator(candidates, query)
        if result is not None:
            return result
    raise NoCandidatesError(query.original)
