"""Serving size resolution in grams."""

from calorie_counter.domain.nutrition import Candidate

DEFAULT_SERVING_GRAMS = 100.0

_GRAM_UNITS = {"g", "gm", "grm", "gram", "grams"}


def resolve_serving_grams(candidate: Candidate) -> float:
    """Return the weight in grams of one serving of the candidate."""
    size = candidate.serving_size
    unit = (candidate.serving_size_unit or "").strip().lower()
    if size is not None and size > 0:
        if unit in _GRAM_UNITS:
            return size
        if unit:
            for measure in candidate.measures:
                if unit in measure.unit_name.lower():
                    return measure.gram_weight * size
    if candidate.measures:
        return candidate.measures[0].gram_weight
    return DEFAULT_SERVING_GRAMS
