"""Tests for dish name normalization."""

import pytest

from calorie_counter.domain.errors import EmptyQueryError, InputError
from calorie_counter.services.query import normalize_query


def test_normalize_query_trims_and_lowercases() -> None:
    query = normalize_query("  Chicken  Tikka Masala\n")

    assert query.original == "Chicken  Tikka Masala"
    assert query.normalized == "chicken  tikka masala"
    assert query.words == ["chicken", "tikka", "masala"]


@pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
def test_normalize_query_rejects_blank(raw: str) -> None:
    with pytest.raises(EmptyQueryError) as exc_info:
        normalize_query(raw)

    assert isinstance(exc_info.value, InputError)
