"""Tests for configuration helpers."""

from calorie_counter.config import Settings, parse_api_tokens


def test_parse_api_tokens_disabled_values() -> None:
    assert parse_api_tokens(None) is None
    assert parse_api_tokens("") is None
    assert parse_api_tokens(" * ") is None
    assert parse_api_tokens(" , ") is None


def test_parse_api_tokens_splits_and_strips() -> None:
    assert parse_api_tokens("abc, def ,,ghi") == {"abc", "def", "ghi"}


def test_settings_defaults() -> None:
    settings = Settings(fdc_api_key="key")

    assert settings.fdc_base_url == "https://api.nal.usda.gov/fdc/v1"
    assert settings.fdc_timeout_seconds == 10
    assert settings.fdc_page_size == 25
