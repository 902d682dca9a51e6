"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.conversion_strategy == "provider"
        assert settings.rate_quote_field == "bid"
        assert settings.rate_pair_tag_format == "{from}-{to}"

    def test_quote_field_is_normalized(self):
        assert Settings(_env_file=None, rate_quote_field="ASK").rate_quote_field == "ask"

    def test_quote_field_must_be_a_price(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, rate_quote_field="timestamp")

    def test_pair_tag_format_needs_both_sides(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, rate_pair_tag_format="{from}")

    def test_memory_store_flag(self):
        assert Settings(_env_file=None, database_url="memory://").uses_memory_store is True
        assert Settings(
            _env_file=None, database_url="sqlite+aiosqlite:///./x.db"
        ).uses_memory_store is False

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("CONVERSION_STRATEGY", "local")
        assert Settings(_env_file=None).conversion_strategy == "local"
