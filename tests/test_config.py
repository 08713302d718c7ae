"""Tests for settings loading."""

import pytest

from deckstrings.config import DECKSTRING_VERSION, SUPPORTED_VERSIONS, Settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.app_name == "deckstrings"
        assert settings.name_buffer_capacity == 256
        assert settings.default_format == 2

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DECKSTRINGS_NAME_BUFFER_CAPACITY", "32")
        monkeypatch.setenv("DECKSTRINGS_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.name_buffer_capacity == 32
        assert settings.log_level == "DEBUG"

    def test_encoder_writes_a_supported_version(self) -> None:
        assert DECKSTRING_VERSION in SUPPORTED_VERSIONS
