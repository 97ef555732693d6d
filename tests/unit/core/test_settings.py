"""Tests for pipeline settings.

This module tests Settings defaults, bounds validation and environment
overrides.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from article_structuring.core.config import Settings


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default configuration values."""

    def test_structuring_defaults(self, test_settings: Settings) -> None:
        """Test structuring engine defaults."""
        assert test_settings.PARAGRAPH_SPLIT_THRESHOLD == 200
        assert test_settings.ENABLE_FALLBACK_DISTRIBUTION is True
        assert test_settings.FALLBACK_MIN_SOURCES == 2
        assert test_settings.FALLBACK_MAX_SOURCES == 4
        assert test_settings.EMPTY_RESULT_SOURCE_LIMIT == 3

    def test_display_defaults(self, test_settings: Settings) -> None:
        """Test chip grouping defaults."""
        assert test_settings.MAX_TEXT_CHIP_GROUPS == 3
        assert "youtube.com" in test_settings.VIDEO_URL_PATTERNS
        assert "youtu.be" in test_settings.VIDEO_URL_PATTERNS


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings bounds validation."""

    def test_empty_result_limit_bounds(self) -> None:
        """Test the empty-result source limit must be 3 or 4."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, EMPTY_RESULT_SOURCE_LIMIT=5)

        assert "empty_result_source_limit" in str(exc_info.value).lower()

    def test_split_threshold_must_be_positive(self) -> None:
        """Test paragraph split threshold minimum (>=1)."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, PARAGRAPH_SPLIT_THRESHOLD=0)

    def test_fallback_window_must_be_ordered(self) -> None:
        """Test min window above max window is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, FALLBACK_MIN_SOURCES=5, FALLBACK_MAX_SOURCES=3)

        assert "FALLBACK_MIN_SOURCES" in str(exc_info.value)


@pytest.mark.unit
class TestSettingsEnvironment:
    """Test loading settings from environment variables."""

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment variables override defaults (case-insensitive)."""
        monkeypatch.setenv("paragraph_split_threshold", "120")
        monkeypatch.setenv("ENABLE_FALLBACK_DISTRIBUTION", "false")

        settings = Settings(_env_file=None)

        assert settings.PARAGRAPH_SPLIT_THRESHOLD == 120
        assert settings.ENABLE_FALLBACK_DISTRIBUTION is False

    def test_env_list_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test list settings are parsed from JSON."""
        monkeypatch.setenv("VIDEO_URL_PATTERNS", '["youtube.com", "twitch.tv"]')

        settings = Settings(_env_file=None)

        assert settings.VIDEO_URL_PATTERNS == ["youtube.com", "twitch.tv"]
