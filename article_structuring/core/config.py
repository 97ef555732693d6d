"""Configuration management for the article structuring pipeline."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pipeline settings loaded from environment variables."""

    # Structuring Engine
    PARAGRAPH_SPLIT_THRESHOLD: int = Field(
        default=200,
        ge=1,
        le=10000,
        description="Accumulated paragraph length (chars) above which a new prose line starts a new paragraph",
    )
    ENABLE_FALLBACK_DISTRIBUTION: bool = Field(
        default=True,
        description="Assign round-robin sources to paragraphs without citation markers",
    )
    FALLBACK_MIN_SOURCES: int = Field(
        default=2, ge=1, le=10, description="Minimum sources per fallback window"
    )
    FALLBACK_MAX_SOURCES: int = Field(
        default=4, ge=1, le=10, description="Maximum sources per fallback window"
    )
    EMPTY_RESULT_SOURCE_LIMIT: int = Field(
        default=3,
        ge=3,
        le=4,
        description="Sources attached to the single fallback paragraph when nothing else was produced",
    )

    # Chip Grouping
    MAX_TEXT_CHIP_GROUPS: int = Field(
        default=3, ge=1, le=10, description="Maximum text source groups shown per paragraph"
    )
    VIDEO_URL_PATTERNS: list[str] = Field(
        default_factory=lambda: ["youtube.com", "youtu.be", "vimeo.com"],
        description="URL substrings identifying video-hosting sources",
    )

    # Source labels
    FAVICON_SERVICE_URL: str = Field(
        default="https://www.google.com/s2/favicons", description="Favicon service base URL"
    )
    FAVICON_SIZE: int = Field(default=32, ge=16, le=256, description="Favicon size in pixels")

    # Article assembly
    SOURCE_CARD_LIMIT: int = Field(
        default=6, ge=0, le=50, description="Source cards shown at the top of an article"
    )
    SLUG_MAX_LENGTH: int = Field(default=60, ge=8, le=200, description="Maximum article slug length")
    RELATED_QUERY_LIMIT: int = Field(
        default=4, ge=0, le=4, description="Related follow-up queries per article"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @model_validator(mode="after")
    def check_fallback_window(self) -> "Settings":
        """Validate the fallback window bounds are ordered."""
        if self.FALLBACK_MIN_SOURCES > self.FALLBACK_MAX_SOURCES:
            raise ValueError("FALLBACK_MIN_SOURCES cannot exceed FALLBACK_MAX_SOURCES")
        return self


# Global settings instance
settings = Settings()
