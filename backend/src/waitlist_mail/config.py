"""Environment-driven settings for waitlist emails."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping
from typing import Optional

from waitlist_mail.exceptions import ConfigurationError

DEFAULT_FOOTER_TEXT = "{site_title}"
DEFAULT_THUMBNAIL_SIZE = (32, 32)
SUPPORTED_LANGUAGES = ("en", "zh")
TEXT_DIRECTIONS = ("ltr", "rtl")


@dataclass(frozen=True)
class Settings:
    """Site and email options used while rendering."""

    site_title: str = ""
    site_url: str = ""
    site_address: str = ""
    footer_text: str = DEFAULT_FOOTER_TEXT
    header_image: str = ""
    placeholder_image: str = ""
    language: str = "en"
    text_direction: str = "ltr"
    thumbnail_size: tuple[int, int] = DEFAULT_THUMBNAIL_SIZE

    @property
    def is_rtl(self) -> bool:
        return self.text_direction == "rtl"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Raises:
            ConfigurationError: If a value is present but invalid.
        """
        env = os.environ if environ is None else environ

        language = env.get("WAITLIST_LANGUAGE", "en").strip().lower() or "en"
        if language not in SUPPORTED_LANGUAGES:
            raise ConfigurationError(
                "WAITLIST_LANGUAGE",
                detail=f"Expected one of {', '.join(SUPPORTED_LANGUAGES)}",
            )

        direction = env.get("WAITLIST_TEXT_DIRECTION", "ltr").strip().lower() or "ltr"
        if direction not in TEXT_DIRECTIONS:
            raise ConfigurationError(
                "WAITLIST_TEXT_DIRECTION",
                detail="Expected ltr or rtl",
            )

        return cls(
            site_title=env.get("WAITLIST_SITE_TITLE", ""),
            site_url=env.get("WAITLIST_SITE_URL", ""),
            site_address=env.get("WAITLIST_SITE_ADDRESS", ""),
            footer_text=env.get("WAITLIST_EMAIL_FOOTER_TEXT", DEFAULT_FOOTER_TEXT),
            header_image=env.get("WAITLIST_EMAIL_HEADER_IMAGE", ""),
            placeholder_image=env.get("WAITLIST_PLACEHOLDER_IMAGE", ""),
            language=language,
            text_direction=direction,
            thumbnail_size=parse_thumbnail_size(env.get("WAITLIST_THUMBNAIL_SIZE")),
        )


def parse_thumbnail_size(value: Optional[str]) -> tuple[int, int]:
    """Parse a ``WIDTHxHEIGHT`` string.

    Args:
        value: Raw value such as "48x48", or None for the default.

    Returns:
        A (width, height) tuple.

    Raises:
        ConfigurationError: If the value is malformed or not positive.
    """
    if not value or not value.strip():
        return DEFAULT_THUMBNAIL_SIZE

    parts = value.lower().split("x")
    if len(parts) != 2:
        raise ConfigurationError(
            "WAITLIST_THUMBNAIL_SIZE",
            detail="Expected WIDTHxHEIGHT",
        )
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise ConfigurationError(
            "WAITLIST_THUMBNAIL_SIZE",
            detail="Width and height must be integers",
        ) from e
    if width <= 0 or height <= 0:
        raise ConfigurationError(
            "WAITLIST_THUMBNAIL_SIZE",
            detail="Width and height must be positive",
        )
    return width, height


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return settings read once from the process environment."""
    return Settings.from_env()
