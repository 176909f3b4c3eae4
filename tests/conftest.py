"""Pytest configuration and fixtures for waitlist email tests.

This module provides shared fixtures: settings, sample products and
subscriptions, and a renderer wired to simple fake collaborators.
"""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path
from typing import Any
from typing import Generator

import pytest

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))


_ENV_VARS = (
    'WAITLIST_SITE_TITLE',
    'WAITLIST_SITE_URL',
    'WAITLIST_SITE_ADDRESS',
    'WAITLIST_EMAIL_FOOTER_TEXT',
    'WAITLIST_EMAIL_HEADER_IMAGE',
    'WAITLIST_PLACEHOLDER_IMAGE',
    'WAITLIST_LANGUAGE',
    'WAITLIST_TEXT_DIRECTION',
    'WAITLIST_THUMBNAIL_SIZE',
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch) -> Generator:
    """Isolate every test from the process environment and cached settings."""
    from waitlist_mail.config import get_settings

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


# --- Settings Fixtures ---


@pytest.fixture
def settings():
    """Settings for a small example shop."""
    from waitlist_mail.config import Settings

    return Settings(
        site_title='Example Co.',
        site_url='https://shop.test',
        site_address='1 Market Street',
        footer_text='© 2024 {site_title}',
    )


# --- Sample Data Factories ---


@pytest.fixture
def sample_product():
    """A simple product with an image."""
    from waitlist_mail.schemas import ProductSnapshot

    return ProductSnapshot(
        id=42,
        name='Blue Widget',
        permalink='https://shop.test/product/blue-widget/',
        price=Decimal('19.5'),
        sku='BW-1',
        image_url='https://shop.test/img/bw.png',
    )


@pytest.fixture
def sample_subscription():
    """A subscription to the sample product."""
    from waitlist_mail.schemas import WaitlistSubscription

    return WaitlistSubscription(
        user_email='alice@example.com',
        product_id=42,
        unsubscribe_token='tok123',
        user_display_name='Alice',
    )


# --- Renderer Fixtures ---


class RecordingHeader:
    """Header emitter that records its calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def __call__(self, heading: str, metadata: Any) -> str:
        self.calls.append((heading, metadata))
        return f'<header>{heading}</header>\n'


class RecordingFooter:
    """Footer emitter that records its calls."""

    def __init__(self) -> None:
        self.calls: list[Any] = []

    def __call__(self, metadata: Any) -> str:
        self.calls.append(metadata)
        return '<footer>Thanks</footer>\n'


@pytest.fixture
def fake_header() -> RecordingHeader:
    return RecordingHeader()


@pytest.fixture
def fake_footer() -> RecordingFooter:
    return RecordingFooter()


@pytest.fixture
def renderer(fake_header, fake_footer):
    """Renderer with recording header/footer and an English localizer."""
    from waitlist_mail.templates.layout import CatalogLocalizer
    from waitlist_mail.templates.renderer import NotificationRenderer

    return NotificationRenderer(
        email_header=fake_header,
        email_footer=fake_footer,
        localize=CatalogLocalizer('en'),
    )
