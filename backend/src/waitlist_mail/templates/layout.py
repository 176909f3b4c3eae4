"""Shared email layout: header, footer, footer text and localization.

These are the default collaborators injected into ``NotificationRenderer``.
Any callable with the same signature can replace them.
"""

from __future__ import annotations

import html
from typing import Any
from typing import Callable
from typing import Iterable
from typing import Optional
from typing import TypeVar

from waitlist_mail.config import Settings
from waitlist_mail.exceptions import RenderingCollaboratorError
from waitlist_mail.utils.markup import sanitize_post_html
from waitlist_mail.utils.texturize import texturize
from waitlist_mail.utils.translations import translate

EmailHeaderEmitter = Callable[[str, Any], str]
EmailFooterEmitter = Callable[[Any], str]
FooterTextProvider = Callable[[], str]
FooterTextFilter = Callable[[str], str]
Localizer = Callable[[str, str], str]

T = TypeVar("T")

EMAIL_HEADER_HTML = """<!DOCTYPE html>
<html lang="{language}" dir="{direction}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{site_title}</title>
</head>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; background-color: #f7f7f7; margin: 0; padding: 20px;">
    <div id="wrapper" dir="{direction}" style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px;">
{header_image}        <div id="template_header" style="background-color: #1a1a1a; padding: 30px 40px; border-radius: 8px 8px 0 0;">
            <h1 style="margin: 0; color: #ffffff; font-size: 26px; font-weight: 300;">{heading}</h1>
        </div>
        <div id="body_content" style="padding: 40px;">
"""

HEADER_IMAGE_HTML = """        <div id="template_header_image" style="padding: 20px; text-align: center;">
            <img src="{src}" alt="{alt}" style="max-width: 200px;">
        </div>
"""

EMAIL_FOOTER_HTML = """        </div>
        <div id="template_footer" style="padding: 20px 40px; text-align: center; font-size: 12px; color: #666;">
            <hr style="border: none; border-top: 1px solid #dee2e6; margin: 0 0 20px 0;">
            <p style="margin: 0;">{footer_text}</p>
        </div>
    </div>
</body>
</html>
"""


def call_collaborator(name: str, collaborator: Callable[..., T], *args: Any) -> T:
    """Call an injected collaborator, wrapping any failure.

    Raises:
        RenderingCollaboratorError: Naming the collaborator, with the original
            exception as its cause.
    """
    try:
        return collaborator(*args)
    except Exception as e:
        raise RenderingCollaboratorError(name, detail=str(e)) from e


def format_site_placeholders(text: str, settings: Settings) -> str:
    """Replace the site placeholders available to every email."""
    replacements = {
        "{site_title}": settings.site_title,
        "{site_url}": settings.site_url,
        "{site_address}": settings.site_address,
    }
    for placeholder, value in replacements.items():
        text = text.replace(placeholder, value)
    return text


class ConfiguredFooterText:
    """Footer text from settings, passed through a chain of filters.

    Filters run in registration order and each receives the output of the
    previous one.
    """

    def __init__(
        self,
        settings: Settings,
        filters: Optional[Iterable[FooterTextFilter]] = None,
    ) -> None:
        self.settings = settings
        self.filters: list[FooterTextFilter] = list(filters or [])

    def add_filter(self, text_filter: FooterTextFilter) -> None:
        self.filters.append(text_filter)

    def __call__(self) -> str:
        text = format_site_placeholders(self.settings.footer_text, self.settings)
        for text_filter in self.filters:
            text = text_filter(text)
        return text


class CatalogLocalizer:
    """Look messages up in the bundled catalogs for one language."""

    def __init__(self, language: str = "en") -> None:
        self.language = language

    def __call__(self, key: str, domain: str) -> str:
        return translate(key, domain=domain, language=self.language)


class DefaultEmailHeader:
    """Emit the document preamble, optional logo and heading."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def __call__(self, heading: str, metadata: Any) -> str:
        header_image = ""
        if self.settings.header_image:
            header_image = HEADER_IMAGE_HTML.format(
                src=html.escape(self.settings.header_image),
                alt=html.escape(self.settings.site_title),
            )

        return EMAIL_HEADER_HTML.format(
            language=self.settings.language,
            direction=self.settings.text_direction,
            site_title=html.escape(self.settings.site_title),
            header_image=header_image,
            heading=sanitize_post_html(heading),
        )


class DefaultEmailFooter:
    """Close the body wrapper and emit the footer credit block."""

    def __init__(self, footer_text: FooterTextProvider) -> None:
        self.footer_text = footer_text

    def __call__(self, metadata: Any) -> str:
        text = sanitize_post_html(texturize(self.footer_text()))
        return EMAIL_FOOTER_HTML.format(footer_text=text)
