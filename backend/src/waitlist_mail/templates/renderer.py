"""HTML and plain-text rendering of waitlist notifications.

The renderer holds no state besides its collaborators, so one instance can
serve any number of concurrent render calls.
"""

from __future__ import annotations

import html
import re
from typing import Any
from typing import Optional

from waitlist_mail.config import Settings
from waitlist_mail.templates.layout import CatalogLocalizer
from waitlist_mail.templates.layout import ConfiguredFooterText
from waitlist_mail.templates.layout import DefaultEmailFooter
from waitlist_mail.templates.layout import DefaultEmailHeader
from waitlist_mail.templates.layout import EmailFooterEmitter
from waitlist_mail.templates.layout import EmailHeaderEmitter
from waitlist_mail.templates.layout import FooterTextProvider
from waitlist_mail.templates.layout import Localizer
from waitlist_mail.templates.layout import call_collaborator
from waitlist_mail.templates.types import NotificationContext
from waitlist_mail.utils.logging import get_logger
from waitlist_mail.utils.markup import escape_for_text
from waitlist_mail.utils.markup import sanitize_post_html
from waitlist_mail.utils.markup import strip_all_markup
from waitlist_mail.utils.texturize import texturize
from waitlist_mail.utils.texturize import texturize_text
from waitlist_mail.utils.translations import TEXT_DOMAIN

logger = get_logger(__name__)

PLAIN_SEPARATOR = "-" * 40

# Hyphen runs that would read as a separator line
_SEPARATOR_RUN_RE = re.compile(r"-{%d,}" % len(PLAIN_SEPARATOR))

UNSUBSCRIBE_NOTICE = (
    "If you don't want to receive any further notification, please follow this link"
)


class NotificationRenderer:
    """Render a ``NotificationContext`` as an HTML or plain-text email.

    Example:
        renderer = NotificationRenderer(
            email_header=DefaultEmailHeader(settings),
            email_footer=DefaultEmailFooter(ConfiguredFooterText(settings)),
            localize=CatalogLocalizer(settings.language),
        )
        body_html = renderer.render_html(context)
        body_text = renderer.render_plain_text(context)
    """

    def __init__(
        self,
        email_header: EmailHeaderEmitter,
        email_footer: EmailFooterEmitter,
        localize: Localizer,
    ) -> None:
        self.email_header = email_header
        self.email_footer = email_footer
        self.localize = localize

    def render_html(self, context: NotificationContext) -> str:
        """Render the HTML document.

        The body is filtered through the post content policy; header and
        footer markup come from the injected emitters as-is.

        Raises:
            RenderingCollaboratorError: If the header or footer emitter fails.
        """
        metadata = context.email_metadata

        header = call_collaborator(
            "email_header", self.email_header, context.heading or "", metadata
        )
        body = sanitize_post_html(context.body_content)
        footer = call_collaborator("email_footer", self.email_footer, metadata)

        logger.debug(
            "Rendered HTML notification",
            extra={"email_id": _email_id(metadata), "length": len(body)},
        )
        return f"{header}\t{body}\n{footer}"

    def render_plain_text(self, context: NotificationContext) -> str:
        """Render the plain-text document.

        Layout: heading, body, separator, unsubscribe notice with link,
        separator, footer text. No segment keeps markup, ``<`` / ``>`` are
        always escaped, and hyphen runs long enough to pass for a separator
        are turned into dashes outside the unsubscribe link.

        Raises:
            RenderingCollaboratorError: If the localizer fails.
        """
        notice = call_collaborator(
            "localize", self.localize, UNSUBSCRIBE_NOTICE, TEXT_DOMAIN
        )
        link = html.unescape(context.unsubscribe_link or "")

        segments = [
            _plain_segment(strip_all_markup(context.heading)),
            "\n\n",
            _plain_segment(strip_all_markup(texturize(context.body_content))),
            "\n\n",
            f"\n{PLAIN_SEPARATOR}\n\n",
            f"{_plain_segment(notice)} {escape_for_text(link)}",
            f"\n{PLAIN_SEPARATOR}\n\n",
            _plain_segment(strip_all_markup(sanitize_post_html(context.footer_text))),
        ]

        logger.debug(
            "Rendered plain-text notification",
            extra={"email_id": _email_id(context.email_metadata)},
        )
        return "".join(segments)


def _plain_segment(text: str) -> str:
    return escape_for_text(
        _SEPARATOR_RUN_RE.sub(lambda m: texturize_text(m.group()), text)
    )


def _email_id(metadata: Any) -> Optional[str]:
    return getattr(metadata, "email_id", None)


def create_default_renderer(
    settings: Settings,
    footer_text: Optional[FooterTextProvider] = None,
) -> NotificationRenderer:
    """Build a renderer wired to the default layout collaborators."""
    footer_text = footer_text or ConfiguredFooterText(settings)
    return NotificationRenderer(
        email_header=DefaultEmailHeader(settings),
        email_footer=DefaultEmailFooter(footer_text),
        localize=CatalogLocalizer(settings.language),
    )
