"""Base class for emails sent to waitlist subscribers.

A waitlist email owns its default copy (heading, subject, HTML and text
bodies), fills the product and customer placeholders, and hands the
resulting ``NotificationContext`` to a ``NotificationRenderer`` once per
email type.

Available placeholders:
- Site: {site_title}, {site_address}, {site_url}
- Product: {product_title}, {product_link}, {product_sku}, {product_price},
  {add_to_cart_url}
- Customer: {user_name}, {user_email}
- HTML only: {product_image}, {product_title_with_link}
"""

from __future__ import annotations

import html
from decimal import Decimal
from typing import Literal
from typing import Mapping
from typing import Optional
from urllib.parse import parse_qsl
from urllib.parse import urlencode
from urllib.parse import urlsplit
from urllib.parse import urlunsplit

from waitlist_mail.config import Settings
from waitlist_mail.config import get_settings
from waitlist_mail.schemas import ProductSnapshot
from waitlist_mail.schemas import WaitlistSubscription
from waitlist_mail.templates.layout import ConfiguredFooterText
from waitlist_mail.templates.layout import FooterTextProvider
from waitlist_mail.templates.layout import Localizer
from waitlist_mail.templates.layout import call_collaborator
from waitlist_mail.templates.layout import format_site_placeholders
from waitlist_mail.templates.renderer import NotificationRenderer
from waitlist_mail.templates.renderer import create_default_renderer
from waitlist_mail.templates.types import EmailContent
from waitlist_mail.templates.types import EmailMetadata
from waitlist_mail.templates.types import NotificationContext
from waitlist_mail.utils.translations import TEXT_DOMAIN

EmailType = Literal["html", "plain"]

UNSUBSCRIBE_ACTION = "woodmart_waitlist_unsubscribe"

SITE_PLACEHOLDERS = ["site_title", "site_address", "site_url"]

PRODUCT_PLACEHOLDERS = [
    "product_title",
    "product_link",
    "product_sku",
    "product_price",
    "add_to_cart_url",
    "user_name",
    "user_email",
]

HTML_ONLY_PLACEHOLDERS = ["product_image", "product_title_with_link"]

PRODUCT_IMAGE_HTML = (
    '<div style="margin-bottom: 5px">'
    '<img src="{src}" alt="{alt}" height="{height}" width="{width}" style="{style}" />'
    "</div>"
)


def add_query_args(url: str, args: Mapping[str, str]) -> str:
    """Add or replace query arguments on a URL, keeping the others."""
    parts = urlsplit(url)
    query = [(key, value) for key, value in parse_qsl(parts.query) if key not in args]
    query.extend(args.items())
    return urlunsplit(parts._replace(query=urlencode(query)))


def format_price(amount: Decimal, currency_symbol: str, decimals: int = 2) -> str:
    """Format a price as an HTML amount span, e.g. ``$1,234.50``."""
    value = format(Decimal(amount), f",.{decimals}f")
    return (
        '<span class="woocommerce-Price-amount amount">'
        f"{html.escape(currency_symbol)}{value}"
        "</span>"
    )


class WaitlistEmail:
    """Shared behaviour of the waitlist emails.

    Subclasses set the identifiers, default heading/subject and the
    ``DEFAULT_CONTENT_HTML`` / ``DEFAULT_CONTENT_TEXT`` bodies.
    """

    email_id = ""
    title = ""
    description = ""
    default_heading = ""
    default_subject = ""

    DEFAULT_CONTENT_HTML = ""
    DEFAULT_CONTENT_TEXT = ""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        renderer: Optional[NotificationRenderer] = None,
        footer_text: Optional[FooterTextProvider] = None,
        localize: Optional[Localizer] = None,
        content_html: Optional[str] = None,
        content_text: Optional[str] = None,
        enabled: bool = True,
    ) -> None:
        self.settings = settings or get_settings()
        self.footer_text = footer_text or ConfiguredFooterText(self.settings)
        self.renderer = renderer or create_default_renderer(
            self.settings, footer_text=self.footer_text
        )
        self.localize = localize or self.renderer.localize
        self.content_html = content_html or self.DEFAULT_CONTENT_HTML
        self.content_text = content_text or self.DEFAULT_CONTENT_TEXT
        self.enabled = enabled

    def is_enabled(self) -> bool:
        return self.enabled

    def translate(self, message: str) -> str:
        """Localize a message through the injected localizer."""
        return call_collaborator("localize", self.localize, message, TEXT_DOMAIN)

    def default_content(self, email_type: EmailType) -> str:
        if email_type == "plain":
            return self.DEFAULT_CONTENT_TEXT
        return self.DEFAULT_CONTENT_HTML

    def placeholder_keys(self, email_type: EmailType) -> list[str]:
        """Return the placeholder keys usable in a body of this type."""
        keys = SITE_PLACEHOLDERS + PRODUCT_PLACEHOLDERS
        if email_type == "html":
            keys = keys + HTML_ONLY_PLACEHOLDERS
        return keys

    @staticmethod
    def placeholder_text_string(keys: list[str]) -> str:
        """Format placeholder keys for an options description."""
        return " ".join(f"<code>{{{key}}}</code>" for key in keys)

    def format_string(self, text: str, placeholders: Mapping[str, str]) -> str:
        """Replace product, customer and site placeholders in ``text``."""
        for placeholder, value in placeholders.items():
            text = text.replace(placeholder, value)
        return format_site_placeholders(text, self.settings)

    def get_placeholders(
        self,
        subscription: WaitlistSubscription,
        product: ProductSnapshot,
        email_type: EmailType,
    ) -> dict[str, str]:
        permalink = html.escape(product.permalink)
        user_name = subscription.user_display_name or self.translate("Customer")

        placeholders = {
            "{product_title}": html.escape(product.name),
            "{product_link}": permalink,
            "{product_sku}": html.escape(product.sku),
            "{product_price}": self.get_product_price_html(product),
            "{add_to_cart_url}": html.escape(self.get_add_to_cart_url(product)),
            "{user_name}": html.escape(user_name),
            "{user_email}": html.escape(subscription.user_email),
        }
        if email_type == "html":
            placeholders["{product_image}"] = self.get_product_image_html(product)
            placeholders["{product_title_with_link}"] = (
                f'<a href="{permalink}">{html.escape(product.name)}</a>'
            )
        placeholders.update(self.extra_placeholders(subscription, product, email_type))
        return placeholders

    def extra_placeholders(
        self,
        subscription: WaitlistSubscription,
        product: ProductSnapshot,
        email_type: EmailType,
    ) -> dict[str, str]:
        """Placeholders specific to one email; none by default."""
        return {}

    def get_product_price_html(self, product: ProductSnapshot) -> str:
        """Price fragment, with the unit of measure when the product has one."""
        price_html = format_price(
            product.price, product.currency_symbol, product.price_decimals
        )
        if product.unit_of_measure:
            price_html += (
                '<span class="xts-unit-slash">/</span>'
                f"<span>{html.escape(product.unit_of_measure)}</span>"
                f"{product.price_suffix}"
            )
        return price_html

    def get_product_image_html(self, product: ProductSnapshot) -> str:
        """Thumbnail fragment; empty when there is no image or placeholder."""
        src = product.image_url or self.settings.placeholder_image
        if not src:
            return ""

        width, height = self.settings.thumbnail_size
        margin = "margin-left" if self.settings.is_rtl else "margin-right"
        style = f"vertical-align: middle; font-size: 12px; {margin}: 10px;"

        return PRODUCT_IMAGE_HTML.format(
            src=html.escape(src),
            alt=html.escape(self.translate("Product image")),
            height=height,
            width=width,
            style=style,
        )

    def get_add_to_cart_url(self, product: ProductSnapshot) -> str:
        return add_query_args(product.permalink, {"add-to-cart": str(product.id)})

    def get_unsubscribe_link(
        self,
        subscription: WaitlistSubscription,
        product: ProductSnapshot,
    ) -> str:
        """Build the unsubscribe URL on the product page.

        The token is only embedded here; checking it belongs to the
        endpoint that receives the request.
        """
        return add_query_args(
            product.permalink,
            {"action": UNSUBSCRIBE_ACTION, "token": subscription.unsubscribe_token},
        )

    def get_heading(self, placeholders: Mapping[str, str]) -> str:
        return self.format_string(
            self.translate(self.default_heading), placeholders
        )

    def get_subject(self, placeholders: Mapping[str, str]) -> str:
        """Subject line as plain text, entities decoded."""
        subject = self.format_string(
            self.translate(self.default_subject), placeholders
        )
        return html.unescape(subject)

    def build_context(
        self,
        subscription: WaitlistSubscription,
        product: ProductSnapshot,
        email_type: EmailType,
    ) -> NotificationContext:
        """Build the render context for one email type."""
        placeholders = self.get_placeholders(subscription, product, email_type)
        content = self.content_text if email_type == "plain" else self.content_html

        return NotificationContext(
            heading=self.get_heading(placeholders),
            body_content=self.format_string(content, placeholders),
            unsubscribe_link=self.get_unsubscribe_link(subscription, product),
            footer_text=call_collaborator("footer_text", self.footer_text),
            email_metadata=EmailMetadata(
                email_id=self.email_id,
                recipient=subscription.user_email,
                plain_text=email_type == "plain",
            ),
        )

    def render(
        self,
        subscription: WaitlistSubscription,
        product: ProductSnapshot,
    ) -> EmailContent:
        """Render subject, text body and HTML body for one subscriber."""
        html_context = self.build_context(subscription, product, "html")
        plain_context = self.build_context(subscription, product, "plain")
        subject_placeholders = self.get_placeholders(subscription, product, "plain")

        return EmailContent(
            subject=self.get_subject(subject_placeholders),
            body_text=self.renderer.render_plain_text(plain_context),
            body_html=self.renderer.render_html(html_context),
        )
