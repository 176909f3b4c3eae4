"""Back-in-stock email templates.

Sent to every waitlist subscriber once the product they are waiting for can
be bought again.
"""

from __future__ import annotations

from typing import Iterable
from typing import Mapping

from waitlist_mail.schemas import ProductSnapshot
from waitlist_mail.schemas import WaitlistSubscription
from waitlist_mail.templates.types import EmailContent
from waitlist_mail.templates.waitlist_email import WaitlistEmail
from waitlist_mail.utils.logging import get_logger
from waitlist_mail.utils.logging import mask_email

logger = get_logger(__name__)

IN_STOCK_TEXT = """Hi {user_name},
Great news! The {product_title} ({product_link}) on your waitlist is now back in stock!
Since you requested to be notified, we wanted to make sure you're the first to know. However, we can't guarantee how long it will be available.
Click the link below to grab it before it's gone!
{product_title} {product_price} {add_to_cart_url}

Best regards,
{site_title}"""

IN_STOCK_HTML = """<p>Hi {user_name}</p>
<p>Great news! The {product_title} ({product_link}) on your waitlist is now back in stock!</p>
<p>Since you requested to be notified, we wanted to make sure you're the first to know. However, we can't guarantee how long it will be available.</p>
<p>Click the link below to grab it before it's gone!</p>
<table class="td xts-prod-table" cellspacing="0" cellpadding="6" border="1">
    <thead>
        <tr>
            <th class="td" scope="col"></th>
            <th class="td xts-align-start" scope="col">Product</th>
            <th class="td xts-align-start" scope="col">Price</th>
            <th class="td xts-align-end" scope="col">Add to cart</th>
        </tr>
    </thead>
    <tbody>
        <tr>
            <td class="td xts-tbody-td xts-img-col xts-align-start">
                <a href="{product_link}">
                    {product_image}
                </a>
            </td>
            <td class="td xts-tbody-td xts-align-start">
                {product_title_with_link}
            </td>
            <td class="td xts-tbody-td xts-align-start">
                {product_price}
            </td>
            <td class="td xts-tbody-td xts-align-end">
                <a href="{add_to_cart_url}" class="xts-add-to-cart">
                    Add to cart
                </a>
            </td>
        </tr>
    </tbody>
</table>"""


class InStockEmail(WaitlistEmail):
    """Tells a subscriber that a product is back in stock."""

    email_id = "woodmart_waitlist_in_stock"
    title = "Waitlist - Product back in stock"
    description = (
        "Set up the email notification that informs customers when a product "
        "they have been waiting for is back in stock."
    )
    default_heading = (
        "Good news! The product you've been waiting for is now back in stock."
    )
    default_subject = "A product you are waiting for is back in stock"

    DEFAULT_CONTENT_HTML = IN_STOCK_HTML
    DEFAULT_CONTENT_TEXT = IN_STOCK_TEXT


def render_in_stock_email(
    subscription: WaitlistSubscription,
    product: ProductSnapshot,
) -> EmailContent:
    """Render the back-in-stock email with the default settings."""
    return InStockEmail().render(subscription, product)


def prepare_in_stock_emails(
    subscriptions: Iterable[WaitlistSubscription],
    products: Mapping[int, ProductSnapshot],
    email: WaitlistEmail,
) -> list[tuple[str, EmailContent]]:
    """Render one message per subscriber for the transport layer.

    Each subscription resolves to its variation when it has one, otherwise
    to the parent product. Subscriptions without a recipient or whose
    product is unknown are skipped.

    Args:
        subscriptions: Waitlist entries of the product that came back.
        products: Known products keyed by product or variation id.
        email: The email to render, usually an ``InStockEmail``.

    Returns:
        (recipient, EmailContent) pairs in subscription order.
    """
    if not email.is_enabled():
        logger.info(f"Email {email.email_id} is disabled, nothing to prepare")
        return []

    prepared: list[tuple[str, EmailContent]] = []
    for subscription in subscriptions:
        if not subscription.user_email:
            logger.warning("Skipping waitlist entry without recipient")
            continue

        product = products.get(subscription.target_product_id)
        if product is None:
            logger.warning(
                f"Skipping {mask_email(subscription.user_email)}: "
                f"product {subscription.target_product_id} not found"
            )
            continue

        prepared.append((subscription.user_email, email.render(subscription, product)))

    logger.info(
        f"Prepared {len(prepared)} {email.email_id} emails",
        extra={"email_id": email.email_id, "count": len(prepared)},
    )
    return prepared
