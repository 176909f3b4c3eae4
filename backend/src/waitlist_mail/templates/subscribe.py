"""Subscription confirmed email templates."""

from __future__ import annotations

from waitlist_mail.schemas import ProductSnapshot
from waitlist_mail.schemas import WaitlistSubscription
from waitlist_mail.templates.types import EmailContent
from waitlist_mail.templates.waitlist_email import WaitlistEmail

SUBSCRIBE_TEXT = """Hi {user_name},
We confirm that you have been added to the waitlist for the following item:
{product_title} {product_price} {product_link}
Stay tuned because we'll notify you when the product is available.

Best regards,
{site_title}"""

SUBSCRIBE_HTML = """<p>Hi {user_name}</p>
<p>We confirm that you have been added to the waitlist for the following item:</p>
<table class="td xts-prod-table" cellspacing="0" cellpadding="6" border="1">
    <thead>
        <tr>
            <th class="td" scope="col"></th>
            <th class="td xts-align-start" scope="col">Product</th>
            <th class="td xts-align-end" scope="col">Price</th>
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
            <td class="td xts-tbody-td xts-align-end">
                {product_price}
            </td>
        </tr>
    </tbody>
</table>
<p>Best regards,</p>
<p>{site_title}</p>"""


class SubscribeConfirmedEmail(WaitlistEmail):
    """Confirms that a customer joined a product's waitlist."""

    email_id = "woodmart_waitlist_subscribe_email"
    title = "Waitlist - Subscription confirmed"
    description = (
        "Configure the email that confirms a customer's subscription to the "
        "waitlist, assuring them that they will receive updates when the "
        "requested item is back in stock."
    )
    default_heading = "You will be notified when product is back in stock"
    default_subject = "Waitlist subscription confirmed"

    DEFAULT_CONTENT_HTML = SUBSCRIBE_HTML
    DEFAULT_CONTENT_TEXT = SUBSCRIBE_TEXT


def render_subscribe_email(
    subscription: WaitlistSubscription,
    product: ProductSnapshot,
) -> EmailContent:
    """Render the subscription confirmed email with the default settings."""
    return SubscribeConfirmedEmail().render(subscription, product)
