"""Confirm subscription email templates.

Sent when a customer asks to join a waitlist, before the subscription is
active. The customer follows the confirm link to activate it.
"""

from __future__ import annotations

import html

from waitlist_mail.schemas import ProductSnapshot
from waitlist_mail.schemas import WaitlistSubscription
from waitlist_mail.templates.types import EmailContent
from waitlist_mail.templates.waitlist_email import EmailType
from waitlist_mail.templates.waitlist_email import WaitlistEmail
from waitlist_mail.templates.waitlist_email import add_query_args

CONFIRM_ACTION = "woodmart_confirm_subscription"

CONFIRM_BUTTON_HTML = (
    '<div style="margin:0 0 16px;">'
    '<a class="xts-add-to-cart" href="{url}">{label}</a>'
    "</div>"
)

CONFIRM_SUBSCRIPTION_TEXT = """Hi {user_name},
Thank you for requesting to join the waitlist for this item:
{product_title} {product_price} {product_link}
Please click the button below to confirm your email address. Once confirmed, we will notify you when the item is back in stock:{confirm_button}
Note: The confirmation period is 2 days.
If you did not request to join this waitlist, please ignore this message.
Cheers
{site_title}"""

CONFIRM_SUBSCRIPTION_HTML = """<p>Hi {user_name}</p>
<p>Thank you for requesting to join the waitlist for this item:</p>
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
<p>Please click the button below to confirm your email address. Once confirmed, we will notify you when the item is back in stock:</p>
{confirm_button}
<p>Note: The confirmation period is 2 days.</p>
<p>If you did not request to join this waitlist, please ignore this message.</p>
<p>Cheers</p>
<p>{site_title}</p>"""


class ConfirmSubscriptionEmail(WaitlistEmail):
    """Asks a customer to confirm a waitlist subscription."""

    email_id = "woodmart_waitlist_confirm_subscription_email"
    title = "Waitlist - Confirm your subscription"
    description = (
        "Configure the email that asks customers to confirm their waitlist "
        "subscription before they are notified about the product."
    )
    default_heading = "Get notified when {product_title} back in stock"
    default_subject = "Confirm waitlist subscription"

    DEFAULT_CONTENT_HTML = CONFIRM_SUBSCRIPTION_HTML
    DEFAULT_CONTENT_TEXT = CONFIRM_SUBSCRIPTION_TEXT

    def placeholder_keys(self, email_type: EmailType) -> list[str]:
        return super().placeholder_keys(email_type) + ["confirm_button"]

    def get_confirm_subscription_link(
        self,
        subscription: WaitlistSubscription,
        product: ProductSnapshot,
    ) -> str:
        """Build the confirm URL on the product page.

        Like the unsubscribe link, the token is only embedded here.
        """
        return add_query_args(
            product.permalink,
            {"action": CONFIRM_ACTION, "token": subscription.confirm_token},
        )

    def extra_placeholders(
        self,
        subscription: WaitlistSubscription,
        product: ProductSnapshot,
        email_type: EmailType,
    ) -> dict[str, str]:
        confirm_url = html.escape(
            self.get_confirm_subscription_link(subscription, product)
        )
        if email_type != "html":
            return {"{confirm_button}": confirm_url}

        return {
            "{confirm_button}": CONFIRM_BUTTON_HTML.format(
                url=confirm_url,
                label=html.escape(self.translate("Confirm now")),
            )
        }


def render_confirm_subscription_email(
    subscription: WaitlistSubscription,
    product: ProductSnapshot,
) -> EmailContent:
    """Render the confirm subscription email with the default settings."""
    return ConfirmSubscriptionEmail().render(subscription, product)
