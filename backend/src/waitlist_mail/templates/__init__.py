"""Email templates for waitlist notifications."""

from waitlist_mail.templates.confirm_subscription import (
    ConfirmSubscriptionEmail,
    render_confirm_subscription_email,
)
from waitlist_mail.templates.in_stock import (
    InStockEmail,
    prepare_in_stock_emails,
    render_in_stock_email,
)
from waitlist_mail.templates.registry import get_email_class
from waitlist_mail.templates.renderer import (
    NotificationRenderer,
    create_default_renderer,
)
from waitlist_mail.templates.subscribe import (
    SubscribeConfirmedEmail,
    render_subscribe_email,
)
from waitlist_mail.templates.types import (
    EmailContent,
    EmailMetadata,
    NotificationContext,
)

__all__ = [
    "ConfirmSubscriptionEmail",
    "EmailContent",
    "EmailMetadata",
    "InStockEmail",
    "NotificationContext",
    "NotificationRenderer",
    "SubscribeConfirmedEmail",
    "create_default_renderer",
    "get_email_class",
    "prepare_in_stock_emails",
    "render_confirm_subscription_email",
    "render_in_stock_email",
    "render_subscribe_email",
]
