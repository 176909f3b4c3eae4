"""Lookup of waitlist emails by short name."""

from __future__ import annotations

from typing import Type

from waitlist_mail.exceptions import UnknownEmailError
from waitlist_mail.templates.confirm_subscription import ConfirmSubscriptionEmail
from waitlist_mail.templates.in_stock import InStockEmail
from waitlist_mail.templates.subscribe import SubscribeConfirmedEmail
from waitlist_mail.templates.waitlist_email import WaitlistEmail

EMAIL_CLASSES: dict[str, Type[WaitlistEmail]] = {
    "in_stock": InStockEmail,
    "subscribe": SubscribeConfirmedEmail,
    "confirm": ConfirmSubscriptionEmail,
}


def get_email_class(name: str) -> Type[WaitlistEmail]:
    """Return the email class registered under ``name``.

    Raises:
        UnknownEmailError: If no email is registered under that name.
    """
    try:
        return EMAIL_CLASSES[name]
    except KeyError as e:
        raise UnknownEmailError(name) from e
