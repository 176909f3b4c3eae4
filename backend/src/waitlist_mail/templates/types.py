"""Template types for email rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import Optional


@dataclass
class EmailContent:
    """Container for email content."""

    subject: str
    body_text: str
    body_html: str


@dataclass(frozen=True)
class EmailMetadata:
    """Describes the email being rendered for header and footer emitters."""

    email_id: str
    recipient: str = ""
    plain_text: bool = False
    sent_to_admin: bool = False


@dataclass
class NotificationContext:
    """Pre-computed values for a single render call.

    Attributes:
        heading: Title shown at the top of the email, may contain markup.
        body_content: Pre-rendered HTML fragment describing the stock event.
        unsubscribe_link: Absolute URL letting the recipient opt out.
        footer_text: Footer copy, may contain the trusted markup subset.
        email_metadata: Passed through to header and footer emitters.
    """

    heading: Optional[str] = ""
    body_content: Optional[str] = ""
    unsubscribe_link: Optional[str] = ""
    footer_text: Optional[str] = ""
    email_metadata: Any = None
