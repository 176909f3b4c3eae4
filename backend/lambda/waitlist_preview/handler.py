"""Lambda entrypoint for the waitlist email preview endpoint."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from waitlist_mail.api.preview import lambda_handler as _handler
from waitlist_mail.utils.logging import configure_logging

configure_logging()


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the preview handler."""
    return _handler(dict(event), context)
