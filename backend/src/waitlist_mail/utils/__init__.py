"""Utility modules for waitlist email rendering."""

from waitlist_mail.utils.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    mask_email,
    set_request_context,
)
from waitlist_mail.utils.markup import (
    escape_for_text,
    sanitize_post_html,
    strip_all_markup,
)
from waitlist_mail.utils.responses import json_response
from waitlist_mail.utils.texturize import texturize
from waitlist_mail.utils.translations import translate

__all__ = [
    "clear_request_context",
    "configure_logging",
    "escape_for_text",
    "get_logger",
    "json_response",
    "mask_email",
    "sanitize_post_html",
    "set_request_context",
    "strip_all_markup",
    "texturize",
    "translate",
]
