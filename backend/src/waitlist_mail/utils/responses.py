"""Shared response utilities for Lambda handlers."""

from __future__ import annotations

import json
import os
from typing import Any
from typing import Mapping
from typing import Optional

from pydantic import BaseModel

from waitlist_mail.exceptions import ValidationError


def validate_content_type(
    event: Mapping[str, Any],
    required_methods: tuple[str, ...] = ("POST", "PUT", "PATCH"),
) -> None:
    """Validate Content-Type header for requests that require a body.

    Args:
        event: The Lambda event containing headers and method.
        required_methods: HTTP methods that require Content-Type validation.

    Raises:
        ValidationError: If Content-Type is missing or not application/json.
    """
    method = event.get("httpMethod", "")
    if method not in required_methods:
        return

    headers = event.get("headers") or {}

    content_type = None
    for key, value in headers.items():
        if key.lower() == "content-type":
            content_type = str(value).lower().strip()
            break

    if not content_type:
        raise ValidationError(
            "Content-Type header is required for requests with a body",
            field="Content-Type",
        )

    # Allow charset parameters like "application/json; charset=utf-8"
    if not content_type.startswith("application/json"):
        raise ValidationError(
            "Content-Type must be application/json",
            field="Content-Type",
        )


def get_security_headers() -> dict[str, str]:
    """Get security headers for all responses."""
    return {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Cache-Control": "no-store, no-cache, must-revalidate",
        "Pragma": "no-cache",
    }


def get_cors_headers(
    event: Optional[Mapping[str, Any]] = None,
) -> dict[str, str]:
    """Get CORS headers for the response.

    Allowed origins come from CORS_ALLOWED_ORIGINS (comma separated).
    Without it, any origin is allowed.
    """
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS", "")
    allowed_origins = [
        origin.strip() for origin in allowed_origins_env.split(",") if origin.strip()
    ]

    request_origin = None
    if event:
        headers = event.get("headers") or {}
        request_origin = headers.get("origin") or headers.get("Origin")

    if request_origin and request_origin in allowed_origins:
        allow_origin = request_origin
    elif allowed_origins:
        allow_origin = allowed_origins[0]
    else:
        allow_origin = "*"

    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Headers": "Content-Type,Authorization,X-Api-Key",
        "Access-Control-Allow-Methods": "POST,OPTIONS",
    }


def json_response(
    status_code: int,
    body: Any,
    event: Optional[Mapping[str, Any]] = None,
) -> dict[str, Any]:
    """Create a JSON API Gateway response.

    Args:
        status_code: HTTP status code.
        body: Response body (dict or Pydantic model).
        event: Optional Lambda event for CORS origin detection.

    Returns:
        API Gateway response dictionary.
    """
    response_headers = {
        "Content-Type": "application/json",
    }
    response_headers.update(get_security_headers())
    response_headers.update(get_cors_headers(event))

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": json.dumps(_serialize_body(body), default=str),
    }


def _serialize_body(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(exclude_none=True)

    return body
