"""Preview endpoint for waitlist emails.

Renders an email for a product and subscriber supplied in the request body
so the copy can be checked without waiting for a stock change.

Request body:
    {
        "email": "in_stock" | "subscribe" | "confirm",
        "format": "html" | "plain" | "both",
        "product": {...ProductSnapshot...},
        "subscription": {...WaitlistSubscription...}
    }
"""

from __future__ import annotations

import json
from typing import Any
from typing import Mapping

from pydantic import ValidationError as PydanticValidationError

from waitlist_mail.exceptions import AppError
from waitlist_mail.exceptions import ValidationError
from waitlist_mail.schemas import PreviewRequest
from waitlist_mail.schemas import PreviewResponse
from waitlist_mail.templates.registry import get_email_class
from waitlist_mail.utils.logging import clear_request_context
from waitlist_mail.utils.logging import get_logger
from waitlist_mail.utils.logging import set_request_context
from waitlist_mail.utils.responses import json_response
from waitlist_mail.utils.responses import validate_content_type

logger = get_logger(__name__)


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Handle API Gateway request for an email preview."""
    request_id = event.get("requestContext", {}).get("requestId", "")
    set_request_context(req_id=request_id)

    try:
        validate_content_type(event)
        request = parse_preview_request(event)
        response = render_preview(request)
        logger.info(
            f"Preview rendered for {response.email_id}",
            extra={"email_id": response.email_id, "format": request.format},
        )
        return json_response(200, response, event=event)
    except AppError as exc:
        logger.warning(f"Preview rejected: {exc.message}")
        return json_response(exc.status_code, exc.to_dict(), event=event)
    except Exception as exc:  # pragma: no cover - safety net
        logger.exception("Unexpected error rendering preview")
        return json_response(
            500, {"error": "Internal server error", "detail": str(exc)}, event=event
        )
    finally:
        clear_request_context()


def parse_preview_request(event: Mapping[str, Any]) -> PreviewRequest:
    """Parse and validate the JSON request body.

    Raises:
        ValidationError: If the body is missing, not JSON, or does not match
            the preview schema.
    """
    raw_body = event.get("body")
    if not raw_body:
        raise ValidationError("Request body is required", field="body")

    try:
        payload = json.loads(raw_body)
    except json.JSONDecodeError as e:
        raise ValidationError("Request body must be valid JSON", field="body") from e

    try:
        return PreviewRequest.model_validate(payload)
    except PydanticValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(part) for part in first_error.get("loc", ()))
        raise ValidationError(first_error.get("msg", "Invalid value"), field=field) from e


def render_preview(request: PreviewRequest) -> PreviewResponse:
    """Render the requested email in the requested format(s)."""
    email = get_email_class(request.email)()
    content = email.render(request.subscription, request.product)

    return PreviewResponse(
        email_id=email.email_id,
        subject=content.subject,
        body_html=content.body_html if request.format in ("html", "both") else None,
        body_text=content.body_text if request.format in ("plain", "both") else None,
    )
