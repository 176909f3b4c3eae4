"""Pydantic schemas for products and waitlist subscriptions."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ProductSnapshot(BaseModel):
    """Product fields needed to render a waitlist email."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    permalink: str
    price: Decimal = Decimal("0")
    sku: str = ""
    image_url: Optional[str] = None
    price_suffix: str = ""
    unit_of_measure: Optional[str] = None
    currency_symbol: str = "$"
    price_decimals: int = Field(default=2, ge=0, le=6)


class WaitlistSubscription(BaseModel):
    """A customer's subscription to a product's waitlist."""

    model_config = ConfigDict(from_attributes=True)

    user_email: str
    product_id: int
    variation_id: Optional[int] = None
    unsubscribe_token: str = ""
    confirm_token: str = ""
    user_display_name: Optional[str] = None

    @property
    def target_product_id(self) -> int:
        """The variation when one is set, otherwise the parent product."""
        return self.variation_id or self.product_id


class PreviewRequest(BaseModel):
    """Body of a preview request."""

    email: Literal["in_stock", "subscribe", "confirm"] = "in_stock"
    format: Literal["html", "plain", "both"] = "both"
    product: ProductSnapshot
    subscription: WaitlistSubscription


class PreviewResponse(BaseModel):
    """Rendered preview returned to the caller."""

    email_id: str
    subject: str
    body_html: Optional[str] = None
    body_text: Optional[str] = None
