from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Delivery(BaseModel):
    """Delivery record from deliveries.json; at most one per order."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    order_id: int = Field(alias="OrderID", description="Delivered order")
    shipping_company: Optional[str] = Field(default=None, alias="ShippingCompany", description="Carrier name")
    tracking_number: Optional[str] = Field(default=None, alias="TrackingNumber", description="Carrier tracking number")
    status: Optional[str] = Field(default=None, alias="Status", description="Delivery status, e.g. In Transit")
