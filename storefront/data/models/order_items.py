from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderItem(BaseModel):
    """Order line record from order_items.json, keyed by (order_id, product_id)."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    order_id: int = Field(alias="OrderID", description="Order identifier this item belongs to")
    product_id: int = Field(alias="ProductID", description="Product identifier")
    quantity: Optional[int] = Field(default=None, alias="Quantity", description="Quantity ordered")
    unit_price: Optional[float] = Field(default=None, alias="UnitPrice", description="Unit price at time of order")
