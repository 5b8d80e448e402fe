from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Payment(BaseModel):
    """Payment record from payments.json; at most one per order."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    order_id: int = Field(alias="OrderID", description="Paid order")
    payment_method: Optional[str] = Field(default=None, alias="PaymentMethod", description="Payment method used")
    amount: Optional[float] = Field(default=None, alias="Amount", description="Amount paid in TRY")
