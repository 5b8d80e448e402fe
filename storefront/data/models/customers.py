from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    """Customer record from customers.json."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    customer_id: int = Field(alias="CustomerID", description="Unique customer identifier")
    customer_name: Optional[str] = Field(default=None, alias="CustomerName", description="Customer display name")
    city: Optional[str] = Field(default=None, alias="City", description="Customer's city")
