from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Order(BaseModel):
    """Order header record from orders.json."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    order_id: int = Field(alias="OrderID", description="Unique order identifier")
    customer_id: Optional[int] = Field(default=None, alias="CustomerID", description="Customer who placed the order")
    store_id: Optional[int] = Field(default=None, alias="StoreID", description="Store where order was placed")
    order_date: Optional[str] = Field(default=None, alias="OrderDate", description="Order date as published in the dataset")
    status: Optional[str] = Field(default=None, alias="Status", description="Order status, e.g. Delivered")
    total_amount: Optional[float] = Field(default=None, alias="TotalAmount", description="Order total in TRY")
