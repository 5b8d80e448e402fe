from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Product record from products.json."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    product_id: int = Field(alias="ProductID", description="Unique product identifier")
    brand: Optional[str] = Field(default=None, alias="Brand", description="Product brand")
    model: Optional[str] = Field(default=None, alias="Model", description="Product model name")
    warranty_period: Optional[int] = Field(default=None, alias="WarrantyPeriod", description="Warranty length in months")
