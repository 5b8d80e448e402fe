from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ServiceRequest(BaseModel):
    """After-sales service request from service_requests.json."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    service_id: int = Field(alias="ServiceID", description="Unique service request identifier")
    customer_id: Optional[int] = Field(default=None, alias="CustomerID", description="Requesting customer")
    product_id: Optional[int] = Field(default=None, alias="ProductID", description="Product under service")
    status: Optional[str] = Field(default=None, alias="Status", description="Open, In Progress or Closed")
    request_date: Optional[str] = Field(default=None, alias="RequestDate", description="Request date as published in the dataset")
    issue_description: Optional[str] = Field(default=None, alias="IssueDescription", description="Free-form issue text")
