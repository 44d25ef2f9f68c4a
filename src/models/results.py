"""Result envelopes returned by the core instead of raising."""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from models.customer import Customer, CustomerDetail
from models.owner import RawOwnerRecord


class FetchResult(BaseModel):
    """Outcome of trying the candidate endpoints in order."""

    data: Optional[Any] = None
    error: Optional[str] = None
    endpoints_tried: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None and self.data is not None


class OwnerLookupResult(BaseModel):
    """Outcome of fetching one raw owner by id."""

    owner: Optional[RawOwnerRecord] = None
    error: Optional[str] = None
    not_found: bool = False


class CustomersResult(BaseModel):
    customers: List[Customer] = Field(default_factory=list)
    error: Optional[str] = None


class CustomerDetailResult(BaseModel):
    customer: Optional[CustomerDetail] = None
    error: Optional[str] = None
    not_found: bool = False
