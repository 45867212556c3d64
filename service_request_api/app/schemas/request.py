"""
Pydantic models for service requests.

The JSON representation uses camelCase keys (``fullName``,
``dateTime``, ``estimateUSD`` ...), both on the wire and in the data
file.  Python code uses snake_case attribute names; the aliases bridge
the two.  Input models are deliberately permissive: required fields
are checked by ``RequestService`` so that a missing field produces the
same error whether it is absent, ``null`` or an empty string.
"""

from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RequestStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    completed = "completed"
    cancelled = "cancelled"


class ServiceRequestCreate(BaseModel):
    """Schema for submitting a new service request."""

    model_config = ConfigDict(populate_by_name=True)

    full_name: Optional[str] = Field(default=None, alias="fullName", examples=["Jane Doe"])
    email: Optional[str] = Field(default=None, examples=["jane@example.com"])
    phone: Optional[str] = Field(default=None, examples=["555-0100"])
    service_type: Optional[str] = Field(default=None, alias="serviceType", examples=["standard", "deep"])
    property_type: Optional[str] = Field(default=None, alias="propertyType", examples=["residential", "commercial"])
    address: Optional[str] = Field(default=None, examples=["1 Main St"])
    # Numbers and numeric strings are used; anything else is stored as
    # ``null`` by the service rather than rejected.
    bedrooms: Any = Field(default=None, description="Number or numeric string", examples=[3, "3"])
    bathrooms: Any = Field(default=None, description="Number or numeric string", examples=[2, "2"])
    frequency: Optional[str] = Field(default=None, examples=["one-time", "weekly"])
    date: Optional[str] = Field(default=None, description="YYYY-MM-DD", examples=["2025-06-01"])
    time: Optional[str] = Field(default=None, description="HH:MM, 24-hour", examples=["10:00"])
    notes: Optional[str] = Field(default=None)


class ServiceRequestRead(BaseModel):
    """A stored service request as returned by the API.

    Records are returned as stored.  Every field is optional and
    ``status`` is a plain string so that a hand-edited or older record
    still lists; unknown keys are passed through unchanged.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    status: Optional[str] = Field(default=None, examples=[s.value for s in RequestStatus])
    full_name: Optional[str] = Field(default=None, alias="fullName")
    email: Optional[str] = None
    phone: Optional[str] = None
    service_type: Optional[str] = Field(default=None, alias="serviceType")
    property_type: Optional[str] = Field(default=None, alias="propertyType")
    address: Optional[str] = None
    bedrooms: Union[int, float, str, None] = None
    bathrooms: Union[int, float, str, None] = None
    frequency: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    date_time: Optional[str] = Field(default=None, alias="dateTime")
    notes: Optional[str] = None
    estimate_usd: Union[int, float, None] = Field(default=None, alias="estimateUSD")


class StatusUpdate(BaseModel):
    """Body of the admin status transition.

    ``status`` is validated by the service so that an unknown value is
    reported as HTTP 400 with a readable message.
    """

    status: Optional[str] = Field(default=None, examples=[s.value for s in RequestStatus])


class AvailabilityRead(BaseModel):
    available: bool
    date_time: str = Field(alias="dateTime")

    model_config = ConfigDict(populate_by_name=True)


class ServiceRequestEnvelope(BaseModel):
    request: ServiceRequestRead


class ServiceRequestList(BaseModel):
    requests: List[ServiceRequestRead]
