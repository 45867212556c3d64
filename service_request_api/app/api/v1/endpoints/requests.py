"""
Public booking endpoints for API v1.

These routes let a visitor check whether a date/time slot is free and
submit a service request.  They rely on ``RequestService`` for
validation, double-booking prevention and pricing.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from service_request_api.app.api.v1.dependencies import get_request_service
from service_request_api.app.core.errors import ConflictError, ValidationError
from service_request_api.app.schemas.request import (
    AvailabilityRead,
    ServiceRequestCreate,
    ServiceRequestEnvelope,
)
from service_request_api.app.services.request_service import RequestService


router = APIRouter()


# The booking form calls ``/check``; ``/availability`` is the descriptive
# name.  Both paths expose the same handler.
@router.get("/availability", response_model=AvailabilityRead)
@router.get("/check", response_model=AvailabilityRead, include_in_schema=False)
async def check_availability(
    date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    time: Optional[str] = Query(None, description="HH:MM, 24-hour"),
    service: RequestService = Depends(get_request_service),
) -> AvailabilityRead:
    """Tell whether a slot is still free.

    Returns ``{"available": bool, "dateTime": "<date> <time>"}``.  A
    slot held only by cancelled requests is available.  Missing or
    malformed parameters yield HTTP 400.
    """
    try:
        return await service.check_availability(date, time)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "/requests",
    response_model=ServiceRequestEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_request(
    payload: ServiceRequestCreate,
    service: RequestService = Depends(get_request_service),
) -> ServiceRequestEnvelope:
    """Submit a service request.

    On success the stored request is returned with status ``pending``
    and a computed ``estimateUSD``.  HTTP 400 is returned for missing or
    malformed fields and HTTP 409 when the slot is already booked.
    """
    try:
        record = await service.create_request(payload)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return {"request": record}
