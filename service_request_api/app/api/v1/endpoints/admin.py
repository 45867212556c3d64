"""
Administrative endpoints for API v1.

Every route in this module requires the ``X-Admin-Key`` header (see
``core.security.require_admin_key``).
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from service_request_api.app.api.v1.dependencies import get_request_service
from service_request_api.app.core.errors import NotFoundError, ValidationError
from service_request_api.app.core.security import require_admin_key
from service_request_api.app.schemas.request import (
    ServiceRequestEnvelope,
    ServiceRequestList,
    StatusUpdate,
)
from service_request_api.app.services.request_service import RequestService


router = APIRouter(dependencies=[Depends(require_admin_key)])


@router.get("/requests", response_model=ServiceRequestList, response_model_exclude_unset=True)
async def list_requests(
    service: RequestService = Depends(get_request_service),
) -> ServiceRequestList:
    """List every service request, most recent first.

    Records are returned as stored; keys a record lacks are omitted
    rather than filled with ``null``.
    """
    return {"requests": await service.list_requests()}


@router.patch(
    "/requests/{request_id}",
    response_model=ServiceRequestEnvelope,
    response_model_exclude_unset=True,
)
async def update_request_status(
    body: StatusUpdate,
    request_id: str = Path(..., description="ID of the service request"),
    service: RequestService = Depends(get_request_service),
) -> ServiceRequestEnvelope:
    """Set the status of a service request.

    Accepts ``{"status": "pending" | "confirmed" | "completed" |
    "cancelled"}``.  Any status may be set regardless of the current
    one.  Returns HTTP 400 for an unknown status and HTTP 404 if the
    request does not exist.
    """
    try:
        record = await service.update_status(request_id, body.status)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"request": record}
