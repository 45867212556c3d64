"""
Business logic for service requests.

The ``RequestService`` validates incoming booking requests, prevents
double-booking of a slot, computes the price estimate, and persists
requests through a ``RecordStore``.  It also implements the admin
operations: listing all requests and changing a request's status.

Every mutation runs inside ``store.lock`` from the moment the records
are loaded until they are saved, so the availability check and the
insert are a single step for all writers sharing the store.  Nothing
is written unless every check has passed.
"""

import logging
import math
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from service_request_api.app.core.errors import ConflictError, NotFoundError, ValidationError
from service_request_api.app.core.store import Record, RecordStore
from service_request_api.app.schemas.request import RequestStatus, ServiceRequestCreate
from service_request_api.app.services.availability import is_booked
from service_request_api.app.services.validators import (
    is_encodable_text,
    is_valid_date,
    is_valid_time,
    make_date_time_key,
)

logger = logging.getLogger(__name__)

Number = Union[int, float]

REQUIRED_FIELDS = (
    "full_name",
    "email",
    "phone",
    "service_type",
    "property_type",
    "address",
    "date",
    "time",
)

DEFAULT_FREQUENCY = "one-time"

BASE_PRICE = 120
DEEP_CLEAN_BASE_PRICE = 180
PRICE_PER_BEDROOM = 20
PRICE_PER_BATHROOM = 15
COMMERCIAL_SURCHARGE = 60


def coerce_count(value: Any) -> Optional[Number]:
    """Normalise a bedroom/bathroom count.

    Returns ``None`` for missing, empty, boolean, non-numeric or
    non-finite input.  Negative numbers are clamped to 0 and whole
    floats become ints (``"3"`` -> ``3``, ``2.0`` -> ``2``).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            value = float(value)
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer():
            value = int(value)
    return max(value, 0)


def compute_estimate(
    service_type: Optional[str],
    property_type: Optional[str],
    bedrooms: Any = None,
    bathrooms: Any = None,
) -> Number:
    """Return the USD price estimate for a request.

    >>> compute_estimate("standard", "residential", 3, 2)
    210
    >>> compute_estimate("deep", "commercial", 0, 0)
    240
    """
    base = DEEP_CLEAN_BASE_PRICE if service_type == "deep" else BASE_PRICE
    beds = coerce_count(bedrooms) or 0
    baths = coerce_count(bathrooms) or 0
    commercial = COMMERCIAL_SURCHARGE if property_type == "commercial" else 0
    return base + beds * PRICE_PER_BEDROOM + baths * PRICE_PER_BATHROOM + commercial


def _utc_now_iso() -> str:
    # Same shape as JavaScript's Date.toISOString(): 2025-06-01T10:00:00.000Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _validate_slot(date: Optional[str], time: Optional[str]) -> str:
    if not is_valid_date(date):
        raise ValidationError("Date must be YYYY-MM-DD.")
    if not is_valid_time(time):
        raise ValidationError("Time must be HH:MM (24-hour).")
    return make_date_time_key(date, time)


class RequestService:
    """Service for creating and administering service requests."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def check_availability(self, date: Optional[str], time: Optional[str]) -> Dict[str, Any]:
        """Report whether the ``date``/``time`` slot can still be booked.

        Returns
        -------
        dict
            ``{"available": bool, "dateTime": "<date> <time>"}``

        Raises
        ------
        ValidationError
            If either value is missing or malformed.
        """
        if not date or not time:
            raise ValidationError("Missing date or time.")
        date_time = _validate_slot(date, time)
        records = self.store.load_all()
        return {"available": not is_booked(records, date_time), "dateTime": date_time}

    async def create_request(self, payload: ServiceRequestCreate) -> Record:
        """Validate, price and store a new service request.

        The new request is placed at the front of the stored sequence so
        listings are newest first.

        Raises
        ------
        ValidationError
            If a required field is missing, a text field cannot be stored
            as UTF-8, or the date/time is malformed.
        ConflictError
            If a non-cancelled request already holds the slot.
        """
        missing = [name for name in REQUIRED_FIELDS if not getattr(payload, name)]
        if missing:
            logger.debug("Rejected request with missing fields: %s", ", ".join(missing))
            raise ValidationError("Missing required fields.")
        unencodable = [name for name, value in payload.model_dump().items() if not is_encodable_text(value)]
        if unencodable:
            logger.debug("Rejected request with unencodable text in: %s", ", ".join(unencodable))
            raise ValidationError("Text fields must be valid UTF-8.")
        date_time = _validate_slot(payload.date, payload.time)

        with self.store.lock:
            records = self.store.load_all()
            if is_booked(records, date_time):
                logger.info("Slot %s already booked", date_time)
                raise ConflictError("That date/time is already booked.")

            record: Record = {
                "id": uuid.uuid4().hex,
                "createdAt": _utc_now_iso(),
                "status": RequestStatus.pending.value,
                "fullName": payload.full_name,
                "email": payload.email,
                "phone": payload.phone,
                "serviceType": payload.service_type,
                "propertyType": payload.property_type,
                "address": payload.address,
                "bedrooms": coerce_count(payload.bedrooms),
                "bathrooms": coerce_count(payload.bathrooms),
                "frequency": payload.frequency or DEFAULT_FREQUENCY,
                "date": payload.date,
                "time": payload.time,
                "dateTime": date_time,
                "notes": payload.notes or "",
                "estimateUSD": compute_estimate(
                    payload.service_type,
                    payload.property_type,
                    payload.bedrooms,
                    payload.bathrooms,
                ),
            }
            records.insert(0, record)
            self.store.save_all(records)

        logger.info("Created service request %s for %s", record["id"], date_time)
        return record

    async def list_requests(self) -> List[Record]:
        """Return every request, newest first."""
        return self.store.load_all()

    async def update_status(self, request_id: str, status: Optional[str]) -> Record:
        """Change the status of an existing request.

        Any status may move to any other, including itself.

        Raises
        ------
        ValidationError
            If ``status`` is not one of the known statuses.
        NotFoundError
            If no request has the given id.
        """
        allowed = {s.value for s in RequestStatus}
        if status not in allowed:
            raise ValidationError("Invalid status.")

        with self.store.lock:
            records = self.store.load_all()
            for record in records:
                if record.get("id") == request_id:
                    break
            else:
                raise NotFoundError("Not found.")
            previous = record.get("status")
            record["status"] = status
            self.store.save_all(records)

        logger.info("Service request %s status %s -> %s", request_id, previous, status)
        return record
