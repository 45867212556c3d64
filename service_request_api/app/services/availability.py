"""Slot conflict detection."""

from typing import Any, Iterable, Mapping

from service_request_api.app.schemas.request import RequestStatus


def is_booked(records: Iterable[Mapping[str, Any]], date_time_key: str) -> bool:
    """Return True if a non-cancelled request already occupies the slot.

    Cancelled requests never block their slot, so a cancelled booking
    can be rebooked by anyone.
    """
    for record in records:
        if record.get("dateTime") == date_time_key and record.get("status") != RequestStatus.cancelled.value:
            return True
    return False
