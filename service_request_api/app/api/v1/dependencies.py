"""Shared FastAPI dependencies for API v1."""

from fastapi import Depends

from service_request_api.app.core.store import RecordStore, get_store
from service_request_api.app.services.request_service import RequestService


def get_request_service(store: RecordStore = Depends(get_store)) -> RequestService:
    """Build a ``RequestService`` bound to the configured record store."""
    return RequestService(store)
