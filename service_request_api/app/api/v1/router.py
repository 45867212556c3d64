"""
Top‑level router for version 1 of the API.

This router aggregates the public booking routes and the admin routes.
Admin routes live under ``/admin`` and carry their own authentication
dependency.
"""

from fastapi import APIRouter

from .endpoints import admin, health, requests

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(requests.router, tags=["requests"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
