"""
Top‑level package for the Service Request API.

This file makes ``service_request_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``service_request_api.app.main``.  The HTTP client lives in
``service_request_api.client``; everything else is under ``app``.
"""

__all__ = []
