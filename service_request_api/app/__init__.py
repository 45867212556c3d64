"""
Application package initializer.

The project is organised into small layers: ``core`` holds settings,
logging, errors, security and the record store; ``services`` holds
the booking rules; ``schemas`` holds the Pydantic payloads; and
``api/v1/endpoints`` exposes the routers that are mounted by
``main.create_app``.
"""

from .main import app  # noqa: F401
