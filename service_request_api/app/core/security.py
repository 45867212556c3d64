"""
Admin authentication helpers.

Administrative routes are protected by a single shared key sent in the
``X-Admin-Key`` header and compared against ``settings.admin_key``.
The comparison is constant time.  If no key is configured on the
server, admin routes fail with HTTP 500 so that a missing
configuration is never mistaken for an open endpoint.
"""

import hmac
import logging
from typing import Optional

from fastapi import Header, HTTPException, status

from .config import settings

logger = logging.getLogger(__name__)

ADMIN_KEY_HEADER = "X-Admin-Key"


def require_admin_key(x_admin_key: Optional[str] = Header(default=None, alias=ADMIN_KEY_HEADER)) -> None:
    """Dependency that rejects requests without a valid admin key.

    Use in FastAPI endpoints via ``Depends(require_admin_key)``.

    Raises
    ------
    HTTPException
        500 if ``ADMIN_KEY`` is not configured, 401 if the header is
        missing or does not match.
    """
    expected = settings.admin_key or ""
    if not expected:
        logger.error("Admin route called but ADMIN_KEY is not set")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="ADMIN_KEY not set.",
        )
    provided = x_admin_key or ""
    if not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized.",
        )
