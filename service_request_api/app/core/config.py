"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration; the admin routes stay
unusable until ``ADMIN_KEY`` is set.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Service Request API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which every API route is mounted.  The frontend shipped
    # in ``static_dir`` talks to ``/api/...``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Shared secret expected in the ``X-Admin-Key`` header of admin
    # requests.  When empty the admin routes answer with HTTP 500.
    admin_key: str = os.getenv("ADMIN_KEY", "")

    # Location of the JSON file holding all service requests.  Relative
    # paths are resolved against the project root by ``core.store``.
    data_file: str = os.getenv("DATA_FILE", os.path.join("data", "requests.json"))

    # Directory with the static booking form.  Mounted only if it exists.
    static_dir: str = os.getenv("STATIC_DIR", "public")

    cors_origins: List[str] = field(default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*")))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
