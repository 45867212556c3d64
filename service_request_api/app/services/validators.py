"""Shape checks for booking dates, times and free text.

The date and time checks are intentionally shallow: they verify the
textual format only.  ``"2024-02-30"`` is a valid date and ``"99:99"``
a valid time.
"""

import re
from typing import Any

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}")


def is_valid_date(value: Any) -> bool:
    """Return True if ``value`` looks like ``YYYY-MM-DD``."""
    return isinstance(value, str) and _DATE_RE.fullmatch(value) is not None


def is_valid_time(value: Any) -> bool:
    """Return True if ``value`` looks like ``HH:MM``."""
    return isinstance(value, str) and _TIME_RE.fullmatch(value) is not None


def make_date_time_key(date: str, time: str) -> str:
    """Build the slot key stored on each request, e.g. ``"2025-06-01 10:00"``."""
    return f"{date} {time}"


def is_encodable_text(value: Any) -> bool:
    """Return True if ``value`` is not a string or encodes as UTF-8.

    JSON bodies may carry lone surrogate escapes such as ``"\\ud800"``,
    which decode to a Python ``str`` that cannot be written back out.
    """
    if not isinstance(value, str):
        return True
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
