"""
Version 1 of the API.

Mounted under ``settings.api_prefix`` (``/api`` by default) so that the
paths match what the booking form calls.
"""
