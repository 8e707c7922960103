"""Helpers for safe debug logging.

Every request URL carries the API key as a query parameter.  This module
masks it before URLs are written to DEBUG logs or exception messages.
"""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pywmata._constants import API_KEY_PARAM

_REDACTED = "<redacted>"


def redact_url(url: str, *, key_param: str = API_KEY_PARAM) -> str:
    """Return *url* with the value of *key_param* replaced by ``<redacted>``."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    pairs = parse_qsl(parts.query, keep_blank_values=True)
    if not any(key == key_param for key, _ in pairs):
        return url
    masked = [(key, _REDACTED if key == key_param else value) for key, value in pairs]
    return urlunsplit(parts._replace(query=urlencode(masked, safe="<>,")))
