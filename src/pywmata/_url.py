"""Authenticated request URL construction."""

from __future__ import annotations

from urllib.parse import quote

from pywmata._constants import API_KEY_PARAM


def build_keyed_url(base_url: str, path: str, token: str, *, key_param: str = API_KEY_PARAM) -> str:
    """Join *base_url* and *path* and append the API key parameter.

    If *path* already carries a ``?`` the key is appended as ``&key=token``,
    otherwise as ``?key=token``.  The rule is applied literally, so a path
    ending in a bare ``?`` yields ``...?&key=token``.
    """
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    separator = "&" if "?" in path else "?"
    return f"{url}{separator}{key_param}={quote(token, safe='')}"
