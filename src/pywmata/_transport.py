"""HTTP transport that fetches and parses XML documents."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol
from xml.etree import ElementTree

import aiohttp

from pywmata._redact import redact_url
from pywmata.config import WmataConfig
from pywmata.exceptions import WmataNetworkError, WmataParseError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_document(self, url: str) -> ElementTree.ElementTree | None:
        ...


def parse_document(body: bytes, *, url: str = "") -> ElementTree.ElementTree | None:
    """Parse a raw response body into an element tree.

    An empty (or whitespace-only) body yields ``None``.  Anything else that
    is not well-formed XML raises :class:`WmataParseError`.
    """
    if not body.strip():
        return None
    try:
        root = ElementTree.fromstring(body)
    except ElementTree.ParseError as exc:
        raise WmataParseError(
            f"Response from {url} is not well-formed XML: {body[:200]!r}",
            url=url,
        ) from exc
    return ElementTree.ElementTree(root)


class HttpTransport:
    """Issues GET requests on a shared aiohttp session and parses the XML reply."""

    def __init__(self, config: WmataConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session

    async def get_document(self, url: str) -> ElementTree.ElementTree | None:
        """GET *url* and return the parsed document.

        Transport failures and non-2xx replies raise
        :class:`WmataNetworkError`; malformed bodies raise
        :class:`WmataParseError`.
        """
        safe_url = redact_url(url, key_param=self._config.api_key_param)
        headers = {
            "accept": "application/xml, text/xml",
            "user-agent": self._config.user_agent,
        }

        _logger.debug("GET %s", safe_url)

        try:
            async with self._http.get(url, headers=headers) as resp:
                body = await resp.read()
                if not 200 <= resp.status < 300:
                    raise WmataNetworkError(
                        f"HTTP {resp.status} from {safe_url}: {body[:200]!r}",
                        status_code=resp.status,
                        url=safe_url,
                    )
        except WmataNetworkError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise WmataNetworkError(
                f"Request to {safe_url} failed: {exc!r}",
                url=safe_url,
            ) from exc

        _logger.debug("Received %d bytes from %s", len(body), safe_url)
        return parse_document(body, url=safe_url)
