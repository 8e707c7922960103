"""Shared helpers for WMATA endpoint modules.

This module centralizes the request pipeline every endpoint shares:
- signing the endpoint path into a full URL with the registered API key
- fetching and parsing the response document
- decoding it into a single model or a flat list of models

Failures from any stage propagate unchanged to the caller.

It is internal to pywmata and may change at any time.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TypeVar

from pywmata._credentials import CredentialStore
from pywmata._decode import Decodable, decode_many, decode_one
from pywmata._redact import redact_url
from pywmata._transport import Transport
from pywmata._url import build_keyed_url
from pywmata.config import WmataConfig

_logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Decodable)


@dataclasses.dataclass(frozen=True)
class Endpoint:
    """One logical query against the WMATA API.

    Parameters
    ----------
    path : str
        Path relative to the base URL, optionally with a query string.
    list_node : str or None
        Name of the container element holding the result items, or
        ``None`` when the response root is itself the result.
    """

    path: str
    list_node: str | None = None


def build_endpoint_url(config: WmataConfig, credentials: CredentialStore, endpoint: Endpoint) -> str:
    """Resolve *endpoint* to an absolute URL carrying the current API key."""
    return build_keyed_url(
        config.base_url,
        endpoint.path,
        credentials.current_token(),
        key_param=config.api_key_param,
    )


async def fetch_one(
    *,
    endpoint: Endpoint,
    model: type[D],
    config: WmataConfig,
    credentials: CredentialStore,
    transport: Transport,
) -> D | None:
    """Fetch *endpoint* and decode the document root as one *model*."""
    url = build_endpoint_url(config, credentials, endpoint)
    doc = await transport.get_document(url)
    _logger.debug("Decoding %s from %s", model.__name__, redact_url(url, key_param=config.api_key_param))
    return decode_one(doc, model)


async def fetch_many(
    *,
    endpoint: Endpoint,
    model: type[D],
    config: WmataConfig,
    credentials: CredentialStore,
    transport: Transport,
) -> list[D] | None:
    """Fetch *endpoint* and decode every item under its list container."""
    if endpoint.list_node is None:
        raise ValueError(f"Endpoint {endpoint.path} has no list container")
    url = build_endpoint_url(config, credentials, endpoint)
    doc = await transport.get_document(url)
    items = decode_many(doc, model, endpoint.list_node)
    _logger.debug(
        "Decoded %s %s from %s",
        "no" if items is None else len(items),
        model.__name__,
        redact_url(url, key_param=config.api_key_param),
    )
    return items
