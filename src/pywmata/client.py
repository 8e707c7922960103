"""High-level async client for the WMATA rail API."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import aiohttp

from pywmata._api import incidents as _incidents_api
from pywmata._api import predictions as _predictions_api
from pywmata._api import rail as _rail_api
from pywmata._credentials import CredentialStore
from pywmata._transport import HttpTransport
from pywmata.config import WmataConfig
from pywmata.exceptions import WmataError
from pywmata.models._base import LineCode
from pywmata.models.entrance import StationEntrance
from pywmata.models.incident import RailIncident
from pywmata.models.line import Line
from pywmata.models.path import PathItem
from pywmata.models.prediction import TrainArrival
from pywmata.models.station import Station

_logger = logging.getLogger(__name__)


def _station_code(station: Station | str) -> str:
    return station.code if isinstance(station, Station) else station


class WmataClient:
    """Async client for the WMATA rail API.

    Usage::

        async with WmataClient(WmataConfig(api_key="...")) as client:
            lines = await client.get_line_information()

    Every operation resolves with ``None`` (single value) or an empty list
    when the response is absent-but-well-formed, and raises
    :class:`~pywmata.exceptions.WmataNetworkError` or
    :class:`~pywmata.exceptions.WmataParseError` when the fetch fails.
    Calls may run concurrently; results arrive in completion order.
    """

    def __init__(
        self,
        config: WmataConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config or WmataConfig()
        self._external_session = session is not None
        self._http_session = session
        self._credentials = CredentialStore(self._config.api_key)
        self._transport: HttpTransport | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> WmataClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    # ------------------------------------------------------------------
    # API key
    # ------------------------------------------------------------------

    def register_api_key(self, key: str) -> None:
        """Set the API key used for all subsequent requests (overwrites)."""
        self._credentials.register(key)

    @property
    def has_api_key(self) -> bool:
        return self._credentials.is_set

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> HttpTransport:
        if self._transport is None:
            raise WmataError("Client not initialized. Use 'async with WmataClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Rail
    # ------------------------------------------------------------------

    async def get_line_information(self) -> list[Line] | None:
        """List all Metrorail lines."""
        transport = self._require_transport()
        return await _rail_api.fetch_lines(self._config, self._credentials, transport)

    async def get_station_info(self, station: Station | str) -> Station | None:
        """Fetch details for one station, given its code or a :class:`Station`."""
        transport = self._require_transport()
        return await _rail_api.fetch_station_info(self._config, self._credentials, transport, _station_code(station))

    async def get_stations_between(
        self,
        from_station: Station | str,
        to_station: Station | str,
    ) -> list[PathItem] | None:
        """Ordered stations from *from_station* to *to_station*, both endpoints included."""
        transport = self._require_transport()
        return await _rail_api.fetch_path(
            self._config,
            self._credentials,
            transport,
            _station_code(from_station),
            _station_code(to_station),
        )

    async def get_stations_by_line(self, line: LineCode | str = LineCode.ALL) -> list[Station] | None:
        """List stations on *line*, or every station for :attr:`LineCode.ALL`."""
        transport = self._require_transport()
        return await _rail_api.fetch_stations(self._config, self._credentials, transport, line)

    async def get_nearest_entrances(self, lat: float, lon: float, radius_m: int) -> list[StationEntrance] | None:
        """Station entrances within *radius_m* metres of (*lat*, *lon*)."""
        transport = self._require_transport()
        return await _rail_api.fetch_entrances(self._config, self._credentials, transport, lat, lon, radius_m)

    # ------------------------------------------------------------------
    # Predictions & incidents
    # ------------------------------------------------------------------

    async def get_arrival_times(self, stations: Iterable[Station | str] = ()) -> list[TrainArrival] | None:
        """Next-train predictions for *stations* (all stations when empty)."""
        transport = self._require_transport()
        codes = [_station_code(station) for station in stations]
        _logger.debug("Requesting predictions for %d station(s)", len(codes))
        return await _predictions_api.fetch_arrival_times(self._config, self._credentials, transport, codes)

    async def get_rail_incidents(self) -> list[RailIncident] | None:
        """Current rail incidents; an empty list when service is normal."""
        transport = self._require_transport()
        return await _incidents_api.fetch_rail_incidents(self._config, self._credentials, transport)
