"""Rail endpoints.

Endpoints:
  - Rail.svc/Lines
  - Rail.svc/Stations
  - Rail.svc/StationInfo
  - Rail.svc/Path
  - Rail.svc/StationEntrances
"""

from __future__ import annotations

from urllib.parse import urlencode

from pywmata._api._common import Endpoint, fetch_many, fetch_one
from pywmata._credentials import CredentialStore
from pywmata._transport import Transport
from pywmata.config import WmataConfig
from pywmata.models._base import LineCode
from pywmata.models.entrance import StationEntrance
from pywmata.models.line import Line
from pywmata.models.path import PathItem
from pywmata.models.station import Station

LINES = Endpoint("Rail.svc/Lines", "Lines")


def stations_endpoint(line: LineCode | str = LineCode.ALL) -> Endpoint:
    """``Rail.svc/Stations``, filtered by *line* unless it is ``ALL``."""
    code = LineCode(line)
    if code == LineCode.UNKNOWN:
        raise ValueError(f"Unknown line code: {line!r}")
    if code == LineCode.ALL:
        return Endpoint("Rail.svc/Stations", "Stations")
    return Endpoint(f"Rail.svc/Stations?{urlencode({'LineCode': code.value})}", "Stations")


def station_info_endpoint(station_code: str) -> Endpoint:
    return Endpoint(f"Rail.svc/StationInfo?{urlencode({'StationCode': station_code})}")


def path_endpoint(from_code: str, to_code: str) -> Endpoint:
    query = urlencode({"FromStationCode": from_code, "ToStationCode": to_code})
    return Endpoint(f"Rail.svc/Path?{query}", "Path")


def entrances_endpoint(lat: float, lon: float, radius: int) -> Endpoint:
    query = urlencode({"lat": lat, "lon": lon, "radius": radius})
    return Endpoint(f"Rail.svc/StationEntrances?{query}", "Entrances")


async def fetch_lines(
    config: WmataConfig,
    credentials: CredentialStore,
    transport: Transport,
) -> list[Line] | None:
    return await fetch_many(
        endpoint=LINES,
        model=Line,
        config=config,
        credentials=credentials,
        transport=transport,
    )


async def fetch_stations(
    config: WmataConfig,
    credentials: CredentialStore,
    transport: Transport,
    line: LineCode | str = LineCode.ALL,
) -> list[Station] | None:
    return await fetch_many(
        endpoint=stations_endpoint(line),
        model=Station,
        config=config,
        credentials=credentials,
        transport=transport,
    )


async def fetch_station_info(
    config: WmataConfig,
    credentials: CredentialStore,
    transport: Transport,
    station_code: str,
) -> Station | None:
    return await fetch_one(
        endpoint=station_info_endpoint(station_code),
        model=Station,
        config=config,
        credentials=credentials,
        transport=transport,
    )


async def fetch_path(
    config: WmataConfig,
    credentials: CredentialStore,
    transport: Transport,
    from_code: str,
    to_code: str,
) -> list[PathItem] | None:
    """Fetch the ordered stations from *from_code* to *to_code*, both included."""
    return await fetch_many(
        endpoint=path_endpoint(from_code, to_code),
        model=PathItem,
        config=config,
        credentials=credentials,
        transport=transport,
    )


async def fetch_entrances(
    config: WmataConfig,
    credentials: CredentialStore,
    transport: Transport,
    lat: float,
    lon: float,
    radius: int,
) -> list[StationEntrance] | None:
    return await fetch_many(
        endpoint=entrances_endpoint(lat, lon, radius),
        model=StationEntrance,
        config=config,
        credentials=credentials,
        transport=transport,
    )
