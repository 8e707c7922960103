"""Station models."""

from __future__ import annotations

from pywmata.models._base import LineCode, WmataBaseModel


class Address(WmataBaseModel):
    """Street address of a station."""

    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""


class Station(WmataBaseModel):
    """A Metrorail station.

    Returned both as items of ``Rail.svc/Stations`` and as the root of a
    ``Rail.svc/StationInfo`` response.

    Parameters
    ----------
    code : str
        Station code (e.g. ``"A10"``).
    name : str
        Station name.
    lat, lon : float or None
        Station coordinates.
    line_code1 .. line_code4 : LineCode or None
        Lines serving the station.
    station_together1, station_together2 : str or None
        Codes of other platforms in the same station complex
        (e.g. Metro Center upper and lower levels).
    address : Address or None
        Street address.
    """

    code: str = ""
    name: str = ""
    lat: float | None = None
    lon: float | None = None
    line_code1: LineCode | None = None
    line_code2: LineCode | None = None
    line_code3: LineCode | None = None
    line_code4: LineCode | None = None
    station_together1: str | None = None
    station_together2: str | None = None
    address: Address | None = None

    @property
    def line_codes(self) -> list[LineCode]:
        """Lines serving this station, in API order."""
        codes = (self.line_code1, self.line_code2, self.line_code3, self.line_code4)
        return [code for code in codes if code is not None]

    def serves(self, line: LineCode | str) -> bool:
        return LineCode(line) in self.line_codes
