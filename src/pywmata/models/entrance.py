"""Station entrance model."""

from __future__ import annotations

from pydantic import Field

from pywmata.models._base import WmataBaseModel


class StationEntrance(WmataBaseModel):
    """A street entrance, as returned by ``Rail.svc/StationEntrances``."""

    id: str = Field(default="", alias="ID")
    name: str = ""
    description: str = ""
    lat: float | None = None
    lon: float | None = None
    station_code1: str | None = None
    """Station the entrance leads to."""
    station_code2: str | None = None
    """Second station code for multi-level complexes."""

    @property
    def station_codes(self) -> list[str]:
        return [code for code in (self.station_code1, self.station_code2) if code]
