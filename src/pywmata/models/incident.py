"""Rail incident model."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from pywmata._normalize import split_codes
from pywmata.models._base import LineCode, WmataBaseModel


class RailIncident(WmataBaseModel):
    """A rail service disruption from ``Incidents.svc/Incidents``."""

    incident_id: str = Field(default="", alias="IncidentID")
    incident_type: str = ""
    """Free-form type, e.g. ``"Delay"`` or ``"Alert"``."""
    description: str = ""
    lines_affected: str = ""
    """Semicolon-separated line codes (e.g. ``"RD; BL;"``)."""
    date_updated: datetime | None = None
    delay_severity: str | None = None
    emergency_text: str | None = None
    start_location_full_name: str | None = None
    end_location_full_name: str | None = None
    passenger_delay: float | None = None

    @property
    def lines(self) -> list[LineCode]:
        """Parsed :attr:`lines_affected`."""
        return [LineCode(code) for code in split_codes(self.lines_affected)]
