"""Train arrival prediction model."""

from __future__ import annotations

from pydantic import Field

from pywmata._normalize import safe_int
from pywmata.models._base import LineCode, WmataBaseModel

ARRIVING = "ARR"
BOARDING = "BRD"


class TrainArrival(WmataBaseModel):
    """Next-train prediction for one platform, from ``StationPrediction.svc``.

    ``minutes`` is passed through as sent: a number of minutes, ``ARR``,
    ``BRD`` or ``---``.  Use :attr:`minutes_away` for a numeric value.
    """

    car: str | None = None
    """Number of cars, ``"-"`` when unknown."""
    destination: str = ""
    destination_code: str | None = None
    destination_name: str = ""
    group: str = ""
    """Track group (``"1"`` or ``"2"``)."""
    line: LineCode = LineCode.UNKNOWN
    location_code: str = ""
    """Code of the station the prediction is for."""
    location_name: str = ""
    minutes: str = Field(default="", alias="Min")

    @property
    def minutes_away(self) -> int | None:
        """Minutes until arrival; ``0`` when arriving or boarding, ``None`` if unknown."""
        if self.minutes in (ARRIVING, BOARDING):
            return 0
        return safe_int(self.minutes)

    @property
    def is_boarding(self) -> bool:
        return self.minutes == BOARDING
