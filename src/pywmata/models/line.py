"""Metrorail line model."""

from __future__ import annotations

from pywmata.models._base import LineCode, WmataBaseModel


class Line(WmataBaseModel):
    """One Metrorail line as returned by ``Rail.svc/Lines``."""

    line_code: LineCode = LineCode.UNKNOWN
    """Two-letter line code (e.g. ``RD``)."""
    display_name: str = ""
    """Human-readable line name (e.g. ``"Red"``)."""
    start_station_code: str = ""
    """Station code at one terminus."""
    end_station_code: str = ""
    """Station code at the other terminus."""
    internal_destination1: str | None = None
    """Intermediate terminal station code, if any."""
    internal_destination2: str | None = None
