"""Path model for ``Rail.svc/Path``."""

from __future__ import annotations

from pywmata.models._base import LineCode, WmataBaseModel


class PathItem(WmataBaseModel):
    """One station on the ordered path between two stations of a line."""

    seq_num: int = 0
    """1-based position along the path."""
    station_code: str = ""
    station_name: str = ""
    line_code: LineCode = LineCode.UNKNOWN
    distance_to_prev: int = 0
    """Distance in feet from the previous station (``0`` for the first)."""
