"""Data models for WMATA API responses."""

from pywmata.models._base import LineCode, WmataBaseModel, WmataEnum, element_to_dict
from pywmata.models.entrance import StationEntrance
from pywmata.models.incident import RailIncident
from pywmata.models.line import Line
from pywmata.models.path import PathItem
from pywmata.models.prediction import TrainArrival
from pywmata.models.station import Address, Station

__all__ = [
    "Address",
    "Line",
    "LineCode",
    "PathItem",
    "RailIncident",
    "Station",
    "StationEntrance",
    "TrainArrival",
    "WmataBaseModel",
    "WmataEnum",
    "element_to_dict",
]
