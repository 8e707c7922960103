"""pywmata - Async Python client for the WMATA rail API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pywmata")
except PackageNotFoundError:
    __version__ = "0+local"
from pywmata.client import WmataClient
from pywmata.config import WmataConfig
from pywmata.exceptions import (
    WmataConfigError,
    WmataDecodeError,
    WmataError,
    WmataNetworkError,
    WmataParseError,
)
from pywmata.models import (
    Address,
    Line,
    LineCode,
    PathItem,
    RailIncident,
    Station,
    StationEntrance,
    TrainArrival,
)

__all__ = [
    "__version__",
    "Address",
    "Line",
    "LineCode",
    "PathItem",
    "RailIncident",
    "Station",
    "StationEntrance",
    "TrainArrival",
    "WmataClient",
    "WmataConfig",
    "WmataConfigError",
    "WmataDecodeError",
    "WmataError",
    "WmataNetworkError",
    "WmataParseError",
]
