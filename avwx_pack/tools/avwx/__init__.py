"""AVWX formulas: one outbound GET each, bodies returned as decoded."""

from .common import AVWX_BASE, FETCH_FAILED_MESSAGE, NETWORK_DOMAIN, AvwxLookupTool, FetchFailedError
from .metar import MetarTool
from .nearest_stations import NearestStationsTool
from .station import StationTool
from .station_search import StationSearchTool
from .summary import SummaryTool
from .taf import TafTool

__all__ = [
    "AVWX_BASE",
    "FETCH_FAILED_MESSAGE",
    "NETWORK_DOMAIN",
    "AvwxLookupTool",
    "FetchFailedError",
    "MetarTool",
    "NearestStationsTool",
    "StationSearchTool",
    "StationTool",
    "SummaryTool",
    "TafTool",
]
