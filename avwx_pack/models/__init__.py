"""Result schemas for the AVWX formulas."""

from .common import CloudLayer, LineItem, Meta, Number, TimeValue, Units
from .metar import Altimeter, MetarReport, PressureTendency, RemarksInfo, RunwayVisibility
from .station import NearestStation, Runway, Station
from .summary import SummaryReport
from .taf import HazardLayer, TafForecastPeriod, TafReport

__all__ = [
    "Altimeter",
    "CloudLayer",
    "HazardLayer",
    "LineItem",
    "Meta",
    "MetarReport",
    "NearestStation",
    "Number",
    "PressureTendency",
    "RemarksInfo",
    "Runway",
    "RunwayVisibility",
    "Station",
    "SummaryReport",
    "TafForecastPeriod",
    "TafReport",
    "TimeValue",
    "Units",
]
