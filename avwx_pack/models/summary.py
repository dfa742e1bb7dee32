"""Condensed current + forecast summary returned by /summary."""

from datetime import datetime
from typing import List, Optional

from .common import AvwxModel, LineItem, Meta


class SummaryCeiling(AvwxModel):
    repr: Optional[str] = None
    type: Optional[str] = None
    altitude: Optional[float] = None
    modifier: Optional[str] = None


class SummaryMetar(AvwxModel):
    time: Optional[datetime] = None
    flight_rules: Optional[str] = None
    wx_codes: Optional[List[LineItem]] = None
    visibility: Optional[LineItem] = None
    ceiling: Optional[SummaryCeiling] = None


class SummaryForecastPeriod(AvwxModel):
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    flight_rules: Optional[str] = None


class SummaryTaf(AvwxModel):
    time: Optional[datetime] = None
    forecast: Optional[List[SummaryForecastPeriod]] = None


class SummaryReport(AvwxModel):
    meta: Optional[Meta] = None
    metar: Optional[SummaryMetar] = None
    taf: Optional[SummaryTaf] = None
