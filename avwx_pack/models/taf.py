"""TAF report schema. A report holds one or more forecast periods."""

from typing import List, Optional, Union

from pydantic import ConfigDict

from .common import AvwxModel, CloudLayer, LineItem, Meta, Number, NumberField, TimeValue


class HazardLayer(AvwxModel):
    """Icing or turbulence band decoded from a TAF group such as "620304"."""
    repr: Optional[str] = None
    severity: Optional[str] = None
    floor: Optional[Number] = None
    ceiling: Optional[Number] = None


class TafForecastPeriod(AvwxModel):
    model_config = ConfigDict(json_schema_extra={"displayProperty": "sanitized"})

    altimeter: NumberField = None
    clouds: Optional[List[CloudLayer]] = None
    flight_rules: Optional[str] = None
    other: Optional[List[str]] = None
    sanitized: Optional[str] = None
    visibility: Optional[LineItem] = None
    wind_direction: Optional[LineItem] = None
    wind_gust: Optional[LineItem] = None
    wind_speed: Optional[LineItem] = None
    wx_codes: Optional[List[LineItem]] = None
    end_time: Optional[TimeValue] = None
    icing: Optional[List[Union[HazardLayer, str]]] = None
    probability: NumberField = None
    raw: Optional[str] = None
    start_time: Optional[TimeValue] = None
    turbulence: Optional[List[Union[HazardLayer, str]]] = None
    type: Optional[str] = None
    wind_shear: Optional[str] = None
    summary: Optional[str] = None


class TafReport(AvwxModel):
    meta: Optional[Meta] = None
    raw: Optional[str] = None
    station: Optional[str] = None
    time: Optional[TimeValue] = None
    remarks: Optional[str] = None
    forecast: Optional[List[TafForecastPeriod]] = None
