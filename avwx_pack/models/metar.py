"""METAR report schema, mirroring the AVWX /metar response."""

from typing import List, Optional, Union

from .common import AvwxModel, CloudLayer, LineItem, Meta, Number, NumberField, TimeValue, Units


class Altimeter(Number):
    pass


class PressureTendency(AvwxModel):
    repr: Optional[str] = None
    tendency: Optional[str] = None
    change: Optional[float] = None


class RunwayVisibility(AvwxModel):
    repr: Optional[str] = None
    runway: Optional[str] = None
    visibility: Optional[Number] = None
    variable_visibility: Optional[List[Number]] = None
    trend: Optional[LineItem] = None


class RemarksInfo(AvwxModel):
    maximum_temperature_6: NumberField = None
    minimum_temperature_6: NumberField = None
    pressure_tendency: Optional[Union[PressureTendency, float]] = None
    precip_36_hours: NumberField = None
    precip_24_hours: NumberField = None
    sunshine_minutes: NumberField = None
    codes: Optional[List[LineItem]] = None
    dewpoint_decimal: Optional[LineItem] = None
    maximum_temperature_24: NumberField = None
    minimum_temperature_24: NumberField = None
    precip_hourly: NumberField = None
    sea_level_pressure: Optional[LineItem] = None
    snow_depth: NumberField = None
    temperature_decimal: Optional[LineItem] = None


class MetarReport(AvwxModel):
    meta: Optional[Meta] = None
    altimeter: Optional[Altimeter] = None
    clouds: Optional[List[CloudLayer]] = None
    flight_rules: Optional[str] = None
    other: Optional[List[str]] = None
    sanitized: Optional[str] = None
    visibility: Optional[LineItem] = None
    wind_direction: Optional[LineItem] = None
    wind_gust: Optional[LineItem] = None
    wind_speed: Optional[LineItem] = None
    wx_codes: Optional[List[LineItem]] = None
    raw: Optional[str] = None
    station: Optional[str] = None
    time: Optional[TimeValue] = None
    remarks: Optional[str] = None
    dewpoint: Optional[LineItem] = None
    relative_humidity: Optional[float] = None
    remarks_info: Optional[RemarksInfo] = None
    runway_visibility: Optional[List[Union[RunwayVisibility, str]]] = None
    temperature: Optional[LineItem] = None
    wind_variable_direction: Optional[List[Union[Number, str]]] = None
    density_altitude: Optional[float] = None
    pressure_altitude: Optional[float] = None
    units: Optional[Units] = None
