"""Shapes shared by METAR, TAF and summary reports."""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class AvwxModel(BaseModel):
    # Upstream adds fields over time; they pass through untouched.
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class LineItem(AvwxModel):
    """Raw text plus parsed value, e.g. visibility or wind speed."""
    repr: Optional[str] = None
    value: Optional[str] = None


class Number(AvwxModel):
    """A parsed numeric token: raw text, numeric value and spoken form."""
    repr: Optional[str] = None
    value: Optional[float] = None
    spoken: Optional[str] = None


# Some report fields arrive either as a bare number or as a Number object.
NumberField = Optional[Union[Number, float]]


class TimeValue(AvwxModel):
    repr: Optional[str] = None
    dt: Optional[datetime] = None


class CloudLayer(AvwxModel):
    repr: Optional[str] = None
    type: Optional[str] = None
    altitude: Optional[float] = None
    modifier: Optional[str] = None
    direction: Optional[str] = None


class Meta(AvwxModel):
    timestamp: Optional[datetime] = None


class Units(AvwxModel):
    accumulation: Optional[str] = None
    altimeter: Optional[str] = None
    altitude: Optional[str] = None
    temperature: Optional[str] = None
    visibility: Optional[str] = None
    wind_speed: Optional[str] = None
