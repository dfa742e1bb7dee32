"""Station and runway records returned by the station endpoints."""

from typing import List, Optional

from pydantic import ConfigDict, Field

from .common import AvwxModel


class Runway(AvwxModel):
    """
    One runway. `name` is not sent upstream; it is synthesized locally
    as "ident1/ident2".
    """
    model_config = ConfigDict(json_schema_extra={"displayProperty": "name"})

    length_ft: Optional[float] = None
    width_ft: Optional[float] = None
    ident1: Optional[str] = None
    ident2: Optional[str] = None
    name: Optional[str] = None


class Station(AvwxModel):
    model_config = ConfigDict(json_schema_extra={"displayProperty": "name"})

    city: Optional[str] = None
    country: Optional[str] = None
    elevation_ft: Optional[float] = None
    elevation_m: Optional[float] = None
    gps: Optional[str] = None
    iata: Optional[str] = None
    icao: Optional[str] = None
    latitude: Optional[float] = None
    local: Optional[str] = None
    longitude: Optional[float] = None
    name: Optional[str] = None
    note: Optional[str] = None
    reporting: Optional[bool] = None
    runways: Optional[List[Runway]] = None
    state: Optional[str] = None
    type: Optional[str] = None
    website: Optional[str] = Field(default=None, json_schema_extra={"hint": "url"})
    wiki: Optional[str] = Field(default=None, json_schema_extra={"hint": "url"})


class NearestStation(AvwxModel):
    """One entry of the nearest-stations result list."""
    station: Optional[Station] = None
    coordinate_distance: Optional[float] = None
    nautical_miles: Optional[float] = None
    miles: Optional[float] = None
    kilometers: Optional[float] = None
