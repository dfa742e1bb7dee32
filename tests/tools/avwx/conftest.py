"""
Upstream-shaped payloads for the AVWX formulas.

Fixtures return fresh dicts so tests can compare against an untouched copy.
"""

import pytest


@pytest.fixture
def jfk_station():
    return {
        "city": "New York",
        "country": "US",
        "elevation_ft": 13,
        "elevation_m": 4,
        "gps": "KJFK",
        "iata": "JFK",
        "icao": "KJFK",
        "latitude": 40.639801,
        "local": "JFK",
        "longitude": -73.7789,
        "name": "John F Kennedy International Airport",
        "note": None,
        "reporting": True,
        "runways": [
            {"length_ft": 12079, "width_ft": 200, "ident1": "04L", "ident2": "22R"},
            {"length_ft": 8400, "width_ft": 200, "ident1": "04R", "ident2": "22L"},
            {"length_ft": 14511, "width_ft": 150, "ident1": "13R", "ident2": "31L"},
        ],
        "state": "NY",
        "type": "large_airport",
        "website": "https://www.jfkairport.com/",
        "wiki": "https://en.wikipedia.org/wiki/John_F._Kennedy_International_Airport",
    }


@pytest.fixture
def denver_search_results():
    return [
        {
            "icao": "KDEN",
            "iata": "DEN",
            "name": "Denver International Airport",
            "city": "Denver",
            "state": "CO",
            "country": "US",
            "reporting": True,
            "runways": [
                {"length_ft": 12000, "width_ft": 150, "ident1": "07", "ident2": "25"},
                {"length_ft": 16000, "width_ft": 200, "ident1": "16R", "ident2": "34L"},
            ],
        },
        {
            "icao": "KAPA",
            "iata": "APA",
            "name": "Centennial Airport",
            "city": "Denver",
            "state": "CO",
            "country": "US",
            "reporting": True,
            "runways": [
                {"length_ft": 10000, "width_ft": 100, "ident1": "17L", "ident2": "35R"},
            ],
        },
        {
            "icao": "KBJC",
            "iata": "BJC",
            "name": "Rocky Mountain Metropolitan Airport",
            "city": "Denver",
            "state": "CO",
            "country": "US",
            "reporting": True,
        },
    ]


@pytest.fixture
def nearest_results(jfk_station):
    return [
        {
            "station": jfk_station,
            "coordinate_distance": 0.0096,
            "nautical_miles": 0.58,
            "miles": 0.66,
            "kilometers": 1.07,
        },
        {
            "station": {"icao": "KLGA", "name": "La Guardia Airport"},
            "coordinate_distance": 0.16,
            "nautical_miles": 9.6,
            "miles": 11.05,
            "kilometers": 17.78,
        },
    ]


@pytest.fixture
def kjfk_metar():
    return {
        "meta": {"timestamp": "2024-05-01T12:55:12.123456Z"},
        "altimeter": {"repr": "A2992", "value": 29.92, "spoken": "two nine point nine two"},
        "clouds": [
            {"repr": "FEW050", "type": "FEW", "altitude": 50, "modifier": None, "direction": None},
            {"repr": "BKN250", "type": "BKN", "altitude": 250, "modifier": None, "direction": None},
        ],
        "flight_rules": "VFR",
        "other": [],
        "sanitized": "KJFK 011251Z 18010KT 10SM FEW050 BKN250 12/M01 A2992",
        "visibility": {"repr": "10", "value": 10},
        "wind_direction": {"repr": "180", "value": 180},
        "wind_gust": None,
        "wind_speed": {"repr": "10", "value": 10},
        "wx_codes": [],
        "raw": "KJFK 011251Z 18010KT 10SM FEW050 BKN250 12/M01 A2992",
        "station": "KJFK",
        "time": {"repr": "011251Z", "dt": "2024-05-01T12:51:00Z"},
        "remarks": "AO2 SLP132",
        "dewpoint": {"repr": "M01", "value": -1},
        "relative_humidity": 0.4,
        "remarks_info": {
            "sea_level_pressure": {"repr": "SLP132", "value": 1013.2},
            "maximum_temperature_6": {"repr": "10156", "value": 15.6, "spoken": "fifteen point six"},
            "minimum_temperature_6": {"repr": "20083", "value": 8.3, "spoken": "eight point three"},
            "pressure_tendency": {"repr": "52015", "tendency": "Increasing, then steady", "change": 1.5},
            "precip_hourly": {"repr": "P0002", "value": 0.02, "spoken": "zero point zero two"},
            "sunshine_minutes": None,
            "snow_depth": None,
            "codes": [{"repr": "AO2", "value": "Automated with precipitation sensor"}],
        },
        "runway_visibility": [
            {
                "repr": "R04R/2000V4000FT",
                "runway": "04R",
                "visibility": None,
                "variable_visibility": [
                    {"repr": "2000", "value": 2000, "spoken": "two thousand"},
                    {"repr": "4000", "value": 4000, "spoken": "four thousand"},
                ],
                "trend": None,
            }
        ],
        "temperature": {"repr": "12", "value": 12},
        "wind_variable_direction": [
            {"repr": "150", "value": 150, "spoken": "one five zero"},
            {"repr": "210", "value": 210, "spoken": "two one zero"},
        ],
        "density_altitude": 10,
        "pressure_altitude": 13,
        "units": {
            "accumulation": "in",
            "altimeter": "inHg",
            "altitude": "ft",
            "temperature": "C",
            "visibility": "sm",
            "wind_speed": "kt",
        },
    }


@pytest.fixture
def kjfk_taf():
    return {
        "meta": {"timestamp": "2024-05-01T12:55:12Z"},
        "raw": "KJFK 011120Z 0112/0218 18010KT P6SM FEW050 FM011800 20015G25KT P6SM BKN040",
        "station": "KJFK",
        "time": {"repr": "011120Z", "dt": "2024-05-01T11:20:00Z"},
        "remarks": "",
        "forecast": [
            {
                "altimeter": {"repr": "QNH2992INS", "value": 29.92, "spoken": "two nine point nine two"},
                "clouds": [{"repr": "FEW050", "type": "FEW", "altitude": 50}],
                "flight_rules": "VFR",
                "other": [],
                "sanitized": "0112/0218 18010KT P6SM FEW050",
                "visibility": {"repr": "P6", "value": None},
                "wind_direction": {"repr": "180", "value": 180},
                "wind_gust": None,
                "wind_speed": {"repr": "10", "value": 10},
                "wx_codes": [],
                "end_time": {"repr": "0118", "dt": "2024-05-01T18:00:00Z"},
                "icing": [
                    {
                        "repr": "620304",
                        "severity": "Light icing",
                        "floor": {"repr": "030", "value": 3000, "spoken": "three thousand"},
                        "ceiling": {"repr": "4", "value": 7000, "spoken": "seven thousand"},
                    }
                ],
                "probability": {"repr": "30", "value": 30, "spoken": "three zero"},
                "raw": "0112/0218 18010KT P6SM FEW050",
                "start_time": {"repr": "0112", "dt": "2024-05-01T12:00:00Z"},
                "turbulence": [
                    {
                        "repr": "520004",
                        "severity": "Occasional moderate turbulence in clear air",
                        "floor": {"repr": "000", "value": 0, "spoken": "zero"},
                        "ceiling": {"repr": "4", "value": 4000, "spoken": "four thousand"},
                    }
                ],
                "type": "FROM",
                "wind_shear": None,
                "summary": "Winds S at 10kt, Vis unlimited, Few clouds at 5000ft",
            },
            {
                "clouds": [{"repr": "BKN040", "type": "BKN", "altitude": 40}],
                "flight_rules": "VFR",
                "sanitized": "FM011800 20015G25KT P6SM BKN040",
                "wind_gust": {"repr": "25", "value": 25},
                "start_time": {"repr": "011800", "dt": "2024-05-01T18:00:00Z"},
                "end_time": {"repr": "0218", "dt": "2024-05-02T18:00:00Z"},
                "type": "FROM",
            },
        ],
    }


@pytest.fixture
def kjfk_summary():
    return {
        "meta": {"timestamp": "2024-05-01T12:55:12Z"},
        "metar": {
            "time": "2024-05-01T12:51:00Z",
            "flight_rules": "VFR",
            "wx_codes": [],
            "visibility": {"repr": "10", "value": 10},
            "ceiling": {"repr": "BKN250", "type": "BKN", "altitude": 250, "modifier": None},
        },
        "taf": {
            "time": "2024-05-01T11:20:00Z",
            "forecast": [
                {
                    "start_time": "2024-05-01T12:00:00Z",
                    "end_time": "2024-05-01T18:00:00Z",
                    "flight_rules": "VFR",
                },
                {
                    "start_time": "2024-05-01T18:00:00Z",
                    "end_time": "2024-05-02T18:00:00Z",
                    "flight_rules": "MVFR",
                },
            ],
        },
    }
