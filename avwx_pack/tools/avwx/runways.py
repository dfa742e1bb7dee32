"""
Runway display names.

AVWX sends each runway as two idents (e.g. "04L" and "22R"); the host
displays runways by a `name` built locally as "04L/22R".
"""

from typing import Any, Dict, List, Optional


def runway_name(runway: Dict[str, Any]) -> Optional[str]:
    """Return "ident1/ident2", or None when either ident is missing."""
    ident1 = runway.get("ident1")
    ident2 = runway.get("ident2")
    if ident1 is None or ident2 is None:
        return None
    return f"{ident1}/{ident2}"


def name_runways(runways: Optional[List[Dict[str, Any]]]) -> Optional[List[Dict[str, Any]]]:
    """
    Set `name` on every runway in place, overwriting any previous value.

    Runways without both idents are left without a name. A missing or
    empty list is returned as-is.
    """
    if not runways:
        return runways
    for runway in runways:
        if not isinstance(runway, dict):
            continue
        name = runway_name(runway)
        if name is not None:
            runway["name"] = name
    return runways


def name_station_runways(station: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Name the runways of one station record, tolerating a missing station or runway list."""
    if isinstance(station, dict):
        name_runways(station.get("runways"))
    return station
