"""
Station formula - static airfield metadata for one station.

AVWX does not name runways; each runway gets a local "ident1/ident2" name
before the station is returned.
"""

from typing import Any

from avwx_pack.models import Station
from avwx_pack.tools.base import ParameterType, ResultType, ToolDefinition, ToolParameter
from avwx_pack.tools.avwx.common import AvwxLookupTool, NETWORK_DOMAIN
from avwx_pack.tools.avwx.runways import name_station_runways


class StationTool(AvwxLookupTool):

    path_template = "/station/{ident}"

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="Station",
            description="Returns station information for an airfield or other location by ICAO ident.",
            result_model=Station,
            result_type=ResultType.OBJECT,
            network_domain=NETWORK_DOMAIN,
            parameters=[
                ToolParameter(
                    name="ident",
                    type=ParameterType.STRING,
                    description="ICAO or IATA station code Example: KJFK",
                ),
            ],
        )

    def post_process(self, body: Any) -> Any:
        return name_station_runways(body)
