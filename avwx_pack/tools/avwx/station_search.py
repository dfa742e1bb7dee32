"""
StationSearch formula - free-text station search.
"""

from typing import Any

from avwx_pack.models import Station
from avwx_pack.tools.base import ParameterType, ResultType, ToolDefinition, ToolParameter
from avwx_pack.tools.avwx.common import AvwxLookupTool, NETWORK_DOMAIN
from avwx_pack.tools.avwx.runways import name_station_runways


class StationSearchTool(AvwxLookupTool):

    path_template = "/search/station"
    query_parameters = ("text", "n")

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="StationSearch",
            description="Text search for stations by ICAO, IATA, name, city, and state.",
            result_model=Station,
            result_type=ResultType.ARRAY,
            network_domain=NETWORK_DOMAIN,
            parameters=[
                ToolParameter(name="text", type=ParameterType.STRING, description="Search text"),
                ToolParameter(
                    name="n",
                    type=ParameterType.NUMBER,
                    description="Number of stations to return",
                    optional=True,
                ),
            ],
        )

    def post_process(self, body: Any) -> Any:
        if isinstance(body, list):
            for station in body:
                name_station_runways(station)
        return body
