"""
NearestStations formula - stations closest to a coordinate pair.
"""

from typing import Any

from avwx_pack.models import NearestStation
from avwx_pack.tools.base import ParameterType, ResultType, ToolDefinition, ToolParameter
from avwx_pack.tools.avwx.common import AvwxLookupTool, NETWORK_DOMAIN
from avwx_pack.tools.avwx.runways import name_station_runways


class NearestStationsTool(AvwxLookupTool):
    """
    Each result wraps a station together with its distance from the
    requested point. `n` is sent only when supplied.
    """

    path_template = "/station/near/{latitude},{longitude}"
    query_parameters = ("n",)

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="NearestStations",
            description="Returns the nearest stations to a coordinate pair.",
            result_model=NearestStation,
            result_type=ResultType.ARRAY,
            network_domain=NETWORK_DOMAIN,
            parameters=[
                ToolParameter(name="latitude", type=ParameterType.NUMBER, description="Latitude"),
                ToolParameter(name="longitude", type=ParameterType.NUMBER, description="Longitude"),
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
            for result in body:
                if isinstance(result, dict):
                    name_station_runways(result.get("station"))
        return body
