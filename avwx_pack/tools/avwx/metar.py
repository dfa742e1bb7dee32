"""
Metar formula - current conditions report for one station.
"""

from avwx_pack.models import MetarReport
from avwx_pack.tools.base import ParameterType, ResultType, ToolDefinition, ToolParameter
from avwx_pack.tools.avwx.common import AvwxLookupTool, NETWORK_DOMAIN


class MetarTool(AvwxLookupTool):

    path_template = "/metar/{location}"

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="Metar",
            description="Returns the METAR for a station.",
            result_model=MetarReport,
            result_type=ResultType.OBJECT,
            network_domain=NETWORK_DOMAIN,
            parameters=[
                ToolParameter(
                    name="location",
                    type=ParameterType.STRING,
                    description="ICAO, IATA station code or coordinate pair. Example: KJFK or 40.639801,-73.778900",
                ),
            ],
        )
