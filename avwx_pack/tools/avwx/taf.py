"""
Taf formula - terminal aerodrome forecast, one report with several periods.
"""

from avwx_pack.models import TafReport
from avwx_pack.tools.base import ParameterType, ResultType, ToolDefinition, ToolParameter
from avwx_pack.tools.avwx.common import AvwxLookupTool, NETWORK_DOMAIN


class TafTool(AvwxLookupTool):

    path_template = "/taf/{location}"

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="Taf",
            description=(
                "TAF reports are atmospheric conditions for an area within five nautical miles "
                "of a particular airfield or other station location."
            ),
            result_model=TafReport,
            result_type=ResultType.OBJECT,
            network_domain=NETWORK_DOMAIN,
            parameters=[
                ToolParameter(
                    name="location",
                    type=ParameterType.STRING,
                    description="ICAO, IATA station code, or coordinate pair",
                ),
            ],
        )
