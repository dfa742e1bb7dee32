"""
Summary formula - condensed current and forecast flight conditions.
"""

from avwx_pack.models import SummaryReport
from avwx_pack.tools.base import ParameterType, ResultType, ToolDefinition, ToolParameter
from avwx_pack.tools.avwx.common import AvwxLookupTool, NETWORK_DOMAIN


class SummaryTool(AvwxLookupTool):
    """Current and future flight rules plus the elements that explain them."""

    path_template = "/summary/{location}"

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="Summary",
            description=(
                "The summary provides the current and future flight conditions "
                "as well as a few other elements to explain them."
            ),
            result_model=SummaryReport,
            result_type=ResultType.OBJECT,
            network_domain=NETWORK_DOMAIN,
            parameters=[
                ToolParameter(
                    name="location",
                    type=ParameterType.STRING,
                    description="ICAO & IATA station code or coordinate pair.",
                ),
            ],
        )
