"""
Shared lookup flow for the AVWX formulas.

Every formula builds one URL under https://avwx.rest/api, issues a single
GET through the context's fetcher and returns the decoded body. Any status
other than 200 fails with the same generic error; nothing is retried.
"""

from typing import Any, Dict, Optional, Tuple

import structlog

from avwx_pack.tools.base import Tool
from avwx_pack.tools.context import ToolExecutionContext
from avwx_pack.tools.http.debug_trace import redact_url
from avwx_pack.tools.http.fetcher import quote_path_value, with_query_params

logger = structlog.get_logger(__name__)

NETWORK_DOMAIN = "avwx.rest"
AVWX_BASE = f"https://{NETWORK_DOMAIN}/api"
FETCH_FAILED_MESSAGE = "Failed to fetch airport information"


class FetchFailedError(RuntimeError):
    """
    Upstream answered with a status other than 200.

    The message is the same for every status; `status` and `url` are kept
    for logs only.
    """

    def __init__(self, status: Optional[int] = None, url: Optional[str] = None):
        super().__init__(FETCH_FAILED_MESSAGE)
        self.status = status
        self.url = url


class AvwxLookupTool(Tool):
    """
    Base for the six AVWX formulas.

    Subclasses set `path_template` (placeholders are parameter names) and
    `query_parameters`, and override `post_process` when the body needs a
    local touch-up.
    """

    path_template: str = ""
    query_parameters: Tuple[str, ...] = ()

    def build_url(self, parameters: Dict[str, Any]) -> str:
        path_values = {
            name: quote_path_value(value)
            for name, value in parameters.items()
            if name not in self.query_parameters and value is not None
        }
        url = AVWX_BASE + self.path_template.format(**path_values)
        return with_query_params(url, {name: parameters.get(name) for name in self.query_parameters})

    def post_process(self, body: Any) -> Any:
        return body

    async def execute(
        self,
        parameters: Dict[str, Any],
        context: ToolExecutionContext
    ) -> Any:
        name = self.definition.name
        url = self.build_url(parameters)

        logger.info(
            "Fetching AVWX resource",
            formula=name,
            url=redact_url(url),
            invocation_id=context.invocation_id,
        )

        response = await context.fetcher.fetch(method="GET", url=url)

        if response.status != 200:
            logger.warning(
                "AVWX request failed",
                formula=name,
                status=response.status,
                invocation_id=context.invocation_id,
            )
            raise FetchFailedError(status=response.status, url=url)

        body = self.post_process(response.body)

        logger.debug(
            "AVWX request completed",
            formula=name,
            items=len(body) if isinstance(body, list) else None,
            invocation_id=context.invocation_id,
        )
        return body
