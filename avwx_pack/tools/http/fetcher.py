"""
HTTP fetch capability used by every formula.

Performs one request against an allow-listed domain, attaches the bearer
credential and hands back the status plus the decoded JSON body. Formulas
only ever see a FetchResponse; they never read the token or build headers.
"""

import asyncio
import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional
from urllib.parse import quote, urlencode, urlsplit

import aiohttp

from avwx_pack.tools.http.debug_trace import clip_body, redact_headers, redact_url

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "avwx-pack/1.0"


class NetworkDomainError(ValueError):
    """Raised when a formula requests a host outside the allow-list."""


@dataclass
class FetchResponse:
    """Status code and decoded body of a single fetch."""
    status: int
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


def format_param_value(value: Any) -> str:
    """
    Render a parameter for a URL.

    Integral floats drop the fractional part so that a host-supplied
    `5.0` is sent as `5`.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def quote_path_value(value: Any) -> str:
    """Quote a value for interpolation into a path segment; commas stay literal."""
    return quote(format_param_value(value), safe=",")


def with_query_params(url: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Append query parameters to `url` in declaration order.

    Parameters whose value is None are omitted entirely.
    """
    pairs = [
        (key, format_param_value(value))
        for key, value in (params or {}).items()
        if value is not None
    ]
    if not pairs:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(pairs)}"


def _decode_json(text: str, url: str) -> Any:
    """Decode a 2xx body; a blank body is None, an undecodable one a payload error."""
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise aiohttp.ClientPayloadError(
            f"Response from {redact_url(url)} is not valid JSON: {e.msg} at char {e.pos}"
        ) from e


class AiohttpFetcher:
    """
    aiohttp-backed fetcher.

    One ClientSession per request; nothing is cached or retried. Transport
    errors (aiohttp.ClientError, asyncio.TimeoutError) propagate unchanged.
    """

    def __init__(
        self,
        *,
        token: Optional[str] = None,
        allowed_domains: Iterable[str] = ("avwx.rest",),
        timeout_ms: int = 10000,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.token = (token or "").strip() or None
        self.allowed_domains = tuple(d.strip().lower() for d in allowed_domains if d and d.strip())
        self.timeout_ms = max(1, int(timeout_ms))
        self.user_agent = user_agent or DEFAULT_USER_AGENT

    def is_allowed(self, url: str) -> bool:
        host = (urlsplit(url).hostname or "").lower()
        if not host:
            return False
        return any(host == d or host.endswith("." + d) for d in self.allowed_domains)

    def _build_headers(self, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if extra:
            headers.update(extra)
        return headers

    async def fetch(
        self,
        *,
        url: str,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
    ) -> FetchResponse:
        """
        Perform a single request.

        Returns:
            FetchResponse. The body is decoded only for 2xx statuses; any
            other status comes back with body=None.

        Raises:
            NetworkDomainError: If the URL host is not allow-listed
            aiohttp.ClientError / asyncio.TimeoutError: On transport failure,
                including a 2xx body that is not valid JSON (ClientPayloadError)
        """
        if not self.is_allowed(url):
            raise NetworkDomainError(f"Network domain not allowed: {urlsplit(url).hostname or url}")

        request_headers = self._build_headers(headers)
        started = time.monotonic()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "[HTTP_FETCH_TRACE] request method=%s url=%s headers=%s",
                method,
                redact_url(url),
                redact_headers(request_headers),
            )

        timeout = aiohttp.ClientTimeout(total=self.timeout_ms / 1000.0)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(method=method, url=url, headers=request_headers) as response:
                    response_headers = dict(response.headers or {})
                    if not 200 <= response.status < 300:
                        logger.warning(f"Fetch returned non-2xx: status={response.status} url={redact_url(url)}")
                        return FetchResponse(status=response.status, body=None, headers=response_headers)

                    text = await response.text()
                    body = _decode_json(text, url)

                    if logger.isEnabledFor(logging.DEBUG):
                        elapsed_ms = round((time.monotonic() - started) * 1000, 2)
                        logger.debug(
                            "[HTTP_FETCH_TRACE] response_ok status=%s elapsed_ms=%s body_len=%s body_preview=%s",
                            response.status,
                            elapsed_ms,
                            len(text),
                            clip_body(text),
                        )

                    return FetchResponse(status=response.status, body=body, headers=response_headers)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Fetch failed: {method} {redact_url(url)} error={e!r}")
            raise
