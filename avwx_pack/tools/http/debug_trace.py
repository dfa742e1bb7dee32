"""
Token-safe rendering of fetch requests and responses for DEBUG logs.

Nothing here is consulted unless the fetcher's logger is at DEBUG.
"""

import re
from typing import Mapping, Optional

_SECRET_QUERY_PATTERN = re.compile(r'(api_key|apikey|key|token|auth|password)=([^&]+)', re.IGNORECASE)

BODY_PREVIEW_LIMIT = 512


def clip_body(text: Optional[str], limit: int = BODY_PREVIEW_LIMIT) -> str:
    """First `limit` characters of a response body, marked when cut."""
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text) - limit} more chars)"


def redact_url(url: str) -> str:
    """Redact credentials passed as query parameters."""
    return _SECRET_QUERY_PATTERN.sub(r'\1=***', url)


def redact_headers(headers: Optional[Mapping[str, str]]) -> dict:
    """Copy of `headers` with the Authorization credential masked, scheme kept."""
    redacted = dict(headers or {})
    for name, value in redacted.items():
        if name.lower() == "authorization" and value:
            redacted[name] = f"{str(value).split(' ', 1)[0]} ***"
    return redacted
