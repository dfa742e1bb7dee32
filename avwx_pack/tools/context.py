"""
Formula execution context - request-scoped access to host capabilities.

A fresh context is built for every invocation; nothing on it is shared
between invocations.
"""

from dataclasses import dataclass, field
from typing import Any
import uuid


def _new_invocation_id() -> str:
    return uuid.uuid4().hex


@dataclass
class ToolExecutionContext:
    """
    Context provided to formulas during execution.

    The fetcher attaches credentials and enforces the network allow-list;
    formulas never see the token.
    """

    fetcher: Any  # Object exposing `async fetch(method=..., url=...) -> FetchResponse`
    invocation_id: str = field(default_factory=_new_invocation_id)
