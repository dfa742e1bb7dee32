"""
HTTP fetch capability for formulas.

- AiohttpFetcher: allow-listed, bearer-authenticated single-request fetcher
- FetchResponse: status + decoded JSON body
"""

from .fetcher import AiohttpFetcher, FetchResponse, NetworkDomainError, with_query_params

__all__ = ["AiohttpFetcher", "FetchResponse", "NetworkDomainError", "with_query_params"]
