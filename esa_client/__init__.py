from esa_client.core.client import (
    DecodeError,
    EsaClient,
    EsaError,
    HTTPStatusError,
    TransportError,
    get_esa_client,
)
from esa_client.core.query import build_query, build_search_query

__all__ = [
    "EsaClient",
    "get_esa_client",
    "EsaError",
    "TransportError",
    "HTTPStatusError",
    "DecodeError",
    "build_query",
    "build_search_query",
]
