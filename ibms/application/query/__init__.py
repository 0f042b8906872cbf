from .keys import QueryKey, QueryKeys, normalize_key
from .mutation import Mutation, MutationResult
from .query_client import QueryClient, QueryOptions, QueryResult, QueryStatus

__all__ = [
    "Mutation",
    "MutationResult",
    "QueryClient",
    "QueryKey",
    "QueryKeys",
    "QueryOptions",
    "QueryResult",
    "QueryStatus",
    "normalize_key",
]
