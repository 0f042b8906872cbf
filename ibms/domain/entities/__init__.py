from .envelope import ApiResponse, PaginatedResponse

__all__ = [
    "ApiResponse",
    "PaginatedResponse",
]
