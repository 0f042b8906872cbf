from .http_gateway import HttpGateway
from .mock_gateway import MockGateway

__all__ = [
    "HttpGateway",
    "MockGateway",
]
