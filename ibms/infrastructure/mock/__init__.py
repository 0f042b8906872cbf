from .backend import Collection, MockBackend, MockRequest, MockRouter, MockValidationError, TenantStore
from .fixtures import DEMO_USER

__all__ = [
    "Collection",
    "DEMO_USER",
    "MockBackend",
    "MockRequest",
    "MockRouter",
    "MockValidationError",
    "TenantStore",
]
