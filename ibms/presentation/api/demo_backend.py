"""Demo backend endpoints — serves the mock backend's route table over HTTP.

Every ``/api/<path>`` request not claimed by a versioned router is handed
to ``MockBackend.dispatch`` and answered with the resulting envelope.
"""

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from ibms.infrastructure.dependencies import get_mock_backend
from ibms.infrastructure.mock import MockBackend

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Demo backend"])


async def _read_body(request: Request) -> object:
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid JSON body: {e}")


@router.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
async def dispatch(
    path: str,
    request: Request,
    backend: MockBackend = Depends(get_mock_backend),
) -> JSONResponse:
    """Route one request through the demo backend."""
    body = await _read_body(request) if request.method in ("POST", "PUT", "PATCH") else None
    response = backend.dispatch(
        request.method,
        f"/{path}",
        params=dict(request.query_params),
        body=body,
        tenant=request.headers.get("X-Tenant"),
    )
    status_code = response.status_code or (status.HTTP_200_OK if response.success else status.HTTP_400_BAD_REQUEST)
    return JSONResponse(response.to_dict(), status_code=status_code)
