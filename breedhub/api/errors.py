import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from breedhub.services.errors import NetworkError, UpstreamError

logger = logging.getLogger(__name__)


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.warning("Upstream failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": str(exc), "upstream_status": exc.status_code})


async def network_error_handler(request: Request, exc: NetworkError) -> JSONResponse:
    logger.warning("Upstream unreachable on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UpstreamError, upstream_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(NetworkError, network_error_handler)  # type: ignore[arg-type]
