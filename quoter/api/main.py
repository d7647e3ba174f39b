"""FastAPI application for the 1DEX quoter.

Note: Rate limiting is intentionally not implemented at the application level.
It should be handled at the infrastructure layer (reverse proxy / load balancer).
"""

import logging
import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from quoter import __version__
from quoter.api.endpoints import router

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("QUOTER_HOST", "0.0.0.0")
PORT = int(os.environ.get("QUOTER_PORT", "8000"))
DEBUG = os.environ.get("QUOTER_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (1 MB); a pool account is a few hundred bytes
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="1DEX Quoter",
    description="Quotes for 1DEX weighted pools",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length:
        try:
            size = int(content_length)
        except ValueError:
            return JSONResponse(status_code=400, content={"detail": "Invalid Content-Length"})
        if size > MAX_REQUEST_SIZE:
            return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the quoter API server.

    Configuration via environment variables:
    - QUOTER_HOST: Host to bind to (default: 0.0.0.0)
    - QUOTER_PORT: Port to bind to (default: 8000)
    - QUOTER_DEBUG: Enable debug/reload mode and debug logging (default: false)
    """
    log_level = logging.DEBUG if DEBUG else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )
    logger.info("quoter_starting", host=HOST, port=PORT, debug=DEBUG)

    uvicorn.run(
        "quoter.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
