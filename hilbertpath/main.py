"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hilbertpath import __version__
from hilbertpath.config import settings
from hilbertpath.errors import HilbertError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.hilbertpath_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _hilbert_error_handler(request: Request, exc: HilbertError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="hilbertpath",
        description="Compact multi-dimensional Hilbert curve — index/coordinate lookups",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(HilbertError, _hilbert_error_handler)

    from hilbertpath.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
