"""FastAPI application entrypoint for the PDFLens backend."""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from . import __version__
from .bootstrap import bootstrap_env
from .config import get_settings
from .errors import ApiError
from .routers.pdf import router as pdf_router
from .routers.search import router as search_router
from .schemas import HealthResponse


settings = get_settings()
bootstrap_env(settings.log_level)

logger = logging.getLogger(__name__)

app = FastAPI(title="PDFLens Backend", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(pdf_router)
app.include_router(search_router)


def _error_body(error: str, details: str | None = None) -> dict[str, str]:
    body = {"error": error}
    if details is not None and get_settings().expose_error_details:
        body["details"] = details
    return body


@app.exception_handler(ApiError)
async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.error, exc.details))


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
        for error in exc.errors()
    )
    return JSONResponse(status_code=400, content=_error_body("Invalid request", problems))


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().expose_error_details else ""
    return JSONResponse(status_code=500, content={"error": message or "Internal server error"})


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="ok", message="Server is running")


# Mounted last so the API routes above take precedence over "/"
if Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
else:  # pragma: no cover - depends on deployment layout
    logger.warning("Static directory %s not found; browser page disabled", settings.static_dir)
