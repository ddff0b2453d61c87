"""
custom_validation/main.py

FastAPI application entry point.

Responsibilities:
  - Create the FastAPI app with metadata from config
  - Register the validation router
  - Map an invalid DEFAULT_FILE_TYPES setting to a 500 misconfiguration error
  - Add a global exception handler for uncaught AppBaseException
  - Expose a /health endpoint for liveness probes
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from custom_validation.api.validation_controller import router as validation_router
from custom_validation.core.config import settings
from custom_validation.core.exceptions import AppBaseException, UnknownFileTypeError
from custom_validation.core.logger import get_logger

logger = get_logger(__name__)

# ── App instance ───────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=(
        "Evaluates custom validation rules: allowed file types for uploads "
        "and minimum age for dates of birth."
    ),
)

# ── Routers ────────────────────────────────────────────────────────────────────

app.include_router(validation_router)

# ── Global exception handlers ──────────────────────────────────────────────────

@app.exception_handler(UnknownFileTypeError)
async def file_type_setting_handler(request: Request, exc: UnknownFileTypeError) -> JSONResponse:
    """
    Names sent by a client are rejected with 400 in the controller, so an
    UnknownFileTypeError reaching this point comes from DEFAULT_FILE_TYPES.
    """
    logger.error(
        "Invalid DEFAULT_FILE_TYPES setting '%s' on %s: %s",
        settings.default_file_types,
        request.url.path,
        exc,
    )
    return JSONResponse(
        status_code=500,
        content={"error": f"Server misconfiguration: DEFAULT_FILE_TYPES — {exc}"},
    )


@app.exception_handler(AppBaseException)
async def app_exception_handler(request: Request, exc: AppBaseException) -> JSONResponse:
    """
    Safety-net for any AppBaseException that escapes controller-level handling.
    Returns the standard error shape: { "error": "..." }
    """
    logger.exception("Unhandled application error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


# ── Health endpoint ────────────────────────────────────────────────────────────

@app.get("/health", tags=["Health"], summary="Liveness probe")
async def health() -> dict:
    """Returns 200 OK when the service is running."""
    return {"status": "ok", "version": settings.app_version}
