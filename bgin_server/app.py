from __future__ import annotations

import json

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .logging_config import configure_logging, get_logger
from .routes import api_router
from .utils.timestamps import utc_now_iso

logger = get_logger(__name__)


# Register global exception handlers for consistent error responses across the API
def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def _validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.debug("validation error", extra={"errors": exc.errors(), "path": str(request.url)})
        return JSONResponse(
            {"success": False, "error": "Invalid request", "details": jsonable_errors(exc)},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException):
        logger.debug(
            "http error",
            extra={"detail": exc.detail, "status": exc.status_code, "path": str(request.url)},
        )
        detail = exc.detail
        if not isinstance(detail, str):
            detail = json.dumps(detail)
        return JSONResponse({"success": False, "error": detail}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": str(request.url)})
        return JSONResponse(
            {"success": False, "error": "Internal server error", "details": str(exc)},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation errors with only JSON-safe fields (``ctx`` can hold exception objects)."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


configure_logging()
_settings = get_settings()

app = FastAPI(
    title=_settings.app_name,
    version=_settings.app_version,
    docs_url=_settings.resolved_docs_url,
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router)


@app.get("/health", tags=["status"])
async def health() -> dict:
    return {
        "status": "healthy",
        "message": "BGIN AI MVP Server is running",
        "timestamp": utc_now_iso(),
    }


@app.on_event("startup")
# Make sure the transcript directory exists and report the provider chain
async def _startup() -> None:
    from .dispatcher import get_dispatcher
    from .services.transcripts import get_transcript_store

    logger.info("🚀 BGIN multi-agent hub starting up...")

    store = get_transcript_store()
    store.storage_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"📁 Chat storage: {store.storage_dir.resolve()}")

    chain = " → ".join(get_dispatcher().provider_names + ["static fallback"])
    logger.info(f"🔧 LLM provider chain: {chain}")
    if not _settings.openai_configured:
        logger.info("OpenAI key not set; the OpenAI step will be skipped")
    if not _settings.discourse_configured:
        logger.info("Discourse key not set; forum publishing is disabled")


__all__ = ["app"]
