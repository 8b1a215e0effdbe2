# promptvault/main.py
"""
Local HTTP API over the prompt store.

Run with:
    uvicorn promptvault.main:app --port 8000
"""

import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from promptvault import __version__
from promptvault.config import ensure_data_dir, get_settings
from promptvault.database import get_engine, init_db
from promptvault.exceptions import NotFoundError, StorageError
from promptvault.logging_config import configure_logging
from promptvault.routers import catalog_router, prompts_router, settings_router, transfer_router

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title="PromptVault",
    description="Local versioned prompt store",
    version=__version__,
)

if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(prompts_router)
app.include_router(catalog_router)
app.include_router(transfer_router)
app.include_router(settings_router)


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


@app.on_event("startup")
def startup_event() -> None:
    """Configure logging and initialize the store file."""
    configure_logging(json_format=settings.LOG_JSON, level=settings.LOG_LEVEL)
    ensure_data_dir(settings)
    init_db(get_engine())


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "service": "promptvault"}


if __name__ == "__main__":
    import os

    from dotenv import load_dotenv

    load_dotenv()

    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", 8000))

    uvicorn.run(app, host=host, port=port)
