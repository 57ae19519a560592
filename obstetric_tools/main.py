"""Obstetric Decision Support: FastAPI entry point.

JSON surface over the ectopic pregnancy and Bishop score rule engines for an
external rendering layer.
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from obstetric_tools import __version__
from obstetric_tools.config.settings import get_settings
from obstetric_tools.config.logging_config import setup_logging, get_logger
from obstetric_tools.api.routes import bishop, ectopic, tools

settings = get_settings()

setup_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configuration checks only."""
    logger.info("Starting Obstetric Decision Support", env=settings.app_env)

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not set, AI case summaries unavailable")

    yield

    logger.info("Shutting down Obstetric Decision Support")


app = FastAPI(
    title="Obstetric Decision Support",
    description="Methotrexate eligibility for ectopic pregnancy and Bishop score evaluation",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept", "X-Requested-With"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    error_id = str(uuid.uuid4())[:8]
    logger.error("Unhandled exception", error_id=error_id, error=str(exc), path=request.url.path, exc_info=True)
    return JSONResponse(status_code=500, content={"error": "Internal server error", "error_id": error_id})


# Routes
app.include_router(tools.router, prefix="/api/v1")
app.include_router(ectopic.router, prefix="/api/v1")
app.include_router(bishop.router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "components": {"ai_summary": bool(settings.gemini_api_key)},
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("obstetric_tools.main:app", host="0.0.0.0", port=8000, reload=True)
