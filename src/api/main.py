"""FastAPI application entry point."""

import os
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before settings are read
load_dotenv()

from api.dependencies import get_settings
from api.routes import dictionary, health
from utils.logging import setup_structured_logging

SERVICE_NAME = "Sõnaveeb Dictionary API"

setup_structured_logging(level=get_settings().log_level, service=SERVICE_NAME)

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
# main.py is at <root>/src/api/main.py
_project_root = Path(__file__).parent.parent.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: log the selected backends at startup."""
    settings = get_settings()
    logger.info("Dictionary API starting", extra={
        "dictionary": settings.dictionary_backend,
        "cache": "redis" if settings.redis_url else "in-memory",
        "version": VERSION,
    })
    yield  # App runs here


app = FastAPI(
    title=SERVICE_NAME,
    description="Looks up Estonian words: part of speech, word forms and meanings",
    version=VERSION,
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(dictionary.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False  # Structured application logs only
    )
