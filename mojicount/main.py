"""mojicount FastAPI application entry point."""

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mojicount.count.router import router as count_router
from mojicount.db.connection import Database
from mojicount.export.router import get_export_service
from mojicount.export.router import router as export_router
from mojicount.export.service import ExportService
from mojicount.settings.router import get_settings_service
from mojicount.settings.router import router as settings_router
from mojicount.settings.service import SettingsService

VERSION = "0.1.0"

# Load .env from the project root before reading configuration
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _cors_origins() -> list[str]:
    raw = os.environ.get("MOJICOUNT_CORS_ORIGINS", "http://localhost:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage database lifecycle and service wiring."""
    db = await Database.connect(os.environ.get("MOJICOUNT_DB", "mojicount.db"))

    settings_service = SettingsService(db)
    app.dependency_overrides[get_settings_service] = lambda: settings_service

    export_service = ExportService(settings_service)
    app.dependency_overrides[get_export_service] = lambda: export_service

    app.state.db = db
    yield

    await db.close()


app = FastAPI(
    title="mojicount",
    description=(
        "Character, line, byte-size and manuscript-page statistics"
        " for Japanese and general Unicode text"
    ),
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(count_router)
app.include_router(export_router)
app.include_router(settings_router)


@app.get("/api/health")
async def health() -> dict:
    return {"status": "ok", "version": VERSION}
