"""Settings and saved-text API routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status
from pydantic import ValidationError

from mojicount.models import AppSettings
from mojicount.settings.schemas import TextBody
from mojicount.settings.service import ImportResult, SettingsService

router = APIRouter(prefix="/api", tags=["settings"])


def get_settings_service() -> SettingsService:
    """Dependency placeholder, overridden in the app lifespan."""
    raise RuntimeError("SettingsService not configured")


@router.get("/settings")
async def get_settings(
    service: SettingsService = Depends(get_settings_service),
) -> AppSettings:
    return await service.load_settings()


@router.put("/settings")
async def replace_settings(
    settings: AppSettings,
    service: SettingsService = Depends(get_settings_service),
) -> AppSettings:
    return await service.save_settings(settings)


@router.patch("/settings")
async def patch_settings(
    patch: dict[str, Any] = Body(...),
    service: SettingsService = Depends(get_settings_service),
) -> AppSettings:
    """Update only the fields present in the request body."""
    try:
        return await service.update_settings(patch)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.get("/settings/export")
async def export_settings(
    service: SettingsService = Depends(get_settings_service),
) -> dict:
    return await service.export_bundle()


@router.post("/settings/import")
async def import_settings(
    request: Request,
    service: SettingsService = Depends(get_settings_service),
) -> ImportResult:
    """Restore an exported bundle. Malformed bundles report failure, not 4xx."""
    raw = (await request.body()).decode("utf-8", errors="replace")
    return await service.import_bundle(raw)


@router.get("/text")
async def get_text(
    service: SettingsService = Depends(get_settings_service),
) -> TextBody:
    return TextBody(text=await service.load_text())


@router.put("/text")
async def put_text(
    body: TextBody,
    service: SettingsService = Depends(get_settings_service),
) -> TextBody:
    await service.save_text(body.text)
    return body


@router.delete("/data", status_code=status.HTTP_204_NO_CONTENT)
async def clear_data(
    service: SettingsService = Depends(get_settings_service),
) -> None:
    await service.clear_all()
