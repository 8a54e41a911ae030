"""Count API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, UploadFile

from mojicount.count.files import UploadRejectedError, decode_text, validate_upload
from mojicount.count.schemas import CountRequest, CountResponse, FileCountResponse
from mojicount.counting.counter import count_text
from mojicount.counting.frequency import top_characters
from mojicount.settings.router import get_settings_service
from mojicount.settings.service import SettingsService

router = APIRouter(prefix="/api/count", tags=["count"])


@router.post("")
async def count(
    request: CountRequest,
    service: SettingsService = Depends(get_settings_service),
) -> CountResponse:
    """Count the submitted text. Saves it as the last text when auto-save is on."""
    stored = await service.load_settings()
    options = request.options or stored.count_options()
    if stored.auto_save:
        await service.save_text(request.text)

    result = count_text(request.text, options)
    return CountResponse(
        result=result,
        top_characters=top_characters(result.character_frequency, request.top_n),
    )


@router.post("/file")
async def count_file(
    file: UploadFile,
    top_n: int = Query(10, ge=0, le=1000),
    service: SettingsService = Depends(get_settings_service),
) -> FileCountResponse:
    """Count an uploaded .txt file using the stored settings."""
    content = await file.read()
    try:
        validate_upload(file.filename, file.content_type, len(content))
        text = decode_text(content)
    except UploadRejectedError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    stored = await service.load_settings()
    if stored.auto_save:
        await service.save_text(text)

    result = count_text(text, stored.count_options())
    return FileCountResponse(
        filename=file.filename or "unknown",
        size=len(content),
        result=result,
        top_characters=top_characters(result.character_frequency, top_n),
    )
