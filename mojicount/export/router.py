"""Export API routes."""

from fastapi import APIRouter, Depends, Response

from mojicount.export.schemas import ExportRequest
from mojicount.export.service import REPORT_FILENAME, ExportService

router = APIRouter(prefix="/api/export", tags=["export"])


def get_export_service() -> ExportService:
    """Dependency placeholder, overridden in the app lifespan."""
    raise RuntimeError("ExportService not configured")


@router.post("/report")
async def export_report(
    request: ExportRequest,
    service: ExportService = Depends(get_export_service),
) -> Response:
    """Count the text and return the report as a UTF-8 text attachment."""
    report = await service.report(request.text, request.options)
    return Response(
        content=report.encode("utf-8"),
        media_type="text/plain; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"',
        },
    )


@router.post("/summary")
async def export_summary(
    request: ExportRequest,
    service: ExportService = Depends(get_export_service),
) -> dict:
    """Short summary suitable for the clipboard."""
    return {"summary": await service.summary(request.text, request.options)}
