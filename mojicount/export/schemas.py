"""Export API request schemas."""

from pydantic import BaseModel

from mojicount.models import CountOptions


class ExportRequest(BaseModel):
    text: str
    # Omitted -> the stored settings decide
    options: CountOptions | None = None
