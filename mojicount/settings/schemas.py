"""Settings API request/response schemas."""

from pydantic import BaseModel


class TextBody(BaseModel):
    text: str
