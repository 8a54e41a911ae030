"""Count API request/response schemas."""

from pydantic import BaseModel, Field

from mojicount.models import CharacterCount, CountOptions, TextCountResult


class CountRequest(BaseModel):
    text: str
    # Omitted -> the stored settings decide
    options: CountOptions | None = None
    top_n: int = Field(10, ge=0, le=1000)


class CountResponse(BaseModel):
    result: TextCountResult
    top_characters: list[CharacterCount]


class FileCountResponse(CountResponse):
    filename: str
    size: int
