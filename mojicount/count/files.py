"""Uploaded text-file intake: type/size validation and UTF-8 decoding."""

MAX_FILE_SIZE = 10 * 1024 * 1024
TEXT_CONTENT_TYPE = "text/plain"


class UploadRejectedError(Exception):
    """Raised when an uploaded file is not an acceptable text file."""


def is_text_file(filename: str | None, content_type: str | None) -> bool:
    """Plain-text MIME type (parameters ignored) or a ``.txt`` name."""
    mime = (content_type or "").split(";", 1)[0].strip().lower()
    return mime == TEXT_CONTENT_TYPE or (filename or "").lower().endswith(".txt")


def validate_upload(filename: str | None, content_type: str | None, size: int) -> None:
    """Raise UploadRejectedError unless the file is a text file of at most 10 MB."""
    if size > MAX_FILE_SIZE:
        raise UploadRejectedError("ファイルサイズが大きすぎます（10MB以下）")
    if not is_text_file(filename, content_type):
        raise UploadRejectedError("テキストファイル（.txt）のみ対応しています")


def decode_text(content: bytes) -> str:
    """Decode UTF-8, dropping a leading BOM."""
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise UploadRejectedError("ファイルの読み込みに失敗しました") from e
