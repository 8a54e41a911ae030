"""Export service: human-readable count reports and clipboard summaries.

Labels and their order are fixed: totals, lines, manuscript pages, then each
byte size, then the measurement timestamp.
"""

from datetime import datetime

from mojicount.counting.counter import count_text
from mojicount.models import CountOptions, DisplayFormat, TextCountResult
from mojicount.settings.service import SettingsService

REPORT_TITLE = "文字数カウント結果"
REPORT_FILENAME = "count-result.txt"
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"

# (label, ByteSizes field)
BYTE_LABELS: list[tuple[str, str]] = [
    ("UTF-8", "utf8"),
    ("UTF-16LE", "utf16le"),
    ("UTF-16BE", "utf16be"),
    ("Shift_JIS", "shift_jis"),
    ("EUC-JP", "euc_jp"),
    ("ISO-2022-JP", "iso2022_jp"),
]


def format_number(value: int, use_separator: bool = True) -> str:
    """Group digits the way ja-JP does (``1,234,567``)."""
    return f"{value:,}" if use_separator else str(value)


def _unit(text: str, unit: str, show_units: bool) -> str:
    return f"{text} {unit}" if show_units else text


def format_count_report(
    result: TextCountResult,
    generated_at: datetime | None = None,
    display: DisplayFormat | None = None,
) -> str:
    display = display or DisplayFormat()
    generated_at = generated_at or datetime.now()
    sep = display.use_thousands_separator

    lines = [
        REPORT_TITLE,
        "=" * 16,
        "",
        f"総文字数: {format_number(result.total_characters, sep)}",
        f"改行除く文字数: {format_number(result.total_characters_no_newlines, sep)}",
        f"空白除く文字数: {format_number(result.characters_excluding_spaces, sep)}",
        f"行数: {format_number(result.lines, sep)}",
        f"原稿用紙換算: {_unit(str(result.manuscript_pages), '枚', display.show_units)}",
        "",
        "バイト数:",
    ]
    for label, field in BYTE_LABELS:
        size = format_number(getattr(result.bytes, field), sep)
        lines.append(f"  {label}: {_unit(size, 'bytes', display.show_units)}")
    lines += ["", f"計測日時: {generated_at.strftime(TIMESTAMP_FORMAT)}"]
    return "\n".join(lines)


def format_clipboard_summary(result: TextCountResult) -> str:
    """The short four-line summary offered for copying."""
    return "\n".join([
        f"総文字数: {format_number(result.total_characters)}",
        f"行数: {format_number(result.lines)}",
        f"原稿用紙換算: {result.manuscript_pages} 枚",
        f"UTF-8: {format_number(result.bytes.utf8)} bytes",
    ])


class ExportService:
    """Counts text and renders it with the stored display preferences."""

    def __init__(self, settings: SettingsService) -> None:
        self._settings = settings

    async def report(self, text: str, options: CountOptions | None = None) -> str:
        stored = await self._settings.load_settings()
        result = count_text(text, options or stored.count_options())
        return format_count_report(result, display=stored.display_format)

    async def summary(self, text: str, options: CountOptions | None = None) -> str:
        if options is None:
            options = (await self._settings.load_settings()).count_options()
        return format_clipboard_summary(count_text(text, options))
