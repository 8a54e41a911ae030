"""Unicode normalization and the line/character counts built on it.

Python str iterates by code point, so a character outside the BMP is already
one unit here. The only wrinkle is text that arrived with a surrogate pair
split into two code points (e.g. decoded with ``surrogatepass``); those pairs
are joined back into a single scalar value before anything is counted.
"""

import re
import unicodedata

from mojicount.models import Normalization

NEWLINES = "\r\n"
SPACES = " \t\u3000"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_NEWLINE_CHARS = re.compile(r"[\r\n]")
_SPACE_CHARS = re.compile(r"[ \t\u3000]")
_SURROGATE_PAIR = re.compile(r"[\ud800-\udbff][\udc00-\udfff]")


def _join_pair(match: re.Match[str]) -> str:
    high, low = match.group()
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))


def join_surrogates(text: str) -> str:
    """Collapse well-formed surrogate pairs into scalar values; leave lone ones."""
    return _SURROGATE_PAIR.sub(_join_pair, text)


def normalize(text: str, form: Normalization) -> str:
    """Apply NFC or NFKC. ``"none"`` only rejoins split surrogate pairs."""
    text = join_surrogates(text)
    if form == "none":
        return text
    return unicodedata.normalize(form, text)


def strip_newlines(text: str) -> str:
    return _NEWLINE_CHARS.sub("", text)


def strip_spaces(text: str) -> str:
    """Remove ASCII space, tab, and the ideographic space U+3000."""
    return _SPACE_CHARS.sub("", text)


def count_characters(text: str) -> int:
    return len(text)


def count_characters_no_newlines(text: str) -> int:
    return len(strip_newlines(text))


def count_lines(text: str) -> int:
    """Count non-empty segments between line breaks.

    CRLF is a single delimiter. Empty segments (trailing newline, blank lines)
    are not counted, so ``"a\\n"`` is one line and ``"a\\n\\nb"`` is two.
    """
    if not text:
        return 0
    return sum(1 for segment in _LINE_BREAK.split(text) if segment)


def count_excluding_spaces(
    text: str,
    *,
    exclude_spaces: bool,
    include_newlines: bool,
) -> int:
    """Character count after removing spaces, under the total's newline policy."""
    base = text if include_newlines else strip_newlines(text)
    if exclude_spaces:
        base = strip_spaces(base)
    return len(base)


def is_blank(text: str) -> bool:
    return not text.strip()
