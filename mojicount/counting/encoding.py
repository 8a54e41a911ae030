"""Byte-size calculation under UTF-8, UTF-16 and the legacy Japanese encodings.

UTF sizes are arithmetic over code points and cannot fail. The legacy sizes
delegate to Python's bundled CJK codecs, which carry the JIS X 0201/0208
mapping tables. ISO-2022-JP uses the ``_ext`` variant so half-width katakana
are written after ``ESC ( I`` instead of being dropped. Shift_JIS has no CP932
vendor rows, so ``～``, ``－`` and ``①`` are unmappable there.
Characters with no mapping are dropped by the ``ignore`` error handler and so
contribute 0 bytes.
"""

import logging

from mojicount.models import ByteSizes

logger = logging.getLogger(__name__)

# Result field -> codec name
LEGACY_CODECS: dict[str, str] = {
    "shift_jis": "shift_jis",
    "euc_jp": "euc_jp",
    "iso2022_jp": "iso2022_jp_ext",
}


def utf8_length(text: str) -> int:
    """UTF-8 byte length. A lone surrogate counts as its U+FFFD replacement."""
    total = 0
    for ch in text:
        cp = ord(ch)
        if cp < 0x80:
            total += 1
        elif cp < 0x800:
            total += 2
        elif cp < 0x10000:
            total += 3
        else:
            total += 4
    return total


def utf16_length(text: str) -> int:
    """UTF-16 byte length for either byte order."""
    units = sum(2 if ord(ch) > 0xFFFF else 1 for ch in text)
    return units * 2


def encoded_length(text: str, codec: str) -> int:
    """Bytes needed for ``text`` in ``codec``, skipping unmappable characters.

    For stateful encodings such as ISO-2022-JP this includes the escape
    sequences emitted at every charset switch and the final return to ASCII.
    """
    return len(text.encode(codec, errors="ignore"))


def legacy_byte_sizes(
    text: str,
    codecs: dict[str, str] | None = None,
) -> dict[str, int]:
    """Byte sizes for each legacy encoding, all zero if conversion fails."""
    codecs = codecs if codecs is not None else LEGACY_CODECS
    try:
        return {field: encoded_length(text, codec) for field, codec in codecs.items()}
    except (LookupError, UnicodeError, ValueError) as e:
        logger.warning("Legacy encoding size calculation failed: %s", e)
        return {field: 0 for field in codecs}


def byte_sizes(text: str, codecs: dict[str, str] | None = None) -> ByteSizes:
    utf16 = utf16_length(text)
    legacy = legacy_byte_sizes(text, codecs)
    return ByteSizes(
        utf8=utf8_length(text),
        utf16le=utf16,
        utf16be=utf16,
        shift_jis=legacy.get("shift_jis", 0),
        euc_jp=legacy.get("euc_jp", 0),
        iso2022_jp=legacy.get("iso2022_jp", 0),
    )
