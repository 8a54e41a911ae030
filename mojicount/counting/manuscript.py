"""Manuscript page (原稿用紙) estimate.

A page is 400 squares. With rules enabled each character is looked up in
MANUSCRIPT_WEIGHTS; anything not listed takes one square regardless of width.
Newlines never occupy a square.
"""

from decimal import ROUND_HALF_UP, Decimal

from mojicount.counting.normalizer import count_characters_no_newlines

CHARS_PER_PAGE = 400
DEFAULT_WEIGHT = 1

DOUBLE_DASH = "\u2500\u2500"

MANUSCRIPT_WEIGHTS: dict[str, int] = {
    # Punctuation
    "、": 1, "。": 1, "，": 1, "．": 1,
    # Brackets and quotation marks
    "「": 1, "」": 1, "『": 1, "』": 1,
    "〈": 1, "〉": 1, "（": 1, "）": 1,
    "【": 1, "】": 1, "［": 1, "］": 1,
    "｛": 1, "｝": 1, "＜": 1, "＞": 1,
    # Ellipsis and dashes take two squares
    "…": 2, "―": 2, "‥": 2, DOUBLE_DASH: 2,
    # Small kana
    "っ": 1, "ゃ": 1, "ゅ": 1, "ょ": 1,
    "ァ": 1, "ィ": 1, "ゥ": 1, "ェ": 1, "ォ": 1,
    "ャ": 1, "ュ": 1, "ョ": 1,
}


def round_pages(value: Decimal | float) -> float:
    """Round half-up to two decimal places."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def manuscript_weight(text: str) -> int:
    """Total squares occupied by ``text`` under the weighting rules."""
    total = 0
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in "\r\n":
            i += 1
            continue
        if text.startswith(DOUBLE_DASH, i):
            total += MANUSCRIPT_WEIGHTS[DOUBLE_DASH]
            i += len(DOUBLE_DASH)
            continue
        total += MANUSCRIPT_WEIGHTS.get(ch, DEFAULT_WEIGHT)
        i += 1
    return total


def manuscript_pages(text: str, use_rules: bool) -> float:
    if use_rules:
        squares = manuscript_weight(text)
    else:
        squares = count_characters_no_newlines(text)
    return round_pages(Decimal(squares) / Decimal(CHARS_PER_PAGE))
