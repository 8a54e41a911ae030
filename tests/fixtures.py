"""Shared test helpers."""

from typing import Any

from httpx import AsyncClient

from mojicount.models import CountOptions

# Texts covering ASCII, kana, kanji, astral characters, mixed newlines
SAMPLE_TEXTS = [
    "hello world",
    "a\nb\n",
    "吾輩は猫である。\r\n名前はまだ無い。",
    "「こんにちは」……と彼は言った。\r\r",
    "😀 emoji 🍣\n寿司",
    "  全角\u3000空白\t  ",
    "ｶﾞｷﾞ①②ｱｲｳ",
    "e\u0301cole",
]


def make_options(**overrides: Any) -> CountOptions:
    """CountOptions with the documented defaults, selectively overridden."""
    return CountOptions(**overrides)


async def count_via_api(
    client: AsyncClient,
    text: str,
    top_n: int = 10,
    **options: Any,
) -> dict:
    """POST /api/count and return the decoded body. Asserts 200."""
    body: dict[str, Any] = {"text": text, "top_n": top_n}
    if options:
        body["options"] = options
    resp = await client.post("/api/count", json=body)
    assert resp.status_code == 200, resp.text
    return resp.json()
