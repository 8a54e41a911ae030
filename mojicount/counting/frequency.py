"""Character frequency tables."""

from collections import Counter

from mojicount.models import CharacterCount


def character_frequency(text: str) -> dict[str, int]:
    """Occurrences per character, newlines excluded.

    Keys appear in first-occurrence order, which ``top_characters`` relies on
    for its tie-break.
    """
    return dict(Counter(ch for ch in text if ch not in "\r\n"))


def top_characters(frequency: dict[str, int], n: int = 10) -> list[CharacterCount]:
    """The ``n`` most frequent characters, count descending.

    Equal counts keep the frequency table's order (first occurrence in the text).
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    ranked = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
    return [CharacterCount(char=char, count=count) for char, count in ranked[:n]]
