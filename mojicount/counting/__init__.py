"""Counting engine: normalization, byte sizes, manuscript pages, frequencies."""

from mojicount.counting.coalescer import Coalescer
from mojicount.counting.counter import count_text
from mojicount.counting.encoding import byte_sizes
from mojicount.counting.frequency import character_frequency, top_characters
from mojicount.counting.manuscript import manuscript_pages
from mojicount.counting.normalizer import normalize

__all__ = [
    "Coalescer",
    "byte_sizes",
    "character_frequency",
    "count_text",
    "manuscript_pages",
    "normalize",
    "top_characters",
]
