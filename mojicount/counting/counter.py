"""Text counter: composes the normalizer, byte sizes, manuscript estimate and
frequency table into one TextCountResult.

Pure and synchronous. Every field is computed from the normalized text; the
original input is only consulted for the blank-input short-circuit.
"""

import logging
import time

from mojicount.counting.encoding import byte_sizes
from mojicount.counting.frequency import character_frequency
from mojicount.counting.manuscript import manuscript_pages
from mojicount.counting.normalizer import (
    count_characters,
    count_characters_no_newlines,
    count_excluding_spaces,
    count_lines,
    is_blank,
    normalize,
)
from mojicount.models import CountOptions, TextCountResult

logger = logging.getLogger(__name__)


def count_text(text: str, options: CountOptions) -> TextCountResult:
    """Count ``text`` under ``options``. Blank input gives the all-zero result."""
    if is_blank(text):
        return TextCountResult.empty()

    started = time.perf_counter()
    normalized = normalize(text, options.normalization)

    with_newlines = count_characters(normalized)
    without_newlines = count_characters_no_newlines(normalized)

    result = TextCountResult(
        total_characters=with_newlines if options.include_newlines else without_newlines,
        total_characters_no_newlines=without_newlines,
        characters_excluding_spaces=count_excluding_spaces(
            normalized,
            exclude_spaces=options.exclude_spaces,
            include_newlines=options.include_newlines,
        ),
        lines=count_lines(normalized),
        bytes=byte_sizes(normalized),
        manuscript_pages=manuscript_pages(normalized, options.use_manuscript_rules),
        character_frequency=character_frequency(normalized),
    )

    logger.debug(
        "Counted %d characters in %.1f ms",
        with_newlines,
        (time.perf_counter() - started) * 1000,
    )
    return result
