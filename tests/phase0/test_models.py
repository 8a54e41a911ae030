"""Contract tests for Pydantic models.

Verifies defaults, immutability of engine values, and validation of options.
"""

import pytest
from pydantic import ValidationError

from mojicount.models import (
    AppSettings,
    ByteSizes,
    CharacterCount,
    CountOptions,
    DisplayFormat,
    TextCountResult,
)


class TestCountOptions:
    def test_defaults(self):
        o = CountOptions()
        assert o.include_newlines is True
        assert o.exclude_spaces is False
        assert o.use_manuscript_rules is True
        assert o.normalization == "none"

    def test_frozen(self):
        o = CountOptions()
        with pytest.raises(ValidationError):
            o.include_newlines = False

    def test_unknown_normalization_rejected(self):
        with pytest.raises(ValidationError):
            CountOptions(normalization="NFD")

    def test_roundtrip(self):
        o = CountOptions(exclude_spaces=True, normalization="NFKC")
        assert CountOptions.model_validate(o.model_dump()) == o


class TestTextCountResult:
    def test_empty_is_all_zero(self):
        r = TextCountResult.empty()
        assert r.total_characters == 0
        assert r.total_characters_no_newlines == 0
        assert r.characters_excluding_spaces == 0
        assert r.lines == 0
        assert r.bytes == ByteSizes()
        assert r.manuscript_pages == 0.0
        assert r.character_frequency == {}

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            ByteSizes(utf8=-1)

    def test_serializes_bytes_field(self):
        data = TextCountResult.empty().model_dump()
        assert set(data["bytes"]) == {
            "utf8", "utf16le", "utf16be", "shift_jis", "euc_jp", "iso2022_jp",
        }


class TestAppSettings:
    def test_defaults(self):
        s = AppSettings()
        assert s.realtime_mode is True
        assert s.auto_save is True
        assert s.show_character_frequency is False
        assert s.debounce_delay == 300
        assert s.display_format == DisplayFormat()

    def test_count_options_projection(self):
        s = AppSettings(exclude_spaces=True, normalization="NFC", realtime_mode=False)
        assert s.count_options() == CountOptions(exclude_spaces=True, normalization="NFC")

    def test_negative_debounce_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(debounce_delay=-5)


def test_character_count():
    c = CharacterCount(char="あ", count=3)
    assert c.model_dump() == {"char": "あ", "count": 3}
