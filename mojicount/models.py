"""Canonical data structures for mojicount.

Defined once here, referenced everywhere else. CountOptions and
TextCountResult are the engine boundary; AppSettings is the persisted
superset that the settings layer stores and the API falls back to.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Normalization = Literal["none", "NFC", "NFKC"]

# ---------------------------------------------------------------------------
# Engine boundary
# ---------------------------------------------------------------------------


class CountOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    include_newlines: bool = True
    exclude_spaces: bool = False
    use_manuscript_rules: bool = True
    normalization: Normalization = "none"


class ByteSizes(BaseModel):
    model_config = ConfigDict(frozen=True)

    utf8: int = Field(0, ge=0)
    utf16le: int = Field(0, ge=0)
    utf16be: int = Field(0, ge=0)
    shift_jis: int = Field(0, ge=0)
    euc_jp: int = Field(0, ge=0)
    iso2022_jp: int = Field(0, ge=0)


class TextCountResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_characters: int = Field(ge=0)
    total_characters_no_newlines: int = Field(ge=0)
    characters_excluding_spaces: int = Field(ge=0)
    lines: int = Field(ge=0)
    bytes: ByteSizes
    manuscript_pages: float = Field(ge=0)
    # Key order is first occurrence in the text
    character_frequency: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def empty(cls) -> "TextCountResult":
        """The all-zero result returned for blank input."""
        return cls(
            total_characters=0,
            total_characters_no_newlines=0,
            characters_excluding_spaces=0,
            lines=0,
            bytes=ByteSizes(),
            manuscript_pages=0.0,
            character_frequency={},
        )


class CharacterCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    char: str
    count: int


# ---------------------------------------------------------------------------
# Persisted settings
# ---------------------------------------------------------------------------


class DisplayFormat(BaseModel):
    use_thousands_separator: bool = True
    show_units: bool = True


class AppSettings(CountOptions):
    """Everything the client remembers between sessions.

    Extends CountOptions so a stored settings record can be handed to the
    engine after projecting away the display-only fields.
    """

    model_config = ConfigDict(frozen=False)

    realtime_mode: bool = True
    auto_save: bool = True
    show_character_frequency: bool = False
    debounce_delay: int = Field(300, ge=0)  # milliseconds
    display_format: DisplayFormat = Field(default_factory=DisplayFormat)

    def count_options(self) -> CountOptions:
        return CountOptions(
            include_newlines=self.include_newlines,
            exclude_spaces=self.exclude_spaces,
            use_manuscript_rules=self.use_manuscript_rules,
            normalization=self.normalization,
        )
