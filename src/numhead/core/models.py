"""Numbering settings record, defaults, and field validity predicates"""

from typing import Annotated, Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator


LevelStyle = Literal["1", "A", "I"]             # arabic, letter, roman
Separator  = Literal["", ":", ".", "-", "—", ")"]
Level      = Annotated[int, Field(ge=1, le=6)]

MIN_LEVEL = 1
MAX_LEVEL = 6

LEVEL_STYLES: tuple[str, ...] = get_args(LevelStyle)
SEPARATORS: tuple[str, ...] = get_args(Separator)


def is_valid_flag(value: Any) -> bool:
    return isinstance(value, bool)


def is_valid_first_or_max_level(value: Any) -> bool:
    """True for an int heading depth in 1..6; bools are rejected."""
    return isinstance(value, int) and not isinstance(value, bool) and MIN_LEVEL <= value <= MAX_LEVEL


def is_valid_level_style(value: Any) -> bool:
    return isinstance(value, str) and value in LEVEL_STYLES


def is_valid_separator(value: Any) -> bool:
    return isinstance(value, str) and value in SEPARATORS


def is_valid_contents(value: Any) -> bool:
    """Empty (disabled) or printable single-line heading text that survives the compact format."""
    if not isinstance(value, str):
        return False
    if value == "":
        return True
    return value == value.strip() and value.isprintable() and "," not in value


class NumberingSettings(BaseModel):
    """Heading numbering settings for one document. Immutable; rebuilt on every decode."""
    model_config = ConfigDict(frozen=True)

    auto:              bool       = Field(default=False, description="Renumber automatically on edit")
    first_level:       Level      = Field(default=1, description="Topmost heading depth to number")
    max_level:         Level      = Field(default=6, description="Deepest heading depth to number")
    contents:          str        = Field(default="", description="Table of contents heading; empty disables")
    skip_top_level:    bool       = Field(default=False, description="Leave the first numbered level unnumbered")
    style_level_1:     LevelStyle = "1"
    style_level_other: LevelStyle = "1"
    separator:         Separator  = ""

    @field_validator("contents")
    @classmethod
    def _check_contents(cls, v: str) -> str:
        if not is_valid_contents(v):
            raise ValueError(f"invalid contents heading: {v!r}")
        return v


DEFAULT_SETTINGS = NumberingSettings()
