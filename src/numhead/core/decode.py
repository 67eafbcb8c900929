"""Decoding of numbering settings from frontmatter.

Two formats are understood. The compact format stores every setting in one
comma-separated value under the ``number headings`` key, e.g.::

    number headings: auto, first-level 2, max 4, contents Table of Contents, _.1.A-

Parts are classified by prefix in a fixed priority order; anything that is
not ``auto``, ``first-level N``, ``max N`` or ``contents TEXT`` is read as a
formatting descriptor ``[_.]STYLE1.STYLE2[SEP]``. Unrecognized or invalid
parts are ignored and leave the default in place.

The legacy format (one key per setting) is consulted only when the compact
key is missing, so that older documents keep working.
"""

import re
from typing import Any, Callable, Mapping, Optional

import structlog

from numhead.core.frontmatter import Frontmatter, frontmatter_entry
from numhead.core.models import (
    DEFAULT_SETTINGS,
    NumberingSettings,
    is_valid_contents,
    is_valid_first_or_max_level,
    is_valid_flag,
    is_valid_level_style,
    is_valid_separator,
)


log = structlog.get_logger()

SETTINGS_KEY = "number headings"

AUTO_PART_KEY = "auto"
FIRST_LEVEL_PART_KEY = "first-level"
MAX_LEVEL_PART_KEY = "max"
CONTENTS_PART_KEY = "contents"
SKIP_TOP_LEVEL_MARKER = "_"

LEGACY_SKIP_TOP_LEVEL_KEYS = ("number-headings-skip-top-level", "header-numbering-skip-top-level")
LEGACY_MAX_LEVEL_KEYS = ("number-headings-max-level", "header-numbering-max-level")
LEGACY_STYLE_LEVEL_1_KEYS = ("number-headings-style-level-1", "header-numbering-style-level-1")
LEGACY_STYLE_LEVEL_OTHER_KEYS = ("number-headings-style-level-other", "header-numbering-style-level-other")
LEGACY_AUTO_KEYS = ("number-headings-auto", "header-numbering-auto")

Updates = dict[str, Any]

_LEVEL_RE = re.compile(r"[0-9]+")


def _remainder(part: str, key: str) -> str:
    return part[len(key):].strip()


def _parse_level(part: str, key: str, field: str) -> Updates:
    digits = _remainder(part, key)
    if not _LEVEL_RE.fullmatch(digits):
        return {}
    n = int(digits)
    return {field: n} if is_valid_first_or_max_level(n) else {}


def _auto_part(part: str) -> Updates:
    return {"auto": True}


def _first_level_part(part: str) -> Updates:
    return _parse_level(part, FIRST_LEVEL_PART_KEY, "first_level")


def _max_level_part(part: str) -> Updates:
    return _parse_level(part, MAX_LEVEL_PART_KEY, "max_level")


def _contents_part(part: str) -> Updates:
    heading = _remainder(part, CONTENTS_PART_KEY)
    if heading and is_valid_contents(heading):
        return {"contents": heading}
    return {}


def _formatting_part(part: str) -> Updates:
    """Parse a ``[_.]STYLE1.STYLE2[SEP]`` descriptor."""
    updates: Updates = {}
    remaining = part
    if is_valid_separator(part[-1]):
        updates["separator"] = part[-1]
        remaining = part[:-1]

    descriptors = remaining.split(".")
    first = 0
    if len(descriptors) > 1 and descriptors[0] == SKIP_TOP_LEVEL_MARKER:
        updates["skip_top_level"] = True
        first = 1
    else:
        updates["skip_top_level"] = False

    if len(descriptors) - first >= 2:
        style_level_1, style_level_other = descriptors[first], descriptors[first + 1]
        if is_valid_level_style(style_level_1):
            updates["style_level_1"] = style_level_1
        if is_valid_level_style(style_level_other):
            updates["style_level_other"] = style_level_other
    return updates


def _keyword(key: str) -> Callable[[str], bool]:
    """Match the bare keyword or the keyword followed by a space and its argument."""
    return lambda p: p == key or p.startswith(key + " ")


# Evaluated in order; the formatting descriptor is the fallback for any other part.
PART_HANDLERS: tuple[tuple[Callable[[str], bool], Callable[[str], Updates]], ...] = (
    (lambda p: p == AUTO_PART_KEY,   _auto_part),
    (_keyword(FIRST_LEVEL_PART_KEY), _first_level_part),
    (_keyword(MAX_LEVEL_PART_KEY),   _max_level_part),
    (_keyword(CONTENTS_PART_KEY),    _contents_part),
    (lambda p: True,                 _formatting_part),
)


def _classify(part: str) -> Updates:
    for matches, handler in PART_HANDLERS:
        if matches(part):
            updates = handler(part)
            if not updates:
                log.debug("compact_part_ignored", part=part, handler=handler.__name__)
            return updates
    return {}


def parse_compact_value(value: Any) -> NumberingSettings:
    """Decode a compact settings value; parts not given keep DEFAULT_SETTINGS values."""
    fields: Updates = {}
    for raw in ("" if value is None else str(value)).split(","):
        part = raw.strip()
        if part:
            fields.update(_classify(part))
    return DEFAULT_SETTINGS.model_copy(update=fields)


def parse_compact_settings(entries: Mapping[str, Any]) -> Optional[NumberingSettings]:
    """Return settings from the compact key, or None when the key is absent.

    A present but empty value decodes to DEFAULT_SETTINGS.
    """
    if SETTINGS_KEY not in entries:
        return None
    return parse_compact_value(entries[SETTINGS_KEY])


def parse_legacy_settings(entries: Mapping[str, Any], alternative: NumberingSettings) -> NumberingSettings:
    """Decode the one-key-per-setting format predating the compact key.

    Invalid or missing keys fall back to ``alternative``; first level,
    contents and separator have no legacy key and come from DEFAULT_SETTINGS.
    """
    skip_top_level = frontmatter_entry(entries, *LEGACY_SKIP_TOP_LEVEL_KEYS)
    max_level = frontmatter_entry(entries, *LEGACY_MAX_LEVEL_KEYS)
    style_level_1 = frontmatter_entry(entries, *LEGACY_STYLE_LEVEL_1_KEYS)
    style_level_other = frontmatter_entry(entries, *LEGACY_STYLE_LEVEL_OTHER_KEYS)
    auto = frontmatter_entry(entries, *LEGACY_AUTO_KEYS)

    style_level_1 = None if style_level_1 is None else str(style_level_1)
    style_level_other = None if style_level_other is None else str(style_level_other)

    return DEFAULT_SETTINGS.model_copy(update={
        "skip_top_level":    skip_top_level if is_valid_flag(skip_top_level) else alternative.skip_top_level,
        "max_level":         max_level if is_valid_first_or_max_level(max_level) else alternative.max_level,
        "style_level_1":     style_level_1 if is_valid_level_style(style_level_1) else alternative.style_level_1,
        "style_level_other": style_level_other if is_valid_level_style(style_level_other) else alternative.style_level_other,
        "auto":              auto if is_valid_flag(auto) else alternative.auto,
    })


def get_frontmatter_settings_or_alternative(
    frontmatter: Optional[Frontmatter],
    alternative: NumberingSettings,
    ) -> NumberingSettings:
    """Resolve a document's effective settings.

    No frontmatter: ``alternative`` unchanged. Compact key present: the
    compact value alone decides. Otherwise the legacy keys, backed by
    ``alternative``.
    """
    if frontmatter is None:
        return alternative

    settings = parse_compact_settings(frontmatter.entries)
    if settings is not None:
        return settings

    log.debug("compact_key_absent", key=SETTINGS_KEY, fallback="legacy")
    return parse_legacy_settings(frontmatter.entries, alternative)
