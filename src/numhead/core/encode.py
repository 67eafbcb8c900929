"""Encoding of numbering settings into the compact frontmatter value"""

from typing import Optional

import structlog
import yaml

from numhead.core.decode import SETTINGS_KEY, SKIP_TOP_LEVEL_MARKER
from numhead.core.document import Document, Position
from numhead.core.frontmatter import DELIMITER, Frontmatter
from numhead.core.models import NumberingSettings
from numhead.errors import SettingsKeyNotFoundError


log = structlog.get_logger()


def settings_to_compact_value(settings: NumberingSettings) -> str:
    """Serialize settings; optional parts carry their own trailing ', '."""
    auto_part = "auto, " if settings.auto else ""
    first_level_part = f"first-level {settings.first_level}, "
    max_part = f"max {settings.max_level}, "
    contents_part = f"contents {settings.contents}, " if settings.contents else ""
    skip_part = f"{SKIP_TOP_LEVEL_MARKER}." if settings.skip_top_level else ""
    style_part = f"{skip_part}{settings.style_level_1}.{settings.style_level_other}{settings.separator}"
    return auto_part + first_level_part + max_part + contents_part + style_part


def settings_to_frontmatter_line(settings: NumberingSettings) -> str:
    """Render the `number headings: ...` line, quoting the value only when YAML needs it."""
    return yaml.safe_dump(
        {SETTINGS_KEY: settings_to_compact_value(settings)},
        sort_keys=False, allow_unicode=True, width=float("inf"),
    )


def _find_line_starting_with(document: Document, search: str, start: int, end: int) -> Optional[int]:
    for i in range(start, min(end, document.last_line()) + 1):
        if document.get_line(i).startswith(search):
            return i
    return None


def save_settings_to_frontmatter(
    frontmatter: Optional[Frontmatter],
    document: Document,
    settings: NumberingSettings,
    ) -> None:
    """Store settings under the compact key, replacing, inserting, or creating the block."""
    line = settings_to_frontmatter_line(settings)

    if frontmatter is None:
        origin = Position(0, 0)
        document.replace_range(f"{DELIMITER}\n{line}{DELIMITER}\n\n", origin, origin)
        log.info("frontmatter_created", key=SETTINGS_KEY)
        return

    if SETTINGS_KEY in frontmatter.entries:
        key_line = _find_line_starting_with(document, SETTINGS_KEY, frontmatter.start_line, frontmatter.end_line)
        if key_line is None:
            raise SettingsKeyNotFoundError(SETTINGS_KEY, frontmatter.start_line)
        document.replace_range(line, Position(key_line, 0), Position(key_line + 1, 0))
        log.info("frontmatter_key_replaced", key=SETTINGS_KEY, line=key_line)
    else:
        insert_at = Position(frontmatter.start_line + 1, 0)
        document.replace_range(line, insert_at, insert_at)
        log.info("frontmatter_key_inserted", key=SETTINGS_KEY, line=insert_at.line)
