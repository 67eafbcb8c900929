"""Frontmatter block discovery and entry lookup"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import yaml

from numhead.errors import FrontmatterError


DELIMITER = "---"


@dataclass
class Frontmatter:
    """Parsed YAML header plus the line span of its delimiters."""
    entries:    dict[str, Any] = field(default_factory=dict)
    start_line: int = 0         # opening '---'
    end_line:   int = 0         # closing '---'


def read_frontmatter(text: str) -> Optional[Frontmatter]:
    """Return the document's Frontmatter, or None when no block is present."""
    lines = text.split("\n")
    if not lines or lines[0].strip() != DELIMITER:
        return None

    end_idx = None
    for i in range(1, len(lines)):
        if lines[i].strip() == DELIMITER:
            end_idx = i
            break
    if end_idx is None:
        return None

    fm_text = "\n".join(lines[1:end_idx])
    try:
        entries = yaml.safe_load(fm_text) if fm_text.strip() else {}
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML frontmatter: {e}") from e
    if entries is None:
        entries = {}
    if not isinstance(entries, dict):
        raise FrontmatterError(f"Invalid YAML frontmatter: expected a mapping, got {type(entries).__name__}")
    return Frontmatter(entries=entries, start_line=0, end_line=end_idx)


def frontmatter_entry(entries: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-None value among keys (preferred spelling first), else None."""
    for key in keys:
        value = entries.get(key)
        if value is not None:
            return value
    return None
