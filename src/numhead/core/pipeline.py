"""File-level operations: read effective settings, apply overrides, write back"""

from pathlib import Path
from typing import Any

import structlog

from numhead.core.decode import get_frontmatter_settings_or_alternative
from numhead.core.document import TextDocument
from numhead.core.encode import save_settings_to_frontmatter, settings_to_compact_value
from numhead.core.frontmatter import read_frontmatter
from numhead.core.models import NumberingSettings


log = structlog.get_logger()


def load_document(path: Path) -> TextDocument:
    """Read path as UTF-8 without newline translation so CRLF files keep their endings."""
    with path.open(encoding="utf-8", newline="") as f:
        return TextDocument(f.read())


def read_settings(path: Path, fallback: NumberingSettings) -> NumberingSettings:
    """Effective settings for the file at path; fallback applies when it has no frontmatter."""
    doc = load_document(path)
    return get_frontmatter_settings_or_alternative(read_frontmatter(doc.text), fallback)


def update_settings(current: NumberingSettings, overrides: dict[str, Any]) -> NumberingSettings:
    """Apply non-None overrides and re-validate. Raises pydantic ValidationError."""
    data = current.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    return NumberingSettings.model_validate(data)


def write_settings(path: Path, settings: NumberingSettings) -> str:
    """Splice settings into the file's frontmatter. Returns the compact value written."""
    doc = load_document(path)
    save_settings_to_frontmatter(read_frontmatter(doc.text), doc, settings)
    path.write_text(doc.text, encoding="utf-8", newline="")
    value = settings_to_compact_value(settings)
    log.info("settings_written", path=str(path), value=value)
    return value
