"""Application configuration: settings schema and numhead.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from numhead.core.models import Level, LevelStyle, NumberingSettings, Separator


CONFIG_FILE = "numhead.yaml"
CONFIG_ENV = "NUMHEAD_CONFIG"
ENV_PREFIX = "NUMHEAD_"


class Settings(BaseModel):
    app_name:      str = "numhead"
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")
    log_format:    str = Field(default="text", pattern="^(text|json)$", description="text or json")
    parser_config: str = Field(default="gfm-like", description="MarkdownIt parser preset name")

    # Fallback numbering for documents without frontmatter or legacy keys
    auto:              bool       = False
    first_level:       Level      = 1
    max_level:         Level      = 6
    contents:          str        = ""
    skip_top_level:    bool       = False
    style_level_1:     LevelStyle = "1"
    style_level_other: LevelStyle = "1"
    separator:         Separator  = ""

    def fallback(self) -> NumberingSettings:
        """Numbering settings used when a document does not define its own."""
        return NumberingSettings.model_validate(
            {name: getattr(self, name) for name in NumberingSettings.model_fields}
        )


def _config_path(config_file: Optional[Path]) -> Optional[Path]:
    """Explicit path first, then $NUMHEAD_CONFIG, then ./numhead.yaml if it exists.

    An explicitly named file must exist; the implicit one is optional.
    """
    named = config_file or (Path(os.environ[CONFIG_ENV]) if os.getenv(CONFIG_ENV) else None)
    if named is not None:
        if not named.is_file():
            raise ValueError(f"Config file not found: {named}")
        return named
    default = Path(CONFIG_FILE)
    return default if default.is_file() else None


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def load_config(overrides: dict[str, Any] = None, config_file: Optional[Path] = None) -> Settings:
    """Build Settings from the config file, NUMHEAD_<FIELD> env vars, then non-None CLI overrides.

    Later sources win. Raises ValueError for unreadable files or out-of-domain values.
    """
    path = _config_path(config_file)
    data = _read_yaml(path) if path else {}

    data.update({
        name: os.environ[ENV_PREFIX + name.upper()]
        for name in Settings.model_fields
        if os.getenv(ENV_PREFIX + name.upper())
    })
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings.model_validate(data)
