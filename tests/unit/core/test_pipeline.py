"""Unit tests for core/pipeline.py"""

import pytest
from pydantic import ValidationError

from numhead.core.models import DEFAULT_SETTINGS
from numhead.core.pipeline import read_settings, update_settings, write_settings


def test_read_settings_without_frontmatter_uses_fallback(tmp_path, alternative):
    f = tmp_path / "plain.md"
    f.write_text("# Hello\n")
    assert read_settings(f, alternative) == alternative


def test_read_settings_compact(tmp_path, compact_md, alternative):
    f = tmp_path / "doc.md"
    f.write_text(compact_md)
    settings = read_settings(f, alternative)
    assert settings.max_level == 4
    assert settings.separator == "-"


def test_write_settings_updates_file(tmp_path, no_key_md):
    """write_settings splices the key into the file and returns the value written."""
    f = tmp_path / "doc.md"
    f.write_text(no_key_md)
    settings = DEFAULT_SETTINGS.model_copy(update={"auto": True})
    value = write_settings(f, settings)
    assert value == "auto, first-level 1, max 6, 1.1"
    assert f.read_text().split("\n")[1] == f"number headings: {value}"
    assert read_settings(f, DEFAULT_SETTINGS) == settings


def test_write_settings_migrates_legacy(tmp_path, legacy_md):
    """Re-saving a legacy document stores the same settings under the compact key."""
    f = tmp_path / "legacy.md"
    f.write_text(legacy_md)
    settings = read_settings(f, DEFAULT_SETTINGS)
    write_settings(f, settings)
    assert "number headings: auto, first-level 1, max 3, _.A.I" in f.read_text()
    assert read_settings(f, DEFAULT_SETTINGS) == settings


def test_update_settings_skips_none():
    """None overrides keep current values; others replace them."""
    settings = update_settings(DEFAULT_SETTINGS, {"max_level": 3, "auto": None})
    assert settings.max_level == 3
    assert settings.auto is False


def test_update_settings_validates():
    with pytest.raises(ValidationError):
        update_settings(DEFAULT_SETTINGS, {"style_level_1": "Q"})


def test_write_settings_preserves_crlf(tmp_path, no_key_md):
    """A CRLF file stays CRLF throughout after the key is inserted and then replaced."""
    f = tmp_path / "doc.md"
    f.write_bytes(no_key_md.replace("\n", "\r\n").encode("utf-8"))
    write_settings(f, DEFAULT_SETTINGS)
    write_settings(f, DEFAULT_SETTINGS.model_copy(update={"max_level": 2}))
    raw = f.read_bytes().decode("utf-8")
    assert raw.count("\n") == raw.count("\r\n")
    assert raw.split("\r\n")[1] == "number headings: first-level 1, max 2, 1.1"
    assert read_settings(f, DEFAULT_SETTINGS).max_level == 2
