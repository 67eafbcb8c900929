"""Shared fixtures for core unit tests"""

import pytest

from numhead.core.models import NumberingSettings


COMPACT_MD = """\
---
title: Notes
number headings: auto, first-level 2, max 4, contents Table of Contents, _.1.A-
tags: [a, b]
---

# Notes

## Table of Contents

## Intro

### Detail
"""

NO_KEY_MD = """\
---
title: Notes
tags: [a, b]
---

# Notes
"""

LEGACY_MD = """\
---
number-headings-auto: true
header-numbering-max-level: 3
number-headings-style-level-1: A
number-headings-style-level-other: I
number-headings-skip-top-level: true
---

# Notes
"""


@pytest.fixture(name="compact_md")
def compact_md_fixture():
    return COMPACT_MD


@pytest.fixture(name="no_key_md")
def no_key_md_fixture():
    return NO_KEY_MD


@pytest.fixture(name="legacy_md")
def legacy_md_fixture():
    return LEGACY_MD


@pytest.fixture(name="alternative")
def alternative_fixture():
    """Caller-supplied fallback that differs from DEFAULT_SETTINGS in every field."""
    return NumberingSettings(
        auto=True, first_level=3, max_level=5, contents="Index",
        skip_top_level=True, style_level_1="I", style_level_other="A", separator=":",
    )
