"""Heading inventory of a markdown body via markdown-it tokens"""

from dataclasses import dataclass

from markdown_it import MarkdownIt

from numhead.core.models import NumberingSettings


@dataclass(frozen=True)
class Heading:
    level: int
    text:  str
    line:  int      # 1-based source line


def _make_parser(preset: str) -> MarkdownIt:
    return MarkdownIt(preset, options_update={"linkify": False})


def _heading_level(token) -> int | None:
    """Extract heading level (1-6) from a heading_open token tag, else None."""
    if token.type == "heading_open" and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None


def list_headings(markdown: str, preset: str = "gfm-like") -> list[Heading]:
    """Return ATX and setext headings in document order; fenced code is skipped by the parser."""
    tokens = _make_parser(preset).parse(markdown)
    headings: list[Heading] = []
    for i, tok in enumerate(tokens):
        level = _heading_level(tok)
        if level is None or i + 1 >= len(tokens):
            continue
        line = tok.map[0] + 1 if tok.map else 0
        headings.append(Heading(level=level, text=tokens[i + 1].content.strip(), line=line))
    return headings


def numbered_headings(headings: list[Heading], settings: NumberingSettings) -> list[Heading]:
    """Headings whose depth falls within first_level..max_level, excluding the contents heading."""
    return [
        h for h in headings
        if settings.first_level <= h.level <= settings.max_level
        and not (settings.contents and h.text == settings.contents)
    ]


def has_contents_heading(headings: list[Heading], settings: NumberingSettings) -> bool:
    return bool(settings.contents) and any(h.text == settings.contents for h in headings)
