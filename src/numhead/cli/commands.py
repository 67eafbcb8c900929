"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, NoReturn, Optional

import structlog
import typer
from pydantic import ValidationError

from numhead.config import Settings, load_config
from numhead.core.decode import SETTINGS_KEY
from numhead.core.encode import settings_to_compact_value
from numhead.core.frontmatter import read_frontmatter
from numhead.core.headings import has_contents_heading, list_headings, numbered_headings
from numhead.core.pipeline import load_document, read_settings, update_settings, write_settings
from numhead.errors import NumHeadError
from numhead.log import configure_logging


log = structlog.get_logger()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", dir_okay=False, help="Config file (default: $NUMHEAD_CONFIG or ./numhead.yaml)"),
]


def _fail(msg: str, cause: Exception = None) -> NoReturn:
    """Report msg and the underlying error type on stderr, then exit 1."""
    log.debug("command_failed", reason=msg, error=repr(cause))
    typer.echo(f"Error: {msg}", err=True)
    if cause is not None:
        typer.echo(f"  {type(cause).__name__}: {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None, config_file: Optional[Path] = None) -> Settings:
    """Load config and set up logging; config errors end the command."""
    try:
        settings = load_config(overrides=overrides, config_file=config_file)
    except ValueError as e:
        _fail("Invalid configuration", e)
    configure_logging(settings.log_level, settings.log_format)
    return settings


def _body(text: str) -> str:
    """Markdown after the frontmatter block, if any."""
    fm = read_frontmatter(text)
    if fm is None:
        return text
    return "\n".join(text.split("\n")[fm.end_line + 1:])


def show_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Markdown file")],
    as_json: Annotated[bool, typer.Option("--json", help="Print settings as JSON")] = False,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    config: ConfigOption = None,
    ):
    """Print the effective heading numbering settings for a document."""
    settings = _settings(overrides={"parser_config": parser}, config_file=config)
    try:
        numbering = read_settings(path, settings.fallback())
        headings = list_headings(_body(load_document(path).text), settings.parser_config)
    except NumHeadError as e:
        _fail(f"Cannot read {path}", e)

    if as_json:
        typer.echo(numbering.model_dump_json(indent=2))
        return

    typer.echo(f"{SETTINGS_KEY}: {settings_to_compact_value(numbering)}")
    for name, value in numbering.model_dump().items():
        typer.echo(f"  {name}: {value!r}")
    typer.echo(f"Numbered headings: {len(numbered_headings(headings, numbering))}")
    if numbering.contents and not has_contents_heading(headings, numbering):
        typer.echo(f"Warning: contents heading '{numbering.contents}' not found", err=True)


def set_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, writable=True, help="Markdown file")],
    auto: Annotated[Optional[bool], typer.Option("--auto/--no-auto", help="Renumber automatically")] = None,
    first_level: Annotated[Optional[int], typer.Option("--first-level", help="Topmost heading depth to number")] = None,
    max_level: Annotated[Optional[int], typer.Option("--max-level", help="Deepest heading depth to number")] = None,
    contents: Annotated[Optional[str], typer.Option("--contents", help="Table of contents heading; '' disables")] = None,
    skip_top_level: Annotated[Optional[bool], typer.Option("--skip-top-level/--no-skip-top-level", help="Leave the first level unnumbered")] = None,
    style_level_1: Annotated[Optional[str], typer.Option("--style-level-1", help="Style of the first level: 1, A or I")] = None,
    style_level_other: Annotated[Optional[str], typer.Option("--style-level-other", help="Style of deeper levels: 1, A or I")] = None,
    separator: Annotated[Optional[str], typer.Option("--separator", help="Character after the number")] = None,
    config: ConfigOption = None,
    ):
    """Write heading numbering settings into a document's frontmatter.

    Options not given keep the document's effective value, so running with
    no options rewrites legacy keys into the compact form.
    """
    settings = _settings(config_file=config)
    try:
        current = read_settings(path, settings.fallback())
        numbering = update_settings(current, {
            "auto": auto, "first_level": first_level, "max_level": max_level,
            "contents": contents, "skip_top_level": skip_top_level,
            "style_level_1": style_level_1, "style_level_other": style_level_other,
            "separator": separator,
        })
    except ValidationError as e:
        _fail("Invalid settings", e)
    except NumHeadError as e:
        _fail(f"Cannot read {path}", e)

    try:
        value = write_settings(path, numbering)
    except NumHeadError as e:
        _fail(f"Cannot write {path}", e)
    typer.echo(f"Saved {path}: {SETTINGS_KEY}: {value}")
