"""CLI entrypoint: Typer app definition and command registration"""

import typer

from numhead.cli.commands import set_cmd, show_cmd


app = typer.Typer(name="numhead", no_args_is_help=True, help="Heading numbering settings stored in markdown frontmatter")

app.command(name="show")(show_cmd)
app.command(name="set")(set_cmd)
