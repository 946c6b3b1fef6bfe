"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docrepo.cli.commands import search_cmd, show_cmd


app = typer.Typer(name="docrepo", no_args_is_help=True, help="Search an in-memory document repository")

app.command(name="search")(search_cmd)
app.command(name="show")(show_cmd)
