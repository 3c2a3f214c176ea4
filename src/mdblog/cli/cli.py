"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdblog.cli.commands import build_cmd, list_cmd, rss_cmd, show_cmd


app = typer.Typer(name="mdblog", no_args_is_help=True, help="Markdown blog content parser and static exporter")

app.command(name="build")(build_cmd)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="rss")(rss_cmd)
