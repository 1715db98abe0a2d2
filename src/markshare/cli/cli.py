"""CLI entrypoint: Typer app definition and command registration"""

import typer

from markshare.cli.commands import conversation_cmd, paste_cmd, render_cmd, themes_cmd


app = typer.Typer(name="markshare", no_args_is_help=True, help="Render markdown to themed HTML and convert pasted rich text")

app.command(name="render")(render_cmd)
app.command(name="conversation")(conversation_cmd)
app.command(name="paste")(paste_cmd)
app.command(name="themes")(themes_cmd)
