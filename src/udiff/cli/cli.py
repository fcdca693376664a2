"""CLI entrypoints: the two-argument diff app and the edit-script tools app"""

import typer

from udiff.cli.commands import apply_cmd, diff_cmd, render_cmd, script_cmd


# A Typer app with a single command runs it directly: `udiff SOURCE TARGET`.
app = typer.Typer(name="udiff", no_args_is_help=True, help="Print the unified diff turning SOURCE into TARGET")
app.command()(diff_cmd)

tools_app = typer.Typer(name="udiff-tools", no_args_is_help=True, help="Edit-script and patch tools for udiff")
tools_app.command(name="script")(script_cmd)
tools_app.command(name="render")(render_cmd)
tools_app.command(name="apply")(apply_cmd)
