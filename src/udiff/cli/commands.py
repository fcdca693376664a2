"""CLI command implementations"""

from typing import Annotated

import typer

from udiff.config import Settings, load_config
from udiff.core.pipeline import run_apply, run_diff, run_render, run_script
from udiff.core.utils.log import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings() -> Settings:
    """Load config with standard CLI error handling and set up logging."""
    try:
        settings = load_config()
    except ValueError as e:
        _fail("Invalid configuration", e)
    configure_logging(settings.log_level)
    return settings


def diff_cmd(
    source: Annotated[str, typer.Argument(help="Source (old) file")],
    target: Annotated[str, typer.Argument(help="Target (new) file")],
    ):
    """Print the unified diff turning SOURCE into TARGET."""
    settings = _settings()
    try:
        diff = run_diff(source, target, settings)
    except RuntimeError as e:
        _fail(str(e))
    except ValueError as e:
        _fail("Diff failed", e)
    typer.echo(diff, nl=False)


def script_cmd(
    source: Annotated[str, typer.Argument(help="Source (old) file")],
    target: Annotated[str, typer.Argument(help="Target (new) file")],
    ):
    """Print the line-level edit script for SOURCE -> TARGET as JSON."""
    settings = _settings()
    try:
        script = run_script(source, target, settings)
    except RuntimeError as e:
        _fail(str(e))
    except ValueError as e:
        _fail("Script failed", e)
    typer.echo(script.model_dump_json(indent=2))


def render_cmd(
    source: Annotated[str, typer.Argument(help="Source (old) file")],
    target: Annotated[str, typer.Argument(help="Target (new) file")],
    script: Annotated[str, typer.Argument(help="JSON edit script produced by 'udiff-tools script'")],
    ):
    """Render a unified diff from a precomputed edit script."""
    settings = _settings()
    try:
        diff = run_render(source, target, script, settings)
    except RuntimeError as e:
        _fail(str(e))
    except ValueError as e:
        _fail("Render failed", e)
    typer.echo(diff, nl=False)


def apply_cmd(
    source: Annotated[str, typer.Argument(help="File to patch")],
    patch: Annotated[str, typer.Argument(help="Unified diff to apply")],
    ):
    """Apply a single-file unified diff to SOURCE and print the result."""
    settings = _settings()
    try:
        patched = run_apply(source, patch, settings)
    except RuntimeError as e:
        _fail(str(e))
    except ValueError as e:
        _fail("Patch failed", e)
    typer.echo(patched, nl=False)
