"""Pipeline step functions: read inputs, diff, render, and apply"""

from pathlib import Path

from udiff.config import Settings
from udiff.core.engine import get_engine
from udiff.core.format import build_diff, format_unified_diff
from udiff.core.models import EditScript, TextFile
from udiff.core.patch import apply_patch, parse_patch
from udiff.core.utils.fs import read_text_file
from udiff.core.utils.log import get_logger

logger = get_logger("pipeline")


def _read(path: str, encoding: str) -> TextFile:
    """Read path, wrapping I/O and decoding failures in RuntimeError."""
    try:
        return read_text_file(path, encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e


def run_diff(source_path: str, target_path: str, settings: Settings) -> str:
    """Read both files and return their unified diff (header only when the engine is 'none')."""
    source = _read(source_path, settings.encoding)
    target = _read(target_path, settings.encoding)
    logger.debug("Diffing %s against %s with engine '%s'", source_path, target_path, settings.engine)
    return build_diff(source, target, get_engine(settings.engine), settings.validate_edit_script)


def run_script(source_path: str, target_path: str, settings: Settings) -> EditScript:
    """Return the configured engine's edit script for the two files.

    Raises ValueError when the engine is 'none', which produces no edit script.
    """
    engine = get_engine(settings.engine)
    if engine is None:
        raise ValueError(f"Engine '{settings.engine}' does not produce an edit script")
    source = _read(source_path, settings.encoding)
    target = _read(target_path, settings.encoding)
    return EditScript(operations=engine.diff(source.content, target.content))


def run_render(source_path: str, target_path: str, script_path: str, settings: Settings) -> str:
    """Format a unified diff from an edit script stored as JSON at script_path."""
    source = _read(source_path, settings.encoding)
    target = _read(target_path, settings.encoding)
    try:
        script = EditScript.model_validate_json(Path(script_path).read_text(encoding="utf-8"))
    except OSError as e:
        raise RuntimeError(f"Failed to read {script_path}: {e}") from e
    logger.debug("Rendering %d operations from %s", len(script.operations), script_path)
    return format_unified_diff(source, target, script.operations, settings.validate_edit_script)


def run_apply(source_path: str, patch_path: str, settings: Settings) -> str:
    """Apply the unified diff at patch_path to the source file and return the patched text."""
    source = _read(source_path, settings.encoding)
    patch = parse_patch(_read(patch_path, settings.encoding).content)
    logger.debug("Applying %d hunk(s) from %s to %s", len(patch.hunks), patch_path, source_path)
    return apply_patch(source.content, patch)
