"""Launching the user's editor on a memo file."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path

from loguru import logger


class EditorError(RuntimeError):
    """Base error for editor integration."""


class EditorNotConfiguredError(EditorError):
    """Raised when no editor command is configured."""

    def __init__(self) -> None:
        super().__init__("EDITOR is not set. Export EDITOR (e.g. 'vim') and retry.")


class EditorLaunchError(EditorError):
    """Raised when the editor process cannot be started."""


def editor_command(editor: str, path: Path) -> list[str]:
    """Split ``editor`` with shell quoting rules and append ``path``."""

    try:
        parts = shlex.split(editor)
    except ValueError as exc:
        raise EditorLaunchError(f"Cannot parse EDITOR {editor!r}: {exc}") from exc
    if not parts:
        raise EditorNotConfiguredError()
    return [*parts, str(path)]


def open_editor(path: Path, editor: str | None) -> int:
    """Run ``editor`` on ``path`` in the foreground and return its exit status.

    The child shares the current terminal. A non-zero exit status is logged
    but not treated as a failure.
    """

    if editor is None or not editor.strip():
        raise EditorNotConfiguredError()

    command = editor_command(editor, path)
    logger.debug("Launching editor: {}", command)
    try:
        process = subprocess.run(command, check=False)
    except OSError as exc:
        raise EditorLaunchError(f"Failed to launch editor '{command[0]}': {exc}") from exc

    if process.returncode != 0:
        logger.warning("Editor exited with status {}", process.returncode)
    return process.returncode
