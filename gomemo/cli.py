"""Click-based command-line interface for go-memo."""

from __future__ import annotations

from typing import Any, Sequence

import click

from . import __version__
from .app import create_memo
from .config import ConfigError, Settings
from .editor import EditorError, open_editor
from .logging_config import setup_logging
from .storage import StorageError
from .template import TemplateError
from .validation import FilenameError

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class GoMemoCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("filename")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log each step to stderr.",
)
@click.version_option(__version__, prog_name="go-memo")
def cli(filename: str, verbose: bool) -> None:
    """Create memo FILENAME from the template and open it in $EDITOR."""

    setup_logging(verbose)
    settings = Settings.from_environ()

    try:
        path = create_memo(filename, settings)
    except FilenameError as exc:
        raise GoMemoCliError(f"Invalid filename: {exc}") from exc
    except (ConfigError, TemplateError, StorageError) as exc:
        raise GoMemoCliError(str(exc)) from exc

    click.echo(f"Created {path}")

    try:
        open_editor(path, settings.editor)
    except EditorError as exc:
        raise GoMemoCliError(str(exc)) from exc


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        return cli.main(args=args, prog_name="go-memo", standalone_mode=False) or 0
    except click.ClickException as exc:
        click.echo(f"Error: {exc.format_message()}", err=True)
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except SystemExit as exc:
        return int(exc.code or 0)
