"""Memo creation pipeline for go-memo."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from loguru import logger

from .config import Settings, locate_paths
from .storage import create_memo_file
from .template import Memo, resolve_template
from .utils.datetime_fmt import now_memo_timestamp, to_memo_timestamp
from .validation import validate_filename


def create_memo(
    filename: str, settings: Settings, *, now: datetime | None = None
) -> Path:
    """Validate ``filename``, render the template and write the new memo.

    Returns the absolute path of the created file. Each stage raises its own
    error type and nothing is rolled back.
    """

    validate_filename(filename)

    paths = locate_paths(settings)
    logger.debug("Config dir {}, memo dir {}", paths.config_dir, paths.memo_dir)

    template = resolve_template(paths.config_dir)

    date = to_memo_timestamp(now) if now is not None else now_memo_timestamp()
    memo = Memo(filename=filename, date=date)
    return create_memo_file(paths.memo_dir, filename, memo, template)
