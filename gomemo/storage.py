"""Writing rendered memos to the memo directory."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from .template import Memo, MemoTemplate


class StorageError(RuntimeError):
    """Raised when a memo file cannot be written."""


class FileAlreadyExistsError(StorageError):
    """Raised when the target memo file already exists."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"File already exists: {path}")
        self.path = path


class FileCreationError(StorageError):
    """Raised when creating or writing the memo file fails."""


def create_memo_file(
    memo_dir: Path, filename: str, memo: Memo, template: MemoTemplate
) -> Path:
    """Render ``template`` into ``memo_dir / filename`` and return its absolute path.

    The file is opened in exclusive-create mode, so an existing file is never
    overwritten. A failure while writing may leave a truncated file behind.
    """

    target = memo_dir / filename
    if target.exists():
        raise FileAlreadyExistsError(target)

    content = template.render(memo)
    try:
        with target.open("x", encoding="utf-8") as fh:
            fh.write(content)
    except FileExistsError as exc:
        raise FileAlreadyExistsError(target) from exc
    except (OSError, ValueError) as exc:
        raise FileCreationError(f"Could not create {target}: {exc}") from exc

    path = target.resolve()
    logger.debug("Wrote {} bytes to {}", len(content.encode("utf-8")), path)
    return path
