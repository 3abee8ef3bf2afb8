"""Filename checks applied before a memo is written."""

from __future__ import annotations

MAX_NAME_BYTES = 30
INVALID_CHARACTERS = frozenset('\\/:*?"<>|')


class FilenameError(ValueError):
    """Base error for rejected memo filenames."""


class EmptyNameError(FilenameError):
    """Raised when the filename is empty or only whitespace."""

    def __init__(self) -> None:
        super().__init__("Filename must not be empty.")


class NameTooLongError(FilenameError):
    """Raised when the filename exceeds ``MAX_NAME_BYTES``."""

    def __init__(self, name: str, length: int) -> None:
        super().__init__(
            f"Filename '{name}' is too long ({length} bytes, max {MAX_NAME_BYTES})."
        )
        self.name = name
        self.length = length


class InvalidCharacterError(FilenameError):
    """Raised when the filename contains a character unsafe for file paths."""

    def __init__(self, name: str, character: str) -> None:
        super().__init__(f"Filename '{name}' contains invalid character '{character}'.")
        self.name = name
        self.character = character


def validate_filename(name: str) -> None:
    """Validate ``name`` as a memo filename.

    Checks run in order (empty, length, characters) and the first failure is
    raised. Length is measured in UTF-8 bytes.

    Raises
    ------
    EmptyNameError
        If ``name`` is empty once surrounding whitespace is stripped.
    NameTooLongError
        If ``name`` is longer than ``MAX_NAME_BYTES`` bytes.
    InvalidCharacterError
        If ``name`` contains one of ``\\ / : * ? " < > |``.
    """

    if not name.strip():
        raise EmptyNameError()

    length = len(name.encode("utf-8"))
    if length > MAX_NAME_BYTES:
        raise NameTooLongError(name, length)

    for character in name:
        if character in INVALID_CHARACTERS:
            raise InvalidCharacterError(name, character)
