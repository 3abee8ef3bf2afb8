"""go-memo: create date-stamped memo files and open them in your editor."""

__version__ = "0.1.0"
