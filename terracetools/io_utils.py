"""Small input/output helpers."""

from __future__ import annotations

from typing import Any, Iterable, Sequence


class FileOpenError(OSError):
    """Raised when a file cannot be opened."""


def comma_separated(data: Iterable[Any], names: Sequence[str] | None = None) -> str:
    """Join the elements of ``data`` with commas, looking each up in ``names`` if given."""
    if names is None:
        return ",".join(str(el) for el in data)
    return ",".join(str(names[el]) for el in data)


def read_file_full(filename: str) -> str:
    """Return the whole content of a text file."""
    try:
        with open(filename, encoding="utf-8", newline="") as stream:
            return stream.read()
    except OSError as exc:
        raise FileOpenError(f"failed to open {filename}") from exc