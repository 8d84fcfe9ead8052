"""Reading map files: line-by-line input, splitting into rows, extension check."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import IO, AnyStr

BUFFER_SIZE = 5
"""Default number of characters read from a stream at a time."""

MAP_EXTENSION = "ber"


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each with its trailing newline if it had one.

    The stream is read ``buffer_size`` units at a time; it may be opened in
    text or binary mode. A final line without a newline is yielded as is;
    an empty remainder is not.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    return _iter_lines(stream, buffer_size)


def _iter_lines(stream: IO[AnyStr], buffer_size: int) -> Iterator[AnyStr]:
    pending = None
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        pending = chunk if pending is None else pending + chunk
        newline = b"\n" if isinstance(pending, bytes) else "\n"
        while (index := pending.find(newline)) != -1:
            yield pending[: index + 1]
            pending = pending[index + 1 :]
    if pending:
        yield pending


def parse_map(text: str) -> list[str]:
    """Split map text into rows, dropping empty lines."""
    return [row for row in text.split("\n") if row]


def load_map(path: str | PathLike[str]) -> list[str]:
    """Read the map file at ``path`` and return its rows.

    Raises ``OSError`` when the file cannot be opened.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        text = "".join(read_lines(handle, BUFFER_SIZE))
    return parse_map(text)


def has_ber_extension(name: str) -> bool:
    """Tell whether the first dot in ``name`` is followed by ``ber``."""
    dot = name.find(".")
    if dot == -1:
        return False
    return name[dot + 1 : dot + 1 + len(MAP_EXTENSION)] == MAP_EXTENSION