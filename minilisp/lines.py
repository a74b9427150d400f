"""Bounded line reading from text streams."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TextIO


def get_line(file: TextIO, bufsz: int = 4096, greedy: bool = False) -> str | None:
    """Read at most ``bufsz`` characters of the next line, without the newline.

    Unless ``greedy`` is set, the rest of an over-long line is discarded;
    in greedy mode it is returned by the following calls. Returns None once
    the stream is exhausted and nothing was read.
    """
    if bufsz < 0:
        raise ValueError("bufsz must not be negative")
    chars: list[str] = []
    read_any = False
    while len(chars) < bufsz:
        ch = file.read(1)
        if not ch:
            break
        read_any = True
        if ch == "\n":
            break
        chars.append(ch)
    if len(chars) >= bufsz and not greedy:
        while ch := file.read(1):
            read_any = True
            if ch == "\n":
                break
    if not read_any:
        return None
    return "".join(chars)


def iter_lines(file: TextIO, bufsz: int = 4096, greedy: bool = False) -> Iterator[str]:
    """Yield every non-empty line of ``file`` until the end of the stream."""
    while (line := get_line(file, bufsz, greedy)) is not None:
        if line:
            yield line


def for_each_line(
    file: TextIO, bufsz: int, fn: Callable[[str], object], greedy: bool = False
) -> bool:
    """Call ``fn`` on each line up to the next empty line or end of stream.

    Returns True if the stream has more to read, False at its end.
    """
    while True:
        line = get_line(file, bufsz, greedy)
        if line is None:
            return False
        if not line:
            return True
        fn(line)