#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/utils/io_utils.py
"""I/O utilities for handling output destinations.

This module provides a single way for renderers to write text, line by
line, to file paths or to text and binary file-like objects.

"""

from __future__ import annotations

import io
from contextlib import contextmanager
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Callable, Iterator, Union, cast

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


def is_binary_stream(output: IO[bytes] | IO[str]) -> bool:
    """Detect whether a file-like object expects bytes.

    Concrete ``io`` types are checked first, then the ``mode`` attribute.
    Streams that cannot be classified are treated as text streams.
    """
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


@contextmanager
def open_writer(output: OutputTarget, encoding: str = "utf-8") -> Iterator[Callable[[str], object]]:
    """Yield a callable that writes text to ``output``.

    Paths are opened (and truncated) on entry and closed on exit. Streams
    passed in by the caller are written to but left open.

    Parameters
    ----------
    output : str, Path, IO[bytes] or IO[str]
        Output destination
    encoding : str, default "utf-8"
        Encoding used for paths and binary streams

    Yields
    ------
    Callable[[str], object]
        Function writing one chunk of text

    Raises
    ------
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = BytesIO()
        >>> with open_writer(buffer) as write:
        ...     write("+---+\\n")
        >>> buffer.getvalue()
        b'+---+\\n'

    """
    if isinstance(output, (str, Path)):
        with Path(output).open("w", encoding=encoding, newline="") as handle:
            yield handle.write
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if is_binary_stream(output):
        binary_output = cast(IO[bytes], output)
        yield lambda text: binary_output.write(text.encode(encoding))
    else:
        text_output = cast(IO[str], output)
        yield text_output.write


__all__ = ["OutputTarget", "is_binary_stream", "open_writer"]
