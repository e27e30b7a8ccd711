#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gridtable/utils/inputs.py
"""Line iteration over the input sources accepted by the parser.

The grid parser consumes its input one line at a time. This module turns
every supported source type into an iterator of text lines with their
line terminators removed:

- ``str``: table text held in memory
- ``bytes``: UTF-8 encoded table text
- ``pathlib.Path``: a file on disk, read lazily
- text or binary file-like objects, read lazily
- any other iterable of strings (lines or arbitrary fragments)

"""

from __future__ import annotations

import codecs
import re
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterable, Iterator, Union

from gridtable.exceptions import ValidationError

InputSource = Union[str, bytes, Path, IO[str], IO[bytes], Iterable[str]]

_BOM = "\ufeff"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


def _split_text(text: str) -> list[str]:
    # Only CR and LF end a line, as for files opened with newline=""
    lines = _LINE_BREAK.split(text.lstrip(_BOM))
    if lines and not lines[-1]:
        lines.pop()
    return lines


def _iter_stream(stream: IO[str] | IO[bytes], encoding: str) -> Iterator[str]:
    decoder = None
    first = True
    for raw in stream:
        if isinstance(raw, bytes):
            if decoder is None:
                decoder = codecs.getincrementaldecoder(encoding)()
            text = decoder.decode(raw)
        else:
            text = raw
        if first:
            text = text.lstrip(_BOM)
            first = False
        yield _strip_terminator(text)


@contextmanager
def open_lines(source: InputSource, encoding: str = "utf-8") -> Iterator[Iterator[str]]:
    """Open ``source`` and yield an iterator over its lines.

    Files opened here are closed when the context exits; streams passed in
    by the caller are left open.

    Parameters
    ----------
    source : str, bytes, Path, IO[str], IO[bytes] or iterable of str
        Input to read
    encoding : str, default "utf-8"
        Encoding for byte input

    Yields
    ------
    Iterator[str]
        Lines without their terminators

    Raises
    ------
    ValidationError
        If ``source`` is of an unsupported type

    """
    if isinstance(source, Path):
        with source.open("r", encoding=encoding, newline="") as handle:
            yield _iter_stream(handle, encoding)
    elif isinstance(source, str):
        yield iter(_split_text(source))
    elif isinstance(source, (bytes, bytearray)):
        yield iter(_split_text(bytes(source).decode(encoding)))
    elif hasattr(source, "read"):
        yield _iter_stream(source, encoding)  # type: ignore[arg-type]
    elif isinstance(source, Iterable):
        yield (_strip_terminator(fragment) for fragment in source)
    else:
        raise ValidationError(
            f"Unsupported input type: {type(source).__name__}",
            parameter_name="source",
            parameter_value=source,
        )
