#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/utils/io_utils.py
"""I/O utilities for handling output destinations."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str], None]) -> Union[StringIO, None]:
    """Write rendered text to an output destination or return it as a file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], IO[str], or None
        Output destination. Can be:
        - None: Returns content as StringIO
        - str or Path: Writes content to file at that path (UTF-8)
        - IO[bytes]: Writes UTF-8 encoded content to binary file-like object
        - IO[str]: Writes content to text file-like object

    Returns
    -------
    StringIO or None
        StringIO when output is None, otherwise None after writing

    Raises
    ------
    TypeError
        If output type is not supported

    Examples
    --------
    >>> buffer = BytesIO()
    >>> write_content("<p>hi</p>", buffer)
    >>> buffer.getvalue()
    b'<p>hi</p>'

    """
    if output is None:
        return StringIO(content)

    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return None

    if hasattr(output, "write"):
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, (StringIO, io.TextIOBase)):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return None

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["write_content"]
