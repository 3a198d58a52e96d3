#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/utils/io_utils.py
"""Output writing helpers shared by renderers and the CLI."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text content to a path or file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Paths are written as UTF-8; binary streams
        receive UTF-8 encoded bytes; text streams receive the string.

    Raises
    ------
    TypeError
        If the output type is not supported

    Examples
    --------
    >>> buffer = BytesIO()
    >>> write_content("plain", buffer)
    >>> buffer.getvalue()
    b'plain'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
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


__all__ = ["write_content"]
