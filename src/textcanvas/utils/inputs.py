"""Utilities for uniform input handling.

The public API and the command line interface accept HTML in several forms:
markup strings, raw bytes, paths and file-like objects. This module turns all
of them into markup that can be handed to BeautifulSoup.

Functions
---------
- is_path_like: Check if input is a ``pathlib.Path`` or ``os.PathLike``
- is_file_like: Check if input is a readable file-like object
- read_html_source: Load HTML markup from any supported input type
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/utils/inputs.py
import logging
import os
from io import BytesIO, StringIO
from pathlib import Path
from typing import Any, BinaryIO, TextIO, Union

from textcanvas.exceptions import InputError

logger = logging.getLogger(__name__)

# Type aliases for clarity
FileLike = Union[BinaryIO, TextIO, BytesIO, StringIO]
HtmlSource = Union[str, bytes, Path, FileLike]


def is_path_like(obj: Any) -> bool:
    """Check if an object is a filesystem path object.

    Plain strings are *not* path-like here: a string passed to
    :func:`textcanvas.html_to_text` always holds markup.

    Examples
    --------
    >>> is_path_like(Path("index.html"))
    True
    >>> is_path_like("<p>index.html</p>")
    False

    """
    return isinstance(obj, os.PathLike)


def is_file_like(obj: Any) -> bool:
    """Check if an object provides a callable ``read`` method."""
    return callable(getattr(obj, "read", None))


def read_html_source(source: HtmlSource, encoding: str | None = None) -> Union[str, bytes]:
    """Load HTML markup from ``source``.

    Parameters
    ----------
    source : str, bytes, Path or file-like
        The HTML markup, a path to an HTML file or an open file
    encoding : str, optional
        Encoding used to decode binary input. If omitted, binary input is
        returned as bytes and BeautifulSoup detects the encoding.

    Returns
    -------
    str or bytes
        The markup

    Raises
    ------
    InputError
        If the input type is not supported, the file cannot be read, or the
        content cannot be decoded with ``encoding``

    """
    if isinstance(source, str):
        return source

    if isinstance(source, (bytes, bytearray)):
        data: Union[str, bytes] = bytes(source)
    elif is_path_like(source):
        path = Path(source)  # type: ignore[arg-type]
        try:
            data = path.read_bytes()
        except OSError as e:
            raise InputError(f"Could not read HTML file {path}: {e}", input_type="path", original_error=e) from e
        logger.debug("Read %d bytes from %s", len(data), path)
    elif is_file_like(source):
        try:
            data = source.read()  # type: ignore[union-attr]
        except OSError as e:
            raise InputError(f"Could not read HTML input: {e}", input_type="file", original_error=e) from e
        if not isinstance(data, (str, bytes)):
            raise InputError(
                f"File-like input returned {type(data).__name__}, expected str or bytes",
                input_type=type(source).__name__,
            )
    else:
        raise InputError(
            f"Unsupported input type: {type(source).__name__}. Expected str, bytes, Path or a file-like object.",
            input_type=type(source).__name__,
        )

    if isinstance(data, bytes) and encoding is not None:
        try:
            return data.decode(encoding)
        except (LookupError, UnicodeDecodeError) as e:
            raise InputError(f"Could not decode HTML input as {encoding}: {e}", input_type="bytes", original_error=e) from e

    return data
