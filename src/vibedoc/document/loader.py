#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/document/loader.py
"""Loading stored document trees.

Posts are persisted as the editor's JSON document. This module decodes that
JSON from the usual input shapes (string, bytes, path, stream). It does not
validate the tree: renderers accept any structure and degrade locally.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, Any, Union

from vibedoc.exceptions import ParsingError

logger = logging.getLogger(__name__)


def _read_input(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
    if isinstance(input_data, Path):
        return input_data.read_text(encoding="utf-8")
    if isinstance(input_data, bytes):
        return input_data.decode("utf-8")
    if isinstance(input_data, str):
        # A string is a path only when it names an existing file; otherwise it is JSON text
        stripped = input_data.lstrip()
        if stripped[:1] not in ("{", "[", '"') and Path(input_data).is_file():
            return Path(input_data).read_text(encoding="utf-8")
        return input_data
    if hasattr(input_data, "read"):
        raw_content = input_data.read()
        return raw_content.decode("utf-8") if isinstance(raw_content, bytes) else str(raw_content)
    raise TypeError(f"Unsupported input type: {type(input_data)}")


def load_document(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Any:
    """Decode a stored document tree from JSON.

    Parameters
    ----------
    input_data : str, Path, IO[bytes], IO[str], or bytes
        JSON text, UTF-8 bytes, a path to a JSON file, or a readable stream

    Returns
    -------
    Any
        The decoded JSON value, normally a ``{"type": "doc", ...}`` mapping

    Raises
    ------
    ParsingError
        If the input cannot be read or is not valid JSON

    Examples
    --------
    >>> load_document('{"type": "doc", "content": []}')
    {'type': 'doc', 'content': []}

    """
    try:
        json_str = _read_input(input_data)
    except (OSError, UnicodeDecodeError, TypeError) as e:
        raise ParsingError(
            f"Failed to read document input: {e}", parsing_stage="input_reading", original_error=e
        ) from e

    try:
        document = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON in document: {e}", parsing_stage="json_parsing", original_error=e) from e

    if not isinstance(document, dict):
        logger.debug("Loaded document root is %s, not an object", type(document).__name__)

    return document


__all__ = ["load_document"]
