#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/document/utils.py
"""Plain-text helpers for document trees.

Functions
---------
extract_text : Extract the readable text of a document tree
make_excerpt : Build a short summary suitable for cards and meta descriptions

Examples
--------
    >>> doc = {"type": "doc", "content": [
    ...     {"type": "heading", "content": [{"type": "text", "text": "Hello"}]},
    ...     {"type": "paragraph", "content": [{"type": "text", "text": "world"}]},
    ... ]}
    >>> extract_text(doc)
    'Hello world'

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from vibedoc.constants import (
    BLOCK_NODE_TYPES,
    DEFAULT_EXCERPT_LENGTH,
    DEFAULT_MAX_DEPTH,
    EXCERPT_ELLIPSIS,
    NODE_HARD_BREAK,
    NODE_TEXT,
)
from vibedoc.document.nodes import DocumentNode

logger = logging.getLogger(__name__)


def _collect_text(value: Any, parts: list[str], depth: int, path: set[int], max_depth: int) -> None:
    if isinstance(value, str):
        parts.append(value)
        return
    if not isinstance(value, Mapping):
        return
    if depth > max_depth or id(value) in path:
        logger.debug("Stopping text extraction at depth %d", depth)
        return

    node = DocumentNode.from_raw(value)
    if node.type is None:
        return
    if node.type == NODE_TEXT:
        parts.append(node.text)
        return
    if node.type == NODE_HARD_BREAK:
        parts.append(" ")
        return

    path.add(id(value))
    try:
        for child in node.content:
            _collect_text(child, parts, depth + 1, path, max_depth)
    finally:
        path.discard(id(value))

    if node.type in BLOCK_NODE_TYPES:
        parts.append(" ")


def extract_text(node: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Extract the readable text of a document tree.

    Text payloads are concatenated in document order, block nodes are
    separated by whitespace, and whitespace runs are collapsed to single
    spaces. Unknown node types contribute their children's text. Like
    rendering, extraction never raises on malformed input.

    Parameters
    ----------
    node : Any
        Document tree (or any subtree, or a plain string)
    max_depth : int, default = 100
        Nesting depth beyond which subtrees are ignored

    Returns
    -------
    str
        Whitespace-normalized plain text

    """
    parts: list[str] = []
    _collect_text(node, parts, 0, set(), max_depth)
    return " ".join("".join(parts).split())


def make_excerpt(node: Any, max_length: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Build a plain-text excerpt of a document tree.

    Parameters
    ----------
    node : Any
        Document tree
    max_length : int, default = 160
        Maximum excerpt length in characters, ellipsis included

    Returns
    -------
    str
        The full text when short enough, otherwise the text cut at the last
        word boundary that fits, followed by an ellipsis

    Raises
    ------
    ValueError
        If max_length is smaller than 2

    Examples
    --------
    >>> make_excerpt({"type": "paragraph", "content": [{"type": "text", "text": "one two three"}]}, 10)
    'one two…'

    """
    if max_length < 2:
        raise ValueError(f"max_length must be at least 2, got {max_length}")

    text = extract_text(node)
    if len(text) <= max_length:
        return text

    cut = text[: max_length - len(EXCERPT_ELLIPSIS) + 1]
    if " " in cut:
        cut = cut[: cut.rindex(" ")]
    else:
        cut = cut[:-1]
    return cut.rstrip(" ,.;:") + EXCERPT_ELLIPSIS


__all__ = ["extract_text", "make_excerpt"]
