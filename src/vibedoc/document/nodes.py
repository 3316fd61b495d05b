#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/document/nodes.py
"""Node classes for the rich-text document tree.

The blog editor stores posts as a JSON tree: every node is an object with a
``type`` discriminator, optional ``content`` children, optional ``attrs``,
and, on ``text`` nodes, a ``text`` payload plus inline ``marks``::

    {"type": "doc", "content": [
        {"type": "paragraph", "content": [
            {"type": "text", "text": "Hello", "marks": [{"type": "bold"}]}
        ]}
    ]}

Stored content is not trusted to be well formed. :meth:`DocumentNode.from_raw`
builds a typed view of *one* raw node, coercing every malformed field to its
empty value instead of raising. Children are kept raw so traversal code can
apply its own guards (depth, cycles) before touching them.

Node Variants
-------------
Block containers: doc, paragraph, heading, bulletList, orderedList,
listItem, codeBlock, blockquote

Leaves: image, horizontalRule, hardBreak, text

Any other ``type`` is an unknown variant; renderers treat it as transparent.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional

from vibedoc.constants import KNOWN_MARK_TYPES, KNOWN_NODE_TYPES, NODE_TEXT

_EMPTY_ATTRS: Mapping[str, Any] = MappingProxyType({})


def _coerce_attrs(value: Any) -> Mapping[str, Any]:
    if isinstance(value, Mapping):
        return value
    return _EMPTY_ATTRS


def _coerce_type(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


@dataclass(frozen=True)
class Mark:
    """Inline decoration attached to a text node.

    Parameters
    ----------
    type : str
        Mark discriminator ("bold", "italic", "code", "link", "strike", or
        anything else for marks this library does not know)
    attrs : Mapping[str, Any], default = empty mapping
        Mark attributes, e.g. ``{"href": "..."}`` for links

    """

    type: str
    attrs: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_ATTRS)

    @property
    def is_known(self) -> bool:
        """Whether the mark type is one the renderers handle."""
        return self.type in KNOWN_MARK_TYPES

    @classmethod
    def from_raw(cls, raw: Any) -> Optional[Mark]:
        """Build a mark from a raw JSON value.

        Parameters
        ----------
        raw : Any
            Raw mark object

        Returns
        -------
        Mark or None
            The mark, or None if ``raw`` is not a mapping with a string type

        """
        if not isinstance(raw, Mapping):
            return None
        mark_type = _coerce_type(raw.get("type"))
        if mark_type is None:
            return None
        return cls(type=mark_type, attrs=_coerce_attrs(raw.get("attrs")))


def coerce_marks(value: Any) -> tuple[Mark, ...]:
    """Build the mark sequence of a text node from a raw ``marks`` value.

    Parameters
    ----------
    value : Any
        Raw ``marks`` field

    Returns
    -------
    tuple of Mark
        Marks in listed order; malformed entries are skipped and a
        non-sequence value yields an empty tuple

    Examples
    --------
    >>> [mark.type for mark in coerce_marks([{"type": "bold"}, "junk", {"type": "italic"}])]
    ['bold', 'italic']
    >>> coerce_marks({"type": "bold"})
    ()

    """
    if not isinstance(value, (list, tuple)):
        return ()
    marks = []
    for raw in value:
        mark = Mark.from_raw(raw)
        if mark is not None:
            marks.append(mark)
    return tuple(marks)


@dataclass(frozen=True)
class DocumentNode:
    """Typed, shallow view of one node of a stored document tree.

    Parameters
    ----------
    type : str or None
        Node discriminator; None when the raw node had no usable ``type``
    content : tuple of Any, default = ()
        Raw child values, in order. Empty for leaf variants and for nodes
        whose ``content`` was missing or not a list.
    attrs : Mapping[str, Any], default = empty mapping
        Variant-specific attributes (``level``, ``src``, ``alt``...)
    text : str, default = ""
        Text payload; only meaningful on ``text`` nodes
    marks : tuple of Mark, default = ()
        Inline marks; only meaningful on ``text`` nodes
    raw : Any, default = None
        The raw value this node was built from, kept for diagnostics

    """

    type: Optional[str]
    content: tuple[Any, ...] = ()
    attrs: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_ATTRS)
    text: str = ""
    marks: tuple[Mark, ...] = ()
    raw: Any = field(default=None, repr=False, compare=False)

    @property
    def is_known(self) -> bool:
        """Whether the node type is one of the recognized variants."""
        return self.type in KNOWN_NODE_TYPES

    def attr(self, name: str, default: Any = None) -> Any:
        """Return an attribute, treating None and missing alike."""
        value = self.attrs.get(name)
        return default if value is None else value

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> DocumentNode:
        """Build a node from a raw JSON object, coercing malformed fields.

        Parameters
        ----------
        raw : Mapping[str, Any]
            One node of a stored document tree

        Returns
        -------
        DocumentNode
            Typed view of the node. Its children remain raw values.

        Examples
        --------
        >>> node = DocumentNode.from_raw({"type": "heading", "attrs": {"level": 3}, "content": "oops"})
        >>> node.type, node.content, node.attr("level")
        ('heading', (), 3)

        """
        node_type = _coerce_type(raw.get("type"))
        raw_content = raw.get("content")

        # Text nodes never have children
        if node_type == NODE_TEXT or not isinstance(raw_content, (list, tuple)):
            content: tuple[Any, ...] = ()
        else:
            content = tuple(raw_content)

        text = raw.get("text")
        return cls(
            type=node_type,
            content=content,
            attrs=_coerce_attrs(raw.get("attrs")),
            text=text if isinstance(text, str) else "",
            marks=coerce_marks(raw.get("marks")) if node_type == NODE_TEXT else (),
            raw=raw,
        )


__all__ = ["DocumentNode", "Mark", "coerce_marks"]
