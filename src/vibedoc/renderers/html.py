#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/renderers/html.py
"""HTML rendering of rich-text document trees.

This module provides the HtmlContentRenderer class which converts the blog
editor's JSON document tree into HTML markup for the post page.

Rendering is a single recursive driver over a table of variant renderers.
For each node the driver renders the children first, then hands the joined
child markup and the node to the variant's function. Unknown variants have
no table entry and fall back to their children's markup with no wrapper.

The renderer is total. Malformed nodes render as empty strings, subtrees
past the depth limit (or inside a reference cycle) become a truncation
marker, and every such event is reported as a diagnostic. One broken node
never blanks the rest of the document.

"""

from __future__ import annotations

import html
import json
import logging
import reprlib
from collections.abc import Mapping
from functools import reduce
from typing import Any, Callable, Iterable, Optional

from vibedoc.constants import (
    DEFAULT_HEADING_LEVEL,
    FIGURE_CAPTION_CLASS,
    FIGURE_CONTAINER_CLASS,
    FIGURE_IMAGE_CLASS,
    MARK_BOLD,
    MARK_CODE,
    MARK_ITALIC,
    MARK_LINK,
    MARK_STRIKE,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    NODE_BLOCKQUOTE,
    NODE_BULLET_LIST,
    NODE_CODE_BLOCK,
    NODE_DOC,
    NODE_HARD_BREAK,
    NODE_HEADING,
    NODE_HORIZONTAL_RULE,
    NODE_IMAGE,
    NODE_LIST_ITEM,
    NODE_ORDERED_LIST,
    NODE_PARAGRAPH,
    NODE_TEXT,
)
from vibedoc.diagnostics import DiagnosticCallback
from vibedoc.document.nodes import DocumentNode, Mark
from vibedoc.options.html import HtmlContentOptions
from vibedoc.renderers.base import BaseRenderer
from vibedoc.utils.html_sanitizer import is_url_safe, sanitize_html_string, sanitize_url

logger = logging.getLogger(__name__)

# (children_html, node) -> markup
VariantRenderer = Callable[[str, DocumentNode], str]

_WRAPPER_TAGS = {
    NODE_BULLET_LIST: "ul",
    NODE_ORDERED_LIST: "ol",
    NODE_LIST_ITEM: "li",
    NODE_BLOCKQUOTE: "blockquote",
}

# Variants whose output ignores children entirely
_LEAF_TYPES = frozenset({NODE_TEXT, NODE_IMAGE, NODE_HORIZONTAL_RULE, NODE_HARD_BREAK})


def escape_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted HTML attribute."""
    return html.escape(value, quote=True)


def escape_text(value: str) -> str:
    """Escape raw text content for use between HTML tags."""
    return html.escape(value, quote=False)


def _format_attributes(attributes: Iterable[tuple[str, str]]) -> str:
    return "".join(f' {name}="{escape_attribute(value)}"' for name, value in attributes)


def _string_attr(value: Any) -> str:
    return value if isinstance(value, str) else ""


def heading_level(value: Any) -> int:
    """Resolve the level of a heading from its ``level`` attribute.

    Parameters
    ----------
    value : Any
        Raw ``attrs.level`` value

    Returns
    -------
    int
        The level clamped to 1..6; 2 when the value is missing or not an
        integer (numeric strings are accepted)

    Examples
    --------
    >>> heading_level(3), heading_level(None), heading_level(9), heading_level("4")
    (3, 2, 6, 4)

    """
    if isinstance(value, bool):
        return DEFAULT_HEADING_LEVEL
    if isinstance(value, str):
        value = value.strip()
        # isdigit() also accepts superscripts and non-ASCII digits that int() rejects
        if not (value.isascii() and value.isdigit()):
            return DEFAULT_HEADING_LEVEL
        try:
            value = int(value)
        except ValueError:
            # longer than the interpreter's int conversion limit
            return DEFAULT_HEADING_LEVEL
    if isinstance(value, int):
        return min(max(value, MIN_HEADING_LEVEL), MAX_HEADING_LEVEL)
    return DEFAULT_HEADING_LEVEL


def apply_mark(content: str, mark: Mark, options: Optional[HtmlContentOptions] = None) -> str:
    """Wrap already-rendered inline markup in one mark.

    Parameters
    ----------
    content : str
        Markup to wrap
    mark : Mark
        The mark to apply
    options : HtmlContentOptions or None
        Link attribute and URL safety settings; defaults when None

    Returns
    -------
    str
        The wrapped markup, or ``content`` unchanged for unknown mark types

    """
    if mark.type == MARK_BOLD:
        return f"<strong>{content}</strong>"
    if mark.type == MARK_ITALIC:
        return f"<em>{content}</em>"
    if mark.type == MARK_CODE:
        return f"<code>{content}</code>"
    if mark.type == MARK_STRIKE:
        return f"<s>{content}</s>"
    if mark.type == MARK_LINK:
        options = options or HtmlContentOptions()
        href = _string_attr(mark.attrs.get("href"))
        if options.sanitize_urls:
            href = sanitize_url(href)
        attributes = [("href", href)]
        attributes.extend(
            (name, value)
            for name, value in (
                ("target", options.link_target),
                ("rel", options.link_rel),
                ("class", options.link_class),
            )
            if value
        )
        return f"<a{_format_attributes(attributes)}>{content}</a>"
    return content


def render_marks(text: str, marks: Iterable[Mark], options: Optional[HtmlContentOptions] = None) -> str:
    """Escape a text payload and apply its marks as a left fold.

    Marks apply in the order listed, each wrapping the result so far: the
    first mark ends up innermost and the last mark outermost. Mark types the
    renderer does not know are skipped.

    Parameters
    ----------
    text : str
        Raw text payload (escaped here)
    marks : iterable of Mark
        Marks of the text node, in stored order
    options : HtmlContentOptions or None
        Rendering options for link marks

    Returns
    -------
    str
        Marked-up inline HTML

    Examples
    --------
    >>> render_marks("hi", [Mark("bold"), Mark("italic")])
    '<em><strong>hi</strong></em>'

    """
    known = (mark for mark in marks if mark.is_known)
    return reduce(lambda acc, mark: apply_mark(acc, mark, options), known, escape_text(text))


def _describe_node(raw: Any, limit: int = 200) -> str:
    try:
        described = json.dumps(raw, ensure_ascii=False, default=str)
    except (TypeError, ValueError, RecursionError):
        described = reprlib.repr(raw)
    return described if len(described) <= limit else described[:limit] + "..."


class HtmlContentRenderer(BaseRenderer):
    """Render rich-text document trees to HTML.

    Parameters
    ----------
    options : HtmlContentOptions or None, default = None
        HTML rendering options
    diagnostic_callback : DiagnosticCallback or None, default = None
        Receives a DiagnosticEvent for each anomaly worked around

    Examples
    --------
    Basic usage:

        >>> renderer = HtmlContentRenderer()
        >>> renderer.render({"type": "paragraph", "content": [{"type": "text", "text": "hi"}]})
        '<p>hi</p>'

    Blog page markup:

        >>> from vibedoc.options import BLOG_POST_OPTIONS
        >>> renderer = HtmlContentRenderer(BLOG_POST_OPTIONS)

    Notes
    -----
    The renderer keeps no per-render state on the instance, so one instance
    can serve concurrent renders.

    """

    def __init__(
        self,
        options: HtmlContentOptions | None = None,
        diagnostic_callback: Optional[DiagnosticCallback] = None,
    ):
        """Initialize the HTML content renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlContentOptions, "html")
        options = options or HtmlContentOptions()
        super().__init__(options, diagnostic_callback)
        self.options: HtmlContentOptions = options
        self._variants: dict[str, VariantRenderer] = {
            NODE_DOC: self._render_doc,
            NODE_PARAGRAPH: self._render_paragraph,
            NODE_HEADING: self._render_heading,
            NODE_BULLET_LIST: self._render_wrapper,
            NODE_ORDERED_LIST: self._render_wrapper,
            NODE_LIST_ITEM: self._render_wrapper,
            NODE_BLOCKQUOTE: self._render_wrapper,
            NODE_CODE_BLOCK: self._render_code_block,
            NODE_IMAGE: self._render_image,
            NODE_HORIZONTAL_RULE: self._render_horizontal_rule,
            NODE_HARD_BREAK: self._render_hard_break,
            NODE_TEXT: self._render_text,
        }

    def render(self, node: Any) -> str:
        """Render a document tree to HTML.

        Parameters
        ----------
        node : Any
            Document tree as decoded from JSON. Strings are returned unchanged;
            None and other non-mapping values render as an empty string.

        Returns
        -------
        str
            HTML markup

        Raises
        ------
        DependencyError
            Only when ``sanitize_output`` is enabled and bleach is not installed

        """
        markup = self._render_value(node, 0, set())
        if self.options.sanitize_output:
            markup = sanitize_html_string(markup)
        return markup

    def _render_value(self, value: Any, depth: int, path: set[int]) -> str:
        """Render one raw value of the tree; the single recursive driver."""
        if isinstance(value, str):
            return value
        if not isinstance(value, Mapping):
            return ""

        if depth > self.options.max_depth:
            self._emit_diagnostic(
                "depth_exceeded",
                f"Document nested deeper than {self.options.max_depth} levels; subtree truncated",
                node_type=_string_attr(value.get("type")) or None,
                depth=depth,
            )
            return self.options.truncation_marker
        if id(value) in path:
            self._emit_diagnostic(
                "cycle_detected",
                "Node contains itself; subtree truncated",
                node_type=_string_attr(value.get("type")) or None,
                depth=depth,
            )
            return self.options.truncation_marker

        node_type: str | None = None
        path.add(id(value))
        try:
            node = DocumentNode.from_raw(value)
            node_type = node.type
            if node_type is None:
                logger.debug("Skipping node without a type: %s", _describe_node(value))
                return ""

            if not node.is_known:
                return self._render_children(node, depth, path)

            children_html = "" if node_type in _LEAF_TYPES else self._render_children(node, depth, path)
            return self._variants[node_type](children_html, node)
        except Exception as e:
            self._emit_diagnostic(
                "node_error",
                f"Failed to render node: {e}",
                node_type=node_type,
                error=repr(e),
                depth=depth,
            )
            return ""
        finally:
            path.discard(id(value))

    def _render_children(self, node: DocumentNode, depth: int, path: set[int]) -> str:
        return "".join([self._render_value(child, depth + 1, path) for child in node.content])

    def _render_doc(self, children_html: str, node: DocumentNode) -> str:
        return children_html

    def _render_paragraph(self, children_html: str, node: DocumentNode) -> str:
        if self.options.unwrap_image_paragraphs and len(node.content) == 1:
            only_child = node.content[0]
            if isinstance(only_child, Mapping) and only_child.get("type") == NODE_IMAGE:
                return children_html

        if not children_html.strip():
            children_html = self.options.paragraph_placeholder
        return f"<p>{children_html}</p>"

    def _render_heading(self, children_html: str, node: DocumentNode) -> str:
        level = heading_level(node.attr("level"))
        return f"<h{level}>{children_html}</h{level}>"

    def _render_wrapper(self, children_html: str, node: DocumentNode) -> str:
        tag = _WRAPPER_TAGS[node.type]  # type: ignore[index]
        return f"<{tag}>{children_html}</{tag}>"

    def _render_code_block(self, children_html: str, node: DocumentNode) -> str:
        return f"<pre><code>{children_html}</code></pre>"

    def _render_horizontal_rule(self, children_html: str, node: DocumentNode) -> str:
        return "<hr />"

    def _render_hard_break(self, children_html: str, node: DocumentNode) -> str:
        return "<br />"

    def _render_text(self, children_html: str, node: DocumentNode) -> str:
        return render_marks(node.text, node.marks, self.options)

    def _resolve_image_attr(self, node: DocumentNode, *names: str) -> str:
        candidates = [node.attr(name) for name in names]
        if isinstance(node.raw, Mapping):
            # Older posts stored image fields on the node itself
            candidates.extend(node.raw.get(name) for name in names)
        return next((value for value in candidates if isinstance(value, str) and value.strip()), "")

    def _render_image(self, children_html: str, node: DocumentNode) -> str:
        src = self._resolve_image_attr(node, "src", "url")
        alt = self._resolve_image_attr(node, "alt")
        title = self._resolve_image_attr(node, "title")

        if src and self.options.sanitize_urls and not is_url_safe(src):
            logger.debug("Image source uses a dangerous scheme: %r", src[:80])
            src = ""

        if not src:
            self._emit_diagnostic(
                "missing_image_src",
                f"Image node missing src. Node: {_describe_node(node.raw)}",
                node_type=NODE_IMAGE,
            )
            return ""

        attributes = [("src", src), ("alt", alt), ("title", title)]
        if self.options.image_style == "plain":
            return f"<img{_format_attributes(attributes)} />"

        attributes.extend([("class", FIGURE_IMAGE_CLASS), ("loading", "lazy")])
        caption = f'<p class="{FIGURE_CAPTION_CLASS}">{escape_text(alt)}</p>' if alt else ""
        return f'<div class="{FIGURE_CONTAINER_CLASS}"><img{_format_attributes(attributes)} />{caption}</div>'


def content_to_html(
    content: Any,
    options: HtmlContentOptions | None = None,
    diagnostic_callback: Optional[DiagnosticCallback] = None,
) -> str:
    """Render a stored document tree to HTML.

    Parameters
    ----------
    content : Any
        Document tree as decoded from JSON
    options : HtmlContentOptions or None, default = None
        Rendering options
    diagnostic_callback : DiagnosticCallback or None, default = None
        Receives a DiagnosticEvent for each anomaly worked around

    Returns
    -------
    str
        HTML markup

    Examples
    --------
    >>> content_to_html({"type": "heading", "attrs": {"level": 3}, "content": [{"type": "text", "text": "T"}]})
    '<h3>T</h3>'

    """
    return HtmlContentRenderer(options, diagnostic_callback).render(content)


__all__ = [
    "HtmlContentRenderer",
    "apply_mark",
    "content_to_html",
    "escape_attribute",
    "escape_text",
    "heading_level",
    "render_marks",
]
