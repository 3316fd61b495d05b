"""vibedoc - rendering and publishing helpers for rich-text blog posts.

vibedoc turns the JSON document trees written by the blog's rich-text editor
into HTML for the post page, and provides the small pieces of post
publishing that do not need a database: slugs, reading time, excerpts and
draft validation.

Key Features
------------
- Total HTML rendering: malformed nodes degrade locally, never raise
- Marks applied as a left fold (first mark innermost)
- Escaping of every text payload and attribute value
- Dangerous URL schemes dropped from links and images
- Depth and cycle guards with a visible truncation marker
- Diagnostics delivered to a callback and logged

Requirements
------------
- Python 3.10+
- Optional: bleach (``sanitize`` extra), rich (``cli`` extra)

Examples
--------
Rendering a stored post:

    >>> from vibedoc import content_to_html
    >>> content_to_html({"type": "doc", "content": [
    ...     {"type": "paragraph", "content": [
    ...         {"type": "text", "text": "Hi", "marks": [{"type": "bold"}]}
    ...     ]}
    ... ]})
    '<p><strong>Hi</strong></p>'

Using the blog page markup and collecting diagnostics:

    >>> from vibedoc import BLOG_POST_OPTIONS, HtmlContentRenderer
    >>> events = []
    >>> renderer = HtmlContentRenderer(BLOG_POST_OPTIONS, diagnostic_callback=events.append)

See Also
--------
vibedoc.document : Document tree model and plain-text helpers
vibedoc.blog : Slug and reading time helpers

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "vibedoc requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from vibedoc.blog import ensure_unique_slug, estimate_read_time, is_valid_slug, slugify_title, validate_post
from vibedoc.diagnostics import DiagnosticCallback, DiagnosticEvent
from vibedoc.document import DocumentNode, Mark, extract_text, load_document, make_excerpt
from vibedoc.exceptions import (
    DependencyError,
    InvalidOptionsError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
    VibedocError,
)
from vibedoc.options import BLOG_POST_OPTIONS, BaseRendererOptions, HtmlContentOptions
from vibedoc.renderers import BaseRenderer, HtmlContentRenderer, apply_mark, content_to_html, render_marks

__all__ = [
    "__version__",
    "content_to_html",
    "HtmlContentRenderer",
    "BaseRenderer",
    "apply_mark",
    "render_marks",
    "HtmlContentOptions",
    "BaseRendererOptions",
    "BLOG_POST_OPTIONS",
    "DocumentNode",
    "Mark",
    "load_document",
    "extract_text",
    "make_excerpt",
    "slugify_title",
    "is_valid_slug",
    "ensure_unique_slug",
    "estimate_read_time",
    "validate_post",
    "DiagnosticEvent",
    "DiagnosticCallback",
    "VibedocError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
    "DependencyError",
]
