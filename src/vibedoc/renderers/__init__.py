#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/renderers/__init__.py
"""Renderers converting document trees to output formats."""

from vibedoc.renderers.base import BaseRenderer
from vibedoc.renderers.html import HtmlContentRenderer, apply_mark, content_to_html, render_marks

__all__ = [
    "BaseRenderer",
    "HtmlContentRenderer",
    "apply_mark",
    "content_to_html",
    "render_marks",
]
