#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for vibedoc renderers.

Options are frozen dataclasses: build a new instance (or call
``create_updated``) instead of mutating one.
"""

from __future__ import annotations

from vibedoc.options.base import BaseRendererOptions, CloneFrozenMixin
from vibedoc.options.html import BLOG_POST_OPTIONS, HtmlContentOptions

__all__ = [
    "BLOG_POST_OPTIONS",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlContentOptions",
]
