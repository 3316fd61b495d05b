#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rendering document trees to HTML.

This module defines the options controlling markup details of the content
renderer, its safety limits, and the blog page preset.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from vibedoc.constants import (
    DEFAULT_IMAGE_STYLE,
    DEFAULT_LINK_CLASS,
    DEFAULT_LINK_REL,
    DEFAULT_LINK_TARGET,
    DEFAULT_MAX_DEPTH,
    DEFAULT_PARAGRAPH_PLACEHOLDER,
    DEFAULT_SANITIZE_OUTPUT,
    DEFAULT_SANITIZE_URLS,
    DEFAULT_TRUNCATION_MARKER,
    DEFAULT_UNWRAP_IMAGE_PARAGRAPHS,
    MAX_ALLOWED_DEPTH,
    ImageStyle,
)
from vibedoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlContentOptions(BaseRendererOptions):
    """Configuration options for document-tree-to-HTML rendering.

    Parameters
    ----------
    paragraph_placeholder : str, default "&nbsp;"
        Markup placed inside a paragraph whose children render to nothing, so
        blank lines typed in the editor stay visible.
    image_style : {"plain", "figure"}, default "plain"
        "plain" emits a bare ``<img />``. "figure" wraps the image in the
        blog's centered container with the alt text as a caption.
    unwrap_image_paragraphs : bool, default False
        Render a paragraph whose only child is an image as the image alone.
    link_target : str, default "_blank"
        ``target`` attribute of rendered links. Empty string omits it.
    link_rel : str, default "noopener noreferrer"
        ``rel`` attribute of rendered links. Empty string omits it.
    link_class : str, default "text-primary hover:underline"
        ``class`` attribute of rendered links. Empty string omits it.
    sanitize_urls : bool, default True
        Drop hrefs and image sources that use dangerous schemes
        (``javascript:``, ``vbscript:``, ``data:text/html``...).
    sanitize_output : bool, default False
        Run the finished markup through bleach. Requires the ``sanitize`` extra.
    max_depth : int, default 100
        Maximum nesting depth rendered before the subtree is replaced by
        ``truncation_marker``.
    truncation_marker : str, default "<!-- content truncated -->"
        Markup emitted in place of a subtree cut off by the depth or cycle guard.

    Examples
    --------
    Bare images with links opened in the same tab:
        >>> options = HtmlContentOptions(link_target="", link_rel="")

    """

    paragraph_placeholder: str = field(
        default=DEFAULT_PARAGRAPH_PLACEHOLDER,
        metadata={"help": "Markup inside paragraphs that render empty", "importance": "advanced"},
    )
    image_style: ImageStyle = field(
        default=DEFAULT_IMAGE_STYLE,
        metadata={
            "help": "Image markup: 'plain' (bare img tag) or 'figure' (centered container with caption)",
            "choices": ["plain", "figure"],
            "importance": "core",
        },
    )
    unwrap_image_paragraphs: bool = field(
        default=DEFAULT_UNWRAP_IMAGE_PARAGRAPHS,
        metadata={"help": "Render image-only paragraphs without the <p> wrapper", "importance": "core"},
    )
    link_target: str = field(
        default=DEFAULT_LINK_TARGET,
        metadata={"help": "target attribute for links (empty to omit)", "importance": "advanced"},
    )
    link_rel: str = field(
        default=DEFAULT_LINK_REL,
        metadata={"help": "rel attribute for links (empty to omit)", "importance": "security"},
    )
    link_class: str = field(
        default=DEFAULT_LINK_CLASS,
        metadata={"help": "class attribute for links (empty to omit)", "importance": "advanced"},
    )
    sanitize_urls: bool = field(
        default=DEFAULT_SANITIZE_URLS,
        metadata={"help": "Drop link and image URLs with dangerous schemes", "importance": "security"},
    )
    sanitize_output: bool = field(
        default=DEFAULT_SANITIZE_OUTPUT,
        metadata={"help": "Sanitize the rendered markup with bleach", "importance": "security"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum nesting depth before truncation", "type": int, "importance": "security"},
    )
    truncation_marker: str = field(
        default=DEFAULT_TRUNCATION_MARKER,
        metadata={"help": "Markup emitted where a subtree is truncated", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and choices.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.image_style not in ("plain", "figure"):
            raise ValueError(f"image_style must be 'plain' or 'figure', got {self.image_style!r}")

        if not 1 <= self.max_depth <= MAX_ALLOWED_DEPTH:
            raise ValueError(f"max_depth must be between 1 and {MAX_ALLOWED_DEPTH}, got {self.max_depth}")


BLOG_POST_OPTIONS = HtmlContentOptions(image_style="figure", unwrap_image_paragraphs=True)
"""Preset matching the markup of the public blog post page."""
