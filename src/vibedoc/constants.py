#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the vibedoc library.

This module centralizes the hardcoded values used across vibedoc so the
renderer, the blog helpers and the CLI agree on them.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Document Model - node and mark discriminators
3. HTML Rendering - markup defaults
4. Security Constants - URL scheme filtering
5. Blog Content - slug and read time defaults
6. Optional Dependencies
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ImageStyle = Literal["plain", "figure"]
DiagnosticType = Literal["missing_image_src", "depth_exceeded", "cycle_detected", "node_error"]

# =============================================================================
# Document Model
# =============================================================================

NODE_DOC = "doc"
NODE_PARAGRAPH = "paragraph"
NODE_HEADING = "heading"
NODE_BULLET_LIST = "bulletList"
NODE_ORDERED_LIST = "orderedList"
NODE_LIST_ITEM = "listItem"
NODE_CODE_BLOCK = "codeBlock"
NODE_BLOCKQUOTE = "blockquote"
NODE_IMAGE = "image"
NODE_HORIZONTAL_RULE = "horizontalRule"
NODE_HARD_BREAK = "hardBreak"
NODE_TEXT = "text"

KNOWN_NODE_TYPES = frozenset(
    {
        NODE_DOC,
        NODE_PARAGRAPH,
        NODE_HEADING,
        NODE_BULLET_LIST,
        NODE_ORDERED_LIST,
        NODE_LIST_ITEM,
        NODE_CODE_BLOCK,
        NODE_BLOCKQUOTE,
        NODE_IMAGE,
        NODE_HORIZONTAL_RULE,
        NODE_HARD_BREAK,
        NODE_TEXT,
    }
)

# Block variants get a separating space when extracting plain text
BLOCK_NODE_TYPES = frozenset(
    {
        NODE_PARAGRAPH,
        NODE_HEADING,
        NODE_BULLET_LIST,
        NODE_ORDERED_LIST,
        NODE_LIST_ITEM,
        NODE_CODE_BLOCK,
        NODE_BLOCKQUOTE,
    }
)

MARK_BOLD = "bold"
MARK_ITALIC = "italic"
MARK_CODE = "code"
MARK_LINK = "link"
MARK_STRIKE = "strike"

KNOWN_MARK_TYPES = frozenset({MARK_BOLD, MARK_ITALIC, MARK_CODE, MARK_LINK, MARK_STRIKE})

# =============================================================================
# HTML Rendering
# =============================================================================

DEFAULT_HEADING_LEVEL = 2
MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

DEFAULT_PARAGRAPH_PLACEHOLDER = "&nbsp;"

DEFAULT_LINK_TARGET = "_blank"
DEFAULT_LINK_REL = "noopener noreferrer"
DEFAULT_LINK_CLASS = "text-primary hover:underline"

DEFAULT_IMAGE_STYLE: ImageStyle = "plain"
DEFAULT_UNWRAP_IMAGE_PARAGRAPHS = False

# Classes used by the blog post page for figure-style images
FIGURE_CONTAINER_CLASS = "not-prose my-10 flex flex-col items-center"
FIGURE_IMAGE_CLASS = "rounded-2xl border border-border/40 shadow-xl max-w-full h-auto"
FIGURE_CAPTION_CLASS = "text-muted-foreground mt-4 text-center text-sm font-medium italic"

# Each nesting level costs a few Python frames, so the depth limit has to stay
# well under the interpreter recursion limit.
DEFAULT_MAX_DEPTH = 100
MAX_ALLOWED_DEPTH = 250
DEFAULT_TRUNCATION_MARKER = "<!-- content truncated -->"

DEFAULT_SANITIZE_URLS = True
DEFAULT_SANITIZE_OUTPUT = False

DEFAULT_EXCERPT_LENGTH = 160
EXCERPT_ELLIPSIS = "…"

# =============================================================================
# Security Constants
# =============================================================================

DANGEROUS_SCHEMES = {
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
}

SANITIZE_ALLOWED_TAGS = frozenset(
    {
        "a",
        "blockquote",
        "br",
        "code",
        "div",
        "em",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "img",
        "li",
        "ol",
        "p",
        "pre",
        "s",
        "strong",
        "ul",
    }
)
SANITIZE_ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "rel", "target"],
    "img": ["src", "alt", "title", "loading"],
    "*": ["class"],
}
SANITIZE_ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto", "ftp"})

# =============================================================================
# Blog Content
# =============================================================================

DEFAULT_SLUG_MAX_LENGTH = 80
MAX_VALID_SLUG_LENGTH = 100
SLUG_FALLBACK = "project"
DEFAULT_SLUG_MAX_ATTEMPTS = 100

DEFAULT_WORDS_PER_MINUTE = 200

MIN_TITLE_LENGTH = 5
MIN_SERIALIZED_CONTENT_LENGTH = 100

# =============================================================================
# Optional Dependencies
# =============================================================================

DEPS_SANITIZE = [("bleach", "bleach", ">=6.0.0")]
DEPS_RICH = [("rich", "rich", ">=13.0.0")]
