#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/document/__init__.py
"""Document tree model, loading and plain-text helpers."""

from vibedoc.document.loader import load_document
from vibedoc.document.nodes import DocumentNode, Mark, coerce_marks
from vibedoc.document.utils import extract_text, make_excerpt

__all__ = [
    "DocumentNode",
    "Mark",
    "coerce_marks",
    "extract_text",
    "load_document",
    "make_excerpt",
]
