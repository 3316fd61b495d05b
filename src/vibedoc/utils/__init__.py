#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/utils/__init__.py
"""Utility modules for the vibedoc package.

This package contains URL safety checks, optional HTML sanitization,
dependency checking and output helpers shared by renderers and the CLI.
"""

from vibedoc.utils.html_sanitizer import is_url_safe, sanitize_url
from vibedoc.utils.security import is_relative_url, is_url_scheme_dangerous

__all__ = [
    "is_relative_url",
    "is_url_safe",
    "is_url_scheme_dangerous",
    "sanitize_url",
]
