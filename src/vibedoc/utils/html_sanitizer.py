#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/utils/html_sanitizer.py
"""HTML sanitization utilities for security.

The renderer escapes every text payload and attribute value it emits, so its
output is safe on its own. This module adds two optional layers on top:

- URL filtering for hrefs and image sources (dangerous schemes dropped)
- a bleach pass over finished markup, for callers that inject rendered
  content into pages alongside other untrusted HTML
"""

from __future__ import annotations

import logging

from vibedoc.constants import (
    DEPS_SANITIZE,
    SANITIZE_ALLOWED_ATTRIBUTES,
    SANITIZE_ALLOWED_PROTOCOLS,
    SANITIZE_ALLOWED_TAGS,
)
from vibedoc.utils.decorators import requires_dependencies
from vibedoc.utils.security import is_url_scheme_dangerous

logger = logging.getLogger(__name__)


def is_url_safe(url: str) -> bool:
    """Check if a URL is safe (no dangerous schemes).

    Parameters
    ----------
    url : str
        URL to validate

    Returns
    -------
    bool
        True if URL is safe, False if it uses a dangerous scheme

    Examples
    --------
    >>> is_url_safe("https://example.com")
    True

    >>> is_url_safe("javascript:alert('xss')")
    False

    """
    if not url or not url.strip():
        return True

    return not is_url_scheme_dangerous(url)


def sanitize_url(url: str) -> str:
    """Sanitize a URL by removing dangerous schemes.

    Parameters
    ----------
    url : str
        URL to sanitize

    Returns
    -------
    str
        The URL unchanged, or empty string if the URL is dangerous

    Examples
    --------
    >>> sanitize_url("https://example.com")
    'https://example.com'

    >>> sanitize_url("javascript:alert('xss')")
    ''

    """
    if not is_url_safe(url):
        logger.debug("Dropping URL with dangerous scheme: %r", url[:80])
        return ""
    return url


@requires_dependencies("sanitize", DEPS_SANITIZE)
def sanitize_html_string(content: str) -> str:
    """Sanitize rendered markup with bleach.

    Only the tags and attributes the content renderer can produce survive;
    anything else (for example markup smuggled in through pre-rendered string
    nodes) is stripped.

    Parameters
    ----------
    content : str
        HTML content to sanitize

    Returns
    -------
    str
        Sanitized HTML

    Raises
    ------
    DependencyError
        If bleach is not installed

    """
    import bleach

    return bleach.clean(
        content,
        tags=SANITIZE_ALLOWED_TAGS,
        attributes=SANITIZE_ALLOWED_ATTRIBUTES,
        protocols=SANITIZE_ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=False,
    )


__all__ = [
    "is_url_safe",
    "sanitize_url",
    "sanitize_html_string",
]
