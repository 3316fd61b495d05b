#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/utils/security.py
"""URL scheme safety checks.

Stored documents come from an editor that users control, so any URL pulled
out of a node (link hrefs, image sources) may carry a script scheme. These
helpers classify such URLs; the renderer decides what to do with them.

"""

from __future__ import annotations

from urllib.parse import urlparse

from vibedoc.constants import DANGEROUS_SCHEMES


def is_relative_url(url: str) -> bool:
    """Check if a URL is a relative URL.

    Relative URLs do not have a scheme and typically start with #, /, ./, ../, or ?.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if URL is relative, False otherwise

    Examples
    --------
    >>> is_relative_url("#section")
    True
    >>> is_relative_url("../parent/file.html")
    True
    >>> is_relative_url("https://example.com")
    False

    """
    if not url or not url.strip():
        return True

    return url.strip().startswith(("#", "/", "./", "../", "?"))


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a dangerous scheme.

    Dangerous schemes include javascript:, vbscript:, data:text/html, and others
    that can be used for XSS attacks.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if URL uses a dangerous scheme, False otherwise

    Examples
    --------
    >>> is_url_scheme_dangerous("https://example.com")
    False
    >>> is_url_scheme_dangerous("javascript:alert('xss')")
    True
    >>> is_url_scheme_dangerous("/relative/path")
    False

    """
    if not url or not url.strip():
        return False

    # Browsers ignore embedded whitespace and control characters in schemes
    url_lower = "".join(ch for ch in url.lower() if ch > " ")

    if is_relative_url(url_lower):
        return False

    for dangerous_scheme in DANGEROUS_SCHEMES:
        if url_lower.startswith(dangerous_scheme):
            return True

    try:
        scheme = urlparse(url_lower).scheme
    except ValueError:
        return True

    return scheme in ("javascript", "vbscript", "about")


__all__ = ["is_relative_url", "is_url_scheme_dangerous"]
