#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/blog.py
"""Helpers for publishing blog posts.

These are the pure parts of post creation: turning a title into a URL slug,
checking slugs, picking a free slug, estimating reading time and validating
a draft before it is stored. Storage itself is the caller's concern; slug
uniqueness takes an ``exists`` callable instead of a database handle.

Examples
--------
    >>> slugify_title("Belajar Python: Dasar-Dasar!")
    'belajar-python-dasardasar'
    >>> taken = {"hello-world"}
    >>> ensure_unique_slug("hello-world", taken.__contains__)
    'hello-world-2'

"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Callable

from vibedoc.constants import (
    DEFAULT_SLUG_MAX_ATTEMPTS,
    DEFAULT_SLUG_MAX_LENGTH,
    DEFAULT_WORDS_PER_MINUTE,
    MAX_VALID_SLUG_LENGTH,
    MIN_SERIALIZED_CONTENT_LENGTH,
    MIN_TITLE_LENGTH,
    SLUG_FALLBACK,
)
from vibedoc.exceptions import ValidationError

logger = logging.getLogger(__name__)

_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify_title(title: str, max_length: int = DEFAULT_SLUG_MAX_LENGTH) -> str:
    """Create a URL slug from a post or project title.

    The title is trimmed and lowercased, characters other than ASCII letters,
    digits and whitespace are dropped, whitespace runs become single hyphens,
    and the result is cut to ``max_length`` without a trailing hyphen.

    Parameters
    ----------
    title : str
        Title to slugify
    max_length : int, default = 80
        Maximum slug length

    Returns
    -------
    str
        The slug, or "project" when nothing usable remains

    Examples
    --------
    >>> slugify_title("  Hello   World  ")
    'hello-world'
    >>> slugify_title("!!!")
    'project'

    """
    base = title.strip().lower()
    base = re.sub(r"[^a-z0-9\s]", "", base)
    base = re.sub(r"\s+", "-", base)
    base = base.strip("-")

    if len(base) > max_length:
        base = base[:max_length].rstrip("-")

    return base or SLUG_FALLBACK


def is_valid_slug(slug: str) -> bool:
    """Check that a slug is lowercase alphanumeric words joined by single hyphens.

    Examples
    --------
    >>> is_valid_slug("hello-world"), is_valid_slug("-hello"), is_valid_slug("Hello")
    (True, False, False)

    """
    return bool(slug) and len(slug) <= MAX_VALID_SLUG_LENGTH and _SLUG_PATTERN.match(slug) is not None


def ensure_unique_slug(
    base_slug: str,
    exists: Callable[[str], bool],
    max_attempts: int = DEFAULT_SLUG_MAX_ATTEMPTS,
) -> str:
    """Find a slug not yet taken, appending -2, -3, ... to the base slug.

    Parameters
    ----------
    base_slug : str
        Preferred slug
    exists : Callable[[str], bool]
        Returns True when a slug is already used (e.g. a database lookup)
    max_attempts : int, default = 100
        Number of suffixes to try before giving up

    Returns
    -------
    str
        The first free candidate. When every attempt is taken, or when
        ``exists`` fails, the current candidate is returned and a message is
        logged; the store's own uniqueness constraint has the final word.

    """
    slug = base_slug
    attempt = 1

    while True:
        try:
            if not exists(slug):
                return slug
        except Exception as e:
            logger.error("Error checking slug uniqueness for %r: %s", slug, e)
            return slug

        attempt += 1
        if attempt > max_attempts:
            logger.warning("Slug collision detection exceeded %d attempts for %r", max_attempts, base_slug)
            return slug
        slug = f"{base_slug}-{attempt}"


def _serialize_content(content: Any) -> str:
    try:
        return json.dumps(content, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise ValidationError(
            f"Post content is not JSON serializable: {e}",
            parameter_name="content",
            parameter_value=type(content).__name__,
            original_error=e,
        ) from e


def estimate_read_time(content: Any, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """Estimate reading time of a stored post in whole minutes.

    The estimate counts space-separated chunks of the post's compact JSON
    serialization, the same figure stored alongside existing posts, so new
    and old posts stay comparable.

    Parameters
    ----------
    content : Any
        Document tree of the post
    words_per_minute : int, default = 200
        Reading speed

    Returns
    -------
    int
        Minutes, at least 1

    Raises
    ------
    ValueError
        If words_per_minute is not positive
    ValidationError
        If the content cannot be serialized to JSON

    """
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")

    words = len(_serialize_content(content).split(" "))
    return max(1, math.ceil(words / words_per_minute))


def validate_post(title: str | None, content: Any) -> list[str]:
    """Check a draft post before it is published.

    Parameters
    ----------
    title : str or None
        Post title
    content : Any
        Document tree of the post

    Returns
    -------
    list of str
        Problems found; an empty list means the draft is publishable

    Examples
    --------
    >>> validate_post("Hi", None)
    ['Title must be at least 5 characters', 'Content is too short']

    """
    problems = []

    if not title or len(title) < MIN_TITLE_LENGTH:
        problems.append(f"Title must be at least {MIN_TITLE_LENGTH} characters")

    if not content:
        problems.append("Content is too short")
    else:
        try:
            serialized = _serialize_content(content)
        except ValidationError as e:
            problems.append(e.message)
        else:
            if len(serialized) < MIN_SERIALIZED_CONTENT_LENGTH:
                problems.append("Content is too short")

    return problems


__all__ = [
    "ensure_unique_slug",
    "estimate_read_time",
    "is_valid_slug",
    "slugify_title",
    "validate_post",
]
