"""Helpers for building raw document trees in tests."""


def text(value, *marks):
    """Build a raw text node with the given marks (type names or mark dicts)."""
    node = {"type": "text", "text": value}
    if marks:
        node["marks"] = [mark if isinstance(mark, dict) else {"type": mark} for mark in marks]
    return node


def paragraph(*children):
    """Build a raw paragraph node."""
    return {"type": "paragraph", "content": list(children)}


def doc(*children):
    """Build a raw doc node."""
    return {"type": "doc", "content": list(children)}


def image(**attrs):
    """Build a raw image node."""
    return {"type": "image", "attrs": attrs}


def nested(depth, leaf=None):
    """Build a chain of blockquotes ``depth`` levels deep around ``leaf``."""
    node = leaf if leaf is not None else text("deep")
    for _ in range(depth):
        node = {"type": "blockquote", "content": [node]}
    return node
