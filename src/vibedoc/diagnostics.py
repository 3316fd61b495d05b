#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/diagnostics.py
"""Diagnostic callback system for document rendering.

Rendering never fails on malformed content; instead the renderer reports what
it skipped. Every diagnostic is logged at WARNING level and, when the caller
registered a callback, delivered to it as a :class:`DiagnosticEvent`. This lets
a page layer collect data-quality problems (for example posts with broken
images) without parsing log output.

Examples
--------
Collecting diagnostics while rendering:

    >>> from vibedoc import content_to_html
    >>> events = []
    >>> html = content_to_html({"type": "image", "attrs": {}}, diagnostic_callback=events.append)
    >>> html
    ''
    >>> events[0].event_type
    'missing_image_src'

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from vibedoc.constants import DiagnosticType


@dataclass
class DiagnosticEvent:
    """Diagnostic event raised while rendering a document tree.

    Parameters
    ----------
    event_type : DiagnosticType
        Kind of anomaly:

        - "missing_image_src": an image node had no usable source and was skipped
        - "depth_exceeded": nesting went past the configured maximum depth
        - "cycle_detected": a node appeared again inside its own subtree
        - "node_error": rendering one node raised unexpectedly; the node was skipped

    message : str
        Human-readable description of the event
    node_type : str or None, default None
        The ``type`` of the offending node, when known
    metadata : dict, default empty
        Additional event-specific information (e.g. ``depth``, ``error``)

    """

    event_type: DiagnosticType
    message: str
    node_type: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return human-readable string representation."""
        where = f" ({self.node_type})" if self.node_type else ""
        return f"[{self.event_type.upper()}]{where} {self.message}"


DiagnosticCallback = Callable[[DiagnosticEvent], None]
"""Type alias for diagnostic callback functions.

Callbacks should not raise; an exception from a callback is logged and
rendering continues.
"""

__all__ = ["DiagnosticEvent", "DiagnosticCallback"]
