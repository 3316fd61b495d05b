#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/renderers/base.py
"""Base classes for document tree renderers.

This module defines the abstract base class shared by vibedoc renderers. It
provides options validation, diagnostic reporting and writing rendered output
to files or streams; subclasses only implement :meth:`BaseRenderer.render`.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Optional, Union

from vibedoc.diagnostics import DiagnosticCallback, DiagnosticEvent
from vibedoc.exceptions import InvalidOptionsError, OutputWriteError
from vibedoc.options.base import BaseRendererOptions
from vibedoc.utils.io_utils import write_content

logger = logging.getLogger(__name__)


class BaseRenderer(ABC):
    """Abstract base class for all document tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options
    diagnostic_callback : DiagnosticCallback or None, default = None
        Called with a :class:`DiagnosticEvent` for every anomaly the renderer
        works around

    Examples
    --------
    Creating a custom renderer:

        >>> from vibedoc.document import extract_text
        >>> class TextLengthRenderer(BaseRenderer):
        ...     def render(self, node):
        ...         return str(len(extract_text(node)))

    """

    def __init__(
        self,
        options: BaseRendererOptions | None = None,
        diagnostic_callback: Optional[DiagnosticCallback] = None,
    ):
        """Initialize the renderer with optional configuration and diagnostics callback."""
        self.options = options
        self.diagnostic_callback = diagnostic_callback

    @abstractmethod
    def render(self, node: Any) -> str:
        """Render a document tree to a string.

        Implementations must be total: malformed input degrades to partial or
        empty output and is reported through diagnostics, never raised.

        Parameters
        ----------
        node : Any
            Document tree as decoded from JSON

        Returns
        -------
        str
            Rendered output

        """

    def render_to_file(self, node: Any, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a document tree and write the result.

        Parameters
        ----------
        node : Any
            Document tree as decoded from JSON
        output : str, Path, IO[bytes] or IO[str]
            File path or file-like object

        Raises
        ------
        OutputWriteError
            If the output file cannot be written

        """
        rendered = self.render(node)
        try:
            write_content(rendered, output)
        except OSError as e:
            raise OutputWriteError(str(output), original_error=e) from e

    def _emit_diagnostic(self, event_type: str, message: str, node_type: str | None = None, **metadata: Any) -> None:
        """Log a diagnostic and deliver it to the callback if one is registered.

        Parameters
        ----------
        event_type : str
            Diagnostic kind (missing_image_src, depth_exceeded, cycle_detected, node_error)
        message : str
            Human-readable description
        node_type : str or None
            Type of the offending node
        **metadata
            Additional event-specific information

        Notes
        -----
        A callback that raises is logged and ignored so one faulty observer
        cannot interrupt rendering.

        """
        event = DiagnosticEvent(
            event_type=event_type,  # type: ignore[arg-type]
            message=message,
            node_type=node_type,
            metadata=metadata,
        )
        logger.warning(str(event))

        if not self.diagnostic_callback:
            return

        try:
            self.diagnostic_callback(event)
        except Exception as e:
            logger.warning(f"Diagnostic callback raised exception: {e}", exc_info=True)

    @staticmethod
    def _validate_options_type(
        options: Any,
        expected_type: type,
        renderer_name: str,
    ) -> None:
        """Validate that options are of the correct type.

        Parameters
        ----------
        options : Any
            Options object to validate (can be None)
        expected_type : type
            Expected options class type
        renderer_name : str
            Name of the renderer for error messages

        Raises
        ------
        InvalidOptionsError
            If options is not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


__all__ = ["BaseRenderer"]
