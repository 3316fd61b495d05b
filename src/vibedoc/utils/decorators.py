#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vibedoc/utils/decorators.py
"""Utility decorators for vibedoc.

This module provides the decorator used to guard features that depend on
optional packages, such as bleach-based output sanitization.

"""

from __future__ import annotations

import importlib
from functools import wraps
from typing import Any, Callable, List, Tuple

from vibedoc.exceptions import DependencyError
from vibedoc.utils.packages import check_version_requirement


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the feature (e.g., "sanitize"). This appears in error
        messages to help users identify which extra to install.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "bleach")
        - import_name: Module name for import statement (e.g., "bleach")
        - version_spec: Version requirement (e.g., ">=6.0.0" or "" for any version)

    Returns
    -------
    Callable
        Decorated function that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("sanitize", [("bleach", "bleach", ">=6.0.0")])
        ... def clean(markup):
        ...     import bleach
        ...     return bleach.clean(markup)

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)

                    if version_spec:
                        meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                        if not meets_requirement:
                            version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e

            if missing or version_mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator
