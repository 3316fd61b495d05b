#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the vibedoc library.

Rendering a document never raises: malformed nodes degrade to empty output.
The exceptions below cover the edges around the renderer: loading stored
documents, writing output, invalid options and missing optional packages.

Exception Hierarchy
-------------------
- VibedocError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer)

  - ParsingError (stored document could not be decoded)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class VibedocError(Exception):
    """Base exception class for all vibedoc-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(VibedocError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when a renderer receives the wrong options class.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(VibedocError):
    """Exception raised when a stored document cannot be decoded.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        Stage where parsing failed (e.g. "input_reading", "json_parsing")
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(VibedocError):
    """Exception raised when rendered output cannot be produced or delivered.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        Stage where rendering failed
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing an output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class DependencyError(VibedocError):
    """Exception raised when an optional dependency is missing or too old.

    Parameters
    ----------
    converter_name : str
        Name of the feature requiring dependencies (e.g. "sanitize")
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"'{converter_name}' requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"'{converter_name}' has version mismatches: {mismatch_str}")

            message = ". ".join(message_parts) if message_parts else f"Missing dependencies for '{converter_name}'"

            if not install_command:
                packages_to_install = [f"{name}{spec}" if spec else name for name, spec in missing_packages]
                packages_to_install.extend(f"{name}{required}" for name, required, _ in version_mismatches)
                if packages_to_install:
                    install_command = "pip install " + " ".join(f'"{pkg}"' for pkg in packages_to_install)

            if install_command:
                message += f". Install with: {install_command}"

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command


__all__ = [
    "VibedocError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
    "DependencyError",
]
