#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the gridtable library.

This module defines specialized exception classes for the error conditions
that can occur while decoding and encoding grid tables. Stream I/O errors
are not wrapped: ``OSError`` propagates to the caller unchanged.

Exception Hierarchy
-------------------
- GridTableError (base exception)

  - ValidationError (encode-time table checks, option validation)
    - InvalidOptionsError (wrong options class)
    - ConfigurationError (unknown style, incompatible options)

  - FormatError (unknown format names)

  - DependencyError (optional packages not installed)

  - ParsingError (input parsing failures)
    - ParseError (structural grid errors with line context)

"""

from typing import Any


class GridTableError(Exception):
    """Base exception class for all gridtable-specific errors.

    Catching this will catch all library-specific errors.

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


class ValidationError(GridTableError):
    """Exception raised for invalid tables, parameters or options.

    This exception covers validation errors such as:
    - A table with no headers handed to the renderer
    - A row whose length does not match the header count
    - Invalid parameter values

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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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
    """Exception raised when an incorrect options class is given to a parser or renderer.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received

    """

    def __init__(self, converter_name: str, expected_type: type, received_type: type):
        """Initialize the invalid options error."""
        message = (
            f"{converter_name} expected options of type '{expected_type.__name__}' "
            f"but received '{received_type.__name__}'"
        )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigurationError(ValidationError):
    """Exception raised when codec configuration cannot be resolved.

    Raised by the decoder for an unknown style name before any input
    line is read.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    parameter_name : str, optional
        Name of the offending option
    parameter_value : any, optional
        The offending value

    """


class FormatError(GridTableError):
    """Exception raised when an unknown format name is requested.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_type : str, optional
        The unsupported format name
    supported_formats : list[str], optional
        List of supported formats for reference

    Attributes
    ----------
    format_type : str or None
        The format that was not supported
    supported_formats : list[str] or None
        Available supported formats

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            if format_type:
                message = f"Unsupported format: '{format_type}'"
                if supported_formats:
                    message += f". Supported formats: {', '.join(supported_formats)}"
            else:
                message = "Table format is not supported for conversion"

        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class ParsingError(GridTableError):
    """Exception raised when table parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class ParseError(ParsingError):
    """Structural grid-table error tied to a specific input line.

    Parameters
    ----------
    line_number : int
        1-based number of the offending input line
    message : str
        Description of the structural problem
    raw_line : str, default ""
        The offending line as read (empty when the input ended early)
    parsing_stage : str, optional
        Parser state in which the error was detected

    Attributes
    ----------
    line_number : int
        1-based line number
    raw_line : str
        The offending input text

    """

    def __init__(self, line_number: int, message: str, raw_line: str = "", parsing_stage: str | None = None):
        """Initialize the parse error with positional context."""
        self.line_number = max(1, line_number)
        self.raw_line = raw_line
        super().__init__(
            f"parse error on line {self.line_number}: {message} (line: {raw_line!r})", parsing_stage=parsing_stage
        )
        # Keep the bare description; the formatted text is available via str()
        self.message = message


class DependencyError(GridTableError):
    """Exception raised when an optional package is not installed.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring the packages
    missing_packages : list[str]
        Names of the packages that could not be imported
    install_command : str, optional
        Suggested command to install them
    message : str, optional
        Custom error message

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[str],
        install_command: str = "",
        message: str | None = None,
    ):
        """Initialize the dependency error with package details."""
        if message is None:
            pkg_list = ", ".join(f"'{name}'" for name in missing_packages)
            message = f"{feature_name} requires the following packages: {pkg_list}"
            message += f"\nInstall with: {install_command or 'pip install ' + ' '.join(missing_packages)}"

        super().__init__(message)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.install_command = install_command
