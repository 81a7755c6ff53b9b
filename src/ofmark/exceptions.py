#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the ofmark library.

The dialect transform stages themselves never raise over well-formed input;
these exceptions are raised by the layers around them (options validation,
config loading, the tokenizer, the pipeline and the renderer).

Exception Hierarchy
-------------------
- OfmarkError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class)

  - ConfigError (unreadable or malformed configuration files)

  - FileError (file access and I/O)

  - ParsingError (tokenizer failures)

  - TransformError (a transform stage failed)

  - RenderingError (output generation failures)

"""

from typing import Any


class OfmarkError(Exception):
    """Base exception class for all ofmark-specific errors.

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


class ValidationError(OfmarkError):
    """Exception raised for invalid option names or values.

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
    """Exception raised when an options object of the wrong type is provided.

    Parameters
    ----------
    component_name : str
        Name of the component that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual type that was received
    message : str, optional
        Custom error message. If not provided, generates one

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigError(OfmarkError):
    """Exception raised when a configuration file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the offending configuration file
    original_error : Exception, optional
        The underlying parse or I/O error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the config error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class FileError(OfmarkError):
    """Exception raised when an input or output file cannot be accessed.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ParsingError(OfmarkError):
    """Exception raised when tokenizing a note fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class TransformError(OfmarkError):
    """Exception raised when a transform stage fails.

    Parameters
    ----------
    message : str
        Description of the transform failure
    transform_name : str, optional
        Name of the stage that failed
    original_error : Exception, optional
        The underlying exception that caused the transform failure

    """

    def __init__(self, message: str, transform_name: str | None = None, original_error: Exception | None = None):
        """Initialize the transform error."""
        super().__init__(message, original_error)
        self.transform_name = transform_name


class RenderingError(OfmarkError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


__all__ = [
    "OfmarkError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "FileError",
    "ParsingError",
    "TransformError",
    "RenderingError",
]
