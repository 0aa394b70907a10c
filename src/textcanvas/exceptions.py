#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the textcanvas library.

This module defines specialized exception classes for the error conditions
that can occur while reading, parsing and rendering HTML documents. Layout
itself never raises for structurally odd input (cells outside tables,
unbalanced table tags); these exceptions cover the surrounding concerns.

Exception Hierarchy
-------------------
- TextCanvasError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (invalid ``ParserConfig`` values)
    - ConfigError (invalid configuration files)

  - InputError (unsupported or unreadable input)

  - ParsingError (HTML backend failures)

  - DependencyError (missing parser backends)

"""

from __future__ import annotations

from typing import Any


class TextCanvasError(Exception):
    """Base exception class for all textcanvas-specific errors.

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


class ValidationError(TextCanvasError):
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
    """Exception raised when a ``ParserConfig`` field holds an unsupported value.

    Parameters
    ----------
    parameter_name : str
        Name of the offending option
    parameter_value : any
        The rejected value
    choices : sequence of str, optional
        The accepted values, used to build a helpful message
    message : str, optional
        Custom error message. Generated from the other arguments if omitted.

    """

    def __init__(
        self,
        parameter_name: str,
        parameter_value: Any,
        choices: tuple[str, ...] | None = None,
        message: str | None = None,
    ):
        """Initialize the options error and build a message listing valid choices."""
        if message is None:
            message = f"Invalid value for {parameter_name}: {parameter_value!r}"
            if choices:
                message += f". Expected one of: {', '.join(choices)}"
        super().__init__(message, parameter_name=parameter_name, parameter_value=parameter_value)
        self.choices = choices


class ConfigError(ValidationError):
    """Exception raised when a configuration file cannot be used.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the configuration file
    original_error : Exception, optional
        The underlying decode or I/O error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name="config", parameter_value=config_path, original_error=original_error)
        self.config_path = config_path


class InputError(TextCanvasError):
    """Exception raised when the HTML source cannot be read.

    Parameters
    ----------
    message : str
        Description of the problem
    input_type : str, optional
        Name of the rejected input type (e.g. ``"int"`` or ``"path"``)
    original_error : Exception, optional
        The underlying I/O error

    """

    def __init__(self, message: str, input_type: str | None = None, original_error: Exception | None = None):
        """Initialize the input error."""
        super().__init__(message, original_error=original_error)
        self.input_type = input_type


class ParsingError(TextCanvasError):
    """Exception raised when the HTML backend fails to build a tree."""


class DependencyError(TextCanvasError):
    """Exception raised when a selected HTML parser backend is not installed.

    Parameters
    ----------
    parser_name : str
        The parser backend that was requested
    missing_packages : list[str]
        Packages to install
    message : str, optional
        Custom error message. Generated if omitted.
    original_error : Exception, optional
        The error reported by BeautifulSoup

    """

    def __init__(
        self,
        parser_name: str,
        missing_packages: list[str],
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error with an install hint."""
        if message is None:
            message = f"HTML parser {parser_name!r} is not available."
            if missing_packages:
                message += f"\nInstall with: pip install {' '.join(missing_packages)}"
        super().__init__(message, original_error=original_error)
        self.parser_name = parser_name
        self.missing_packages = missing_packages


__all__ = [
    "TextCanvasError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "InputError",
    "ParsingError",
    "DependencyError",
]
