#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the chatmd library.

This module defines specialized exception classes for the error conditions
that can occur while transcoding between chat components and Discord
markdown.

Exception Hierarchy
-------------------
- ChatMdError (base exception)

  - ValidationError (option and configuration validation)
    - RendererRegistrationError (duplicate or reserved renderer)
    - ProviderMissingError (no text provider for a component kind)

  - ParsingError (markdown or component JSON could not be parsed)

  - RenderingError (output generation failures)
    - NestingDepthError (input nested deeper than the configured bound)

"""

from typing import Any


class ChatMdError(Exception):
    """Base exception class for all chatmd-specific errors.

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


class ValidationError(ChatMdError):
    """Exception raised for invalid options or configuration.

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


class RendererRegistrationError(ValidationError):
    """Exception raised when a renderer cannot be registered or removed.

    Raised immediately by the options methods that edit the renderer chain,
    never deferred to render time.

    Parameters
    ----------
    message : str
        Description of the registration problem
    renderer : any, optional
        The offending renderer instance

    """

    def __init__(self, message: str, renderer: Any = None):
        """Initialize the registration error."""
        super().__init__(message, parameter_name="renderers", parameter_value=renderer)
        self.renderer = renderer


class ProviderMissingError(ValidationError):
    """Exception raised when a component needs a text provider that is not configured.

    Parameters
    ----------
    provider_name : str
        Name of the option holding the missing provider
    component : any, optional
        The component whose text could not be resolved

    """

    def __init__(self, provider_name: str, component: Any = None):
        """Initialize the missing provider error."""
        super().__init__(
            f"No {provider_name} configured, cannot resolve the text of {type(component).__name__}",
            parameter_name=provider_name,
            parameter_value=None,
        )
        self.component = component


class ParsingError(ChatMdError):
    """Exception raised when input cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the parsing error
    source : str, optional
        The source text that failed to parse
    position : int, optional
        Offset in the source where parsing stopped
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        source: str | None = None,
        position: int | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the parsing error."""
        super().__init__(message, original_error=original_error)
        self.source = source
        self.position = position


class RenderingError(ChatMdError):
    """Exception raised when producing output fails."""


class NestingDepthError(RenderingError):
    """Exception raised when input is nested deeper than the configured limit.

    Parameters
    ----------
    depth : int
        Depth that was reached
    limit : int
        Configured maximum depth

    """

    def __init__(self, depth: int, limit: int):
        """Initialize the nesting depth error."""
        super().__init__(f"Nesting too deep: depth {depth} exceeds the limit of {limit}")
        self.depth = depth
        self.limit = limit
