#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdlayout library.

This module defines specialized exception classes for the error conditions
that can occur while turning a document tree into a layout tree. A failed
build is all-or-nothing: none of these errors leave a partial layout behind.

Exception Hierarchy
-------------------
- MdLayoutError (base exception)

  - ValidationError (parameter/option/payload validation)
    - AttributeParseError (unparseable element attribute values)
    - StyleSheetError (invalid style sheet definitions)

  - MalformedTreeError (input tree violates the builder's contract)

"""

from typing import Any


class MdLayoutError(Exception):
    """Base exception class for all mdlayout-specific errors.

    Catching this will catch every error raised by the library.

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


class ValidationError(MdLayoutError):
    """Exception raised for invalid input parameters, options or payloads.

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


class AttributeParseError(ValidationError):
    """Exception raised when an element attribute cannot be parsed.

    Examples are a non-numeric ``start`` on an ordered list or a malformed
    ``#WxH`` dimension suffix on an image source. These are reported rather
    than defaulted so that authoring mistakes stay visible.

    Parameters
    ----------
    tag : str
        Tag of the element carrying the attribute
    attribute : str
        Name of the attribute
    value : str
        The raw attribute value
    message : str, optional
        Custom error message. If not provided, a message is generated
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        tag: str,
        attribute: str,
        value: str,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the attribute parse error."""
        if message is None:
            message = f"Cannot parse attribute '{attribute}' of <{tag}>: {value!r}"
        super().__init__(message, parameter_name=attribute, parameter_value=value, original_error=original_error)
        self.tag = tag
        self.attribute = attribute


class StyleSheetError(ValidationError):
    """Exception raised for an invalid style sheet definition.

    Parameters
    ----------
    message : str
        Description of the problem
    parameter_name : str, optional
        Style sheet key that was rejected
    parameter_value : any, optional
        The rejected value
    original_error : Exception, optional
        The original exception that caused this error

    """


class MalformedTreeError(MdLayoutError):
    """Exception raised when the input tree breaks the builder's contract.

    These are defects of an upstream stage (parser or pre-processing), for
    example unbalanced builder stacks at the end of a build, a ``tr`` outside
    of any ``table`` or an unrecognized cell alignment.

    Parameters
    ----------
    message : str
        Description of the defect
    node_tag : str, optional
        Tag of the element being processed when the defect was found
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    node_tag : str or None
        Tag of the offending element, if known

    """

    def __init__(self, message: str, node_tag: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed tree error."""
        super().__init__(message, original_error=original_error)
        self.node_tag = node_tag


__all__ = [
    "MdLayoutError",
    "ValidationError",
    "AttributeParseError",
    "StyleSheetError",
    "MalformedTreeError",
]
