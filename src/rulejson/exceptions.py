#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the rulejson library.

This module defines specialized exception classes for the error conditions
that can occur while converting rule ASTs to and from records and text.

Exception Hierarchy
-------------------
- RuleJsonError (base exception)

  - SchemaError (record/node shape violations)
    - UnknownNodeTypeError (type tag not in the node schema)
    - MalformedRecordError (wrong record or payload shape)
      - MissingFieldError (declared field absent from a record)

  - TextCodecError (text encode/decode failures)

  - CompilerError (rule compilation failures)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class RuleJsonError(Exception):
    """Base exception class for all rulejson-specific errors.

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


class SchemaError(RuleJsonError):
    """Base exception for records and nodes that do not fit the node schema."""


class UnknownNodeTypeError(SchemaError):
    """Exception raised when a type tag is not part of the node schema.

    Raised in both directions: when building a record from an exported node
    and when rebuilding a node from a record.

    Parameters
    ----------
    node_type : any
        The unresolvable type tag
    message : str, optional
        Custom error message

    Attributes
    ----------
    node_type : any
        The unresolvable type tag

    """

    def __init__(self, node_type: Any, message: str | None = None):
        """Initialize the error with the offending type tag."""
        if message is None:
            message = f"Unknown node type: {node_type!r}"
        super().__init__(message)
        self.node_type = node_type


class MalformedRecordError(SchemaError):
    """Exception raised when a record or node payload has the wrong shape.

    Examples include a record that is not a mapping, a predicate ``args``
    value that is not a sequence of pairs, or a payload whose length does
    not match the schema.

    Parameters
    ----------
    message : str
        Description of the shape problem
    node_type : str, optional
        Type of the node being converted
    field_name : str, optional
        Field where the problem was found

    """

    def __init__(self, message: str, node_type: str | None = None, field_name: str | None = None):
        """Initialize the error with node and field context."""
        super().__init__(message)
        self.node_type = node_type
        self.field_name = field_name


class MissingFieldError(MalformedRecordError):
    """Exception raised when a record lacks a field its node type declares.

    Parameters
    ----------
    node_type : str
        Type of the record
    field_name : str
        The missing field

    """

    def __init__(self, node_type: str | None, field_name: str):
        """Initialize the error for a missing field."""
        if node_type is None:
            message = f"Record is missing required field '{field_name}'"
        else:
            message = f"Record of type '{node_type}' is missing required field '{field_name}'"
        super().__init__(message, node_type=node_type, field_name=field_name)


class TextCodecError(RuleJsonError):
    """Exception raised when text cannot be decoded or a value cannot be encoded.

    Parameters
    ----------
    message : str
        Description of the codec failure
    codec_name : str, optional
        Name of the codec that failed (e.g., "json", "yaml")
    original_error : Exception, optional
        The underlying decoder/encoder exception

    """

    def __init__(self, message: str, codec_name: str | None = None, original_error: Exception | None = None):
        """Initialize the codec error."""
        super().__init__(message, original_error=original_error)
        self.codec_name = codec_name


class CompilerError(RuleJsonError):
    """Exception for compilers to raise on structurally valid but unusable ASTs.

    The serialization pipeline never raises or wraps this itself; it is
    provided so that compilers plugged into the pipeline share the
    library's error hierarchy.

    Parameters
    ----------
    message : str
        Description of the compilation failure
    node : any, optional
        The AST node that could not be compiled
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, node: Any = None, original_error: Exception | None = None):
        """Initialize the compiler error."""
        super().__init__(message, original_error=original_error)
        self.node = node


class DependencyError(RuleJsonError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    component_name : str
        Name of the component requiring dependencies (e.g., "yaml")
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The first ImportError encountered

    """

    def __init__(
        self,
        component_name: str,
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
                message_parts.append(f"{component_name.upper()} codec requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{component_name.upper()} codec has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            if install_command:
                message += f"\nInstall with: {install_command}"
            else:
                all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
                if all_packages:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                    message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_import_error)
        self.component_name = component_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command


__all__ = [
    "RuleJsonError",
    "SchemaError",
    "UnknownNodeTypeError",
    "MalformedRecordError",
    "MissingFieldError",
    "TextCodecError",
    "CompilerError",
    "DependencyError",
]
