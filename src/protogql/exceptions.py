"""Exception hierarchy for protogql.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from ProtoGqlError for easy catching of any protogql-specific error.
"""

from __future__ import annotations


class ProtoGqlError(Exception):
    """Base exception for all protogql errors."""

    pass


class SchemaError(ProtoGqlError):
    """Raised when a descriptor cannot be represented as a GraphQL type.

    Examples:
        - Field kind has no GraphQL counterpart
        - Invalid rename target for a field
    """

    pass


class UnsupportedFieldKindError(SchemaError):
    """Raised when a field's scalar kind is missing from the scalar table.

    Descriptors produced by protoc are always well-formed, so this indicates a
    programming error. It aborts the whole schema build.
    """

    def __init__(self, kind: int, field_name: str | None = None) -> None:
        self.kind = kind
        self.field_name = field_name
        where = f" for field {field_name}" if field_name else ""
        super().__init__(f"Unsupported protobuf field kind {kind}{where}")


class DescriptorSetError(ProtoGqlError):
    """Raised when a serialized descriptor set cannot be parsed or loaded.

    Examples:
        - Truncated or corrupted FileDescriptorSet bytes
        - A file depends on another file missing from the set
        - Conflicting definitions of the same file
    """

    pass
