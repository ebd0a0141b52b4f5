"""Protobuf scalar kinds to GraphQL scalar types."""

from __future__ import annotations

from google.protobuf.descriptor import FieldDescriptor
from graphql import GraphQLBoolean, GraphQLFloat, GraphQLInt, GraphQLScalarType, GraphQLString

from ..exceptions import UnsupportedFieldKindError

SCALAR_TYPES: dict[int, GraphQLScalarType] = {
    # Integers
    FieldDescriptor.TYPE_INT32: GraphQLInt,
    FieldDescriptor.TYPE_INT64: GraphQLInt,
    FieldDescriptor.TYPE_UINT32: GraphQLInt,
    FieldDescriptor.TYPE_UINT64: GraphQLInt,
    FieldDescriptor.TYPE_SINT32: GraphQLInt,
    FieldDescriptor.TYPE_SINT64: GraphQLInt,
    FieldDescriptor.TYPE_FIXED32: GraphQLInt,
    FieldDescriptor.TYPE_FIXED64: GraphQLInt,
    FieldDescriptor.TYPE_SFIXED32: GraphQLInt,
    FieldDescriptor.TYPE_SFIXED64: GraphQLInt,
    # Floating point
    FieldDescriptor.TYPE_FLOAT: GraphQLFloat,
    FieldDescriptor.TYPE_DOUBLE: GraphQLFloat,
    FieldDescriptor.TYPE_BOOL: GraphQLBoolean,
    FieldDescriptor.TYPE_STRING: GraphQLString,
    FieldDescriptor.TYPE_BYTES: GraphQLString,
}


def scalar_type(kind: int, field_name: str | None = None) -> GraphQLScalarType:
    """Return the GraphQL scalar for a ``FieldDescriptor.TYPE_*`` constant.

    Args:
        kind: Protobuf field type constant
        field_name: Fully-qualified field name, used in the error message

    Returns:
        GraphQL scalar type

    Raises:
        UnsupportedFieldKindError: If the kind is not a known scalar
    """
    try:
        return SCALAR_TYPES[kind]
    except KeyError:
        raise UnsupportedFieldKindError(kind, field_name) from None
