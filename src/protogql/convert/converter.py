"""Protobuf message and enum descriptors to GraphQL output types.

Conversion is a pure traversal of the descriptor graph. Referenced messages and
enums are converted recursively and cached in a ConversionContext, so every
descriptor maps to exactly one GraphQL type per build, and self-referencing
messages terminate.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union, cast

from google.protobuf.descriptor import Descriptor, EnumDescriptor, FieldDescriptor, FileDescriptor
from graphql import (
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLID,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLOutputType,
)

from ..descriptors import FieldKind, field_shape, iter_file_types
from ..exceptions import SchemaError
from ..naming import field_name, get_reference_name
from .context import ConversionContext
from .scalars import scalar_type

logger = logging.getLogger(__name__)

NODE_ID_FIELD = "id"


def _context(comments: Optional[Mapping[str, str]], context: Optional[ConversionContext]) -> ConversionContext:
    if context is not None:
        return context
    return ConversionContext(comments)


def convert(
    descriptor: Descriptor,
    node_interface: Optional[GraphQLInterfaceType] = None,
    comments: Optional[Mapping[str, str]] = None,
    context: Optional[ConversionContext] = None,
) -> GraphQLObjectType:
    """Convert a message descriptor to a GraphQL object type.

    Fields keep declaration order. Field names are camelCase unless renamed
    (see ``protogql.naming.field_name``). Message and enum fields reference
    types converted through the same context; repeated fields become lists.

    Args:
        descriptor: Message descriptor
        node_interface: Optional Relay-style Node interface. Messages declaring
            an ``id`` field implement it, with ``id`` typed ``ID!``.
        comments: Mapping from fully-qualified element name to documentation.
            Ignored when ``context`` is given.
        context: Conversion context shared across one schema build

    Returns:
        GraphQL object type named after ``get_reference_name(descriptor)``

    Raises:
        UnsupportedFieldKindError: If a field has an unknown scalar kind
        SchemaError: If two fields map to the same GraphQL name, or another
            descriptor already produced the same type name

    Example:
        >>> object_type = convert(Proto1.DESCRIPTOR, None, comments)
        >>> list(object_type.fields)
        ['id', 'intField', 'camelCaseName', ...]
    """
    context = _context(comments, context)
    name = get_reference_name(descriptor)

    cached = context.lookup(name, descriptor.full_name)
    if cached is not None:
        return cast(GraphQLObjectType, cached)

    is_node = node_interface is not None and NODE_ID_FIELD in descriptor.fields_by_name
    fields: dict[str, GraphQLField] = {}

    # Registered before its fields exist; the thunk sees the completed map
    object_type = GraphQLObjectType(
        name,
        fields=lambda: fields,
        interfaces=[node_interface] if is_node and node_interface is not None else None,
        description=context.description(descriptor.full_name),
    )

    with context.transaction():
        context.register(name, descriptor.full_name, object_type)
        logger.debug("Converting message %s to %s", descriptor.full_name, name)

        for field in descriptor.fields:
            output_name = field_name(field, context.options)
            if output_name in fields:
                raise SchemaError(f"{descriptor.full_name}: more than one field maps to {output_name}")

            if is_node and field.name == NODE_ID_FIELD:
                output_type: GraphQLOutputType = GraphQLNonNull(GraphQLID)
            else:
                output_type = _output_type(field, node_interface, context)

            fields[output_name] = GraphQLField(
                output_type,
                description=context.description(field.full_name),
            )

    return object_type


def _output_type(
    field: FieldDescriptor,
    node_interface: Optional[GraphQLInterfaceType],
    context: ConversionContext,
) -> GraphQLOutputType:
    """Resolve the GraphQL type of a field, wrapping repeated fields in a list."""
    shape = field_shape(field)

    element: GraphQLOutputType
    if shape.kind is FieldKind.MESSAGE:
        assert shape.message_type is not None
        element = convert(shape.message_type, node_interface, context=context)
    elif shape.kind is FieldKind.ENUM:
        assert shape.enum_type is not None
        element = convert_enum(shape.enum_type, context=context)
    else:
        assert shape.scalar_type is not None
        element = scalar_type(shape.scalar_type, field.full_name)

    if shape.repeated:
        return GraphQLList(element)
    return element


def convert_enum(
    descriptor: EnumDescriptor,
    comments: Optional[Mapping[str, str]] = None,
    context: Optional[ConversionContext] = None,
) -> GraphQLEnumType:
    """Convert an enum descriptor to a GraphQL enum type.

    Value names are kept verbatim and map to the proto numbers. Value comments
    are looked up as ``<enum full name>.<VALUE>``.

    Args:
        descriptor: Enum descriptor
        comments: Mapping from fully-qualified element name to documentation.
            Ignored when ``context`` is given.
        context: Conversion context shared across one schema build

    Returns:
        GraphQL enum type named after ``get_reference_name(descriptor)``

    Raises:
        SchemaError: If another descriptor already produced the same type name
    """
    context = _context(comments, context)
    name = get_reference_name(descriptor)

    cached = context.lookup(name, descriptor.full_name)
    if cached is not None:
        return cast(GraphQLEnumType, cached)

    values = {
        value.name: GraphQLEnumValue(
            value.number,
            description=context.description(f"{descriptor.full_name}.{value.name}"),
        )
        for value in descriptor.values
    }
    enum_type = GraphQLEnumType(
        name,
        values,
        description=context.description(descriptor.full_name),
    )
    context.register(name, descriptor.full_name, enum_type)
    logger.debug("Converted enum %s to %s", descriptor.full_name, name)
    return enum_type


def convert_file(
    file: FileDescriptor,
    comments: Optional[Mapping[str, str]] = None,
    context: Optional[ConversionContext] = None,
    node_interface: Optional[GraphQLInterfaceType] = None,
) -> list[GraphQLNamedType]:
    """Convert every message and enum declared in a proto file.

    Args:
        file: File descriptor
        comments: Mapping from fully-qualified element name to documentation.
            Ignored when ``context`` is given.
        context: Conversion context shared across one schema build
        node_interface: Optional Node interface, see ``convert``

    Returns:
        Converted types in declaration order, nested types after their parent
    """
    context = _context(comments, context)
    converted: list[GraphQLNamedType] = []
    with context.transaction():
        for declared in iter_file_types(file):
            converted.append(_convert_declared(declared, node_interface, context))
    logger.info("Converted %d types from %s", len(converted), file.name)
    return converted


def _convert_declared(
    descriptor: Union[Descriptor, EnumDescriptor],
    node_interface: Optional[GraphQLInterfaceType],
    context: ConversionContext,
) -> GraphQLNamedType:
    if isinstance(descriptor, EnumDescriptor):
        return convert_enum(descriptor, context=context)
    return convert(descriptor, node_interface, context=context)
