"""Protobuf message descriptors to GraphQL input object types.

Input objects let request messages be passed as GraphQL arguments. They mirror
the output conversion: same field names, same scalar table, lists for repeated
fields. Enum fields reuse the output enum type from the same context.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, cast

from google.protobuf.descriptor import Descriptor, FieldDescriptor
from graphql import GraphQLInputField, GraphQLInputObjectType, GraphQLInputType, GraphQLList

from ..descriptors import FieldKind, field_shape
from ..exceptions import SchemaError
from ..naming import field_name, get_input_reference_name
from .context import ConversionContext
from .converter import convert_enum
from .scalars import scalar_type

logger = logging.getLogger(__name__)


def convert_input(
    descriptor: Descriptor,
    comments: Optional[Mapping[str, str]] = None,
    context: Optional[ConversionContext] = None,
) -> GraphQLInputObjectType:
    """Convert a message descriptor to a GraphQL input object type.

    Args:
        descriptor: Message descriptor
        comments: Mapping from fully-qualified element name to documentation.
            Ignored when ``context`` is given.
        context: Conversion context shared across one schema build

    Returns:
        Input object type named ``<input_prefix><reference name>``

    Raises:
        UnsupportedFieldKindError: If a field has an unknown scalar kind
        SchemaError: If two fields map to the same GraphQL name, or another
            descriptor already produced the same type name
    """
    if context is None:
        context = ConversionContext(comments)
    name = get_input_reference_name(descriptor, context.options.input_prefix)

    cached = context.lookup(name, descriptor.full_name)
    if cached is not None:
        return cast(GraphQLInputObjectType, cached)

    fields: dict[str, GraphQLInputField] = {}
    input_type = GraphQLInputObjectType(
        name,
        fields=lambda: fields,
        description=context.description(descriptor.full_name),
    )
    with context.transaction():
        context.register(name, descriptor.full_name, input_type)
        logger.debug("Converting message %s to input %s", descriptor.full_name, name)

        for field in descriptor.fields:
            output_name = field_name(field, context.options)
            if output_name in fields:
                raise SchemaError(f"{descriptor.full_name}: more than one field maps to {output_name}")
            fields[output_name] = GraphQLInputField(
                _input_type(field, context),
                description=context.description(field.full_name),
            )

    return input_type


def _input_type(field: FieldDescriptor, context: ConversionContext) -> GraphQLInputType:
    shape = field_shape(field)

    element: GraphQLInputType
    if shape.kind is FieldKind.MESSAGE:
        assert shape.message_type is not None
        element = convert_input(shape.message_type, context=context)
    elif shape.kind is FieldKind.ENUM:
        assert shape.enum_type is not None
        element = convert_enum(shape.enum_type, context=context)
    else:
        assert shape.scalar_type is not None
        element = scalar_type(shape.scalar_type, field.full_name)

    if shape.repeated:
        return GraphQLList(element)
    return element
