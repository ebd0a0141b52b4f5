"""protogql: Protocol Buffer descriptors as GraphQL types

A Python library converting protobuf message and enum descriptors into
graphql-core schema types, documented with the comments protoc keeps in a
compiled descriptor set.

Key Features:
- Collision-resistant type names derived from fully-qualified proto names
- camelCase field names with json_name and explicit rename overrides
- Recursive and self-referencing messages converted to shared type instances
- Leading and trailing proto comments as GraphQL descriptions

Quick Start:
    >>> from protogql import comments_from_file, convert
    >>> comments = comments_from_file("descriptor_set.desc")
    >>> order_type = convert(Order.DESCRIPTOR, None, comments)
    >>> order_type.name
    'shop_v1_Order'
"""

from __future__ import annotations

from .comments import (
    comments_from_descriptor_set,
    comments_from_file,
    comments_from_file_proto,
    format_comment,
)
from .config import ConverterOptions
from .convert import (
    ConversionContext,
    convert,
    convert_enum,
    convert_file,
    convert_input,
)
from .descriptors import FieldKind, FieldShape, build_pool, field_shape, parse_descriptor_set
from .exceptions import (
    DescriptorSetError,
    ProtoGqlError,
    SchemaError,
    UnsupportedFieldKindError,
)
from .naming import field_name, get_input_reference_name, get_reference_name, to_camel_case

__version__ = "0.1.0"

__all__ = [
    # Conversion
    "convert",
    "convert_enum",
    "convert_file",
    "convert_input",
    "ConversionContext",
    "ConverterOptions",
    # Naming
    "get_reference_name",
    "get_input_reference_name",
    "field_name",
    "to_camel_case",
    # Comments
    "comments_from_descriptor_set",
    "comments_from_file",
    "comments_from_file_proto",
    "format_comment",
    # Descriptors
    "parse_descriptor_set",
    "build_pool",
    "field_shape",
    "FieldKind",
    "FieldShape",
    # Exceptions
    "ProtoGqlError",
    "SchemaError",
    "UnsupportedFieldKindError",
    "DescriptorSetError",
    # Version
    "__version__",
]
