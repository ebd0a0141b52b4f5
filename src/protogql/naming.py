"""GraphQL names for protobuf descriptors.

Reference names identify a converted type globally. They are derived from the
descriptor's fully-qualified name, so the same descriptor always maps to the
same GraphQL type name:

    >>> get_reference_name(Proto1.DESCRIPTOR)          # package "shop.v1"
    'shop_v1_Proto1'
    >>> get_reference_name(Proto1.InnerProto.DESCRIPTOR)
    'shop_v1_Proto1_InnerProto'
"""

from __future__ import annotations

import re
from typing import Any

from google.protobuf.descriptor import FieldDescriptor

from .config import DEFAULT_OPTIONS, ConverterOptions

_INVALID_CHARS = re.compile(r"[^0-9A-Za-z_]")


def reference_name_for(full_name: str, file_name: str = "", package: str = "") -> str:
    """Build a reference name from the parts of a descriptor's path.

    Args:
        full_name: Dotted fully-qualified name (``package.Outer.Inner``)
        file_name: Path of the .proto file declaring the type
        package: Package declared by that file

    Returns:
        A valid GraphQL type name
    """
    name = full_name.replace(".", "_")

    # Package-less types are scoped by their source file instead
    if not package and file_name:
        stem = file_name[: -len(".proto")] if file_name.endswith(".proto") else file_name
        prefix = "_".join(segment for segment in stem.split("/") if segment)
        if prefix:
            name = f"{prefix}_{name}"

    name = _INVALID_CHARS.sub("_", name)
    if name[:1].isdigit():
        name = f"_{name}"
    return name


def get_reference_name(descriptor: Any) -> str:
    """Return the GraphQL type name of a message or enum descriptor.

    Args:
        descriptor: Message or enum descriptor

    Returns:
        Reference name, e.g. ``shop_v1_Proto1_InnerProto``
    """
    file = descriptor.file
    return reference_name_for(
        descriptor.full_name,
        file.name if file is not None else "",
        file.package if file is not None else "",
    )


def get_input_reference_name(descriptor: Any, prefix: str = DEFAULT_OPTIONS.input_prefix) -> str:
    """Return the GraphQL input object name of a message descriptor."""
    return f"{prefix}{get_reference_name(descriptor)}"


def to_camel_case(name: str) -> str:
    """Convert a proto field name to lowerCamelCase.

    Follows protobuf's default JSON name rule: every underscore is dropped and
    the character after it is upper-cased.

    Args:
        name: Proto field name, e.g. ``camel_case_name``

    Returns:
        camelCase name, e.g. ``camelCaseName``
    """
    result = []
    capitalize_next = False
    for char in name:
        if char == "_":
            capitalize_next = True
        elif capitalize_next:
            result.append(char.upper())
            capitalize_next = False
        else:
            result.append(char)
    return "".join(result)


def field_name(field: FieldDescriptor, options: ConverterOptions = DEFAULT_OPTIONS) -> str:
    """Return the GraphQL name of a field.

    An entry in ``options.field_renames`` wins, then an explicit json_name,
    then the camelCase form of the proto name.

    Args:
        field: Field descriptor
        options: Converter options

    Returns:
        Output field name
    """
    renamed = options.field_renames.get(field.full_name)
    if renamed is not None:
        return renamed

    default = to_camel_case(field.name)
    if options.honor_json_name:
        # json_name is always populated; it only differs when set explicitly
        if field.json_name and field.json_name != default:
            return field.json_name
    return default
