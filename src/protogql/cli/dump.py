"""Descriptor set dump CLI command."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from google.protobuf.descriptor import EnumDescriptor
from graphql import print_type

from ..comments import comments_from_descriptor_set
from ..config import ConverterOptions
from ..convert import ConversionContext, convert, convert_enum, convert_input
from ..descriptors import build_pool, find_type, iter_file_types, parse_descriptor_set


def dump_descriptor_set(
    file_path: Path,
    type_names: Optional[Sequence[str]] = None,
    inputs: bool = False,
    options: Optional[ConverterOptions] = None,
) -> str:
    """Convert the types of a descriptor set file and render them as SDL.

    Types referenced by the requested ones are rendered too, in the order they
    were converted.

    Args:
        file_path: Serialized FileDescriptorSet
        type_names: Fully-qualified message or enum names (default: all types)
        inputs: Also render input object types for messages
        options: Converter options

    Returns:
        GraphQL SDL for the converted types
    """
    data = file_path.read_bytes()
    file_set = parse_descriptor_set(data)
    pool = build_pool(file_set)

    options = options or ConverterOptions()
    context = ConversionContext(comments_from_descriptor_set(data, options), options)

    if type_names:
        descriptors = [find_type(pool, name) for name in type_names]
    else:
        descriptors = []
        for file_proto in file_set.file:
            file = pool.FindFileByName(file_proto.name)
            descriptors.extend(iter_file_types(file))

    for descriptor in descriptors:
        if isinstance(descriptor, EnumDescriptor):
            convert_enum(descriptor, context=context)
            continue
        convert(descriptor, context=context)
        if inputs:
            convert_input(descriptor, context=context)

    return "\n\n".join(print_type(graphql_type) for graphql_type in context.types.values())
