"""Descriptor set loading and field classification.

This module turns serialized ``FileDescriptorSet`` bytes (as written by
``protoc --descriptor_set_out``) into a private descriptor pool, and classifies
fields into the closed set of kinds the converters handle.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Union

from google.protobuf import descriptor_pb2, descriptor_pool
from google.protobuf.descriptor import (
    Descriptor,
    EnumDescriptor,
    FieldDescriptor,
    FileDescriptor,
)
from google.protobuf.message import DecodeError

from .exceptions import DescriptorSetError

logger = logging.getLogger(__name__)


class FieldKind(enum.Enum):
    """Kind of value a field holds."""

    SCALAR = "scalar"
    ENUM = "enum"
    MESSAGE = "message"


@dataclass(frozen=True)
class FieldShape:
    """Classified field type.

    Exactly one payload is set, matching ``kind``.

    Attributes:
        kind: Field kind
        repeated: Whether the field is a repeated (or map) field
        scalar_type: ``FieldDescriptor.TYPE_*`` constant for scalar fields
        enum_type: Enum descriptor for enum fields
        message_type: Message descriptor for message and group fields
    """

    kind: FieldKind
    repeated: bool
    scalar_type: Optional[int] = None
    enum_type: Optional[EnumDescriptor] = None
    message_type: Optional[Descriptor] = None


def _is_repeated(field: FieldDescriptor) -> bool:
    # protobuf 6 deprecates FieldDescriptor.label in favour of is_repeated
    is_repeated = getattr(field, "is_repeated", None)
    if is_repeated is not None:
        return bool(is_repeated)
    return field.label == FieldDescriptor.LABEL_REPEATED


def field_shape(field: FieldDescriptor) -> FieldShape:
    """Classify a field descriptor.

    Args:
        field: Field descriptor

    Returns:
        FieldShape describing the field
    """
    repeated = _is_repeated(field)

    if field.message_type is not None:
        return FieldShape(FieldKind.MESSAGE, repeated, message_type=field.message_type)
    if field.enum_type is not None:
        return FieldShape(FieldKind.ENUM, repeated, enum_type=field.enum_type)
    return FieldShape(FieldKind.SCALAR, repeated, scalar_type=field.type)


def parse_descriptor_set(data: bytes) -> descriptor_pb2.FileDescriptorSet:
    """Parse serialized FileDescriptorSet bytes.

    Args:
        data: Serialized descriptor set

    Returns:
        Parsed FileDescriptorSet

    Raises:
        DescriptorSetError: If the bytes are not a valid descriptor set
    """
    file_set = descriptor_pb2.FileDescriptorSet()
    try:
        file_set.ParseFromString(data)
    except DecodeError as e:
        raise DescriptorSetError(f"Invalid descriptor set: {e}") from e
    return file_set


def build_pool(file_set: descriptor_pb2.FileDescriptorSet) -> descriptor_pool.DescriptorPool:
    """Load every file of a descriptor set into a fresh descriptor pool.

    Files are added in set order; protoc writes dependencies before the files
    importing them when run with ``--include_imports``.

    Args:
        file_set: Parsed descriptor set

    Returns:
        DescriptorPool holding all files of the set

    Raises:
        DescriptorSetError: If a file cannot be built (e.g. missing dependency)
    """
    pool = descriptor_pool.DescriptorPool()
    for file_proto in file_set.file:
        try:
            pool.AddSerializedFile(file_proto.SerializeToString())
        except (KeyError, TypeError, ValueError) as e:
            raise DescriptorSetError(f"Cannot load {file_proto.name}: {e}") from e
    logger.info("Loaded %d proto files into descriptor pool", len(file_set.file))
    return pool


def find_type(
    pool: descriptor_pool.DescriptorPool, full_name: str
) -> Union[Descriptor, EnumDescriptor]:
    """Look up a message or enum descriptor by fully-qualified name.

    Raises:
        DescriptorSetError: If no message or enum has that name
    """
    try:
        return pool.FindMessageTypeByName(full_name)
    except KeyError:
        pass
    try:
        return pool.FindEnumTypeByName(full_name)
    except KeyError:
        raise DescriptorSetError(f"No message or enum named {full_name}") from None


def iter_file_types(file: FileDescriptor) -> list[Union[Descriptor, EnumDescriptor]]:
    """List all messages and enums declared in a file, nested ones included.

    Map entry messages are skipped. Order follows declaration order, each
    message being followed by its nested messages and enums.
    """
    declared: list[Union[Descriptor, EnumDescriptor]] = []

    def _visit(message: Descriptor) -> None:
        if message.GetOptions().map_entry:
            return
        declared.append(message)
        for nested in message.nested_types:
            _visit(nested)
        declared.extend(message.enum_types)

    for message in file.message_types_by_name.values():
        _visit(message)
    declared.extend(file.enum_types_by_name.values())
    return declared
