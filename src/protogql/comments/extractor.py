"""Documentation comments from descriptor set source info.

protoc keeps comments when run with ``--include_source_info``. Each
``SourceCodeInfo.Location`` carries a path of (field number, index) pairs
pointing into the FileDescriptorProto; this module resolves those paths to
fully-qualified element names and produces the comment map consumed by the
converters.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from google.protobuf import descriptor_pb2

from ..config import DEFAULT_OPTIONS, ConverterOptions
from ..descriptors import parse_descriptor_set

logger = logging.getLogger(__name__)

# FileDescriptorProto field numbers
_FILE_MESSAGE_TYPE = 4
_FILE_ENUM_TYPE = 5

# DescriptorProto field numbers
_MESSAGE_FIELD = 2
_MESSAGE_NESTED_TYPE = 3
_MESSAGE_ENUM_TYPE = 4
_MESSAGE_ONEOF_DECL = 8

# EnumDescriptorProto field numbers
_ENUM_VALUE = 2

_Element = Union[
    descriptor_pb2.FileDescriptorProto,
    descriptor_pb2.DescriptorProto,
    descriptor_pb2.EnumDescriptorProto,
]


def _element_path(file_proto: descriptor_pb2.FileDescriptorProto, path: Sequence[int]) -> Optional[str]:
    """Resolve a location path to the dotted name of the element it documents.

    Returns None for paths that do not end on a message, field, oneof, enum or
    enum value (options, spans, services, the repeated field itself, ...).
    """
    if not path or len(path) % 2:
        return None

    names = [file_proto.package] if file_proto.package else []
    element: _Element = file_proto

    for i in range(0, len(path), 2):
        number, index = path[i], path[i + 1]
        children: Sequence[object]
        if isinstance(element, descriptor_pb2.FileDescriptorProto):
            if number == _FILE_MESSAGE_TYPE:
                children = element.message_type
            elif number == _FILE_ENUM_TYPE:
                children = element.enum_type
            else:
                return None
        elif isinstance(element, descriptor_pb2.DescriptorProto):
            if number == _MESSAGE_FIELD:
                children = element.field
            elif number == _MESSAGE_NESTED_TYPE:
                children = element.nested_type
            elif number == _MESSAGE_ENUM_TYPE:
                children = element.enum_type
            elif number == _MESSAGE_ONEOF_DECL:
                children = element.oneof_decl
            else:
                return None
        elif isinstance(element, descriptor_pb2.EnumDescriptorProto):
            if number != _ENUM_VALUE:
                return None
            children = element.value
        else:
            # Fields, oneofs and enum values have no documented children
            return None

        if index >= len(children):
            return None
        element = children[index]  # type: ignore[assignment]
        names.append(element.name)

    return ".".join(names)


def _normalize(comment: str) -> str:
    """Collapse a raw comment to one line, single-space joined."""
    return " ".join(line.strip() for line in comment.splitlines() if line.strip())


def format_comment(leading: str, trailing: str, separator: str = DEFAULT_OPTIONS.comment_separator) -> str:
    """Join the leading and trailing comments of one element.

    Args:
        leading: Raw leading comment (may be empty)
        trailing: Raw trailing comment (may be empty)
        separator: Text placed between both parts

    Returns:
        Normalized comment, empty when both parts are empty

    Example:
        >>> format_comment(" Some leading comment.\\n", " Some trailing comment\\n")
        'Some leading comment. Some trailing comment'
    """
    parts = [text for text in (_normalize(leading), _normalize(trailing)) if text]
    return separator.join(parts)


def comments_from_file_proto(
    file_proto: descriptor_pb2.FileDescriptorProto,
    options: ConverterOptions = DEFAULT_OPTIONS,
) -> dict[str, str]:
    """Extract the comment map of a single file.

    Args:
        file_proto: File descriptor proto with source_code_info
        options: Converter options (comment separator)

    Returns:
        Mapping from fully-qualified element name to its comment
    """
    comments: dict[str, str] = {}
    for location in file_proto.source_code_info.location:
        if not (location.leading_comments or location.trailing_comments):
            continue

        name = _element_path(file_proto, location.path)
        if name is None:
            continue

        text = format_comment(
            location.leading_comments,
            location.trailing_comments,
            options.comment_separator,
        )
        if text:
            comments.setdefault(name, text)
    return comments


def comments_from_descriptor_set(
    data: bytes, options: ConverterOptions = DEFAULT_OPTIONS
) -> dict[str, str]:
    """Extract the comment map of every file of a serialized descriptor set.

    Args:
        data: Serialized FileDescriptorSet
        options: Converter options (comment separator)

    Returns:
        Mapping from fully-qualified element name to its comment

    Raises:
        DescriptorSetError: If the bytes are not a valid descriptor set
    """
    file_set = parse_descriptor_set(data)
    comments: dict[str, str] = {}
    for file_proto in file_set.file:
        for name, text in comments_from_file_proto(file_proto, options).items():
            comments.setdefault(name, text)

    logger.info("Extracted %d comments from %d proto files", len(comments), len(file_set.file))
    return comments


def comments_from_file(path: Union[str, Path], options: ConverterOptions = DEFAULT_OPTIONS) -> dict[str, str]:
    """Extract the comment map of a descriptor set file on disk."""
    return comments_from_descriptor_set(Path(path).read_bytes(), options)
