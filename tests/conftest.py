"""Pytest configuration and shared fixtures.

The test descriptors are built in-process from a FileDescriptorProto equivalent
to this file (``protogql/testing/test_proto.proto``):

    syntax = "proto3";
    package protogql.testing;

    message Proto1 {
      message InnerProto { string foo = 1; }
      string id = 1;
      // Some leading comment.
      int32 int_field = 2;  // Some trailing comment
      // Some leading comment
      string camel_case_name = 3;
      Proto2 test_proto = 4;  // Some trailing comment
      InnerProto test_inner_proto = 5;
      string renamed_field = 6 [json_name = "RenamedField"];
      map<string, int64> counts = 7;
    }

    message Proto2 {
      // Nested type comment
      message NestedProto {
        // Some nested id
        string nested_id = 1;
      }
      enum TestEnum {
        UNKNOWN = 0;  // Some trailing comment
        FOO = 1;
        BAR = 2;
      }
      Proto1 parent = 1;
      TestEnum test_enum = 2;
      repeated NestedProto nested_protos = 3;
      repeated uint64 ids = 4;
      double score = 5;
      bool flag = 6;
      bytes blob = 7;
      oneof choice {
        string text = 8;
        sfixed32 number = 9;
      }
    }

    enum TestEnumWithComments {
      FOO = 0;  // Some trailing comment
    }
"""

from __future__ import annotations

import pytest
from google.protobuf import descriptor_pb2, descriptor_pool
from google.protobuf.descriptor import Descriptor, EnumDescriptor, FileDescriptor

PACKAGE = "protogql.testing"
FILE_NAME = "protogql/testing/test_proto.proto"

_F = descriptor_pb2.FieldDescriptorProto


def _field(
    name: str,
    number: int,
    field_type: int,
    type_name: str = "",
    repeated: bool = False,
    json_name: str = "",
    oneof_index: int | None = None,
) -> descriptor_pb2.FieldDescriptorProto:
    field = descriptor_pb2.FieldDescriptorProto(
        name=name,
        number=number,
        type=field_type,  # type: ignore[arg-type]
        label=_F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL,  # type: ignore[arg-type]
    )
    if type_name:
        field.type_name = type_name
    if json_name:
        field.json_name = json_name
    if oneof_index is not None:
        field.oneof_index = oneof_index
    return field


def _location(path: list[int], leading: str = "", trailing: str = "") -> descriptor_pb2.SourceCodeInfo.Location:
    location = descriptor_pb2.SourceCodeInfo.Location(path=path, span=[0, 0, 0])
    if leading:
        location.leading_comments = leading
    if trailing:
        location.trailing_comments = trailing
    return location


def build_test_file_proto() -> descriptor_pb2.FileDescriptorProto:
    """Build the FileDescriptorProto described in the module docstring."""
    inner = descriptor_pb2.DescriptorProto(
        name="InnerProto",
        field=[_field("foo", 1, _F.TYPE_STRING)],
    )
    counts_entry = descriptor_pb2.DescriptorProto(
        name="CountsEntry",
        field=[_field("key", 1, _F.TYPE_STRING), _field("value", 2, _F.TYPE_INT64)],
        options=descriptor_pb2.MessageOptions(map_entry=True),
    )
    proto1 = descriptor_pb2.DescriptorProto(
        name="Proto1",
        nested_type=[inner, counts_entry],
        field=[
            _field("id", 1, _F.TYPE_STRING),
            _field("int_field", 2, _F.TYPE_INT32),
            _field("camel_case_name", 3, _F.TYPE_STRING),
            _field("test_proto", 4, _F.TYPE_MESSAGE, f".{PACKAGE}.Proto2"),
            _field("test_inner_proto", 5, _F.TYPE_MESSAGE, f".{PACKAGE}.Proto1.InnerProto"),
            _field("renamed_field", 6, _F.TYPE_STRING, json_name="RenamedField"),
            _field("counts", 7, _F.TYPE_MESSAGE, f".{PACKAGE}.Proto1.CountsEntry", repeated=True),
        ],
    )

    nested = descriptor_pb2.DescriptorProto(
        name="NestedProto",
        field=[_field("nested_id", 1, _F.TYPE_STRING)],
    )
    test_enum = descriptor_pb2.EnumDescriptorProto(
        name="TestEnum",
        value=[
            descriptor_pb2.EnumValueDescriptorProto(name="UNKNOWN", number=0),
            descriptor_pb2.EnumValueDescriptorProto(name="FOO", number=1),
            descriptor_pb2.EnumValueDescriptorProto(name="BAR", number=2),
        ],
    )
    proto2 = descriptor_pb2.DescriptorProto(
        name="Proto2",
        nested_type=[nested],
        enum_type=[test_enum],
        oneof_decl=[descriptor_pb2.OneofDescriptorProto(name="choice")],
        field=[
            _field("parent", 1, _F.TYPE_MESSAGE, f".{PACKAGE}.Proto1"),
            _field("test_enum", 2, _F.TYPE_ENUM, f".{PACKAGE}.Proto2.TestEnum"),
            _field("nested_protos", 3, _F.TYPE_MESSAGE, f".{PACKAGE}.Proto2.NestedProto", repeated=True),
            _field("ids", 4, _F.TYPE_UINT64, repeated=True),
            _field("score", 5, _F.TYPE_DOUBLE),
            _field("flag", 6, _F.TYPE_BOOL),
            _field("blob", 7, _F.TYPE_BYTES),
            _field("text", 8, _F.TYPE_STRING, oneof_index=0),
            _field("number", 9, _F.TYPE_SFIXED32, oneof_index=0),
        ],
    )

    commented_enum = descriptor_pb2.EnumDescriptorProto(
        name="TestEnumWithComments",
        value=[descriptor_pb2.EnumValueDescriptorProto(name="FOO", number=0)],
    )

    source_info = descriptor_pb2.SourceCodeInfo(
        location=[
            _location([4, 0]),
            _location([4, 0, 2, 1], " Some leading comment.\n", " Some trailing comment\n"),
            _location([4, 0, 2, 2], " Some leading comment\n"),
            _location([4, 0, 2, 3], trailing=" Some trailing comment\n"),
            _location([4, 1, 3, 0], " Nested type comment\n"),
            _location([4, 1, 3, 0, 2, 0], " Some nested id\n"),
            _location([4, 1, 4, 0, 2, 0], trailing=" Some trailing comment\n"),
            _location([5, 0, 2, 0], trailing=" Some trailing comment\n"),
        ]
    )

    return descriptor_pb2.FileDescriptorProto(
        name=FILE_NAME,
        package=PACKAGE,
        syntax="proto3",
        message_type=[proto1, proto2],
        enum_type=[commented_enum],
        source_code_info=source_info,
    )


@pytest.fixture(scope="session")
def file_proto() -> descriptor_pb2.FileDescriptorProto:
    """FileDescriptorProto of the test proto file, with source info."""
    return build_test_file_proto()


@pytest.fixture(scope="session")
def descriptor_set_bytes(file_proto: descriptor_pb2.FileDescriptorProto) -> bytes:
    """Serialized FileDescriptorSet holding the test proto file."""
    return descriptor_pb2.FileDescriptorSet(file=[file_proto]).SerializeToString()


@pytest.fixture(scope="session")
def test_file(file_proto: descriptor_pb2.FileDescriptorProto) -> FileDescriptor:
    """The test proto file loaded into a private descriptor pool."""
    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(file_proto.SerializeToString())
    return pool.FindFileByName(FILE_NAME)


@pytest.fixture
def proto1(test_file: FileDescriptor) -> Descriptor:
    """Descriptor of protogql.testing.Proto1."""
    return test_file.message_types_by_name["Proto1"]


@pytest.fixture
def proto2(test_file: FileDescriptor) -> Descriptor:
    """Descriptor of protogql.testing.Proto2."""
    return test_file.message_types_by_name["Proto2"]


@pytest.fixture
def test_enum(proto2: Descriptor) -> EnumDescriptor:
    """Descriptor of protogql.testing.Proto2.TestEnum."""
    return proto2.enum_types_by_name["TestEnum"]
