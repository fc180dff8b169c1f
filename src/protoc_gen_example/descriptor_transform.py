"""Transform descriptor protos into the application's Message/Field models."""

from __future__ import annotations

from typing import List

from google.protobuf.descriptor_pb2 import DescriptorProto, FileDescriptorProto

from protoc_gen_example.models import Field, Message
from protoc_gen_example.naming import camel_case
from protoc_gen_example.type_resolver import go_type

DEFAULT_PACKAGE = "main"


def package_name(
    file: FileDescriptorProto,
    default_package: str = DEFAULT_PACKAGE,
) -> str:
    """Go package for a proto file; files without a package get default_package."""
    return file.package or default_package


def transform_message(desc: DescriptorProto, prefix: str = "") -> List[Message]:
    """Transform a single DescriptorProto and its nested messages.

    Returns a list where the message itself is first, followed by all
    recursively flattened nested messages named ``<Parent>_<Nested>``.
    """
    msg_name = prefix + desc.name
    fields = [
        Field(
            original_name=f.name,
            go_name=camel_case(f.name),
            go_type=go_type(f),
        )
        for f in desc.field
    ]
    msg = Message(name=msg_name, fields=fields, source_name=desc.name)

    result = [msg]
    for nested_desc in desc.nested_type:
        result.extend(transform_message(nested_desc, msg_name + "_"))
    return result
