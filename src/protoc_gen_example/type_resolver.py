from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from google.protobuf.descriptor_pb2 import FieldDescriptorProto

from protoc_gen_example.naming import local_type_name

# Proto scalar kind -> Go type
SCALAR_TYPE_MAP: Mapping[int, str] = MappingProxyType({
    FieldDescriptorProto.TYPE_STRING: "string",
    FieldDescriptorProto.TYPE_INT32: "int32",
    FieldDescriptorProto.TYPE_SINT32: "int32",
    FieldDescriptorProto.TYPE_SFIXED32: "int32",
    FieldDescriptorProto.TYPE_INT64: "int64",
    FieldDescriptorProto.TYPE_SINT64: "int64",
    FieldDescriptorProto.TYPE_SFIXED64: "int64",
    FieldDescriptorProto.TYPE_UINT32: "uint32",
    FieldDescriptorProto.TYPE_FIXED32: "uint32",
    FieldDescriptorProto.TYPE_UINT64: "uint64",
    FieldDescriptorProto.TYPE_FIXED64: "uint64",
    FieldDescriptorProto.TYPE_BOOL: "bool",
    FieldDescriptorProto.TYPE_FLOAT: "float32",
    FieldDescriptorProto.TYPE_DOUBLE: "float64",
    FieldDescriptorProto.TYPE_BYTES: "[]byte",
})

UNTYPED = "interface{}"


def go_type(field: FieldDescriptorProto) -> str:
    """Determine the Go type expression for a field descriptor."""
    kind = field.type
    if not field.HasField("type"):
        # Unset, or a kind number the enum doesn't know: parsing moves those
        # to the unknown fields and ``type`` reads back as TYPE_DOUBLE.
        base_type = UNTYPED
    elif kind in SCALAR_TYPE_MAP:
        base_type = SCALAR_TYPE_MAP[kind]
    elif kind == FieldDescriptorProto.TYPE_MESSAGE:
        base_type = "*" + local_type_name(field.type_name)
    elif kind == FieldDescriptorProto.TYPE_ENUM:
        base_type = local_type_name(field.type_name)
    else:
        # Groups and kinds this generator does not know about.
        base_type = UNTYPED

    if field.label == FieldDescriptorProto.LABEL_REPEATED:
        return f"[]{base_type}"
    return base_type
