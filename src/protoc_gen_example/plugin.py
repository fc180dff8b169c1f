from __future__ import annotations

from typing import Optional

from google.protobuf.compiler import plugin_pb2 as plugin
from google.protobuf.descriptor_pb2 import FileDescriptorProto

from protoc_gen_example.config import GeneratorConfig, parse_parameter
from protoc_gen_example.generator.go_struct_generator import generate_file


def _find_file(
    request: plugin.CodeGeneratorRequest,
    file_name: str,
) -> Optional[FileDescriptorProto]:
    """Return the first descriptor in the request named file_name, if any."""
    for proto_file in request.proto_file:
        if proto_file.name == file_name:
            return proto_file
    return None


def generate(
    request: plugin.CodeGeneratorRequest,
    config: Optional[GeneratorConfig] = None,
) -> plugin.CodeGeneratorResponse:
    """Generate one Go file per requested proto file.

    Requested names with no descriptor in the request are skipped without
    an error, so the response may hold fewer files than were requested.
    """
    if config is None:
        config = parse_parameter(request.parameter)

    response = plugin.CodeGeneratorResponse()

    for file_name in request.file_to_generate:
        proto_file = _find_file(request, file_name)
        if proto_file is None:
            continue

        out_file = response.file.add()
        out_file.name = file_name + config.file_suffix
        out_file.content = generate_file(proto_file, config.default_package)

    # Declared regardless of what was generated.
    response.supported_features = plugin.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL

    return response
