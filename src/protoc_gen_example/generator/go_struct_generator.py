from __future__ import annotations

from pathlib import Path

from google.protobuf.descriptor_pb2 import DescriptorProto, FileDescriptorProto
from jinja2 import Environment, FileSystemLoader

from protoc_gen_example.descriptor_transform import (
    DEFAULT_PACKAGE,
    package_name,
    transform_message,
)


def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent.parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def generate_message(desc: DescriptorProto, prefix: str = "") -> str:
    """Generate Go struct definitions for a message and all of its nested messages."""
    env = _get_template_env()
    template = env.get_template("go_message.go.j2")
    return template.render(messages=transform_message(desc, prefix))


def generate_file(
    file: FileDescriptorProto,
    default_package: str = DEFAULT_PACKAGE,
) -> str:
    """Generate Go source for one proto file.

    A package clause, then the generate_message output of every top-level
    message in declaration order.
    """
    env = _get_template_env()
    template = env.get_template("go_file.go.j2")

    blocks = [generate_message(msg_desc) for msg_desc in file.message_type]

    return template.render(
        package=package_name(file, default_package),
        blocks=blocks,
    )
