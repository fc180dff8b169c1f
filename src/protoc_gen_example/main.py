from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from google.protobuf.compiler import plugin_pb2 as plugin
from google.protobuf.message import DecodeError, EncodeError

from protoc_gen_example.plugin import generate

DEFAULT_INPUT_PATH = "/tmp/plugin-input.bin"


class PluginError(Exception):
    """Raised when the request cannot be decoded or the response cannot be encoded."""


def _env_flag(name: str) -> bool:
    return os.environ.get(name) == "1"


def decode_request(payload: bytes) -> plugin.CodeGeneratorRequest:
    request = plugin.CodeGeneratorRequest()
    try:
        request.ParseFromString(payload)
    except DecodeError as e:
        raise PluginError(f"Could not decode CodeGeneratorRequest: {e}") from e
    return request


def save_input(payload: bytes, input_path: str) -> None:
    """Keep a copy of the raw request so it can be replayed with --debug."""
    try:
        Path(input_path).write_bytes(payload)
    except OSError as e:
        print(f"Warning: could not save request to {input_path}: {e}", file=sys.stderr)
        return
    print(f"Saved request to {input_path}", file=sys.stderr)


def run(payload: bytes, capture_path: Optional[str] = None) -> bytes:
    """Plugin pipeline: decode request, generate, encode response."""
    if capture_path:
        save_input(payload, capture_path)

    request = decode_request(payload)
    response = generate(request)

    try:
        return response.SerializeToString()
    except EncodeError as e:
        raise PluginError(f"Could not encode CodeGeneratorResponse: {e}") from e


def debug(input_path: str) -> int:
    """Replay a saved request and print the generated files instead of encoding them."""
    print("=== DEBUG MODE ===")

    try:
        payload = Path(input_path).read_bytes()
    except OSError as e:
        print(f"Failed to read {input_path}: {e}", file=sys.stderr)
        print("Capture a request first with SAVE_INPUT=1 or --save-input", file=sys.stderr)
        return 1

    try:
        request = decode_request(payload)
    except PluginError as e:
        print(f"FATAL: {e}", file=sys.stderr)
        return 1

    print(f"Files to generate: {list(request.file_to_generate)}")
    print(f"Total files: {len(request.proto_file)}")
    print()

    response = generate(request)

    print("========== Generated code ==========")
    for out_file in response.file:
        print(f"\n--- {out_file.name} ---")
        print(out_file.content)

    return 0


def _print_usage() -> None:
    print("ERROR!: protoc-gen-example is a protoc plugin, it is not intended for direct use.", file=sys.stderr)
    print("", file=sys.stderr)
    print("Usage:", file=sys.stderr)
    print("  protoc --plugin=protoc-gen-example=$(which protoc-gen-example) \\", file=sys.stderr)
    print("         --example_out=./gen \\", file=sys.stderr)
    print("         your_file.proto", file=sys.stderr)
    print("", file=sys.stderr)
    print("Replay a captured request with: protoc-gen-example --debug", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="protoc plugin that generates Go structs from proto messages",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=_env_flag("DEBUG"),
        help="Replay a saved request and print the generated code (env: DEBUG=1)",
    )
    parser.add_argument(
        "--save-input",
        action="store_true",
        default=_env_flag("SAVE_INPUT"),
        help="Save the raw request from protoc for later replay (env: SAVE_INPUT=1)",
    )
    parser.add_argument(
        "--input-path",
        default=DEFAULT_INPUT_PATH,
        help=f"Where requests are saved and replayed from (default: {DEFAULT_INPUT_PATH})",
    )

    args = parser.parse_args(argv)

    if args.debug:
        return debug(args.input_path)

    if sys.stdin.isatty():
        _print_usage()
        return 1

    capture_path = args.input_path if args.save_input else None
    try:
        output = run(sys.stdin.buffer.read(), capture_path)
    except PluginError as e:
        print(f"FATAL: {e}", file=sys.stderr)
        return 1

    sys.stdout.buffer.write(output)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
