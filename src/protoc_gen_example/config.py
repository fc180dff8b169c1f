from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Dict

from protoc_gen_example.descriptor_transform import DEFAULT_PACKAGE

DEFAULT_FILE_SUFFIX = ".generated.go"


@dataclass
class GeneratorConfig:
    default_package: str = DEFAULT_PACKAGE
    file_suffix: str = DEFAULT_FILE_SUFFIX


def _split_parameter(parameter: str) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for chunk in parameter.split(","):
        key, _, value = chunk.partition("=")
        key = key.strip()
        if not key:
            continue
        values[key] = value.strip()
    return values


def parse_parameter(parameter: str) -> GeneratorConfig:
    """Build a GeneratorConfig from the protoc parameter string.

    protoc passes ``--example_opt=default_package=app,file_suffix=.gen.go``
    through as ``default_package=app,file_suffix=.gen.go``. Unknown keys are
    reported on stderr and otherwise ignored.
    """
    config = GeneratorConfig()
    for key, value in _split_parameter(parameter).items():
        if key == "default_package" and value:
            config.default_package = value
        elif key == "file_suffix" and value:
            config.file_suffix = value
        else:
            print(f"Warning: ignoring plugin parameter '{key}'", file=sys.stderr)
    return config
