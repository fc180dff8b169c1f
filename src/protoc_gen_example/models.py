from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Field:
    original_name: str
    go_name: str
    go_type: str


@dataclass
class Message:
    """A message ready to render; ``name`` already carries the enclosing-name prefix."""

    name: str
    fields: List[Field] = field(default_factory=list)
    source_name: str = ""
