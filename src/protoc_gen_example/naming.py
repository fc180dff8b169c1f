from __future__ import annotations


def camel_case(name: str) -> str:
    """Convert a proto field name to its Go member name.

    field_name -> FieldName. Underscores are dropped and the letter after
    each one (and the first letter) is upper-cased; ``__a_b__`` -> ``AB``.
    """
    parts = name.split("_")
    return "".join(_upper_first(p) for p in parts)


def _upper_first(part: str) -> str:
    if not part:
        return ""
    head = part[0]
    # ASCII only; digits and non-latin letters pass through unchanged.
    if "a" <= head <= "z":
        head = head.upper()
    return head + part[1:]


def local_type_name(full_name: str) -> str:
    """Return the last segment of a dotted type reference.

    ``.pkg.Outer.Inner`` -> ``Inner``; a reference without dots is returned as is.
    """
    return full_name.rsplit(".", 1)[-1]
