"""Line record serialization: JSON round-trip for Tejat records.

Converts line records to and from JSON-compatible dicts. Useful for caching
parsed documents and for inspecting them from other tools. Text is always
written out as plain strings, so deserialized records own their text.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from tejat import parse
    from tejat.serialization import to_json, from_json

    lines = parse("# Hello\\n=> /about About")
    assert from_json(to_json(lines)) == lines

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from tejat.location import SourceLocation
from tejat.nodes import Blockquote, Heading, Line, Link, ListItem, Preformatted, Text
from tejat.targets import AbsoluteTarget, RelativeTarget, resolve_target
from tejat.text import SourceText

# Registry of record type names to classes for deserialization
_LINE_TYPES: dict[str, type[Line]] = {
    "Blockquote": Blockquote,
    "Heading": Heading,
    "Link": Link,
    "ListItem": ListItem,
    "Preformatted": Preformatted,
    "Text": Text,
}


def to_dict(line: Line) -> dict[str, Any]:
    """Convert a line record to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    """
    result: dict[str, Any] = {"_type": type(line).__name__}
    for f in fields(line):
        result[f.name] = _serialize_value(getattr(line, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, SourceText):
        return str(value)
    if isinstance(value, AbsoluteTarget | RelativeTarget):
        return {"_type": "LinkTarget", "target": str(value), "absolute": value.is_absolute}
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "offset": value.offset,
            "end_offset": value.end_offset,
            "end_lineno": value.end_lineno,
            "end_col_offset": value.end_col_offset,
            "source_file": value.source_file,
        }
    # Primitives: str, int, None
    return value


def from_dict(data: dict[str, Any]) -> Line:
    """Reconstruct a line record from a dict produced by ``to_dict``.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized line"
        raise ValueError(msg)

    line_cls = _LINE_TYPES.get(type_name)
    if line_cls is None:
        msg = f"Unknown line type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(line_cls):
        if f.name in data:
            kwargs[f.name] = _deserialize_value(data[f.name])
    return line_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if not isinstance(value, dict):
        return value
    type_name = value.get("_type")
    if type_name == "SourceLocation":
        return SourceLocation(
            lineno=value["lineno"],
            col_offset=value["col_offset"],
            offset=value.get("offset", 0),
            end_offset=value.get("end_offset", 0),
            end_lineno=value.get("end_lineno"),
            end_col_offset=value.get("end_col_offset"),
            source_file=value.get("source_file"),
        )
    if type_name == "LinkTarget":
        # Classification is re-derived from the target text
        return resolve_target(value["target"])
    return value


def to_json(lines: list[Line], *, indent: int | None = None) -> str:
    """Serialize a list of line records to a JSON string."""
    return json.dumps([to_dict(line) for line in lines], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Line]:
    """Deserialize a list of line records from a JSON string.

    Raises:
        ValueError: If the JSON is not a list of serialized records.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a list of lines, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
