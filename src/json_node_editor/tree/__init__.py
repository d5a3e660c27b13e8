"""Tree subpackage for path-addressed JSON primitives.

Re-exports the public API for the tree module:
- NodeRow / NodeData / RowType: flattened node content and its location
- MISSING: sentinel returned for paths that do not resolve
- get_at_path / set_at_path: read and write a value at a path
- normalize_rows: render node rows as editable JSON text
- node_from_document: build the NodeData found at a path
- format_path: render a path as ``$["key"][0]``
"""

from json_node_editor.tree.formatter import format_path
from json_node_editor.tree.nodes import (
    MISSING,
    JsonValue,
    Missing,
    NodeData,
    NodeRow,
    Path,
    PathSegment,
    RowType,
)
from json_node_editor.tree.normalizer import (
    node_from_document,
    normalize_rows,
    render_scalar,
    rows_from_value,
)
from json_node_editor.tree.resolver import get_at_path, set_at_path

__all__ = [
    "MISSING",
    "JsonValue",
    "Missing",
    "NodeData",
    "NodeRow",
    "Path",
    "PathSegment",
    "RowType",
    "format_path",
    "get_at_path",
    "node_from_document",
    "normalize_rows",
    "render_scalar",
    "rows_from_value",
    "set_at_path",
]
