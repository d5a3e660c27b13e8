"""Row normalization: flattened node rows <-> editable JSON text.

``normalize_rows`` produces the text shown in the "Content" preview, used to
seed a draft and to reset it on cancel. Rows tagged as containers are left
out: nested arrays and objects are edited by navigating to that child node,
and survive a save because the save merges shallowly.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from json_node_editor.config import EditorConfig
from json_node_editor.tree.nodes import MISSING, JsonValue, NodeData, NodeRow, Path, RowType
from json_node_editor.tree.resolver import get_at_path

__all__ = ["node_from_document", "normalize_rows", "render_scalar", "rows_from_value"]

_DEFAULT_CONFIG = EditorConfig()

_CONTAINER_TAGS = frozenset({RowType.ARRAY.value, RowType.OBJECT.value})


def render_scalar(value: JsonValue) -> str:
    """Return the raw textual form of a value.

    Strings are emitted verbatim (NOT re-quoted as JSON string literals);
    every other value uses its JSON spelling (``true``, ``null``, ``42``).
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def normalize_rows(
    rows: Sequence[NodeRow] | None,
    config: EditorConfig | None = None,
) -> str:
    """Render a node's rows as compact, human-editable JSON text.

    - No rows: ``"{}"``.
    - A single keyless row: the raw text of its value (see ``render_scalar``).
      A plain string value therefore yields text that is not valid JSON.
    - Otherwise: an object of every keyed, non-container row, pretty-printed
      with ``config.indent`` spaces. Keyless rows and container rows are
      dropped.

    Args:
        rows:   The node's flattened content, or None.
        config: Serialization settings. Defaults to ``EditorConfig()``.

    Returns:
        The draft text for the node.
    """
    if not rows:
        return "{}"
    cfg = config if config is not None else _DEFAULT_CONFIG

    if len(rows) == 1 and not rows[0].key:
        return render_scalar(rows[0].value)

    obj: dict[str, Any] = {}
    for row in rows:
        if _is_container_row(row):
            continue
        if row.key:
            obj[row.key] = row.value
    return json.dumps(obj, indent=cfg.indent, ensure_ascii=cfg.ensure_ascii)


def _is_container_row(row: NodeRow) -> bool:
    # str() so rows tagged with plain "array"/"object" strings also match
    return str(row.type) in _CONTAINER_TAGS


def rows_from_value(value: JsonValue) -> list[NodeRow]:
    """Flatten a JSON value into node rows.

    A dict becomes one keyed row per entry (nested containers keep their
    ``array``/``object`` tag); any other value becomes a single keyless row.
    """
    if isinstance(value, dict):
        return [NodeRow.of(child, key=key) for key, child in value.items()]
    return [NodeRow.of(value)]


def node_from_document(document: JsonValue, path: Path = ()) -> NodeData:
    """Build the node located at ``path`` inside ``document``.

    A path that does not resolve yields a node with no rows.
    """
    value = get_at_path(document, path)
    if value is MISSING:
        return NodeData(text=(), path=path)
    return NodeData(text=rows_from_value(value), path=path)
