"""json-node-editor - edit one node of a JSON document and merge it back."""

from __future__ import annotations

import logging

from json_node_editor.config import EditorConfig
from json_node_editor.coordinator import SaveCoordinator, merge_or_replace
from json_node_editor.errors import DraftParseError, NodeEditorError
from json_node_editor.protocols import DocumentStore, SelectionSource
from json_node_editor.result import SaveOutcome, SaveStrategy
from json_node_editor.session import NodeEditSession
from json_node_editor.stores import InMemoryDocumentStore, StaticSelection
from json_node_editor.tree import (
    MISSING,
    NodeData,
    NodeRow,
    RowType,
    format_path,
    get_at_path,
    node_from_document,
    normalize_rows,
    set_at_path,
)
from json_node_editor.validator import DraftStatus, DraftValidator, parse_json

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "DocumentStore",
    "DraftParseError",
    "DraftStatus",
    "DraftValidator",
    "EditorConfig",
    "InMemoryDocumentStore",
    "NodeData",
    "NodeEditSession",
    "NodeEditorError",
    "NodeRow",
    "RowType",
    "SaveCoordinator",
    "SaveOutcome",
    "SaveStrategy",
    "SelectionSource",
    "StaticSelection",
    "format_path",
    "get_at_path",
    "merge_or_replace",
    "node_from_document",
    "normalize_rows",
    "parse_json",
    "set_at_path",
]
