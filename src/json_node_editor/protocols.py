"""Collaborator Protocols for json-node-editor.

Defines the structural interfaces the edit session depends on. The full
document and the node selection are owned elsewhere; any object with
conformant methods passes ``isinstance`` checks without inheriting.

Example::

    from pathlib import Path

    from json_node_editor.protocols import DocumentStore

    class FileBackedStore:
        def __init__(self, path):
            self.path = path

        def load_document_text(self) -> str:
            return self.path.read_text(encoding="utf-8")

        def commit_document_text(self, text: str, dirty: bool) -> None:
            self.path.write_text(text, encoding="utf-8")

    assert isinstance(FileBackedStore(Path("doc.json")), DocumentStore)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_node_editor.tree.nodes import NodeData

__all__ = ["DocumentStore", "SelectionSource"]


@runtime_checkable
class DocumentStore(Protocol):
    """Owner of the full document's serialized text.

    Reads and writes are whole-document and last-writer-wins: there is no
    locking or version check between ``load_document_text`` and
    ``commit_document_text``.
    """

    def load_document_text(self) -> str: ...

    def commit_document_text(self, text: str, dirty: bool) -> None: ...


@runtime_checkable
class SelectionSource(Protocol):
    """Supplies the currently selected node, or None when nothing is selected."""

    def current_selection(self) -> NodeData | None: ...
