"""In-memory collaborators: a document store and a fixed node selection.

Both satisfy the Protocols in ``json_node_editor.protocols`` structurally
(no inheritance). They hold no state beyond what is needed to stand in for
an editor's document and selection stores.
"""

from __future__ import annotations

from json_node_editor.tree.nodes import NodeData

__all__ = ["InMemoryDocumentStore", "StaticSelection"]


class InMemoryDocumentStore:
    """Keeps the full document as a text blob.

    Args:
        text: Initial serialized document. Defaults to ``"{}"``.

    Attributes:
        text: The committed document text.
        has_changes: The pending-changes flag set by the last commit.
        commits: Number of successful ``commit_document_text`` calls.
    """

    def __init__(self, text: str = "{}") -> None:
        self.text = text
        self.has_changes = False
        self.commits = 0

    def load_document_text(self) -> str:
        return self.text

    def commit_document_text(self, text: str, dirty: bool) -> None:
        self.text = text
        self.has_changes = dirty
        self.commits += 1


class StaticSelection:
    """Holds the selected node until ``select`` replaces it."""

    def __init__(self, node: NodeData | None = None) -> None:
        self._node = node

    def current_selection(self) -> NodeData | None:
        return self._node

    def select(self, node: NodeData | None) -> None:
        self._node = node
