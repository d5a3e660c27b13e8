"""NodeEditSession: one editing session for the selected node.

The session owns the transient editing state: the draft text, the draft's
parse error and the editing flag. Everything else is read from collaborators
on demand: the selected node from a ``SelectionSource``, the full document
from a ``DocumentStore`` (through ``SaveCoordinator``).

Lifecycle::

    session = NodeEditSession(store, selection)   # open(): draft seeded, not editing
    session.begin_edit()
    session.update_draft('{"name": "Bob"}')       # revalidated immediately
    outcome = session.save()                      # editing ends only on success
    session.cancel()                              # draft regenerated from current rows

Selecting another node or reopening the editor should call ``open()`` again.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from json_node_editor.config import EditorConfig
from json_node_editor.coordinator import SaveCoordinator
from json_node_editor.result import SaveOutcome
from json_node_editor.tree.formatter import format_path
from json_node_editor.tree.normalizer import normalize_rows
from json_node_editor.validator import DraftValidator

if TYPE_CHECKING:
    from json_node_editor.protocols import DocumentStore, SelectionSource
    from json_node_editor.tree.nodes import NodeData, PathSegment

__all__ = ["NodeEditSession"]

logger = logging.getLogger(__name__)


class NodeEditSession:
    """Edit session controller wiring the draft, validator and save coordinator.

    Args:
        store:     Owner of the full document text.
        selection: Supplies the currently selected node.
        config:    Serialization and commit settings. Defaults to
            ``EditorConfig()``.
    """

    def __init__(
        self,
        store: DocumentStore,
        selection: SelectionSource,
        config: EditorConfig | None = None,
    ) -> None:
        self._config: EditorConfig = config if config is not None else EditorConfig()
        self._selection = selection
        self._coordinator = SaveCoordinator(store, config=self._config)
        self._validator = DraftValidator()
        self._editing = False
        self._draft = ""
        self._draft_error: str | None = None
        self.open()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def node(self) -> NodeData | None:
        """The node currently supplied by the selection source."""
        return self._selection.current_selection()

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def draft_error(self) -> str | None:
        """Parser message for the current draft, or None when it is valid."""
        return self._draft_error

    @property
    def is_editing(self) -> bool:
        return self._editing

    @property
    def is_valid(self) -> bool:
        return self._validator.validate(self._draft).valid

    @property
    def can_save(self) -> bool:
        return self._editing and self.is_valid

    @property
    def preview(self) -> str:
        """Normalized text of the selected node's current rows."""
        return self._normalized_rows()

    @property
    def path_text(self) -> str:
        """Bracket path of the selected node, ``$`` at the root."""
        node = self.node
        return format_path(node.path if node is not None else None)

    # ------------------------------------------------------------------
    # Session operations
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Reset the session for the current selection."""
        self._editing = False
        self._reset_draft()
        logger.debug("Opened edit session at %s", self.path_text)

    def begin_edit(self) -> None:
        self._editing = True

    def update_draft(self, text: str) -> None:
        """Replace the draft and revalidate it."""
        self._draft = text
        self._revalidate()

    def save(self) -> SaveOutcome:
        """Commit the draft into the full document.

        Returns:
            The coordinator's outcome, or a skipped outcome when the session is
            not editing or the draft is not valid JSON. The editing flag is
            cleared only when the outcome is committed.
        """
        if not self._editing:
            return SaveOutcome.skipped("not editing")
        # Re-run validation synchronously; served from cache when unchanged.
        if not self._revalidate():
            return SaveOutcome.skipped(self._draft_error or "invalid draft")

        outcome = self._coordinator.commit(self._current_path(), self._draft)
        if outcome.committed:
            self._editing = False
        return outcome

    def cancel(self) -> None:
        """Discard the draft, regenerating it from the node's current rows."""
        self._reset_draft()
        self._editing = False

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _current_path(self) -> tuple[PathSegment, ...]:
        # No selection addresses the document root.
        node = self.node
        return node.path if node is not None else ()

    def _normalized_rows(self) -> str:
        node = self.node
        return normalize_rows(node.text if node is not None else None, self._config)

    def _reset_draft(self) -> None:
        self._draft_error = None
        self._draft = self._normalized_rows()
        self._revalidate()

    def _revalidate(self) -> bool:
        status = self._validator.validate(self._draft)
        self._draft_error = status.error
        return status.valid
