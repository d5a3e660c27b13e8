"""SaveCoordinator: reconciles an edited node back into the full document.

Architecture:
- ``commit()`` fetches a fresh copy of the full document from the store,
  parses it together with the draft, reconciles the draft at the node path
  via ``merge_or_replace``, re-serializes the whole tree and hands it back to
  the store flagged as having pending changes.
- The coordinator never keeps a copy of the document between calls.
- Merge vs replace: when both the draft and the value currently at the path
  are JSON objects, the draft's keys are copied onto the existing object in
  place (shallow merge). Keys the draft does not mention survive, which is how
  nested arrays/objects hidden from the editable text are preserved. Any
  other combination replaces the value at the path outright.
- Every failure inside ``commit()`` is caught and logged. The store is only
  written once all earlier steps succeeded, so a failed attempt leaves the
  committed document exactly as it was.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from json_node_editor.config import EditorConfig
from json_node_editor.result import SaveOutcome, SaveStrategy
from json_node_editor.tree.resolver import get_at_path, set_at_path
from json_node_editor.validator import parse_json

if TYPE_CHECKING:
    from json_node_editor.protocols import DocumentStore
    from json_node_editor.tree.nodes import JsonValue, Path

__all__ = ["SaveCoordinator", "merge_or_replace"]

logger = logging.getLogger(__name__)


def merge_or_replace(
    root: JsonValue,
    path: Path,
    draft_value: JsonValue,
) -> tuple[JsonValue, SaveStrategy]:
    """Reconcile ``draft_value`` into ``root`` at ``path``.

    Args:
        root:        The full document tree. Mutated in place.
        path:        Location of the edited node.
        draft_value: The parsed draft.

    Returns:
        ``(new_root, strategy)``. ``new_root`` is ``root`` except when the
        path is empty and the draft replaces the whole document.
    """
    current: Any = get_at_path(root, path)
    if isinstance(draft_value, dict) and isinstance(current, dict):
        # current was reached by reference, so this also updates root
        for key, value in draft_value.items():
            current[key] = value
        return root, SaveStrategy.MERGE
    return set_at_path(root, path, draft_value), SaveStrategy.REPLACE


class SaveCoordinator:
    """Orchestrates load -> resolve -> merge/replace -> serialize -> commit.

    Args:
        store:  The owner of the full document text.
        config: Serialization settings. Defaults to ``EditorConfig()``.
    """

    def __init__(self, store: DocumentStore, config: EditorConfig | None = None) -> None:
        self._store = store
        self._config: EditorConfig = config if config is not None else EditorConfig()

    def commit(self, path: Path, draft_text: str) -> SaveOutcome:
        """Write ``draft_text`` into the full document at ``path``.

        Args:
            path:       Location of the edited node; empty means the root.
            draft_text: The draft, expected to be valid JSON.

        Returns:
            A committed ``SaveOutcome`` carrying the strategy and the new
            document text, or an uncommitted one carrying the error message.
        """
        try:
            root = parse_json(self._store.load_document_text())
            draft_value = parse_json(draft_text)

            root, strategy = merge_or_replace(root, path, draft_value)

            updated = json.dumps(
                root,
                indent=self._config.indent,
                ensure_ascii=self._config.ensure_ascii,
                allow_nan=False,
            )
            self._store.commit_document_text(updated, self._config.mark_dirty)
        except Exception as exc:
            logger.exception("Save failed at path %r; document left unchanged", list(path))
            return SaveOutcome(committed=False, error=str(exc) or type(exc).__name__)

        logger.debug("Saved node at path %r using %s", list(path), strategy)
        return SaveOutcome(committed=True, strategy=strategy, document_text=updated)
