"""pytest plugin for json-node-editor.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from json_node_editor import (
    EditorConfig,
    InMemoryDocumentStore,
    NodeEditSession,
    StaticSelection,
    node_from_document,
)


@pytest.fixture
def document_store() -> InMemoryDocumentStore:
    """Fixture returning an empty in-memory document store (``"{}"``).

    Function-scoped: every test gets its own store, so commits never leak
    between tests.
    """
    return InMemoryDocumentStore()


@pytest.fixture
def make_edit_session(document_store: InMemoryDocumentStore) -> Any:
    """Fixture that returns a factory for edit sessions over a JSON document.

    Usage in tests::

        def test_rename(make_edit_session, document_store):
            session = make_edit_session({"user": {"name": "Ann"}}, ["user"])
            session.begin_edit()
            session.update_draft('{"name": "Bob"}')
            assert session.save().committed
            assert json.loads(document_store.text) == {"user": {"name": "Bob"}}

    Returns:
        A callable ``_make(document, path=(), config=None) -> NodeEditSession``
        that loads ``document`` into the ``document_store`` fixture, selects
        the node at ``path`` and opens a session on it.
    """

    def _make(
        document: Any,
        path: Any = (),
        config: EditorConfig | None = None,
    ) -> NodeEditSession:
        document_store.text = json.dumps(document, indent=2)
        selection = StaticSelection(node_from_document(document, path))
        return NodeEditSession(document_store, selection, config=config)

    return _make
