"""Integrations subpackage for json-node-editor.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``document_store`` and ``make_edit_session`` fixtures
"""

from __future__ import annotations

__all__: list[str] = []
