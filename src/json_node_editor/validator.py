"""DraftValidator: memoized JSON validity check for the draft text.

The session re-runs ``validate`` after every draft mutation and again right
before a save. Results are cached against the current draft text only: the
cache holds a single entry, so an unchanged draft is never reparsed and a
changed draft always is.

Example::

    from json_node_editor.validator import DraftValidator

    validator = DraftValidator()
    validator.validate('{"a": 1}')   # DraftStatus(valid=True, error=None)
    validator.validate("{")          # DraftStatus(valid=False, error="Expecting ...")
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from cachetools import LRUCache

from json_node_editor.errors import DraftParseError

__all__ = ["DraftStatus", "DraftValidator", "parse_json"]


def _reject_constant(name: str) -> Any:
    # JSON has no NaN/Infinity literals; the stdlib parser accepts them by default.
    msg = f"Invalid JSON constant: {name}"
    raise DraftParseError(msg)


def parse_json(text: str) -> Any:
    """Parse ``text`` as strict JSON.

    Args:
        text: The JSON text to parse.

    Returns:
        The parsed JSON value.

    Raises:
        DraftParseError: If ``text`` is not valid JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise DraftParseError(str(exc)) from exc


@dataclass(frozen=True, slots=True)
class DraftStatus:
    """Outcome of validating one draft text.

    Attributes:
        valid: True when the text parses as JSON.
        error: The parser's message when invalid, else None.
    """

    valid: bool
    error: str | None = None


class DraftValidator:
    """Validates draft text as JSON, memoized on the most recent text.

    Each instance keeps its own single-entry ``LRUCache``; two validators never
    share results.
    """

    def __init__(self) -> None:
        self._cache: LRUCache[str, DraftStatus] = LRUCache(maxsize=1)

    def validate(self, text: str) -> DraftStatus:
        """Return the validity of ``text``, reparsing only when it changed."""
        status = self._cache.get(text)
        if status is None:
            status = self._check(text)
            self._cache[text] = status
        return status

    @staticmethod
    def _check(text: str) -> DraftStatus:
        try:
            parse_json(text)
        except DraftParseError as exc:
            return DraftStatus(valid=False, error=exc.message or "Invalid JSON")
        return DraftStatus(valid=True)
