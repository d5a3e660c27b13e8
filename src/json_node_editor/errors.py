"""Exception types raised by json-node-editor."""

from __future__ import annotations

__all__ = ["DraftParseError", "NodeEditorError"]


class NodeEditorError(Exception):
    """Base class for all json-node-editor errors."""


class DraftParseError(NodeEditorError, ValueError):
    """Text could not be parsed as JSON.

    Attributes:
        message: The parser's description of the problem.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
