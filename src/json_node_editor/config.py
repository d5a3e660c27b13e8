"""EditorConfig: serialization and commit settings for node editing.

EditorConfig is a frozen (immutable) dataclass shared by the row normalizer,
the save coordinator and the edit session.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["EditorConfig"]


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable configuration for node editing.

    Attributes:
        indent: Spaces of indentation for pretty-printed JSON (draft seeds and
            the committed full document). Must be >= 0.  Default 2.
        ensure_ascii: Escape non-ASCII characters when serializing.
            Default False, so text round-trips as written.
        mark_dirty: Value of the pending-changes flag sent with each commit.
            Default True.
    """

    indent: int = 2
    ensure_ascii: bool = False
    mark_dirty: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            msg = f"indent must be an int, got {type(self.indent).__name__}"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
