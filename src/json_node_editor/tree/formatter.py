"""Human-readable bracket rendering of a node path, e.g. ``$["customer"][0]``."""

from __future__ import annotations

from json_node_editor.tree.nodes import Path

__all__ = ["format_path"]


def format_path(path: Path | None = None) -> str:
    """Render ``path`` as ``$[seg0][seg1]...``.

    Integer segments are rendered bare and string segments are wrapped in
    double quotes. Embedded quotes are NOT escaped, so the result is a display
    string rather than a safe serialization for keys containing ``"``.

    Args:
        path: Key/index segments, or None.

    Returns:
        ``"$"`` for an absent or empty path, otherwise the bracket path.
    """
    if not path:
        return "$"
    segments = [
        str(seg) if isinstance(seg, int) and not isinstance(seg, bool) else f'"{seg}"'
        for seg in path
    ]
    return "$[" + "][".join(segments) + "]"
