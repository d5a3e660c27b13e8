"""Read and write a value at a path inside a JSON value tree.

Paths are sequences of segments: a ``str`` segment addresses an object key,
an ``int`` segment addresses an array index. Existing containers are never
swapped for another kind. Segments are coerced the way JavaScript property
access does: an index into an object reads the key ``str(index)``, and a
canonical decimal string into an array reads that element.

``get_at_path`` never raises on a dangling path; it returns ``MISSING``.
``set_at_path`` never fails on a sparse path; it grows the tree.
"""

from __future__ import annotations

from itertools import pairwise
from typing import Any

from json_node_editor.tree.nodes import MISSING, JsonValue, Missing, Path, PathSegment

__all__ = ["get_at_path", "set_at_path"]


def _is_index(segment: PathSegment) -> bool:
    # bool subclasses int but is never a valid array index
    return isinstance(segment, int) and not isinstance(segment, bool)


def _is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def _empty_for(segment: PathSegment) -> dict[str, Any] | list[Any]:
    return [] if _is_index(segment) else {}


def _key_for(container: dict[str, Any] | list[Any], segment: PathSegment) -> str | int | None:
    """Return the dict key or list index ``segment`` addresses, or None."""
    if isinstance(container, dict):
        if isinstance(segment, str):
            return segment
        return str(segment) if _is_index(segment) else None
    if _is_index(segment):
        return segment
    # "01" and "+1" are plain properties in JavaScript, not indices
    if isinstance(segment, str) and segment.isascii() and segment.isdigit():
        if str(int(segment)) == segment:
            return int(segment)
    return None


def _read(container: Any, segment: PathSegment) -> JsonValue | Missing:
    if not _is_container(container):
        return MISSING
    key = _key_for(container, segment)
    if key is None:
        return MISSING
    if isinstance(container, dict):
        return container.get(key, MISSING)  # type: ignore[arg-type]
    if 0 <= key < len(container):  # type: ignore[operator]
        return container[key]  # type: ignore[index]
    return MISSING


def _write(container: dict[str, Any] | list[Any], segment: PathSegment, value: Any) -> None:
    key = _key_for(container, segment)
    if key is None:
        msg = f"Cannot address {type(container).__name__} with segment {segment!r}"
        raise TypeError(msg)
    if isinstance(container, dict):
        container[key] = value  # type: ignore[index]
        return
    index = int(key)
    if index < 0:
        msg = f"Array index must be non-negative, got {index}"
        raise IndexError(msg)
    # Assigning past the end leaves holes, which serialize as null.
    if index >= len(container):
        container.extend([None] * (index + 1 - len(container)))
    container[index] = value


def get_at_path(root: JsonValue, path: Path = ()) -> JsonValue | Missing:
    """Return the value at ``path`` inside ``root``, or ``MISSING``.

    An empty path returns ``root`` itself. Traversal short-circuits to
    ``MISSING`` as soon as the current reference is ``null``/missing, the key
    or index is absent, or the reference is a scalar. An index into an object
    looks up the key ``str(index)``; a canonical decimal string into an array
    looks up that element.

    Args:
        root: The JSON value tree to read from.
        path: Ordered key/index segments.

    Returns:
        The value found at ``path`` (by reference, not a copy), or ``MISSING``.
    """
    ref: JsonValue | Missing = root
    for segment in path:
        if ref is None or ref is MISSING:
            return MISSING
        ref = _read(ref, segment)
    return ref


def set_at_path(root: JsonValue, path: Path, value: JsonValue) -> JsonValue:
    """Write ``value`` at ``path`` inside ``root`` and return the root.

    An empty path returns ``value``: the caller replaces the whole root.
    Otherwise every intermediate that is absent, ``null`` or a scalar is
    replaced by an empty list (next segment is an index) or an empty dict
    (next segment is a key). Existing dicts and lists are always kept, so
    sibling data survives. ``root`` is mutated in place; when ``root`` is
    ``null`` or a scalar a fresh container is created, so callers should
    always keep the return value.

    Args:
        root:  The JSON value tree to write into.
        path:  Ordered key/index segments.
        value: The value to store at ``path``.

    Returns:
        The (possibly new) root.

    Raises:
        IndexError: If an index segment is negative.
        TypeError: If a non-index key is written into an existing list.
    """
    if not path:
        return value

    if not _is_container(root):
        root = _empty_for(path[0])

    ref: Any = root
    for segment, next_segment in pairwise(path):
        child = _read(ref, segment)
        if not _is_container(child):
            child = _empty_for(next_segment)
            _write(ref, segment, child)
        ref = child

    _write(ref, path[-1], value)
    return root
