"""Value types for node editing: JSON values, paths, rows and node data.

A node's content arrives flattened into ``NodeRow`` entries: either a single
keyless row for a scalar, or one keyed row per direct child of an object.
``NodeData`` pairs those rows with the node's location inside the full
document.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from typing import Any, TypeAlias

# Type alias for valid JSON values
JsonValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None

PathSegment: TypeAlias = str | int
Path: TypeAlias = Sequence[PathSegment]


class Missing(Enum):
    """Sentinel for "no value at this path", distinct from JSON ``null``."""

    MISSING = auto()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing.MISSING


class RowType(StrEnum):
    """Tag describing the kind of value held by a ``NodeRow``.

    StrEnum values are the lowercased member names:
    - STRING  -> "string"
    - NUMBER  -> "number"
    - BOOLEAN -> "boolean"
    - NULL    -> "null"
    - ARRAY   -> "array"   : container, edited by navigating to the child node
    - OBJECT  -> "object"  : container, edited by navigating to the child node
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_container(self) -> bool:
        return self in (RowType.ARRAY, RowType.OBJECT)

    @classmethod
    def for_value(cls, value: Any) -> RowType:
        """Return the tag matching a Python JSON value.

        bool MUST be checked before int because bool subclasses int.
        """
        if isinstance(value, bool):
            return cls.BOOLEAN
        if value is None:
            return cls.NULL
        if isinstance(value, dict):
            return cls.OBJECT
        if isinstance(value, list):
            return cls.ARRAY
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        msg = f"Unsupported JSON value type: {type(value)!r}"
        raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class NodeRow:
    """One flattened field of a node's content.

    Attributes:
        value: The JSON value of the field.
        type:  Kind of value; rows tagged ``array``/``object`` are containers.
        key:   Object key for the field, or None for a bare scalar row.
    """

    value: JsonValue
    type: RowType
    key: str | None = None

    @classmethod
    def of(cls, value: JsonValue, key: str | None = None) -> NodeRow:
        return cls(value=value, type=RowType.for_value(value), key=key)


@dataclass(frozen=True, slots=True)
class NodeData:
    """The currently selected node: its rows and its path in the full document."""

    text: tuple[NodeRow, ...] = ()
    path: tuple[PathSegment, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence but store tuples so instances stay hashable.
        object.__setattr__(self, "text", tuple(self.text))
        object.__setattr__(self, "path", tuple(self.path))
