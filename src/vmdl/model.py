"""Data model for VMDL trees and the decoder's parse stack."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Empty — singleton for unresolved key paths
# ---------------------------------------------------------------------------

class _EmptyType:
    """Sentinel returned when a key path cannot be resolved."""

    _instance: _EmptyType | None = None

    def __new__(cls) -> _EmptyType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __str__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False


Empty = _EmptyType()


# ---------------------------------------------------------------------------
# Tree types
# ---------------------------------------------------------------------------

Tree = dict[str, "Node"]
Node = Union[str, Tree]


def is_section(value: object) -> bool:
    """Return True if *value* renders as a nested section.

    Only mappings are sections; ``None`` and every other value is a leaf.
    """
    return isinstance(value, Mapping)


# ---------------------------------------------------------------------------
# Frame — one step of the nesting path while decoding
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Frame:
    level: int
    mapping: Tree
