"""Encoder: renders a tree back into VMDL text (or JSON)."""

from __future__ import annotations

import json
from collections.abc import Mapping

from .model import is_section

INDENT_WIDTH = 4


def encode(tree: Mapping, indent: int = 0) -> str:
    """Render *tree* as VMDL text, starting *indent* spaces deep.

    Sections recurse with four more spaces.  Leaves are written with
    ``str()``, so ``None`` becomes ``None`` and lists get no list syntax.
    """
    spacing = " " * indent
    lines: list[str] = []

    for key, value in tree.items():
        if is_section(value):
            lines.append(f"{spacing}{key}:\n")
            lines.append(encode(value, indent + INDENT_WIDTH))
        else:
            lines.append(f"{spacing}{key} = {value}\n")

    return "".join(lines)


def to_json(tree: Mapping) -> str:
    """Pretty-print *tree* as JSON (2-space indent, non-ASCII kept)."""
    return json.dumps(tree, indent=2, ensure_ascii=False, default=str)
