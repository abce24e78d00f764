"""Key-path lookups over decoded trees."""

from __future__ import annotations

from collections.abc import Mapping

from .model import Empty, Node, _EmptyType, is_section


def split_path(path: str) -> list[str]:
    """Split a dotted key path, dropping empty segments."""
    return [segment.strip() for segment in path.split(".") if segment.strip()]


def get_path(tree: Mapping, path: str) -> Node | _EmptyType:
    """Resolve a dotted *path* such as ``Environments.Staging.Route``.

    - Each segment but the last must name a section
    - A missing key, or a segment that crosses a leaf, yields Empty
    - An empty path returns *tree* itself

    Every ``.`` separates segments, so keys that contain a dot
    (``api.v1 = x``) cannot be reached this way; index the dict directly.
    """
    current: object = tree
    for segment in split_path(path):
        if not is_section(current) or segment not in current:
            return Empty
        current = current[segment]
    return current


def get_string(tree: Mapping, path: str) -> str | None:
    value = get_path(tree, path)
    if value is Empty or is_section(value):
        return None
    return value


def get_section(tree: Mapping, path: str) -> Mapping | None:
    value = get_path(tree, path)
    if is_section(value):
        return value
    return None
