"""Decoder: converts VMDL text into a tree of nested dicts."""

from __future__ import annotations

import logging

from .errors import VMDLDecodeError
from .model import Frame, Tree

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------

def indent_level(line: str) -> int:
    """Count leading whitespace characters.  A tab counts as one."""
    return len(line) - len(line.lstrip())


def is_skippable(content: str) -> bool:
    """Return True for blank lines and ``#`` comments (*content* is stripped)."""
    return content == "" or content.startswith("#")


def split_assignment(content: str) -> tuple[str, str]:
    """Split ``key = value`` on the first ``=``; later ``=`` stay in the value."""
    key, *value_parts = content.split("=")
    return key.strip(), "=".join(value_parts).strip()


# ---------------------------------------------------------------------------
# decode
# ---------------------------------------------------------------------------

def decode(text: str, strict: bool = False) -> Tree:
    """Decode VMDL *text* into a fresh tree.

    Nesting follows indentation: a line belongs to the nearest preceding
    section header whose indentation is strictly smaller.  Lines that are
    neither a section header (``Key:``) nor an assignment (``Key = value``)
    are ignored, or raise :class:`VMDLDecodeError` when *strict* is set.
    """
    root: Tree = {}
    stack = [Frame(0, root)]
    lines = text.split("\n")

    for lineno, line in enumerate(lines, 1):
        content = line.strip()
        if is_skippable(content):
            continue

        level = indent_level(line)
        while len(stack) > 1 and stack[-1].level >= level:
            stack.pop()

        parent = stack[-1].mapping

        if content.endswith(":"):
            section: Tree = {}
            parent[content[:-1].strip()] = section
            stack.append(Frame(level, section))
        elif "=" in content:
            key, value = split_assignment(content)
            parent[key] = value
        elif strict:
            raise VMDLDecodeError(lineno, line)
        else:
            logger.debug("Ignoring line %d: %r", lineno, line)

    logger.debug("Decoded %d lines into %d top-level keys", len(lines), len(root))
    return root
