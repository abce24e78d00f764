"""Exceptions raised by vmdl."""

from __future__ import annotations


class VMDLError(Exception):
    """Base class for all vmdl errors."""


class VMDLDecodeError(VMDLError, ValueError):
    """A line matched neither a section header nor an assignment (strict mode)."""

    def __init__(self, lineno: int, line: str) -> None:
        self.lineno = lineno
        self.line = line
        super().__init__(f"Invalid line format at line {lineno}: {line}")
