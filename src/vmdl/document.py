"""Document — a decoded VMDL tree together with where it came from."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .decoder import decode
from .encoder import encode, to_json
from .errors import VMDLError
from .getter import get_path, get_section, get_string
from .model import Node, Tree, _EmptyType, is_section

logger = logging.getLogger(__name__)


@dataclass
class Document:
    """Holds a VMDL tree and the file it was loaded from, if any."""

    tree: Tree = field(default_factory=dict)
    source: Path | None = None

    # -- Loading --------------------------------------------------------

    @classmethod
    def loads(cls, text: str, strict: bool = False) -> Document:
        return cls(tree=decode(text, strict=strict))

    @classmethod
    def load(cls, path: str | Path, strict: bool = False) -> Document:
        """Decode the UTF-8 file at *path*.

        Raises ``FileNotFoundError`` if it does not exist.
        """
        path_obj = Path(path)
        if not path_obj.exists():
            raise FileNotFoundError(f"VMDL file not found: {path_obj}")
        logger.debug("Loading %s", path_obj)
        text = path_obj.read_text(encoding="utf-8")
        return cls(tree=decode(text, strict=strict), source=path_obj)

    # -- Rendering ------------------------------------------------------

    def dumps(self) -> str:
        return encode(self.tree)

    def to_json(self) -> str:
        return to_json(self.tree)

    def save(self, path: str | Path | None = None) -> Path:
        """Write the encoded tree to *path*, or back to :attr:`source`."""
        target = Path(path) if path is not None else self.source
        if target is None:
            raise VMDLError("No path given and document has no source file")
        target.write_text(self.dumps(), encoding="utf-8")
        logger.debug("Saved %s", target)
        return target

    # -- Convenience accessors ------------------------------------------

    def get(self, path: str) -> Node | _EmptyType:
        return get_path(self.tree, path)

    def get_string(self, path: str) -> str | None:
        return get_string(self.tree, path)

    def get_section(self, path: str) -> Mapping | None:
        return get_section(self.tree, path)

    # -- Incremental loading --------------------------------------------

    def merge(self, text: str, strict: bool = False) -> None:
        """Decode *text* and merge it into :attr:`tree`.

        Sections present on both sides are merged key by key; anything else
        from *text* overwrites what was there.
        """
        _merge_into(self.tree, decode(text, strict=strict))


def _merge_into(target: Tree, incoming: Mapping) -> None:
    for key, value in incoming.items():
        existing = target.get(key)
        if is_section(value) and is_section(existing):
            _merge_into(existing, value)
        else:
            target[key] = value
