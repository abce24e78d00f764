"""Command line entry point: ``vmdl`` / ``python -m vmdl``."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import IO, Sequence

from .document import Document
from .errors import VMDLDecodeError
from .model import Empty, is_section

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _fmt_value(value: object) -> str:
    """Format a looked-up value for one-line display."""
    if value is Empty:
        return "Empty"
    if is_section(value):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _show_document(doc: Document, fmt: str, dest: IO[str]) -> None:
    if fmt == "text":
        print(doc.dumps(), end="", file=dest)
    else:
        print(doc.to_json(), file=dest)


def _show_paths(doc: Document, paths: Sequence[str], dest: IO[str]) -> None:
    for path in paths:
        print(f"{path}: {_fmt_value(doc.get(path))}", file=dest)


def _configure_logging(verbose: bool) -> int:
    """Configure root logging and return the level in effect.

    An unknown ``VMDL_LOG_LEVEL`` falls back to WARNING.
    """
    name = "DEBUG" if verbose else os.getenv("VMDL_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    known = isinstance(level, int)
    if not known:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    if not known:
        logger.warning("Unknown VMDL_LOG_LEVEL %r, using WARNING", name)
    return level


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="vmdl", description="Parse and re-render VMDL files")
    ap.add_argument("file", help="VMDL file to parse")
    ap.add_argument("-f", "--format", choices=["json", "text"], default="json")
    ap.add_argument(
        "--get",
        action="append",
        default=[],
        metavar="PATH",
        help="Dot separated key path to print (e.g. Environments.Staging.Route)",
    )
    ap.add_argument("-o", "--output", help="Write the re-encoded VMDL text to this file")
    ap.add_argument("--strict", action="store_true", help="Reject unrecognised lines")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Sequence[str] | None = None, dest: IO[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    dest = dest if dest is not None else sys.stdout
    _configure_logging(args.verbose)

    try:
        doc = Document.load(args.file, strict=args.strict)
    except FileNotFoundError:
        print(f"File does not exist: {args.file}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1
    except VMDLDecodeError as exc:
        print(f"Error parsing VMDL: {exc}", file=sys.stderr)
        return 1

    _show_document(doc, args.format, dest)
    _show_paths(doc, args.get, dest)

    if args.output:
        try:
            target = doc.save(args.output)
        except OSError as exc:
            print(f"Error writing '{args.output}': {exc}", file=sys.stderr)
            return 1
        print(f"Wrote regenerated VMDL to {target}", file=dest)

    return 0


if __name__ == "__main__":
    sys.exit(main())
