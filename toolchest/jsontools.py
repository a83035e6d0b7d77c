"""Validate JSON files in bulk and build a sample document."""

from __future__ import annotations

import os
import sys
import time
from typing import Optional

from toolchest.json_model import (
    JSONObjectNode,
    create_array,
    create_node,
    create_object,
    loads,
)

SEPARATOR = "-" * 105
PATH_WIDTH = 55
USAGE = "Usage: validate-json <filepath/dirpath>"


def validate_file(path: str) -> bool:
    """True when the file can be read and parses as a JSON document."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except OSError:
        return False
    try:
        loads(text)
    except (ValueError, LookupError, TypeError):
        return False
    return True


def collect_files(path: str) -> list[str]:
    """The file itself, or the ``.json`` files directly in a directory, sorted."""
    if os.path.isfile(path):
        return [os.fspath(path)]
    with os.scandir(path) as entries:
        return sorted(
            entry.path
            for entry in entries
            if entry.is_file() and os.path.splitext(entry.name)[1] == ".json"
        )


def _header() -> str:
    return (
        f"{SEPARATOR}\n| {'File':<{PATH_WIDTH}} | {'Size':>15} | "
        f"{'Time Taken':>15} | {'Status':^7} |\n{SEPARATOR}"
    )


def format_row(path: str, size_kb: float, elapsed_ms: float, valid: bool) -> str:
    """One table row; long paths keep only their tail."""
    shown = path if len(path) <= PATH_WIDTH else "..." + path[-(PATH_WIDTH - 3):]
    status = "✅" if valid else "❌"
    return (
        f"| {shown:<{PATH_WIDTH}} | {size_kb:>12.2f} KB | "
        f"{elapsed_ms:>12.2f} ms | {status:^8} |"
    )


def build_example_document() -> JSONObjectNode:
    """A document with an array, every simple type and a nested object."""
    array = create_array([create_node(1), create_node(2), create_node(3)], "array")
    nested = create_object(
        [create_node("b", "a"), create_node("d", "c"), create_node("empty", "")],
        "object",
    )
    return create_object(
        [
            array,
            create_node(True, "boolean"),
            create_node(None, "null"),
            create_node(123, "number"),
            create_node(1.0, "float"),
            create_node("Hello world", "string"),
            nested,
        ]
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE)
        return 0
    try:
        files = collect_files(args[0])
    except OSError as exc:
        print(f"validate-json: {args[0]}: {exc.strerror or exc}")
        return 1

    print(_header())
    for path in files:
        start = time.perf_counter()
        valid = validate_file(path)
        elapsed_us = int((time.perf_counter() - start) * 1_000_000)
        size_kb = os.path.getsize(path) / 1024
        print(format_row(path, size_kb, elapsed_us / 1000, valid))
    print(SEPARATOR)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())