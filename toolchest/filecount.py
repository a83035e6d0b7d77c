"""Count files by extension under a directory and print a summary table."""

from __future__ import annotations

import os
import sys
from collections import Counter
from typing import Mapping, Optional

NO_EXTENSION = "* noext *"
USAGE = "Files Count: WC for directories\nUsage: fc <directory_path>"
_MIN_WIDTH = 10


def count_extensions(directory: str) -> dict[str, int]:
    """Count regular files by the text after their last dot, sorted by extension."""
    if not os.path.isdir(directory):
        raise NotADirectoryError("Invalid directory provided.")
    counts: Counter[str] = Counter()
    for root, _dirs, files in os.walk(directory):
        for name in files:
            if not os.path.isfile(os.path.join(root, name)):
                continue
            _, dot, extension = name.rpartition(".")
            counts[extension if dot else NO_EXTENSION] += 1
    return dict(sorted(counts.items()))


def render_table(counts: Mapping[str, int], total: int) -> str:
    """A boxed table of counts per extension followed by the total."""
    width = max([_MIN_WIDTH, *(len(extension) for extension in counts)])
    rule = "-" * (width + 19)

    def row(label: object, value: object) -> str:
        return f"| {label!s:<{width + 2}} | {value!s:>10} |"

    lines = [
        rule,
        row("Extension", "Counts"),
        rule,
        *(row(extension, count) for extension, count in counts.items()),
        rule,
        row("Total", total),
        rule,
    ]
    return "".join(f"{line}\n" for line in lines)


def main(argv: Optional[list[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        return 0
    try:
        counts = count_extensions(args[0])
    except NotADirectoryError as exc:
        print(exc)
        return 1
    print(render_table(counts, sum(counts.values())), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())