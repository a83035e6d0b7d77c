"""Dictionary attack on a password-protected zip archive using ``unzip``."""

from __future__ import annotations

import os
import subprocess
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Sequence

Checker = Callable[[str, str], bool]


def check_password(archive: str, password: str) -> bool:
    """Test the archive with ``unzip``; True when the password opens it."""
    result = subprocess.run(
        ["unzip", "-P", password, "-qq", "-t", archive],
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        check=False,
    )
    return result.returncode == 0


def split_chunks(passwords: Sequence[str], count: int) -> list[list[str]]:
    """Split into ``count`` equal chunks; the last one takes the remainder."""
    if count < 1:
        raise ValueError("chunk count must be at least 1")
    size = len(passwords) // count
    chunks = [list(passwords[i * size:(i + 1) * size]) for i in range(count - 1)]
    chunks.append(list(passwords[(count - 1) * size:]))
    return chunks


def read_dictionary(path: str) -> list[str]:
    """Read whitespace-separated candidate passwords from a file."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return handle.read().split()


def find_password(
    archive: str,
    passwords: Sequence[str],
    workers: Optional[int] = None,
    checker: Checker = check_password,
) -> Optional[str]:
    """Try every candidate across worker threads; return the first that works."""
    workers = workers if workers is not None else (os.cpu_count() or 1)
    found = threading.Event()
    lock = threading.Lock()
    result: list[str] = []

    def work(chunk: list[str]) -> None:
        for candidate in chunk:
            if found.is_set():
                return
            if checker(archive, candidate):
                with lock:
                    if not result:
                        result.append(candidate)
                found.set()
                return

    with ThreadPoolExecutor(max_workers=workers) as pool:
        for future in [pool.submit(work, c) for c in split_chunks(passwords, workers)]:
            future.result()
    return result[0] if result else None


def _first_word(prompt: str) -> str:
    words = input(prompt).split()
    return words[0] if words else ""


def main(argv: Optional[list[str]] = None) -> int:
    archive = _first_word("Enter zip file path: ")
    dictionary = _first_word("Enter dictionary file path: ")
    try:
        candidates = read_dictionary(dictionary)
    except OSError:
        candidates = []
    try:
        found = find_password(archive, candidates)
    except OSError as exc:
        print(f"Unable to run unzip: {exc}")
        return 1
    if found is None:
        print("Password not found in this dictionary")
        return 1
    print(f"Password found: {found}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())