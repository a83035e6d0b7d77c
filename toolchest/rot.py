"""Rotation (Caesar) cipher over ASCII letters, with an interactive command."""

from __future__ import annotations

import string
import sys
from typing import Iterator, Optional

_ALPHABET = 26


def rot_cipher(text: str, shift: int) -> str:
    """Shift ASCII letters by ``shift`` places, keeping case; leave the rest."""
    shift %= _ALPHABET
    lower = string.ascii_lowercase
    upper = string.ascii_uppercase
    table = str.maketrans(
        lower + upper,
        lower[shift:] + lower[:shift] + upper[shift:] + upper[:shift],
    )
    return text.translate(table)


def brute_force(text: str) -> Iterator[tuple[int, str]]:
    """Yield (shift, rotated text) for every shift from 1 to 25."""
    for shift in range(1, _ALPHABET):
        yield shift, rot_cipher(text, shift)


def _first_word(prompt: str) -> str:
    words = input(prompt).split()
    return words[0] if words else ""


def main(argv: Optional[list[str]] = None) -> int:
    input_path = _first_word("Enter input filename: ")
    output_path = _first_word("Enter output filename: ")

    try:
        with open(input_path, encoding="utf-8") as handle:
            text = handle.read()
        output = open(output_path, "w", encoding="utf-8")
    except OSError:
        print(
            f"IO Error, provided input: '{input_path}', output: '{output_path}'",
            file=sys.stderr,
        )
        return 1

    if text.endswith("\n"):
        text = text[:-1]

    with output:
        print(
            "File read successful.\nWhat do you wish to do (1,2)?\n"
            "1. Encrypt\n2. Decrypt"
        )
        choice = input(">> ").strip()
        if choice == "1":
            try:
                shift = int(input("\nEnter shift: ").strip())
            except ValueError:
                print("Invalid shift entered. Exiting.")
                return 1
            encrypted = rot_cipher(text, shift)
            print(f"\nPlaintext ----> \n{text}\n\nEncrypted ----> \n{encrypted}")
            output.write(encrypted + "\n")
        elif choice == "2":
            for shift, decrypted in brute_force(text):
                block = f"\nDecrypted (Shift: {shift}) ----> \n{decrypted}\n"
                print(block, end="")
                output.write(block)
        else:
            print("Invalid operation selected. Exiting.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())