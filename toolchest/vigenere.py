"""Vigenère cipher over ASCII letters."""

from __future__ import annotations

import enum
import math
from typing import Optional


class Mode(enum.Enum):
    DECRYPT = 0
    ENCRYPT = 1


def _c_mod(value: int, modulus: int) -> int:
    return int(math.fmod(value, modulus))


def vigenere(text: str, key: str, mode: Mode) -> str:
    """Shift each ASCII letter by the next key letter; other characters pass."""
    if not key:
        raise ValueError("key must not be empty")
    result: list[str] = []
    key_index = 0
    for ch in text:
        shift = 0
        letter = ch.isascii() and ch.isalpha()
        if letter:
            text_ord = ord(ch.lower()) - ord("a")
            key_ord = ord(key[key_index]) - ord("a")
            if mode is Mode.ENCRYPT:
                shift = _c_mod(text_ord + key_ord, 26)
            else:
                shift = _c_mod(text_ord - key_ord + 26, 26)
            key_index = (key_index + 1) % len(key)
        if letter and ch.islower():
            result.append(chr(ord("a") + shift))
        elif letter:
            result.append(chr(ord("A") + shift))
        else:
            result.append(ch)
    return "".join(result)


def encrypt(text: str, key: str) -> str:
    return vigenere(text, key, Mode.ENCRYPT)


def decrypt(text: str, key: str) -> str:
    return vigenere(text, key, Mode.DECRYPT)


def main(argv: Optional[list[str]] = None) -> int:
    plaintext = "The quick brown fox jumped over the lazy dog."
    key = "secret"
    encrypted = encrypt(plaintext, key)
    decrypted = decrypt(encrypted, key)
    print(f"Original: {plaintext}\nEncrypted: {encrypted}\nDecrypted: {decrypted}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())