"""Spell checking against a Bloom filter built from a word list."""

from __future__ import annotations

import math
import os
import string
import struct
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

FNV_OFFSET = 14695981039346656037
FNV_PRIME = 1099511628211
VERSION = 0.1
MAGIC = b"BLOOM"
DUMP_PATH = "words-en.bf"
_MASK = (1 << 64) - 1
_HEADER = struct.Struct("<fii")
_PUNCTUATION = frozenset(string.punctuation)


class BloomFilterError(Exception):
    """Raised for unreadable or malformed filters and word lists."""


def _char_values(word: str) -> Iterator[int]:
    for byte in word.encode("utf-8", errors="surrogateescape"):
        yield byte | 0xFFFFFFFFFFFFFF00 if byte >= 0x80 else byte


def fnv1(word: str) -> int:
    value = FNV_OFFSET
    for ch in _char_values(word):
        value = (value * FNV_PRIME) & _MASK
        value ^= ch
    return value


def fnv1a(word: str) -> int:
    value = FNV_OFFSET
    for ch in _char_values(word):
        value ^= ch
        value = (value * FNV_PRIME) & _MASK
    return value


def _float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


@dataclass
class BloomFilter:
    """A bit array of ``m`` bits probed by ``k`` double-hashed positions."""

    m: int
    k: int
    bits: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        if self.m <= 0:
            raise BloomFilterError("filter size must be positive")
        if not self.bits:
            self.bits = bytearray(self.m)
        if len(self.bits) != self.m:
            raise BloomFilterError("bit array does not match filter size")

    @classmethod
    def from_words(cls, words: Iterable[str], p: float = 0.01) -> BloomFilter:
        """Size a filter for the words at false-positive rate ``p`` and fill it."""
        words = list(words)
        if not words:
            raise BloomFilterError("cannot build a filter from no words")
        n = float(len(words))
        log_p = math.log(_float32(p))
        m = -int((n * log_p) / math.log(2) ** 2)
        k = int((float(_float32(m)) / n) * math.log(2))
        bloom = cls(m, k)
        for word in words:
            bloom.insert(word)
        return bloom

    def _positions(self, word: str) -> list[int]:
        h1, h2 = fnv1(word), fnv1a(word)
        return [((h1 + i * h2) & _MASK) % self.m for i in range(self.k)]

    def insert(self, word: str) -> None:
        for position in self._positions(word):
            self.bits[position] = 1

    def check(self, word: str) -> bool:
        """False means surely absent; True means probably present."""
        return all(self.bits[position] for position in self._positions(word))

    def dump(self, path: str) -> None:
        packed = bytearray()
        for start in range(0, self.m, 8):
            chunk = self.bits[start:start + 8]
            byte = 0
            for bit in chunk:
                byte = (byte << 1) | (1 if bit else 0)
            packed.append(byte << (8 - len(chunk)))
        try:
            with open(path, "wb") as handle:
                handle.write(MAGIC + _HEADER.pack(VERSION, self.m, self.k) + bytes(packed))
        except OSError:
            raise BloomFilterError("File couldn't be opened.") from None

    @classmethod
    def load(cls, path: str) -> BloomFilter:
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError:
            raise BloomFilterError("Error reading file.") from None
        head_size = len(MAGIC) + _HEADER.size
        if len(data) < head_size or data[:len(MAGIC)] != MAGIC:
            raise BloomFilterError("Malformed Binary.")
        version, m, k = _HEADER.unpack_from(data, len(MAGIC))
        if version != _float32(VERSION) or m <= 0:
            raise BloomFilterError("Malformed Binary.")
        bits = bytearray(
            (byte >> shift) & 1 for byte in data[head_size:] for shift in range(7, -1, -1)
        )[:m]
        if len(bits) < m:
            raise BloomFilterError("Malformed Binary.")
        return cls(m, k, bits)


def read_wordlist(path: str) -> list[str]:
    """Words one per line, each line losing its last character (a CR)."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            content = handle.read()
    except OSError:
        raise BloomFilterError("Error reading file.") from None
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    words = []
    for line in lines:
        word = line[:-1]
        if word and not any(ch.isspace() for ch in word):
            words.append(word)
    return words


def build(input_path: str, output_path: str) -> tuple[BloomFilter, int]:
    """Build a filter from a word list, save it, and return it with the word count."""
    words = read_wordlist(input_path)
    bloom = BloomFilter.from_words(words)
    bloom.dump(output_path)
    return bloom, len(words)


def normalise_word(token: str) -> str:
    """Drop ASCII punctuation and lowercase."""
    return "".join(ch for ch in token if ch not in _PUNCTUATION).lower()


def misspelt_words(bloom: BloomFilter, text: str) -> Iterator[str]:
    """Yield each whitespace-separated token the filter does not know."""
    for token in text.split():
        if not bloom.check(normalise_word(token)):
            yield token


def main(argv: Optional[list[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if not args:
            print(
                "Spell Check using Bloom Filter. Needs to be built before it can be used.\n\n"
                "Usage:\n"
                "1. Building spellchecker: `spellcheck build <dictionary>`\n"
                "2. Running spell check:   `spellcheck <file>`"
            )
        elif len(args) == 1:
            if not os.path.exists(DUMP_PATH):
                print("Filter not built, please build filter before using it.")
                return 1
            if not os.path.isfile(args[0]):
                print("Not a valid input file.")
                return 1
            bloom = BloomFilter.load(DUMP_PATH)
            with open(args[0], encoding="utf-8", errors="surrogateescape") as handle:
                text = handle.read()
            print("Misspelt words:")
            for token in misspelt_words(bloom, text):
                print(f"- {token}")
        elif len(args) == 2 and args[0] == "build":
            bloom, count = build(args[1], DUMP_PATH)
            print(f"Built Filter            : {DUMP_PATH}")
            print(f"Words processed         : {count}")
            print(f"Optimal Bit count       : {bloom.m}")
            print(f"Optimal Hash func count : {bloom.k}")
    except BloomFilterError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())