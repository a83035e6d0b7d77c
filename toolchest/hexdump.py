"""Hex and binary dumps of files, and the reverse conversion back to bytes."""

from __future__ import annotations

import os
import sys
from collections import deque
from dataclasses import dataclass
from typing import Optional, Sequence, Union

HELP = (
    "An imperfect clone of CLI utility XXD.\n"
    "Usage:\n\tcxxd [options] [infile]\n"
    "Options:\n\t"
    "-b      binary digit dump.\n\t"
    "-e      little-endian dump (incompatible with -p, -r).\n\t"
    "-d      show offset in decimal instead of hex.\n\t"
    "-p      output in plain hexdump style, overrides binary, little-endian & resets formatting.\n\t"
    "-c      format octets per line. Default 16 (-b:6, -p:30).\n\t"
    "-g      number of octets per group in normal output. Default 2 (-b:1, -e:4, -p:30).\n\t"
    "-l      stop after specified octets.\n\t"
    "-s      start at specified bytes (abs).\n\t"
    "-r      reverse: convert (or patch) hexdump into binary. Ignores all params except -s, -l, -op.\n\t"
    "-op     specify output file, writes to console if not specified.\n"
)

_FLAGS = {
    "-e": "little_endian",
    "-r": "reverse",
    "-b": "binary",
    "-p": "plain",
    "-d": "decimal_offset",
}
_VALUED = {"-g": "group", "-l": "length", "-s": "offset", "-c": "columns"}


class HexdumpError(Exception):
    """Raised for bad options, unreadable input or unwritable output."""


@dataclass
class DumpOptions:
    input_path: str = ""
    binary: bool = False
    little_endian: bool = False
    plain: bool = False
    decimal_offset: bool = False
    reverse: bool = False
    offset: int = 0
    length: Optional[int] = None
    group: int = 2
    columns: int = 16
    output: Optional[str] = None

    @property
    def end(self) -> Optional[int]:
        """Absolute position to stop at, or None to read to the end."""
        return None if self.length is None else self.offset + self.length


def repr_byte(value: int, binary: bool) -> str:
    """A byte as eight binary digits or two lowercase hex digits."""
    return f"{value:08b}" if binary else f"{value:02x}"


def _hex_pair(pair: str) -> int:
    try:
        return int(pair, 16)
    except ValueError:
        raise HexdumpError(f"cxxd: invalid hex digits: {pair!r}") from None


def hex_to_binary(text: str) -> bytes:
    """Convert a plain or offset-prefixed big-endian hex dump back to bytes."""
    lines = text.split("\n")
    first = lines[0]
    plain = all(ch.isspace() or (ch.isascii() and ch.isalnum()) for ch in first)

    if plain:
        digits = "".join(ch for ch in text if not ch.isspace())
    else:
        hex_end = first.find("  ")
        parts: list[str] = []
        for line in lines:
            if len(line) < 10:
                break
            section = line[10:] if hex_end < 10 else line[10:hex_end]
            parts.append("".join(ch for ch in section if not ch.isspace()))
        digits = "".join(parts)

    usable = len(digits) - len(digits) % 2
    return bytes(_hex_pair(digits[i:i + 2]) for i in range(0, usable, 2))


def binary_to_hex(data: bytes, options: DumpOptions) -> str:
    """Render bytes as an xxd-style dump according to the options."""
    group, columns = options.group, options.columns
    if group <= 0 or columns <= 0:
        raise HexdumpError("cxxd: group and column sizes must be positive.")
    if options.little_endian and group & (group - 1):
        raise HexdumpError("cxxd: number of octets per group must be a power of 2 with -e.")

    binary = options.binary
    append_back = binary or not options.little_endian
    pad = " " * (8 if binary else 2)
    end = options.end
    offset = options.offset
    position = offset
    out: list[str] = []

    while position < len(data):
        dump: list[str] = []
        text: list[str] = []
        count = 0
        while count < columns:
            acc: deque[str] = deque()
            while (
                len(acc) < group
                and count < columns
                and (end is None or offset + count < end)
                and position < len(data)
            ):
                byte = data[position]
                position += 1
                count += 1
                cell = repr_byte(byte, binary)
                acc.append(cell) if append_back else acc.appendleft(cell)
                if not options.plain:
                    text.append(chr(byte) if 0x20 <= byte < 0x7F else ".")
            while len(acc) < group and count < columns:
                acc.append(pad) if append_back else acc.appendleft(pad)
                count += 1
            dump.append("".join(acc) + " ")

        row = "".join(dump)
        if options.plain:
            out.append(row + "\n")
        else:
            label = f"{offset:08d}" if options.decimal_offset else f"{offset:08x}"
            gap = "  " if options.little_endian else " "
            out.append(f"{label}: {row}{gap}{''.join(text)}\n")

        offset += columns
        if end is not None and offset >= end:
            break
    return "".join(out)


def _int_value(flag: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise HexdumpError(f"cxxd: invalid value for {flag}: {value!r}") from None


def parse_options(argv: Sequence[str]) -> DumpOptions:
    """Parse options; the last argument is the input file."""
    args = list(argv)
    if not args:
        raise HexdumpError("cxxd: no input file given.")
    flags: dict[str, bool] = {}
    values: dict[str, int] = {}
    output: Optional[str] = None
    rest = iter(args[:-1])
    for arg in rest:
        if arg in _FLAGS:
            flags[_FLAGS[arg]] = True
        elif arg in _VALUED or arg == "-op":
            try:
                value = next(rest)
            except StopIteration:
                raise HexdumpError(f"cxxd: missing value for {arg}.") from None
            if arg == "-op":
                output = value
            else:
                values[_VALUED[arg]] = _int_value(arg, value)

    binary = flags.get("binary", False)
    little = flags.get("little_endian", False)
    options = DumpOptions(
        input_path=args[-1],
        binary=binary,
        little_endian=little,
        plain=flags.get("plain", False),
        decimal_offset=flags.get("decimal_offset", False),
        reverse=flags.get("reverse", False),
        offset=values.get("offset", 0),
        length=values.get("length"),
        group=values.get("group", 1 if binary else (4 if little else 2)),
        columns=values.get("columns", 6 if binary else 16),
        output=output,
    )
    if options.offset < 0 or options.group < 0 or options.columns < 0:
        raise HexdumpError(
            f"cxxd: negative parameters are not supported: (-s={options.offset}, "
            f"-g={options.group}, -c={options.columns})."
        )
    if options.plain and not options.reverse:
        options.binary = False
        options.little_endian = False
        options.group = 30
        options.columns = 30
    return options


def write_output(
    path: str,
    dump: Union[str, bytes],
    reverse: bool,
    offset: int = 0,
    end: Optional[int] = None,
) -> None:
    """Write a dump to a file; in reverse mode patch the bytes at ``offset``."""
    try:
        if not reverse:
            text = dump if isinstance(dump, str) else dump.decode("latin-1")
            with open(path, "w", encoding="latin-1", newline="") as handle:
                handle.write(text)
            return

        payload = dump if isinstance(dump, bytes) else dump.encode("latin-1")
        exists = os.path.exists(path)
        mismatched = exists and end is not None and end - offset != len(payload)
        if offset > 0 or end is not None:
            if not exists:
                raise HexdumpError(f"cxxd: {path}: error writing output file.")
            with open(path, "rb") as handle:
                original = handle.read()
        else:
            original = b""
        prefix = original[:offset].ljust(offset, b"\0")
        tail = original[end + 1:] if mismatched and end is not None else b""
        with open(path, "wb") as handle:
            handle.write(prefix + payload + tail)
    except OSError:
        raise HexdumpError(f"cxxd: {path}: error writing output file.") from None


def main(argv: Optional[list[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(HELP, end="")
        return 0
    try:
        options = parse_options(args)
        try:
            if options.reverse:
                with open(options.input_path, encoding="latin-1", newline="") as handle:
                    source_text = handle.read()
            else:
                with open(options.input_path, "rb") as handle:
                    source_bytes = handle.read()
        except OSError:
            raise HexdumpError(
                f"cxxd: {options.input_path}: No such file or directory."
            ) from None

        dump: Union[str, bytes]
        if options.reverse:
            dump = hex_to_binary(source_text)
        else:
            dump = binary_to_hex(source_bytes, options)

        if options.output is None:
            if isinstance(dump, bytes):
                sys.stdout.flush()
                sys.stdout.buffer.write(dump)
                sys.stdout.buffer.flush()
            else:
                sys.stdout.write(dump)
        else:
            write_output(options.output, dump, options.reverse, options.offset, options.end)
    except HexdumpError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())