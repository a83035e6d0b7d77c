import pytest

from toolchest.hexdump import (
    DumpOptions,
    HexdumpError,
    binary_to_hex,
    hex_to_binary,
    main,
    parse_options,
    repr_byte,
    write_output,
)


def test_repr_byte_hex_and_binary():
    assert repr_byte(0x41, False) == "41"
    assert repr_byte(0x41, True) == "01000001"
    assert len(repr_byte(0, True)) == 8


def test_default_options():
    options = parse_options(["file.bin"])
    assert (options.group, options.columns) == (2, 16)
    assert options.input_path == "file.bin"
    assert options.end is None


def test_binary_and_little_endian_defaults():
    assert parse_options(["-b", "f"]).group == 1
    assert parse_options(["-b", "f"]).columns == 6
    assert parse_options(["-e", "f"]).group == 4


def test_plain_resets_layout():
    options = parse_options(["-p", "-b", "-e", "f"])
    assert (options.binary, options.little_endian, options.group, options.columns) == (
        False, False, 30, 30)


def test_negative_parameters_rejected():
    with pytest.raises(HexdumpError):
        parse_options(["-s", "-1", "f"])


def test_length_sets_end():
    options = parse_options(["-s", "2", "-l", "3", "-op", "out", "f"])
    assert options.end == 5
    assert options.output == "out"


def test_normal_dump_layout():
    out = binary_to_hex(b"Hello", DumpOptions())
    assert out.startswith("00000000: 4865 6c6c 6f")
    assert out.endswith(" Hello\n")


def test_nonprintable_shown_as_dot():
    out = binary_to_hex(b"\x00A", DumpOptions())
    assert out.rstrip("\n").endswith(" .A")


@pytest.mark.parametrize("data", [b"", b"x", bytes(range(256)), b"hello world" * 7])
def test_plain_round_trip(data):
    options = parse_options(["-p", "f"])
    assert hex_to_binary(binary_to_hex(data, options)) == data


@pytest.mark.parametrize("data", [b"abc", bytes(range(100)), b"The quick brown fox"])
def test_normal_round_trip(data):
    assert hex_to_binary(binary_to_hex(data, DumpOptions())) == data


def test_offset_and_length_limit():
    data = bytes(range(64))
    options = DumpOptions(offset=4, length=3, plain=True, group=30, columns=30)
    assert hex_to_binary(binary_to_hex(data, options)) == data[4:7]


def test_little_endian_reverses_group():
    options = DumpOptions(little_endian=True, group=2)
    big = binary_to_hex(b"\x01\x02", DumpOptions(group=2))
    little = binary_to_hex(b"\x01\x02", options)
    assert "0102" in big
    assert "0201" in little


def test_little_endian_needs_power_of_two():
    with pytest.raises(HexdumpError):
        binary_to_hex(b"abc", DumpOptions(little_endian=True, group=3))


def test_invalid_hex_raises():
    with pytest.raises(HexdumpError):
        hex_to_binary("zz")


def test_write_output_patches(tmp_path):
    target = tmp_path / "data.bin"
    target.write_bytes(b"abcdef")
    write_output(str(target), b"XY", True, 2, 4)
    assert target.read_bytes() == b"abXY"


def test_main_writes_file(tmp_path):
    source = tmp_path / "in.bin"
    source.write_bytes(b"payload")
    dump = tmp_path / "dump.txt"
    assert main(["-p", "-op", str(dump), str(source)]) == 0
    assert hex_to_binary(dump.read_text(encoding="latin-1")) == b"payload"


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing")]) == 1