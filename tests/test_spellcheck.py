import pytest

from toolchest.spellcheck import (
    FNV_OFFSET,
    BloomFilter,
    BloomFilterError,
    build,
    fnv1,
    fnv1a,
    misspelt_words,
    normalise_word,
    read_wordlist,
)

WORDS = ["apple", "banana", "cherry", "grape", "lemon", "mango", "peach"]


def test_hash_of_empty_is_offset():
    assert fnv1("") == FNV_OFFSET
    assert fnv1a("") == FNV_OFFSET


def test_fnv1a_known_vector():
    assert fnv1a("a") == 0xAF63DC4C8601EC8C


def test_hashes_differ_and_fit_64_bits():
    assert fnv1("word") != fnv1a("word")
    assert 0 <= fnv1("word") < 2**64


def test_no_false_negatives():
    bloom = BloomFilter.from_words(WORDS)
    assert all(bloom.check(word) for word in WORDS)


def test_sizing_grows_with_words():
    small = BloomFilter.from_words(WORDS[:2])
    large = BloomFilter.from_words(WORDS * 10)
    assert large.m > small.m
    assert small.k >= 1


def test_empty_word_list_rejected():
    with pytest.raises(BloomFilterError):
        BloomFilter.from_words([])


def test_dump_load_round_trip(tmp_path):
    bloom = BloomFilter.from_words(WORDS)
    path = tmp_path / "f.bf"
    bloom.dump(str(path))
    loaded = BloomFilter.load(str(path))
    assert loaded == bloom
    assert path.read_bytes()[:5] == b"BLOOM"


def test_load_malformed(tmp_path):
    path = tmp_path / "bad.bf"
    path.write_bytes(b"NOPE!" + bytes(20))
    with pytest.raises(BloomFilterError):
        BloomFilter.load(str(path))


def test_read_wordlist_strips_last_char(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"apple\r\nbad word\r\n\r\npear\r\n")
    assert read_wordlist(str(path)) == ["apple", "pear"]


def test_build_writes_filter(tmp_path):
    source = tmp_path / "words.txt"
    source.write_bytes("".join(f"{w}\r\n" for w in WORDS).encode())
    out = tmp_path / "out.bf"
    bloom, count = build(str(source), str(out))
    assert count == len(WORDS)
    assert BloomFilter.load(str(out)) == bloom


def test_normalise_word():
    assert normalise_word("Hello,") == "hello"


def test_misspelt_words_keep_known():
    bloom = BloomFilter.from_words(WORDS)
    found = list(misspelt_words(bloom, "Apple, banana! cherry."))
    assert found == []