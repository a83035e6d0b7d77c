# toolchest

A collection of small command-line utilities, classic ciphers, a
dependency-free JSON document model, and compact examples of common
structural and behavioural design patterns.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### cxxd — hex and binary dumps

```
cxxd file.bin                   # hex dump, 16 octets per line, groups of 2
cxxd -b file.bin                # binary digit dump
cxxd -e file.bin                # little-endian groups
cxxd -p file.bin                # plain hexdump
cxxd -s 16 -l 32 file.bin       # start at byte 16, stop after 32 octets
cxxd -op dump.txt file.bin      # write the dump to a file
cxxd -r -op file.bin dump.txt   # turn a hex dump back into binary
```

Other options: `-d` shows offsets in decimal, `-c N` sets octets per line,
`-g N` sets octets per group. The input file is always the last argument.
Run `cxxd` with no arguments for the full list.

### fc — count files by extension

```
fc path/to/directory
```

Walks the directory recursively and prints a table of file counts per
extension (the text after the last dot), followed by the total.

### spellcheck — spell checking with a Bloom filter

The filter must be built from a word list before use. It is stored as
`words-en.bf` in the current directory.

```
spellcheck build words.txt
spellcheck essay.txt
```

The word list holds one word per line with CRLF line endings: the last
character of every line is dropped before the word is used, and lines with
whitespace inside are skipped. When checking, each whitespace-separated
token loses its ASCII punctuation and is lowercased before lookup.

### validate-json — check JSON files

```
validate-json document.json
validate-json path/to/directory
```

Given a directory, every `.json` file directly inside it is checked. A table
lists each file's size, the time taken and whether it parsed.

### rot-cipher, vigenere-cipher, crack-archive

```
rot-cipher          # asks for input/output files, then encrypts or tries every shift
vigenere-cipher     # encrypts and decrypts a sample sentence
crack-archive       # asks for a zip file and a word list, tries each word as its password
```

`crack-archive` relies on the `unzip` program being available on the path.

## Library use

### JSON documents

```python
from toolchest.json_model import create_node, create_array, create_object, dumps, loads, pretty

doc = create_object(
    [
        create_array([create_node(1), create_node(2)], "array"),
        create_node("Hello world", "string"),
    ]
)
print(pretty(dumps(doc)))

root = loads('{"a": [1, 2, 3], "b": null}')
print(root["a"][0].value)       # 1
```

Malformed input raises `JSONError`. `toolchest.jsontools.build_example_document()`
returns a sample document with an array, every simple type and a nested object.

### Ciphers

```python
from toolchest.rot import rot_cipher, brute_force
from toolchest.vigenere import encrypt, decrypt

rot_cipher("Hello", 3)          # 'Khoor'
secret_text = encrypt("attack at dawn", "lemon")
decrypt(secret_text, "lemon")   # 'attack at dawn'
```

### Hex dumps and Bloom filters

```python
from toolchest.hexdump import DumpOptions, binary_to_hex, hex_to_binary
from toolchest.spellcheck import BloomFilter

print(binary_to_hex(b"hello, world", DumpOptions()))
hex_to_binary("68656c6c6f")     # b'hello'

bloom = BloomFilter.from_words(["apple", "banana", "cherry"], 0.01)
bloom.check("apple")            # True
```

### Design patterns

The `toolchest.patterns` package holds short, working examples:

- `toolchest.patterns.structural` — adapter, bridge, composite, decorator,
  facade, flyweight, proxy
- `toolchest.patterns.behavioral` — chain of responsibility, command,
  interpreter, iterator, mediator, memento, observer
- `toolchest.patterns.workflows` — state, strategy, template method, visitor

```python
from toolchest.patterns.behavioral import AddExpression, Number, SubExpression

expr = AddExpression(Number(4), SubExpression(Number(9), Number(8)))
expr.interpret()                # 5
```

## What is not included

- There is no file-comparison command: the package cannot produce normal,
  unified or context diffs of two text files.
- There are no creational pattern examples (factories, builders, object
  pools, prototypes or singletons); the pattern examples cover structural
  and behavioural patterns only.