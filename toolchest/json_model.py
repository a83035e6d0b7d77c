"""A small JSON document model with a tokenising parser and serializer.

Documents are trees of nodes. Every node carries a key; keys are rendered
only when a node sits inside an object. Arrays and objects keep insertion
order, and objects refuse duplicate keys.
"""

from __future__ import annotations

import enum
import re
from typing import Iterable, Iterator, Optional, Union

JSONSimple = Union[str, None, int, float, bool]

_SPECIAL_CHARS = frozenset("{}[],:")
_VALID_ESCAPES = frozenset('"\\/bfnrtu')
_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1

_DECIMAL_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)


class JSONError(ValueError):
    """Raised for malformed JSON text, bad values or invalid document edits."""


class NodeType(enum.Enum):
    VALUE = "value"
    ARRAY = "array"
    OBJECT = "object"


class JSONNode:
    """Base of all nodes: a key and the kind of node."""

    node_type: NodeType

    def __init__(self, key: str = "") -> None:
        self.key = key

    @property
    def type(self) -> NodeType:
        return self.node_type


class JSONValueNode(JSONNode):
    """A simple value: string, null, integer, float or boolean."""

    node_type = NodeType.VALUE

    def __init__(self, value: JSONSimple, key: str = "") -> None:
        super().__init__(key)
        self.value = value

    def __repr__(self) -> str:
        return f"JSONValueNode({self.value!r}, key={self.key!r})"


class JSONArrayNode(JSONNode):
    """An ordered sequence of nodes; children's keys are not rendered."""

    node_type = NodeType.ARRAY

    def __init__(self, values: Iterable[JSONNode] = (), key: str = "") -> None:
        super().__init__(key)
        self._values: list[JSONNode] = list(values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[JSONNode]:
        return iter(self._values)

    def __getitem__(self, index: int) -> JSONNode:
        if not 0 <= index < len(self._values):
            raise IndexError("Out of bounds")
        return self._values[index]

    def push(self, node: JSONNode) -> None:
        self._values.append(node)

    def pop(self) -> JSONNode:
        if not self._values:
            raise IndexError("pop from empty array")
        return self._values.pop()

    def __repr__(self) -> str:
        return f"JSONArrayNode({self._values!r}, key={self.key!r})"


class JSONObjectNode(JSONNode):
    """An ordered mapping of keyed nodes with unique keys."""

    node_type = NodeType.OBJECT

    def __init__(self, values: Iterable[JSONNode] = (), key: str = "") -> None:
        super().__init__(key)
        values = list(values)
        seen: set[str] = set()
        for node in values:
            if node.key in seen:
                raise JSONError("Duplicate key found")
            seen.add(node.key)
        self._values: list[JSONNode] = values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[JSONNode]:
        return iter(self._values)

    def __getitem__(self, key: str) -> JSONNode:
        node = self.find(key)
        if node is None:
            raise KeyError(f"Key not found: {key}")
        return node

    def find(self, key: str) -> Optional[JSONNode]:
        """Return the child with this key, or None."""
        return next((node for node in self._values if node.key == key), None)

    def push(self, node: JSONNode) -> None:
        """Append a node, replacing any child that has the same key."""
        for position, existing in enumerate(self._values):
            if existing.key == node.key:
                self._values[position] = node
                return
        self._values.append(node)

    def __repr__(self) -> str:
        return f"JSONObjectNode({self._values!r}, key={self.key!r})"


def create_node(value: JSONSimple, key: str = "") -> JSONValueNode:
    return JSONValueNode(value, key)


def create_array(values: Iterable[JSONNode], key: str = "") -> JSONArrayNode:
    return JSONArrayNode(values, key)


def create_object(values: Iterable[JSONNode], key: str = "") -> JSONObjectNode:
    return JSONObjectNode(values, key)


def pretty(dump: str) -> str:
    """Indent a compact dump with newlines and tabs around brackets and commas."""
    levels = 0
    parts: list[str] = []
    for ch in dump:
        if ch in "{[":
            levels += 1
            parts.append(ch + "\n" + "\t" * levels)
        elif ch in "]}":
            levels -= 1
            if levels < 0:
                raise JSONError("Unbalanced brackets")
            parts.append("\n" + "\t" * levels + ch)
        elif ch == ",":
            parts.append(ch + "\n" + "\t" * levels)
        else:
            parts.append(ch)
    return "".join(parts)


def simple_format(value: JSONSimple) -> str:
    """Render a simple value as JSON text."""
    if isinstance(value, str):
        return f'"{value}"'
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return "%f" % value
    raise TypeError(f"Unsupported JSON value: {value!r}")


def _has_leading_zero(token: str) -> bool:
    for position, ch in enumerate(token):
        if ch in _DIGITS:
            return ch == "0" and position + 1 < len(token) and token[position + 1] in _DIGITS
    return False


def simple_parse(token: str) -> JSONSimple:
    """Parse one scalar token into a Python value."""
    error = JSONError(f"Invalid value: {token}")
    if not token:
        raise error

    digit_count = sum(ch in _DIGITS for ch in token)
    size = len(token)
    dot = token.find(".")

    if token == "null":
        return None
    if token in ("true", "false"):
        return token == "true"

    if token[0] == '"' and token[-1] == '"':
        if "\t" in token or "\n" in token:
            raise error
        return token[1:-1]

    if digit_count == size or (digit_count == size - 1 and token[0] == "-"):
        if digit_count == 0 or _has_leading_zero(token):
            raise error
        number = int(token)
        if not _LONG_MIN <= number <= _LONG_MAX:
            raise error
        return number

    if (
        (
            (digit_count == size - 1 and dot != -1 and dot != 0)
            or (digit_count == size - 2 and dot != -1 and token[0] == "-" and dot != 1)
        )
        and dot != size - 1
    ):
        if _has_leading_zero(token):
            raise error
        try:
            return float(token)
        except ValueError:
            raise error from None

    if "e" in token or "E" in token:
        if _DECIMAL_FLOAT.fullmatch(token):
            result = float(token)
        elif _HEX_FLOAT.fullmatch(token):
            result = float.fromhex(token)
        else:
            raise error
        if _has_leading_zero(token):
            raise error
        return result

    raise error


def _object_key(tokens: list) -> str:
    candidate = tokens[-1] if tokens else "*"
    if not isinstance(candidate, str):
        raise JSONError("Invalid JSON")
    if (
        not candidate.startswith('"')
        or not candidate.endswith('"')
        or "\n" in candidate
        or "\t" in candidate
    ):
        raise JSONError("Invalid JSON")
    return candidate[1:-1]


def loads(raw: str) -> JSONNode:
    """Parse JSON text whose top level is an object or an array."""
    open_brackets: list[tuple[str, int]] = []
    tokens: list[Union[str, JSONNode]] = []
    acc = ""
    in_string = False
    escaped = False
    commas = commas_expected = colons = colons_expected = 0

    for ch in raw:
        if ch == '"' or in_string:
            acc += ch
            if ch == '"' and not escaped:
                in_string = not in_string
                if not in_string:
                    tokens.append(acc)
                    acc = ""
            if ch == "\\":
                escaped = not escaped
            elif escaped:
                if ch not in _VALID_ESCAPES:
                    raise JSONError(f"Invalid Escape \\{ch}")
                escaped = False
            continue

        if ch in _WHITESPACE:
            continue

        if ch not in _SPECIAL_CHARS:
            acc += ch
        elif acc:
            tokens.append(acc)
            acc = ""

        if (ch == "}" and (not open_brackets or open_brackets[-1][0] != "{")) or (
            ch == "]" and (not open_brackets or open_brackets[-1][0] != "[")
        ):
            raise JSONError("Invalid JSON")
        if ch in "{[":
            open_brackets.append((ch, len(tokens)))
        elif ch in "}]":
            opener, start = open_brackets.pop()
            values: list[JSONNode] = []
            while len(tokens) > start:
                item = tokens.pop()
                node = item if isinstance(item, JSONNode) else JSONValueNode(simple_parse(item))
                values.append(node)
                key = ""
                if opener == "{":
                    key = _object_key(tokens)
                    tokens.pop()
                node.key = key
            values.reverse()
            if opener == "{":
                tokens.append(JSONObjectNode(values))
                colons_expected += len(values)
            else:
                tokens.append(JSONArrayNode(values))
            commas_expected += max(len(values) - 1, 0)
        elif ch == ",":
            commas += 1
        elif ch == ":":
            colons += 1

    if (
        commas_expected == commas
        and colons_expected == colons
        and not acc
        and len(tokens) == 1
        and isinstance(tokens[0], JSONNode)
    ):
        return tokens[0]
    raise JSONError("Invalid JSON")


def dumps(root: Optional[JSONNode], ignore_keys: bool = True) -> str:
    """Serialize a node tree to compact JSON text."""
    if root is None:
        return ""
    key_text = "" if ignore_keys else f'"{root.key}": '
    if isinstance(root, JSONValueNode):
        return key_text + simple_format(root.value)
    if isinstance(root, JSONArrayNode):
        return key_text + "[" + ", ".join(dumps(child, True) for child in root) + "]"
    if isinstance(root, JSONObjectNode):
        return key_text + "{" + ", ".join(dumps(child, False) for child in root) + "}"
    raise TypeError(f"Unsupported node: {root!r}")