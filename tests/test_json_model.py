import pytest

from toolchest.json_model import (
    JSONArrayNode,
    JSONError,
    JSONObjectNode,
    JSONValueNode,
    NodeType,
    create_array,
    create_node,
    create_object,
    dumps,
    loads,
    pretty,
    simple_format,
    simple_parse,
)


def _example_tree():
    array = create_array([create_node(1), create_node(2), create_node(3)], key="array")
    inner = create_object(
        [create_node("b", key="a"), create_node("d", key="c"), create_node("empty", key="")],
        key="object",
    )
    return create_object(
        [
            array,
            create_node(True, key="boolean"),
            create_node(None, key="null"),
            create_node(123, key="number"),
            create_node(1.0, key="float"),
            create_node("Hello world", key="string"),
            inner,
        ]
    )


def test_simple_values_dump():
    assert dumps(create_node(True)) == "true"
    assert dumps(create_node(False)) == "false"
    assert dumps(create_node(None)) == "null"
    assert dumps(create_node("Hello world")) == '"Hello world"'
    assert dumps(create_node(123)) == "123"


def test_float_uses_six_decimals():
    assert simple_format(1.0) == "1.000000"


def test_object_dump_renders_keys():
    assert dumps(create_object([create_node("b", key="a")])) == '{"a": "b"}'


def test_array_dump_hides_child_keys():
    text = dumps(create_array([create_node(1, key="hidden")]))
    assert "hidden" not in text
    assert text.startswith("[") and text.endswith("]")


def test_dumps_none_is_empty():
    assert dumps(None) == ""


def test_round_trip_example_tree():
    tree = _example_tree()
    text = dumps(tree)
    assert dumps(loads(text)) == text


def test_loads_structure():
    root = loads('{"a": [1, 2.5, true, null, "x"], "b": {"c": -3}}')
    assert root.type is NodeType.OBJECT
    items = root["a"]
    assert isinstance(items, JSONArrayNode)
    assert [node.value for node in items] == [1, 2.5, True, None, "x"]
    assert root["b"]["c"].value == -3
    assert root["b"]["c"].key == "c"
    assert [node.key for node in root] == ["a", "b"]


def test_loads_keeps_escapes_raw():
    root = loads('["a\\"b"]')
    assert root[0].value == 'a\\"b'


@pytest.mark.parametrize(
    "text",
    [
        "[1, 2",
        "[1,, 2]",
        '{"a" 1}',
        '{"a": 1, "a": 2}',
        "]",
        "[}",
        '["\\x"]',
        "{1: 2}",
        "1",
        '"abc',
        "[01]",
        '{"a\tb": 1}',
    ],
)
def test_loads_rejects_invalid(text):
    with pytest.raises(JSONError):
        loads(text)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("null", None),
        ("true", True),
        ("false", False),
        ('"abc"', "abc"),
        ("-12", -12),
        ("0", 0),
        ("0.5", 0.5),
        ("-0.5", -0.5),
        ("1e3", 1e3),
        ("+2E-2", 2e-2),
    ],
)
def test_simple_parse_values(token, expected):
    result = simple_parse(token)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "token",
    ["01", "-01", "1.", ".5", "-.5", "00.5", "abc", '"a\tb"', "1e", "1_0e5", "-", "9223372036854775808"],
)
def test_simple_parse_rejects(token):
    with pytest.raises(JSONError):
        simple_parse(token)


def test_simple_format_round_trips_through_parse():
    for value in ["text", None, True, False, 42, -7]:
        assert simple_parse(simple_format(value)) == value


def test_pretty_only_adds_layout():
    text = dumps(_example_tree())
    pretty_text = pretty(text)
    assert pretty_text.replace("\n", "").replace("\t", "") == text
    assert pretty_text.count("\n") == text.count(",") + 2 * (text.count("{") + text.count("["))


def test_pretty_rejects_unbalanced():
    with pytest.raises(JSONError):
        pretty("}")


def test_array_operations():
    array = create_array([create_node(1)])
    array.push(create_node(2))
    assert len(array) == 2
    assert array[1].value == 2
    with pytest.raises(IndexError):
        array[2]
    popped = array.pop()
    assert popped.value == 2
    assert len(array) == 1


def test_object_duplicate_keys_rejected():
    with pytest.raises(JSONError):
        create_object([create_node(1, key="a"), create_node(2, key="a")])


def test_object_push_replaces_and_appends():
    obj = create_object([create_node(1, key="a")])
    obj.push(create_node(5, key="a"))
    obj.push(create_node(6, key="b"))
    assert len(obj) == 2
    assert obj["a"].value == 5
    assert [node.key for node in obj] == ["a", "b"]
    assert obj.find("missing") is None
    with pytest.raises(KeyError):
        obj["missing"]


def test_modify_loaded_document():
    root = loads('{"inner": {"x": 1}}')
    child = root["inner"]
    assert isinstance(child, JSONObjectNode)
    child.key = "renamed"
    child.push(JSONValueNode("added", key="y"))
    reparsed = loads(dumps(root))
    assert reparsed["renamed"]["y"].value == "added"
    assert reparsed["renamed"]["x"].value == 1