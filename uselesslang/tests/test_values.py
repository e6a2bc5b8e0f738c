import pytest

from uselesslang.values import Promise, format_value, is_number, type_name, values_equal


@pytest.mark.parametrize("value, name", [
    (True, "Boolean"),
    (0, "Number"),
    ("", "String"),
    ([], "Array"),
    ({}, "Object"),
    (Promise(1), "Promise"),
    (None, "Null"),
])
def test_type_name(value, name):
    assert type_name(value) == name


def test_booleans_are_not_numbers():
    assert is_number(3)
    assert not is_number(True)
    assert not values_equal(True, 1)
    assert not values_equal(0, False)
    assert not values_equal([1], [True])


def test_values_equal_is_structural():
    assert values_equal({"a": [1, {"b": None}]}, {"a": [1, {"b": None}]})
    assert not values_equal({"a": 1}, {"b": 1})
    assert not values_equal([1, 2], [1, 2, 3])
    assert values_equal(Promise("x"), Promise("x"))
    assert not values_equal(Promise("x"), Promise("x", resolved=False))


def test_format_value():
    assert format_value(-3) == "-3"
    assert format_value("hi") == "hi"
    assert format_value(None) == "null"
    assert format_value(["hi", [False]]) == '["hi", [false]]'
    assert format_value({"k": "v", "n": {}}) == '{"k": "v", "n": {}}'
    assert format_value(Promise([1])) == "Promise([1])"
    assert format_value(Promise(1, resolved=False)) == "Promise(pending)"


def test_type_name_rejects_foreign_objects():
    with pytest.raises(TypeError):
        type_name(object())
