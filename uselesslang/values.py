"""Runtime values.

Values are plain Python objects: ``str``, ``int``, ``bool``, ``list``,
``dict`` and ``None`` stand for String, Number, Boolean, Array, Object and
Null. Only promises need a class of their own. Because ``bool`` is a subclass
of ``int`` in Python, the helpers here always test for booleans first.


File: values.py
Version: 0.1.0
License: MIT
"""


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Promise:
    """Runtime representation of a promise value."""

    def __init__(self, value, resolved=True):
        self.value = value
        self.resolved = resolved

    def __eq__(self, other) -> bool:
        if not isinstance(other, Promise):
            return NotImplemented
        return self.resolved == other.resolved and values_equal(self.value, other.value)

    def __repr__(self) -> str:
        state = "resolved" if self.resolved else "pending"
        return f"Promise({self.value!r}, {state})"


def is_number(value) -> bool:
    """True for Number values (never for booleans)."""
    return isinstance(value, int) and not isinstance(value, bool)


def type_name(value) -> str:
    """
    Return the language-level name of a value's kind.
    """
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, int):
        return "Number"
    if isinstance(value, str):
        return "String"
    if isinstance(value, list):
        return "Array"
    if isinstance(value, dict):
        return "Object"
    if isinstance(value, Promise):
        return "Promise"
    if value is None:
        return "Null"
    raise TypeError(f"Not a runtime value: {value!r}")


def values_equal(left, right) -> bool:
    """
    Structural equality where values of different kinds are never equal.
    """
    if type_name(left) != type_name(right):
        return False
    if isinstance(left, list):
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, dict):
        return left.keys() == right.keys() and all(
            values_equal(left[k], right[k]) for k in left
        )
    return left == right


def format_value(value, nested=False) -> str:
    """
    Render a value the way ``print`` shows it.

    Strings print bare at the top level and quoted inside collections.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return f'"{value}"' if nested else value
    if isinstance(value, list):
        return "[" + ", ".join(format_value(v, nested=True) for v in value) + "]"
    if isinstance(value, dict):
        return "{" + ", ".join(
            f'"{k}": {format_value(v, nested=True)}' for k, v in value.items()
        ) + "}"
    if isinstance(value, Promise):
        if not value.resolved:
            return "Promise(pending)"
        return f"Promise({format_value(value.value, nested=True)})"
    return str(value)


def function_descriptor(kind: str, name: str, parameters: list[str]) -> dict:
    """
    Build the Object bound in place of a declared function.

    Declared functions are never invoked; the descriptor only records what
    was declared.
    """
    return {
        "type": kind,
        "name": name,
        "parameters": list(parameters),
    }
