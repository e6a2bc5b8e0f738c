"""Shared definitions for builtin operation identifiers.

The language has no infix operators: every binary operation is written as a
prefix keyword call such as ``add(a, b)``. This module centralizes the names
used by the parser and interpreter to label those operations so the two
components cannot drift apart.


File: operations.py
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported builtin binary operations.
    """

    # Arithmetic
    ADD = "add"
    MULTIPLY = "multiply"

    # Collections
    INDEX = "index"
    ACCESS = "access"

    # Comparison
    EQUALS = "equals"
    LESS_THAN = "lessThan"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Token types that introduce a ``keyword(left, right)`` binary operation.
BINARY_OP_TOKENS: dict[str, Op] = {
    'ADD': Op.ADD,
    'MULTIPLY': Op.MULTIPLY,
    'INDEX': Op.INDEX,
    'EQUALS': Op.EQUALS,
    'LESS_THAN': Op.LESS_THAN,
}


__all__ = ["Op", "BINARY_OP_TOKENS"]
