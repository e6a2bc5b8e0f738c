"""AST node definitions.

The parser produces a :data:`Program`, a list of statement nodes. Nodes are
plain frozen dataclasses with no behaviour; the interpreter dispatches on
their class with ``match`` statements. Sub-expressions are owned by exactly
one parent, so the tree never shares nodes or forms cycles.


File: nodes.py
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from uselesslang.operations import Op


# ----------------------------------------------------------------------
# Literals
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class StringLiteral:
    """A quoted string, stored without its quotes."""
    value: str


@dataclass(frozen=True)
class NumberLiteral:
    """A signed 64-bit integer."""
    value: int


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool


@dataclass(frozen=True)
class NullLiteral:
    pass


@dataclass(frozen=True)
class ArrayLiteral:
    """``[a, b, c]``"""
    elements: List[Expression] = field(default_factory=list)


@dataclass(frozen=True)
class ObjectLiteral:
    """``{"key": value, ...}``. Keys may repeat; the last one wins at runtime."""
    pairs: List[Tuple[str, Expression]] = field(default_factory=list)


Literal = Union[
    StringLiteral, NumberLiteral, BooleanLiteral, NullLiteral, ArrayLiteral, ObjectLiteral
]


# ----------------------------------------------------------------------
# Expressions
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class BinaryOp:
    """A builtin operation written as ``keyword(left, right)``."""
    op: Op
    left: Expression
    right: Expression


@dataclass(frozen=True)
class FunctionCall:
    name: str
    arguments: List[Expression] = field(default_factory=list)


@dataclass(frozen=True)
class Access:
    """``access(object, key)``"""
    object: Expression
    key: Expression


@dataclass(frozen=True)
class PromiseExpr:
    """``promise(value)`` or ``promise(value, timeout)``"""
    value: Expression
    timeout: Optional[Expression] = None


@dataclass(frozen=True)
class AwaitExpr:
    """``await(promise)`` used as a value."""
    promise: Expression


Expression = Union[
    Literal, Identifier, BinaryOp, FunctionCall, Access, PromiseExpr, AwaitExpr
]


# ----------------------------------------------------------------------
# Statements
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Let:
    name: str
    value: Expression


@dataclass(frozen=True)
class Print:
    value: Expression


@dataclass(frozen=True)
class ExpressionStatement:
    """A bare expression followed by ``;``."""
    expression: Expression


@dataclass(frozen=True)
class If:
    condition: Expression
    then_branch: List[Statement]
    else_branch: Optional[List[Statement]] = None


@dataclass(frozen=True)
class Loop:
    body: List[Statement]


@dataclass(frozen=True)
class Function:
    name: str
    parameters: List[str]
    body: List[Statement]


@dataclass(frozen=True)
class AsyncFunction:
    name: str
    parameters: List[str]
    body: List[Statement]


@dataclass(frozen=True)
class TryCatch:
    """
    ``try { ... } catch err { ... }``. A ``try`` without ``catch`` has no
    error variable and an empty catch block.
    """
    try_block: List[Statement]
    error_var: Optional[str]
    catch_block: List[Statement]


@dataclass(frozen=True)
class Module:
    name: str
    body: List[Statement]


@dataclass(frozen=True)
class Use:
    """``use a::b::c;`` with the path kept as ``"a::b::c"``."""
    path: str


@dataclass(frozen=True)
class Directive:
    """A bare ``#[directive(name)]`` that stays active for the rest of the run."""
    name: str


@dataclass(frozen=True)
class Save:
    filename: str


@dataclass(frozen=True)
class AwaitStatement:
    expression: Expression


@dataclass(frozen=True)
class Attributed:
    """A directive or attribute scoped to the execution of one statement."""
    name: str
    statement: Statement


Statement = Union[
    Let, Print, ExpressionStatement, If, Loop, Function, AsyncFunction, TryCatch,
    Module, Use, Directive, Save, AwaitStatement, Attributed,
]

Program = List[Statement]
