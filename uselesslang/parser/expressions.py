"""
Expression parsing utilities for the Useless Programming Language.

These functions operate on a `uselesslang.parser.parser.Parser` instance.
There is no operator precedence to resolve: every builtin operation is a
prefix keyword followed by a parenthesized operand list, so the lookahead
token alone decides which rule applies.


File: expressions.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from uselesslang.exceptions import InvalidNumberLiteralError
from uselesslang.nodes import (
    Access,
    ArrayLiteral,
    AwaitExpr,
    BinaryOp,
    BooleanLiteral,
    FunctionCall,
    Identifier,
    NullLiteral,
    NumberLiteral,
    ObjectLiteral,
    PromiseExpr,
    StringLiteral,
)
from uselesslang.operations import BINARY_OP_TOKENS
from uselesslang.values import INT64_MAX, INT64_MIN

if TYPE_CHECKING:
    from uselesslang.parser import Parser


def parse_expression(parser: 'Parser'):
    """
    Parse a single expression.

    Syntax:
        <literal> | <builtin>(<expr>, <expr>) | access(<expr>, <expr>)
        | promise(<expr> [, <expr>]) | await(<expr>) | exit()
        | <identifier> | <identifier>(<args>) | [<elements>] | {<pairs>}

    Args:
        parser: The parser instance.

    Returns:
        An expression node.
    """
    tok = parser.peek()

    if tok.type == 'STRING':
        parser.eat('STRING')
        return StringLiteral(parser.string_value(tok))

    if tok.type == 'NUMBER':
        parser.eat('NUMBER')
        return NumberLiteral(_number_value(parser, tok))

    if tok.type in ('TRUE', 'FALSE'):
        parser.eat(tok.type)
        return BooleanLiteral(tok.type == 'TRUE')

    if tok.type == 'NULL':
        parser.eat('NULL')
        return NullLiteral()

    if tok.type in BINARY_OP_TOKENS:
        parser.eat(tok.type)
        left, right = parser.operand_pair()
        return BinaryOp(BINARY_OP_TOKENS[tok.type], left, right)

    if tok.type == 'ACCESS':
        parser.eat('ACCESS')
        obj, key = parser.operand_pair()
        return Access(obj, key)

    if tok.type == 'PROMISE':
        return parse_promise(parser)

    if tok.type == 'AWAIT':
        parser.eat('AWAIT')
        parser.eat('LPAREN')
        promise = parser.expr()
        parser.eat('RPAREN')
        return AwaitExpr(promise)

    if tok.type == 'EXIT':
        parser.eat('EXIT')
        parser.eat('LPAREN')
        parser.eat('RPAREN')
        return FunctionCall('exit', [])

    if tok.type == 'ID':
        parser.eat('ID')
        if parser.check('LPAREN'):
            return FunctionCall(tok.value, parser.arguments())
        return Identifier(tok.value)

    if tok.type == 'LBRACKET':
        return parse_array(parser)

    if tok.type == 'LBRACE':
        return parse_object(parser)

    raise parser.unexpected("an expression")


def _number_value(parser: 'Parser', tok) -> int:
    try:
        number = int(tok.value)
    except ValueError as e:
        raise InvalidNumberLiteralError(tok.value, tok.line, parser.source_file) from e
    if not INT64_MIN <= number <= INT64_MAX:
        raise InvalidNumberLiteralError(tok.value, tok.line, parser.source_file)
    return number


def parse_arguments(parser: 'Parser') -> list:
    """
    Parse a call's argument list.

    Syntax:
        ( [<expr> {, <expr>}] )

    Args:
        parser: The parser instance.

    Returns:
        list: The argument expressions.
    """
    parser.eat('LPAREN')
    args = []
    if not parser.check('RPAREN'):
        args.append(parser.expr())
        while parser.check('COMMA'):
            parser.eat('COMMA')
            args.append(parser.expr())
    parser.eat('RPAREN')
    return args


def parse_operand_pair(parser: 'Parser') -> tuple:
    """
    Parse exactly two comma-separated operands in parentheses.
    """
    parser.eat('LPAREN')
    left = parser.expr()
    parser.eat('COMMA')
    right = parser.expr()
    parser.eat('RPAREN')
    return left, right


def parse_promise(parser: 'Parser') -> PromiseExpr:
    """
    Parse a promise with an optional timeout.

    Syntax:
        promise(<expr>) | promise(<expr>, <timeout>)
    """
    parser.eat('PROMISE')
    parser.eat('LPAREN')
    value = parser.expr()
    timeout = None
    if parser.check('COMMA'):
        parser.eat('COMMA')
        timeout = parser.expr()
    parser.eat('RPAREN')
    return PromiseExpr(value, timeout)


def parse_array(parser: 'Parser') -> ArrayLiteral:
    """
    Parse an array literal. A trailing comma is allowed.

    Syntax:
        [ <expr> {, <expr>} [,] ]
    """
    parser.eat('LBRACKET')
    elements = []
    while not parser.check('RBRACKET'):
        parser.require_more()
        elements.append(parser.expr())
        if not parser.check('COMMA'):
            break
        parser.eat('COMMA')
    parser.require_more()
    parser.eat('RBRACKET')
    return ArrayLiteral(elements)


def parse_object(parser: 'Parser') -> ObjectLiteral:
    """
    Parse an object literal with string keys. A trailing comma is allowed.

    Syntax:
        { <string>: <expr> {, <string>: <expr>} [,] }
    """
    parser.eat('LBRACE')
    pairs = []
    while not parser.check('RBRACE'):
        parser.require_more()
        key_tok = parser.eat('STRING')
        parser.eat('COLON')
        pairs.append((parser.string_value(key_tok), parser.expr()))
        if not parser.check('COMMA'):
            break
        parser.eat('COMMA')
    parser.require_more()
    parser.eat('RBRACE')
    return ObjectLiteral(pairs)
