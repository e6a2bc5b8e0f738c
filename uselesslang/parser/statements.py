"""Statement parsing utilities for the Useless Programming Language.

These functions operate on a `uselesslang.parser.parser.Parser` instance and
handle the various statement forms in the language such as blocks,
conditionals, loops, declarations and directives.


File: statements.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from uselesslang.exceptions import UnexpectedEofError
from uselesslang.nodes import (
    AsyncFunction,
    Attributed,
    AwaitStatement,
    Directive,
    ExpressionStatement,
    Function,
    FunctionCall,
    Identifier,
    If,
    Let,
    Loop,
    Module,
    Print,
    Save,
    TryCatch,
    Use,
)

if TYPE_CHECKING:
    from uselesslang.parser import Parser

DIRECTIVE_PREFIX = '#[directive('


def parse_block(parser: 'Parser') -> list:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        list: The statements of the block.
    """
    parser.eat('LBRACE')
    statements = []
    while not parser.check('RBRACE'):
        parser.require_more()
        statements.append(parser.statement())
    parser.eat('RBRACE')
    return statements


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    The lookahead token selects the rule. Anything that does not start with a
    keyword is parsed as an expression followed by ``;``.

    Args:
        parser: The parser instance.

    Returns:
        A statement node.
    """
    tok = parser.peek()
    if tok.type == 'EOF':
        raise UnexpectedEofError(tok.line, parser.source_file)
    elif tok.type == 'ATTRIBUTE':
        return parser.parse_attribute()
    elif tok.type == 'DIRECTIVE':
        return parser.parse_directive()
    elif tok.type == 'MODULE':
        return parser.parse_module()
    elif tok.type == 'USE':
        return parser.parse_use()
    elif tok.type == 'LET':
        return parser.parse_let()
    elif tok.type == 'PRINT':
        return parser.parse_print()
    elif tok.type == 'IF':
        return parser.parse_if()
    elif tok.type == 'LOOP':
        return parser.parse_loop()
    elif tok.type == 'SAVE':
        return parser.parse_save()
    elif tok.type == 'EXIT':
        return parser.parse_exit()
    elif tok.type == 'ASYNC':
        return parser.parse_async_func()
    elif tok.type == 'TRY':
        return parser.parse_try()
    elif tok.type == 'AWAIT':
        return parser.parse_await()
    elif tok.type == 'ID':
        return parser.parse_identifier_statement()

    expr_node = parser.expr()
    parser.eat('SEMICOLON')
    return ExpressionStatement(expr_node)


def parse_attribute(parser: 'Parser') -> Attributed:
    """
    Parse an attribute and the statement it applies to.

    Syntax:
        #[<name>] <statement>
        #[<name>(<params>)] <statement>

    Parameters inside the parentheses are accepted and ignored.
    """
    tok = parser.eat('ATTRIBUTE')
    content = tok.value[2:-1]
    name = content.split('(', 1)[0]
    return Attributed(name, parser.statement())


def parse_directive(parser: 'Parser'):
    """
    Parse a directive.

    Syntax:
        #[directive(<name>)] ;          (bare, stays active)
        #[directive(<name>)] <statement> (scoped to that statement)

    A directive directly followed by ``}`` or the end of input is bare.
    """
    tok = parser.eat('DIRECTIVE')
    name = tok.value[len(DIRECTIVE_PREFIX):-2]
    if parser.check('SEMICOLON'):
        parser.eat('SEMICOLON')
        return Directive(name)
    if parser.at_end() or parser.check('RBRACE'):
        return Directive(name)
    return Attributed(name, parser.statement())


def parse_module(parser: 'Parser') -> Module:
    """
    Parse a module block.

    Syntax:
        mod <identifier> { <statement>* }
    """
    parser.eat('MODULE')
    name_tok = parser.eat('ID')
    body = parser.block()
    return Module(name_tok.value, body)


def parse_use(parser: 'Parser') -> Use:
    """
    Parse a use statement.

    Syntax:
        use <identifier> {:: <identifier>} ;
    """
    parser.eat('USE')
    path = [parser.eat('ID').value]
    while parser.check('DOUBLE_COLON'):
        parser.eat('DOUBLE_COLON')
        path.append(parser.eat('ID').value)
    parser.eat('SEMICOLON')
    return Use('::'.join(path))


def parse_let(parser: 'Parser') -> Let:
    """
    Parse a variable binding.

    Syntax:
        let <identifier> = <expression> ;
    """
    parser.eat('LET')
    name_tok = parser.eat('ID')
    parser.eat('ASSIGN')
    value = parser.expr()
    parser.eat('SEMICOLON')
    return Let(name_tok.value, value)


def parse_print(parser: 'Parser') -> Print:
    """
    Parse a print statement.

    Syntax:
        print(<expression>) ;
    """
    parser.eat('PRINT')
    parser.eat('LPAREN')
    value = parser.expr()
    parser.eat('RPAREN')
    parser.eat('SEMICOLON')
    return Print(value)


def parse_if(parser: 'Parser') -> If:
    """
    Parse a conditional with an optional else branch.

    Syntax:
        if (<condition>) { <block> }
        if <condition> { <block> } else { <block> }
        if <condition> { <block> } else if ...

    No expression starts with ``(``, so parentheses around the condition are
    optional.
    """
    parser.eat('IF')
    if parser.check('LPAREN'):
        parser.eat('LPAREN')
        condition = parser.expr()
        parser.eat('RPAREN')
    else:
        condition = parser.expr()
    then_branch = parser.block()

    else_branch = None
    if parser.check('ELSE'):
        parser.eat('ELSE')
        if parser.check('IF'):
            else_branch = [parser.parse_if()]
        else:
            else_branch = parser.block()

    return If(condition, then_branch, else_branch)


def parse_loop(parser: 'Parser') -> Loop:
    """
    Parse a loop statement.

    Syntax:
        loop { <block> }
    """
    parser.eat('LOOP')
    return Loop(parser.block())


def parse_save(parser: 'Parser') -> Save:
    """
    Parse a save statement.

    Syntax:
        save("<filename>") ;
        save "<filename>" ;
    """
    parser.eat('SAVE')
    parenthesized = parser.check('LPAREN')
    if parenthesized:
        parser.eat('LPAREN')
    filename = parser.string_value(parser.eat('STRING'))
    if parenthesized:
        parser.eat('RPAREN')
    parser.eat('SEMICOLON')
    return Save(filename)


def parse_exit(parser: 'Parser') -> ExpressionStatement:
    """
    Parse an exit call.

    Syntax:
        exit() ;
    """
    parser.eat('EXIT')
    parser.eat('LPAREN')
    parser.eat('RPAREN')
    parser.eat('SEMICOLON')
    return ExpressionStatement(FunctionCall('exit', []))


def parse_async_func(parser: 'Parser') -> AsyncFunction:
    """
    Parse an async function declaration.

    Syntax:
        async <name>(<params>) { <block> }
    """
    parser.eat('ASYNC')
    name_tok = parser.eat('ID')
    parser.eat('LPAREN')
    params = []
    if not parser.check('RPAREN'):
        params.append(parser.eat('ID').value)
        while parser.check('COMMA'):
            parser.eat('COMMA')
            params.append(parser.eat('ID').value)
    parser.eat('RPAREN')
    body = parser.block()
    return AsyncFunction(name_tok.value, params, body)


def parse_try(parser: 'Parser') -> TryCatch:
    """
    Parse a try statement with an optional catch clause.

    Syntax:
        try { <block> } catch <identifier> { <block> }
        try { <block> } catch (<identifier>) { <block> }
        try { <block> }
    """
    parser.eat('TRY')
    try_block = parser.block()
    if not parser.check('CATCH'):
        return TryCatch(try_block, None, [])

    parser.eat('CATCH')
    if parser.check('LPAREN'):
        parser.eat('LPAREN')
        error_var = parser.eat('ID').value
        parser.eat('RPAREN')
    else:
        error_var = parser.eat('ID').value
    catch_block = parser.block()
    return TryCatch(try_block, error_var, catch_block)


def parse_await(parser: 'Parser') -> AwaitStatement:
    """
    Parse an await statement.

    Syntax:
        await <expression> ;
        await(<expression>) ;
    """
    parser.eat('AWAIT')
    if parser.check('LPAREN'):
        parser.eat('LPAREN')
        expr_node = parser.expr()
        parser.eat('RPAREN')
    else:
        expr_node = parser.expr()
    parser.eat('SEMICOLON')
    return AwaitStatement(expr_node)


def parse_identifier_statement(parser: 'Parser'):
    """
    Parse a statement that starts with an identifier.

    Syntax:
        <name>(<args>) { <block> }    function declaration
        <name>(<args>) ;              call
        <name> ;                      bare identifier

    The argument list is read as expressions; for a declaration the
    identifier arguments become the parameter names and anything else is
    dropped.
    """
    name_tok = parser.eat('ID')
    if not parser.check('LPAREN'):
        parser.eat('SEMICOLON')
        return ExpressionStatement(Identifier(name_tok.value))

    arguments = parser.arguments()
    if parser.check('LBRACE'):
        body = parser.block()
        params = [arg.name for arg in arguments if isinstance(arg, Identifier)]
        return Function(name_tok.value, params, body)

    parser.eat('SEMICOLON')
    return ExpressionStatement(FunctionCall(name_tok.value, arguments))
