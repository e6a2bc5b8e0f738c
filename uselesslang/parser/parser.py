"""
Main parser entry point for the Useless Programming Language.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`uselesslang.parser.expressions` and `uselesslang.parser.statements`.

The parser reads tokens strictly left to right with a single token of
lookahead and never backtracks. The first error aborts the whole parse.


File: parser.py
Version: 0.1.0
License: MIT
"""

from uselesslang.exceptions import (
    InvalidStringLiteralError,
    UnexpectedEofError,
    UnexpectedTokenError,
)
from uselesslang.lexer import Token

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Useless Programming Language parser."""

    def __init__(self, tokens: list, token_map_literals: dict[str, str] | None = None,
                 file: str = "<input>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances. A trailing EOF token is optional.
            token_map_literals (dict): A dict of literal spellings mapped to token types.
            file (str): The name of the script.
        """
        self.tokens = tokens
        self.token_map = token_map_literals or {}
        self.reverse_token_map = {v: k for k, v in self.token_map.items()}
        self.position = 0
        self.source_file = file
        last_line = tokens[-1].line if tokens else 1
        self._eof = Token('EOF', '', last_line)
        self.curr_token = self._token_at(0)

    def _token_at(self, position: int) -> Token:
        if position < len(self.tokens):
            return self.tokens[position]
        return self._eof

    def peek(self) -> Token:
        """
        Return the lookahead token without consuming it.
        """
        return self.curr_token

    def at_end(self) -> bool:
        return self.curr_token.type == 'EOF'

    def advance(self) -> Token:
        """
        Consume the current token and return it.
        """
        tok = self.curr_token
        if not self.at_end():
            self.position += 1
            self.curr_token = self._token_at(self.position)
        return tok

    def check(self, token_type: str) -> bool:
        return self.curr_token.type == token_type

    def eat(self, token_type: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            Token: The consumed token.

        Raises:
            UnexpectedTokenError: If the token does not match the expected type.
        """
        if self.curr_token.type == token_type:
            return self.advance()
        expd_value = self.reverse_token_map.get(token_type, token_type)
        raise UnexpectedTokenError(
            self.curr_token,
            expected=f"'{expd_value}' ({token_type})",
            file=self.source_file,
        )

    def unexpected(self, expected: str | None = None):
        """
        Build the error for a lookahead token that fits no rule.
        """
        return UnexpectedTokenError(self.curr_token, expected=expected, file=self.source_file)

    def require_more(self) -> None:
        """
        Raise if the input ended inside an unfinished construct.
        """
        if self.at_end():
            raise UnexpectedEofError(self.curr_token.line, self.source_file)

    def string_value(self, tok: Token) -> str:
        """
        Strip the quotes from a STRING token.
        """
        text = tok.value
        if len(text) < 2 or not (text.startswith('"') and text.endswith('"')):
            raise InvalidStringLiteralError(text, tok.line, self.source_file)
        return text[1:-1]


    # Expression wrappers
    def expr(self):
        """
        Parse a single expression.
        """
        return _expr.parse_expression(self)

    def arguments(self) -> list:
        """
        Parse a parenthesized, comma-separated argument list.
        """
        return _expr.parse_arguments(self)

    def operand_pair(self) -> tuple:
        """
        Parse the ``(left, right)`` operands of a builtin operation.
        """
        return _expr.parse_operand_pair(self)


    # Statement wrappers
    def block(self) -> list:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_let(self):
        """
        Parse a 'let' binding.
        """
        return _stmt.parse_let(self)

    def parse_print(self):
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_if(self):
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_loop(self):
        """
        Parse a 'loop' statement.
        """
        return _stmt.parse_loop(self)

    def parse_save(self):
        """
        Parse a 'save' statement.
        """
        return _stmt.parse_save(self)

    def parse_exit(self):
        """
        Parse an 'exit();' statement.
        """
        return _stmt.parse_exit(self)

    def parse_async_func(self):
        """
        Parse an 'async' function declaration.
        """
        return _stmt.parse_async_func(self)

    def parse_try(self):
        """
        Parse a 'try'/'catch' statement.
        """
        return _stmt.parse_try(self)

    def parse_await(self):
        """
        Parse an 'await' statement.
        """
        return _stmt.parse_await(self)

    def parse_module(self):
        """
        Parse a 'mod' block.
        """
        return _stmt.parse_module(self)

    def parse_use(self):
        """
        Parse a 'use' path statement.
        """
        return _stmt.parse_use(self)

    def parse_directive(self):
        """
        Parse a directive, either bare or attached to the next statement.
        """
        return _stmt.parse_directive(self)

    def parse_attribute(self):
        """
        Parse an attribute attached to the next statement.
        """
        return _stmt.parse_attribute(self)

    def parse_identifier_statement(self):
        """
        Parse a statement that starts with an identifier.
        """
        return _stmt.parse_identifier_statement(self)


    def parse(self) -> list:
        """
        Parse the full input into a list of statements.
        """
        statements = []
        while not self.at_end():
            statements.append(self.statement())
        return statements
