"""Lexer for the Useless Programming Language.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, the exact text it matched and its source line number.

Tokens cover literals (numbers, strings, booleans, null), keywords (``print``,
``let``, ``loop`` …), the builtin operation keywords (``add``, ``multiply``,
``equals`` …), delimiters and directives (``#[directive(name)]``). Whitespace
and ``//`` comments are skipped. Characters that match nothing are dropped
instead of raising, so the parser only ever sees recognised lexemes.


File: lexer.py
Version: 0.1.0
License: MIT
"""

import logging
import re

logger = logging.getLogger(__name__)


class Token:
    """
    Represents a lexical token with a type and the raw text it matched.
    """
    def __init__(self, type_, value, line):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (str): The exact substring matched in the source.
            line (int): The source line the token starts on.
        """
        self.type = type_
        self.value = value
        self.line = line

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value) == (other.type, other.value)

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line})"


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Directives and attributes
    ('DIRECTIVE',   r'\#\[directive\([A-Za-z_][A-Za-z0-9_]*\)\]'),
    ('ATTRIBUTE',   r'\#\[[A-Za-z_][A-Za-z0-9_]*(?:\([^)\]]*\))?\]'),

    # Literals
    ('NUMBER',      r'\d+'),
    ('STRING',      r'"[^"]*"'),
    ('TRUE',        r'\btrue\b'),
    ('FALSE',       r'\bfalse\b'),
    ('NULL',        r'\bnull\b'),

    # Keywords
    ('PRINT',       r'\bprint\b'),
    ('LET',         r'\blet\b'),
    ('IF',          r'\bif\b'),
    ('ELSE',        r'\belse\b'),
    ('LOOP',        r'\bloop\b'),
    ('SAVE',        r'\bsave\b'),
    ('EXIT',        r'\bexit\b'),
    ('ASYNC',       r'\basync\b'),
    ('TRY',         r'\btry\b'),
    ('CATCH',       r'\bcatch\b'),
    ('AWAIT',       r'\bawait\b'),
    ('PROMISE',     r'\bpromise\b'),
    ('MODULE',      r'\bmod\b'),
    ('USE',         r'\buse\b'),

    # Builtin operations
    ('ADD',         r'\badd\b'),
    ('MULTIPLY',    r'\bmultiply\b'),
    ('INDEX',       r'\bindex\b'),
    ('ACCESS',      r'\baccess\b'),
    ('EQUALS',      r'\bequals\b'),
    ('LESS_THAN',   r'\blessThan\b'),

    # Identifiers
    ('ID',          r'[A-Za-z_][A-Za-z0-9_]*'),

    # Delimiters
    ('LPAREN',      r'\('),
    ('RPAREN',      r'\)'),
    ('LBRACE',      r'\{'),
    ('RBRACE',      r'\}'),
    ('LBRACKET',    r'\['),
    ('RBRACKET',    r'\]'),
    ('SEMICOLON',   r';'),
    ('COMMA',       r','),
    ('DOUBLE_COLON', r'::'),
    ('COLON',       r':'),
    ('ASSIGN',      r'='),

    # Miscellaneous
    ('COMMENT',     r'//[^\n]*'),
    ('NEWLINE',     r'\n'),
    ('SKIP',        r'[ \t\r\f]+'),
    ('MISMATCH',    r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


def _token_map_literals() -> dict[str, str]:
    """
    Map literal spellings (``print``, ``(``, ``::`` …) to their token types.
    """
    token_map_literals = {}
    for name, pattern in TOKEN_SPECIFICATION:
        literal = pattern.replace(r'\b', '')
        if re.match(r'^[\\\w{}()\[\];,:=]+$', literal) and not re.search(r'\\[a-z]', literal):
            unescaped = re.sub(r'\\', '', literal)
            token_map_literals[unescaped] = name
    return token_map_literals


def tokenize(code: str) -> tuple[list[Token], dict[str, str]]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances, terminated by an ``EOF`` token.
        dict[str, str]: A dict containing mapped token-values.
    """
    tokens = []
    line_num = 1

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'NEWLINE':
            line_num += 1
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'MISMATCH':
            logger.debug("Dropping unrecognised character %r on line %d", value, line_num)
            continue

        tokens.append(Token(kind, value, line_num))
        if kind == 'STRING':
            line_num += value.count('\n')

    tokens.append(Token('EOF', '', line_num))
    return tokens, _token_map_literals()


def untokenize(tokens: list[Token]) -> str:
    """
    Rebuild source text from tokens, one space between significant lexemes.
    """
    return ' '.join(tok.value for tok in tokens if tok.type != 'EOF')
