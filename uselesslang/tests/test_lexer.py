"""Tests for the tokenizer."""

from uselesslang.lexer import Token, tokenize, untokenize


def _types(source):
    tokens, _ = tokenize(source)
    return [tok.type for tok in tokens]


def test_print_statement_tokens():
    tokens, _ = tokenize('print("Hello, World!");')
    assert tokens == [
        Token('PRINT', 'print', 1),
        Token('LPAREN', '(', 1),
        Token('STRING', '"Hello, World!"', 1),
        Token('RPAREN', ')', 1),
        Token('SEMICOLON', ';', 1),
        Token('EOF', '', 1),
    ]


def test_let_statement_tokens():
    assert _types("let x = 42;") == ['LET', 'ID', 'ASSIGN', 'NUMBER', 'SEMICOLON', 'EOF']


def test_comments_and_whitespace_are_skipped():
    tokens, _ = tokenize("let a = 1;\n// nothing to see here\n\tprint(a);")
    assert [tok.value for tok in tokens[:-1]] == [
        'let', 'a', '=', '1', ';', 'print', '(', 'a', ')', ';'
    ]
    assert tokens[5].line == 3


def test_unrecognised_characters_are_dropped():
    assert _types("let x = 5 @ $;") == ['LET', 'ID', 'ASSIGN', 'NUMBER', 'SEMICOLON', 'EOF']


def test_directive_and_attribute_tokens():
    tokens, _ = tokenize("#[directive(disable_useless)] #[inline] #[cfg(test)]")
    assert [(tok.type, tok.value) for tok in tokens[:-1]] == [
        ('DIRECTIVE', '#[directive(disable_useless)]'),
        ('ATTRIBUTE', '#[inline]'),
        ('ATTRIBUTE', '#[cfg(test)]'),
    ]


def test_keywords_need_word_boundaries():
    assert _types("index_of indexer index lessThan lessThanOrEqual printer") == [
        'ID', 'ID', 'INDEX', 'LESS_THAN', 'ID', 'ID', 'EOF'
    ]


def test_double_colon_is_one_token():
    assert _types("use normal::mode;") == ['USE', 'ID', 'DOUBLE_COLON', 'ID', 'SEMICOLON', 'EOF']


def test_token_map_literals():
    _, token_map = tokenize("")
    assert token_map['print'] == 'PRINT'
    assert token_map['lessThan'] == 'LESS_THAN'
    assert token_map['('] == 'LPAREN'
    assert token_map['::'] == 'DOUBLE_COLON'
    assert 'n' not in token_map


def test_untokenize_reproduces_significant_lexemes():
    source = 'let x = add(5, 3); // the sum\nprint( "a b" );'
    tokens, _ = tokenize(source)
    rebuilt = untokenize(tokens)
    assert rebuilt == 'let x = add ( 5 , 3 ) ; print ( "a b" ) ;'
    assert tokenize(rebuilt)[0] == tokens


def test_multiline_string_advances_line_numbers():
    tokens, _ = tokenize('let s = "first\nsecond";\nlet t = 1;')
    assert tokens[3].value == '"first\nsecond"'
    assert tokens[3].line == 1
    assert tokens[5].line == 3
