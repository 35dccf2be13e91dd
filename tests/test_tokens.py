import pytest

from riyalex.tokens import Token, keyword_token, symbol_token

KEYWORDS = [
    "extern", "func", "struct", "end", "return", "var", "array", "const",
    "bool", "char", "string", "i8", "u8", "i16", "u16", "i32", "u32",
    "i64", "u64", "if", "elif", "else", "while", "is", "then", "do",
    "break", "continue", "import", "true", "false", "and", "or",
]


def test_eof_is_zero():
    assert Token(0) is Token.EOF
    assert Token(1) is Token.NONE


def test_values_are_in_declaration_order():
    assert [Token(index) for index in range(len(Token))] == list(Token)


@pytest.mark.parametrize("word", KEYWORDS)
def test_keyword_spelling_round_trip(word):
    token = keyword_token(word)
    assert token is not None and token.spelling == word


def test_logical_keywords():
    assert keyword_token("and") is Token.LGAND
    assert keyword_token("or") is Token.LGOR


def test_non_keyword():
    assert keyword_token("banana") is None
    assert keyword_token("Func") is None


@pytest.mark.parametrize("char", list(".;,()[]+-*/%&|^:><="))
def test_symbol_spelling_round_trip(char):
    assert symbol_token(char).spelling == char


def test_symbol_specifics():
    assert symbol_token("-") is Token.MINUS
    assert symbol_token(":") is Token.COLON
    assert symbol_token("!") is Token.NONE
    assert symbol_token("a") is None
    assert symbol_token(" ") is None


def test_compound_spellings():
    assert symbol_token(":").spelling + "=" == Token.ASSIGN.spelling
    assert symbol_token("-").spelling + ">" == Token.ARROW.spelling
    assert symbol_token("!").spelling == "???"
    assert Token.NEQ.spelling == "!="
    assert Token(len(Token) - 1).spelling == "FL"