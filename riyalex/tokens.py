"""Token kinds produced by the lexer, with their spellings."""

from __future__ import annotations

from enum import IntEnum


class Token(IntEnum):
    """Every kind of token the lexer can return."""

    EOF = 0
    NONE = 1

    EXTERN = 2
    FUNC = 3
    STRUCT = 4
    END = 5
    RETURN = 6
    VAR = 7
    ARRAY = 8
    CONST = 9
    BOOL = 10
    CHAR = 11
    STRING = 12
    I8 = 13
    U8 = 14
    I16 = 15
    U16 = 16
    I32 = 17
    U32 = 18
    I64 = 19
    U64 = 20
    IF = 21
    ELIF = 22
    ELSE = 23
    WHILE = 24
    IS = 25
    THEN = 26
    DO = 27
    BREAK = 28
    CONTINUE = 29
    IMPORT = 30
    TRUE = 31
    FALSE = 32
    LGAND = 33
    LGOR = 34

    DOT = 35
    SEMICOLON = 36
    COMMA = 37
    LPAREN = 38
    RPAREN = 39
    LBRACKET = 40
    RBRACKET = 41
    PLUS = 42
    MINUS = 43
    MUL = 44
    DIV = 45
    MOD = 46
    AND = 47
    OR = 48
    XOR = 49
    COLON = 50
    GT = 51
    GTE = 52
    LT = 53
    LTE = 54
    EQ = 55
    NEQ = 56
    ASSIGN = 57
    ARROW = 58

    ID = 59
    INT_LITERAL = 60
    STRING_LITERAL = 61
    CHAR_LITERAL = 62
    FLOAT_LITERAL = 63

    @property
    def spelling(self) -> str:
        """The text used for this token in scanner dumps."""
        return _SPELLING[self]


_KEYWORDS: dict[str, Token] = {
    "extern": Token.EXTERN,
    "func": Token.FUNC,
    "struct": Token.STRUCT,
    "end": Token.END,
    "return": Token.RETURN,
    "var": Token.VAR,
    "array": Token.ARRAY,
    "const": Token.CONST,
    "bool": Token.BOOL,
    "char": Token.CHAR,
    "string": Token.STRING,
    "i8": Token.I8,
    "u8": Token.U8,
    "i16": Token.I16,
    "u16": Token.U16,
    "i32": Token.I32,
    "u32": Token.U32,
    "i64": Token.I64,
    "u64": Token.U64,
    "if": Token.IF,
    "elif": Token.ELIF,
    "else": Token.ELSE,
    "while": Token.WHILE,
    "is": Token.IS,
    "then": Token.THEN,
    "do": Token.DO,
    "break": Token.BREAK,
    "continue": Token.CONTINUE,
    "import": Token.IMPORT,
    "true": Token.TRUE,
    "false": Token.FALSE,
    "and": Token.LGAND,
    "or": Token.LGOR,
}

_SYMBOLS: dict[str, Token] = {
    ".": Token.DOT,
    ";": Token.SEMICOLON,
    ",": Token.COMMA,
    "(": Token.LPAREN,
    ")": Token.RPAREN,
    "[": Token.LBRACKET,
    "]": Token.RBRACKET,
    "+": Token.PLUS,
    "-": Token.MINUS,
    "*": Token.MUL,
    "/": Token.DIV,
    "%": Token.MOD,
    "&": Token.AND,
    "|": Token.OR,
    "^": Token.XOR,
    ":": Token.COLON,
    ">": Token.GT,
    "<": Token.LT,
    "=": Token.EQ,
    # A lone '!' is a symbol character but has no token of its own.
    "!": Token.NONE,
}

_SPELLING: dict[Token, str] = {
    Token.NONE: "???",
    Token.EOF: "EOF",
    **{token: word for word, token in _KEYWORDS.items()},
    **{token: char for char, token in _SYMBOLS.items() if token is not Token.NONE},
    Token.GTE: ">=",
    Token.LTE: "<=",
    Token.NEQ: "!=",
    Token.ASSIGN: ":=",
    Token.ARROW: "->",
    Token.ID: "ID",
    Token.STRING_LITERAL: "STR",
    Token.CHAR_LITERAL: "CHAR",
    Token.INT_LITERAL: "INT",
    Token.FLOAT_LITERAL: "FL",
}


def keyword_token(word: str) -> Token | None:
    """Return the keyword token for ``word``, or None if it is not a keyword."""
    return _KEYWORDS.get(word)


def symbol_token(char: str) -> Token | None:
    """Return the single-character token for ``char``, or None if it is not a symbol."""
    return _SYMBOLS.get(char)