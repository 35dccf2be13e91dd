"""Hand-written scanner for the language."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from typing import TextIO

from .tokens import Token, keyword_token, symbol_token

_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_TWO_CHAR: dict[str, tuple[str, Token]] = {
    "-": (">", Token.ARROW),
    ":": ("=", Token.ASSIGN),
    ">": ("=", Token.GTE),
    "<": ("=", Token.LTE),
    "!": ("=", Token.NEQ),
}

_VALUED = frozenset(
    {
        Token.ID,
        Token.STRING_LITERAL,
        Token.CHAR_LITERAL,
        Token.INT_LITERAL,
        Token.FLOAT_LITERAL,
    }
)


class Lexer:
    """Turns source text into a stream of tokens.

    After each token the attributes ``value``, ``i_value`` and ``f_value``
    hold the text and numeric value of the most recent literal or identifier.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._eof = False
        self._buffer = ""
        self._raw = ""
        self._stack: list[Token] = []
        self.value = ""
        self.i_value = 0
        self.f_value = 0.0
        self.line_number = 1

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> Lexer:
        """Create a lexer over the contents of a file."""
        with open(path, encoding="utf-8", newline="") as handle:
            return cls(handle.read())

    def unget(self, token: Token) -> None:
        """Push a token back; pushed tokens come back last in, first out."""
        self._stack.append(Token(token))

    def _read(self) -> str:
        if self._pos < len(self._source):
            char = self._source[self._pos]
            self._pos += 1
            return char
        self._eof = True
        return ""

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def get_next(self) -> Token:
        """Return the next token in the stream."""
        if self._stack:
            return self._stack.pop()
        if self._eof:
            return Token.EOF

        while not self._eof:
            char = self._read()
            self._raw += char

            if char == "#":
                char = self._read()
                self._raw += char
                while char != "\n" and not self._eof:
                    char = self._read()
                    self._raw += char
                self.line_number += 1

            if char == '"':
                return self._read_string()
            if char == "'":
                return self._read_char()
            if not char:
                # Input ended; any unfinished word is dropped.
                break

            is_symbol = symbol_token(char) is not None
            if char in (" ", "\n") or is_symbol:
                if char == "\n":
                    self.line_number += 1
                if is_symbol:
                    symbol = self._read_symbol(char)
                    if not self._buffer:
                        return symbol
                    self._stack.append(symbol)
                if not self._buffer:
                    continue
                token = self._classify(self._buffer)
                self._buffer = ""
                return token

            self._buffer += char

        return Token.EOF

    def _read_string(self) -> Token:
        value = ""
        char = self._read()
        self._raw += char
        while char != '"' and not self._eof:
            if char == "\\":
                char = self._read()
                value += "\n" if char == "n" else "\\" + char
            else:
                value += char
            char = self._read()
        self.value = value
        return Token.STRING_LITERAL

    def _read_char(self) -> Token:
        char = self._read()
        if char == "\\":
            char = self._read()
            if char == "n":
                char = "\n"
        self.i_value = ord(char) if char else -1
        self.value = char
        self._read()
        return Token.CHAR_LITERAL

    def _read_symbol(self, char: str) -> Token:
        pair = _TWO_CHAR.get(char)
        if pair is not None:
            second, combined = pair
            if self._peek() == second:
                self._read()
                self._raw += second
                return combined
        return symbol_token(char)

    def _classify(self, word: str) -> Token:
        keyword = keyword_token(word)
        if keyword is not None:
            return keyword
        if all(c in _DIGITS for c in word):
            self.value = word
            self.i_value = int(word)
            return Token.INT_LITERAL
        if len(word) >= 3 and word.startswith("0x") and all(c in _HEX_DIGITS for c in word[2:]):
            self.value = word
            self.i_value = int(word, 16)
            return Token.INT_LITERAL
        if word.count(".") == 1 and all(c in _DIGITS for c in word.replace(".", "")):
            self.value = word
            self.f_value = float(word)
            return Token.FLOAT_LITERAL
        self.value = word
        return Token.ID

    def get_raw_buffer(self) -> str:
        """Return the raw text consumed since the last call, and clear it."""
        raw, self._raw = self._raw, ""
        return raw

    def describe(self, token: Token | int) -> str:
        """Return the scanner-dump text for a token, using the current value."""
        try:
            token = Token(token)
        except ValueError:
            return ""
        if token in _VALUED:
            return f"{token.spelling}({self.value})"
        return token.spelling

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until the end of input (EOF itself is not yielded)."""
        while (token := self.get_next()) is not Token.EOF:
            yield token


def debug_scanner(lexer: Lexer, stream: TextIO | None = None) -> None:
    """Write every token up to and including EOF, one per line."""
    out = sys.stdout if stream is None else stream
    out.write("Debugging scanner...\n")
    while True:
        token = lexer.get_next()
        out.write(lexer.describe(token) + "\n")
        if token is Token.EOF:
            break