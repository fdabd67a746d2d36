import string
from dataclasses import dataclass

from shap.diagnostics import SourceError
from shap.tokens import (
    EofToken,
    IdentifierToken,
    Keyword,
    KeywordToken,
    Location,
    NumberToken,
    Operator,
    OperatorToken,
    Separator,
    SeparatorToken,
    Token,
)

TAB_WIDTH = 4

_DIGITS = frozenset(string.digits)
_IDENTIFIER_START = frozenset(string.ascii_letters + "_")
_IDENTIFIER_REST = _IDENTIFIER_START | _DIGITS | {"'"}


@dataclass
class LexError(SourceError):
    char: str


class Lexer:
    """Demand-driven scanner over a single source string.

    Each call to ``next`` skips whitespace and returns one token. Once the source is exhausted every further call
    returns an ``EofToken`` at the same location.
    """

    def __init__(self, source: str) -> None:
        self._src = source
        self._start = 0
        self._cur = 0
        self._line = 1
        self._col = 1
        self._start_loc = Location(1, 1)

    def next(self) -> Token:
        self._skip_whitespace()
        self._start = self._cur
        self._start_loc = Location(self._line, self._col)

        c = self._advance()
        if c is None:
            return EofToken(self._start_loc)
        if c in _DIGITS:
            return self._number()
        if c in _IDENTIFIER_START:
            return self._identifier()

        operator = Operator.lookup(c)
        if operator is not None:
            return OperatorToken(operator, self._start_loc)
        separator = Separator.lookup(c)
        if separator is not None:
            return SeparatorToken(separator, self._start_loc)

        raise LexError(f"Invalid character: {c!r}", loc=self._start_loc, char=c)

    def _number(self) -> NumberToken:
        self._eat(_DIGITS)
        # a '.' belongs to the literal only when a digit follows it, so "3." leaves the '.' unlexed
        if self._peek() == "." and self._peek(1) in _DIGITS:
            self._advance()
            self._eat(_DIGITS)
        return NumberToken(float(self._lexeme()), self._start_loc)

    def _identifier(self) -> IdentifierToken | KeywordToken:
        self._eat(_IDENTIFIER_REST)
        text = self._lexeme()
        keyword = Keyword.lookup(text)
        if keyword is not None:
            return KeywordToken(keyword, self._start_loc)
        return IdentifierToken(text, self._start_loc)

    def _skip_whitespace(self) -> None:
        while True:
            c = self._peek()
            if c == "\n":
                self._cur += 1
                self._line += 1
                self._col = 1
            elif c == "\t":
                self._cur += 1
                self._col += TAB_WIDTH
            elif c in (" ", "\r"):
                self._advance()
            else:
                return

    def _eat(self, charset: frozenset[str]) -> None:
        while self._peek() in charset:
            self._advance()

    def _lexeme(self) -> str:
        return self._src[self._start : self._cur]

    def _advance(self) -> str | None:
        c = self._peek()
        if c is not None:
            self._cur += 1
            self._col += 1
        return c

    def _peek(self, offset: int = 0) -> str | None:
        idx = self._cur + offset
        return self._src[idx] if idx < len(self._src) else None


def tokenize(source: str) -> list[Token]:
    """All tokens of ``source``, ending with (and including) the ``EofToken``."""
    lexer = Lexer(source)
    tokens: list[Token] = []
    while True:
        token = lexer.next()
        tokens.append(token)
        if isinstance(token, EofToken):
            return tokens
