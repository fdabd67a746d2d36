from dataclasses import dataclass

from shap.utils import SymbolEnum


@dataclass(frozen=True)
class Location:
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class Operator(SymbolEnum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"


class Separator(SymbolEnum):
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    SEMICOLON = ";"


class Keyword(SymbolEnum):
    IS = "is"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class NumberToken:
    value: float
    loc: Location

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class IdentifierToken:
    text: str
    loc: Location

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class KeywordToken:
    keyword: Keyword
    loc: Location

    def __str__(self) -> str:
        return str(self.keyword)


@dataclass(frozen=True)
class SeparatorToken:
    separator: Separator
    loc: Location

    def __str__(self) -> str:
        return str(self.separator)


@dataclass(frozen=True)
class OperatorToken:
    operator: Operator
    loc: Location

    def __str__(self) -> str:
        return str(self.operator)


@dataclass(frozen=True)
class EofToken:
    loc: Location

    def __str__(self) -> str:
        return "<eof>"


Token = NumberToken | IdentifierToken | KeywordToken | SeparatorToken | OperatorToken | EofToken
