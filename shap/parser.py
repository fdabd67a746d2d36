import logging
from dataclasses import dataclass

from shap.diagnostics import SourceError
from shap.lexer import LexError, Lexer
from shap.nodes import Binary, Expr, ExprStmt, Grouping, Literal, Stmt, Unary
from shap.tokens import EofToken, Location, NumberToken, Operator, OperatorToken, Separator, SeparatorToken, Token

logger = logging.getLogger("shap.parser")

TERM_OPERATORS = (Operator.ADD, Operator.SUB)
FACTOR_OPERATORS = (Operator.MUL, Operator.DIV, Operator.MOD)

# each level of parentheses costs four Python frames (_expr, _term, _factor, _atom)
MAX_NESTING_DEPTH = 100


@dataclass
class ParserError(SourceError):
    pass


@dataclass
class UnexpectedTokenError(ParserError):
    token: Token

    @classmethod
    def at(cls, token: Token) -> "UnexpectedTokenError":
        return cls(f"Unexpected token: '{token}'.", loc=token.loc, token=token)


@dataclass
class ParserLexError(ParserError):
    lex_error: LexError

    @classmethod
    def wrap(cls, lex_error: LexError) -> "ParserLexError":
        return cls(lex_error.errmsg, loc=lex_error.loc, lex_error=lex_error)


@dataclass
class ParserInternalError(ParserError):
    pass


@dataclass
class NestingTooDeepError(ParserError):
    token: Token

    @classmethod
    def at(cls, token: Token) -> "NestingTooDeepError":
        return cls(f"Expression nested deeper than {MAX_NESTING_DEPTH} levels.", loc=token.loc, token=token)


def _is_operator(token: Token, operators: tuple[Operator, ...]) -> bool:
    return isinstance(token, OperatorToken) and token.operator in operators


def _is_separator(token: Token, separator: Separator) -> bool:
    return isinstance(token, SeparatorToken) and token.separator is separator


class Parser:
    """Recursive-descent parser pulling tokens from a ``Lexer`` on demand.

    Grammar, lowest precedence first::

        program := stmt* Eof
        stmt    := expr ';'
        expr    := term (('+' | '-') term)*
        term    := factor (('*' | '/' | '%') factor)*
        factor  := '-' factor | atom
        atom    := Number | '(' expr ')'
    """

    def __init__(self, source: str) -> None:
        self._lexer = Lexer(source)
        self._tokens: list[Token] = []
        self._pos = 0
        self._depth = 0

    def parse(self) -> list[Stmt]:
        stmts = self._program()
        logger.debug("Parsed %d statement(s)", len(stmts))
        return stmts

    def _program(self) -> list[Stmt]:
        stmts: list[Stmt] = []
        while not isinstance(self._peek(), EofToken):
            stmts.append(self._stmt())
        return stmts

    def _stmt(self) -> Stmt:
        expr = self._expr()
        terminator = self._next()
        if not _is_separator(terminator, Separator.SEMICOLON):
            raise UnexpectedTokenError.at(terminator)
        return ExprStmt(expr)

    def _expr(self) -> Expr:
        left = self._term()
        while _is_operator(self._peek(), TERM_OPERATORS):
            op = self._next()
            left = Binary(left=left, op=op, right=self._term())
        return left

    def _term(self) -> Expr:
        left = self._factor()
        while _is_operator(self._peek(), FACTOR_OPERATORS):
            op = self._next()
            left = Binary(left=left, op=op, right=self._factor())
        return left

    def _factor(self) -> Expr:
        op = self._peek()
        if self._depth >= MAX_NESTING_DEPTH:
            raise NestingTooDeepError.at(op)
        self._depth += 1
        try:
            if not _is_operator(op, (Operator.SUB,)):
                return self._atom()
            self._next()
            return Unary(op=op, operand=self._factor())  # type: ignore[arg-type]
        finally:
            self._depth -= 1

    def _atom(self) -> Expr:
        token = self._next()
        if isinstance(token, NumberToken):
            return Literal(token=token, value=token.value)
        if _is_separator(token, Separator.LEFT_PAREN):
            inner = self._expr()
            closing = self._next()
            if not _is_separator(closing, Separator.RIGHT_PAREN):
                raise UnexpectedTokenError.at(closing)
            return Grouping(paren=token, inner=inner)  # type: ignore[arg-type]
        raise UnexpectedTokenError.at(self._prev())

    def _next(self) -> Token:
        token = self._peek()
        self._pos += 1
        return token

    def _prev(self) -> Token:
        """Step back over the token just consumed and return it."""
        if self._pos == 0:
            raise ParserInternalError("Internal error: no token to step back to", loc=Location(1, 1))
        self._pos -= 1
        return self._peek()

    def _peek(self) -> Token:
        if self._pos >= len(self._tokens):
            try:
                self._tokens.append(self._lexer.next())
            except LexError as e:
                raise ParserLexError.wrap(e) from e
        return self._tokens[self._pos]


def parse(source: str) -> list[Stmt]:
    return Parser(source).parse()
