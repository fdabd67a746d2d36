from dataclasses import dataclass

from shap.tokens import Location, NumberToken, OperatorToken, SeparatorToken, Token


@dataclass(frozen=True)
class Literal:
    token: NumberToken
    value: float

    @property
    def loc(self) -> Location:
        return self.token.loc


@dataclass(frozen=True)
class Grouping:
    paren: SeparatorToken
    inner: "Expr"

    @property
    def loc(self) -> Location:
        return self.paren.loc


@dataclass(frozen=True)
class Unary:
    op: OperatorToken
    operand: "Expr"

    @property
    def loc(self) -> Location:
        return self.op.loc


@dataclass(frozen=True)
class Binary:
    left: "Expr"
    # any token type is representable here, the walker rejects non-operators
    op: Token
    right: "Expr"

    @property
    def loc(self) -> Location:
        return self.op.loc


Expr = Literal | Grouping | Unary | Binary


@dataclass(frozen=True)
class ExprStmt:
    expr: Expr

    @property
    def loc(self) -> Location:
        return self.expr.loc


Stmt = ExprStmt
