import logging
import math
from dataclasses import dataclass
from typing import Callable

from shap.diagnostics import SourceError
from shap.nodes import Binary, Expr, ExprStmt, Grouping, Literal, Stmt, Unary
from shap.tokens import Location, Operator, OperatorToken

logger = logging.getLogger("shap.runtime")

UNKNOWN_LOC = Location(1, 1)


@dataclass
class WalkError(SourceError):
    pass


def ieee_div(a: float, b: float) -> float:
    """Division that follows IEEE-754 instead of raising ``ZeroDivisionError``."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def ieee_fmod(a: float, b: float) -> float:
    """C ``fmod``: the result takes the sign of ``a``. Domain errors give NaN rather than ``ValueError``."""
    if math.isnan(a) or math.isnan(b) or math.isinf(a) or b == 0.0:
        return math.nan
    return math.fmod(a, b)


BinaryOperationImpl = Callable[[float, float], float]

binary_impls: dict[Operator, BinaryOperationImpl] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
    Operator.DIV: ieee_div,
    Operator.MOD: ieee_fmod,
}


class Walker:
    """Tree-walking evaluator. Holds no state between statements."""

    def eval(self, stmt: Stmt) -> float:
        if isinstance(stmt, ExprStmt):
            # left-associative chains build trees deeper than any parser nesting limit
            try:
                value = self.eval_expr(stmt.expr)
            except RecursionError:
                raise WalkError("Expression too deep to evaluate", loc=stmt.loc) from None
            logger.debug("Statement at %s evaluated to %r", stmt.loc, value)
            return value
        raise WalkError(f"Unexpected statement type: {type(stmt).__name__}", loc=getattr(stmt, "loc", UNKNOWN_LOC))

    def eval_expr(self, expr: Expr) -> float:
        if isinstance(expr, Literal):
            return expr.value
        elif isinstance(expr, Grouping):
            return self.eval_expr(expr.inner)
        elif isinstance(expr, Unary):
            return -self.eval_expr(expr.operand)
        elif isinstance(expr, Binary):
            if not isinstance(expr.op, OperatorToken):
                raise WalkError(f"Binary operator expected, found '{expr.op}'", loc=expr.op.loc)
            left = self.eval_expr(expr.left)
            right = self.eval_expr(expr.right)
            return binary_impls[expr.op.operator](left, right)
        else:
            raise WalkError(f"Unexpected expression type: {type(expr).__name__}", loc=getattr(expr, "loc", UNKNOWN_LOC))


def evaluate(stmts: list[Stmt]) -> list[float]:
    walker = Walker()
    return [walker.eval(stmt) for stmt in stmts]
