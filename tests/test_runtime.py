import math

import pytest

from shap.nodes import Binary, ExprStmt, Literal, Unary
from shap.parser import parse
from shap.runtime import WalkError, Walker, ieee_div, ieee_fmod
from shap.tokens import Location, NumberToken, Operator, OperatorToken, Separator, SeparatorToken


def _literal(value: float, column: int) -> Literal:
    return Literal(token=NumberToken(value, Location(1, column)), value=value)


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("7 % 3;", 1.0),
        pytest.param("-7 % 3;", -1.0),
        pytest.param("7 % -3;", 1.0),
        pytest.param("-7 % -3;", -1.0),
        pytest.param("7.5 % 2;", 1.5),
        pytest.param("2 % 7;", 2.0),
    ],
)
def test_modulo_takes_sign_of_dividend(code: str, expected_ret_val: float) -> None:
    [stmt] = parse(code)
    assert Walker().eval(stmt) == expected_ret_val


@pytest.mark.parametrize(
    "a, b, expected",
    [
        pytest.param(1.0, 0.0, math.inf),
        pytest.param(-1.0, 0.0, -math.inf),
        pytest.param(1.0, -0.0, -math.inf),
        pytest.param(-1.0, -0.0, math.inf),
        pytest.param(0.0, 0.0, math.nan),
        pytest.param(math.nan, 0.0, math.nan),
        pytest.param(6.0, 4.0, 1.5),
    ],
)
def test_ieee_div(a: float, b: float, expected: float) -> None:
    result = ieee_div(a, b)
    if math.isnan(expected):
        assert math.isnan(result)
    else:
        assert result == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        pytest.param(5.0, 0.0, math.nan),
        pytest.param(math.inf, 2.0, math.nan),
        pytest.param(math.nan, 2.0, math.nan),
        pytest.param(1.0, math.inf, 1.0),
        pytest.param(-1.0, math.inf, -1.0),
    ],
)
def test_ieee_fmod(a: float, b: float, expected: float) -> None:
    result = ieee_fmod(a, b)
    if math.isnan(expected):
        assert math.isnan(result)
    else:
        assert result == expected


def test_unary_negates_operand() -> None:
    expr = Unary(op=OperatorToken(Operator.SUB, Location(1, 1)), operand=_literal(0.0, 2))
    result = Walker().eval_expr(expr)
    assert result == 0.0
    assert math.copysign(1.0, result) == -1.0


def test_walker_keeps_no_state_between_statements() -> None:
    walker = Walker()
    stmts = parse("1 + 1; 1 + 1; 5;")
    assert [walker.eval(stmt) for stmt in stmts] == [2.0, 2.0, 5.0]


def test_binary_without_operator_token_is_walk_error() -> None:
    expr = Binary(
        left=_literal(1.0, 1),
        op=SeparatorToken(Separator.SEMICOLON, Location(1, 3)),
        right=_literal(2.0, 5),
    )
    with pytest.raises(WalkError) as exc_info:
        Walker().eval(ExprStmt(expr))
    assert exc_info.value.loc == Location(1, 3)
    assert str(exc_info.value) == "[1:3] Binary operator expected, found ';'"


def test_unknown_node_is_walk_error() -> None:
    with pytest.raises(WalkError):
        Walker().eval_expr("1 + 1")  # type: ignore[arg-type]


def test_long_left_associative_chain_is_walk_error() -> None:
    [stmt] = parse("1" + " - 1" * 3000 + ";")
    with pytest.raises(WalkError) as exc_info:
        Walker().eval(stmt)
    assert exc_info.value.errmsg == "Expression too deep to evaluate"
    assert exc_info.value.loc == Location(1, 11999)
