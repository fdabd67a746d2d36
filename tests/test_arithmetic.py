import math

import pytest

from shap.parser import parse
from shap.runtime import evaluate


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1;", 1.0),
        pytest.param("-1;", -1.0),
        pytest.param("1+2;", 3.0),
        pytest.param("(1+2);", 3.0),
        pytest.param("-(1+2);", -3.0),
        pytest.param("(((1)));", 1.0),
        pytest.param("1 * 4 + 5;", 9.0),
        pytest.param("1 + 4 * 5;", 21.0),
        pytest.param("2 + 3 * 4;", 14.0),
        pytest.param("(2 + 3) * 4;", 20.0),
        pytest.param("-2 - -3;", 1.0),
        pytest.param("- -3;", 3.0),
        pytest.param("7 % 3;", 1.0),
        pytest.param("10 - 2 - 3;", 5.0),
        pytest.param("10 / 5 / 2 / 2;", 0.5),
        pytest.param("10 + 2 * (5 + 3 - 1);", 24.0),
        pytest.param("2 * 3 % 4;", 2.0),
        pytest.param("-2 * 3;", -6.0),
        pytest.param("3.25 * 4;", 13.0),
        # statements are independent
        pytest.param("1; 2; 3 + 4;", 7.0),
        pytest.param("1;\n2 *\n\t(3 - 1);", 4.0),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: float) -> None:
    results = evaluate(parse(code))
    assert results[-1] == expected_ret_val


def test_one_value_per_statement() -> None:
    assert evaluate(parse("1; 2 + 2; -3;")) == [1.0, 4.0, -3.0]


def test_empty_program_has_no_values() -> None:
    assert evaluate(parse("  \n\t")) == []


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1 / 0;", math.inf),
        pytest.param("-1 / 0;", -math.inf),
        pytest.param("1 / -0;", -math.inf),
        pytest.param("(1 / 0) * 0;", math.nan),
        pytest.param("0 / 0;", math.nan),
        pytest.param("5 % 0;", math.nan),
    ],
)
def test_division_by_zero_follows_ieee754(code: str, expected_ret_val: float) -> None:
    [result] = evaluate(parse(code))
    if math.isnan(expected_ret_val):
        assert math.isnan(result)
    else:
        assert result == expected_ret_val
