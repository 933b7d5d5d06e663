import math

import pytest

from calculator.parser import split
from calculator.runtime import evaluate
from calculator.tokenizer import tokenize
from calculator.validator import validate


def eval_code(code: str) -> float:
    return evaluate(split(validate(tokenize(code))))


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("-1", -1.0),
        pytest.param("1+2", 3.0),
        pytest.param("(1+2)", 3.0),
        pytest.param("-(1+2)", -3.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("1*4+5", 9.0),
        pytest.param("1+4*5", 21.0),
        pytest.param("10/5/2/2", 0.5),
        pytest.param("10-5-2", 3.0),
        pytest.param("10-(5-2)", 7.0),
        pytest.param("10+2*(5+3-1)", 24.0),
        pytest.param("1+-1", 0.0),
        pytest.param("5--3", 8.0),
        pytest.param("2*-(3+1)", -8.0),
        pytest.param("7+12*3+1+4*2", 52.0),
        pytest.param("7+12*3+(1+4)*2", 53.0),
        pytest.param("((2+3)*(4-1))/5", 3.0),
        # unary operations
        pytest.param("sqrt16", 4.0),
        pytest.param("√16+sqrt(9)", 7.0),
        pytest.param("sqrt(4)*3", 6.0),
        pytest.param("sqrtsqrt16", 2.0),
        pytest.param("cos0", 1.0),
        pytest.param("sin0", 0.0),
        pytest.param("-cos(0)", -1.0),
        pytest.param("2*cos0+1", 3.0),
        pytest.param("acos(1)", 0.0),
        pytest.param("acos(-1)", math.pi),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: float) -> None:
    assert eval_code(code) == pytest.approx(expected_ret_val)


def test_eval_sum_with_float() -> None:
    assert eval_code("7+12-3+1.1") == pytest.approx(17.1)


@pytest.mark.parametrize("code", ["0", "7", "42", "1234567890", "000123"])
def test_digits_evaluate_exactly(code: str) -> None:
    assert eval_code(code) == int(code)


@pytest.mark.parametrize(
    "code",
    ["1+2*3", "7+12*3+(1+4)*2", "sqrt(16)-2/4", "-(3-10)*2", "10-5-2"],
)
def test_redundant_outer_parenthesis_does_not_change_result(code: str) -> None:
    assert eval_code(f"({code})") == eval_code(code)
    assert eval_code(f"(({code}))") == eval_code(code)


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1/0", math.inf),
        pytest.param("-1/0", -math.inf),
        pytest.param("1/(0*-1)", -math.inf),
    ],
)
def test_division_by_zero_is_infinite(code: str, expected_ret_val: float) -> None:
    assert eval_code(code) == expected_ret_val


@pytest.mark.parametrize("code", ["0/0", "sqrt(-4)", "acos2", "sin(1/0)"])
def test_math_domain_errors_are_nan(code: str) -> None:
    assert math.isnan(eval_code(code))


def test_long_flat_expression() -> None:
    assert eval_code("+".join(["1"] * 5000)) == 5000.0
    assert eval_code("-".join(["1"] * 3000)) == -2998.0
    assert eval_code("*".join(["1"] * 3000) + "/2") == 0.5


def test_deeply_nested_expression() -> None:
    depth = 1100
    assert eval_code("(1+" * depth + "1" + ")" * depth) == depth + 1
    assert eval_code("(" * depth + "7" + ")" * depth) == 7.0


def test_long_unary_chain() -> None:
    assert eval_code("-" * 2001 + "(4)") == -4.0
    assert eval_code("sqrt" * 1500 + "1") == 1.0
