import logging
import math

import pytest

from calculator.errors import CalculatorError, ErrorKind, TokenizerError, ValidationError
from calculator.pipeline import calculate, evaluate_expression, format_result


@pytest.mark.parametrize(
    "text, expected",
    [
        pytest.param("7 + 12 * 3 + (1 + 4) * 2", "53"),
        pytest.param("7+12*3+1+4*2", "52"),
        pytest.param("1/4", "0.25"),
        pytest.param(" sqrt 16 ", "4"),
        pytest.param("1/0", "inf"),
        pytest.param("-1/0", "-inf"),
        pytest.param("0/0", "nan"),
        pytest.param("12.2.", "TooManyDots"),
        pytest.param("13..", "TooManyDots"),
        pytest.param("12$12", "UnknownOperation"),
        pytest.param("a", "UnknownOperation"),
        pytest.param("1\x00", "InvalidToken"),
        pytest.param("1++2", "InvalidSequence"),
        pytest.param("(1+2", "ParenthesisOpenedWithoutClosing"),
        pytest.param("1+2)", "ParenthesisClosedWithoutOpening"),
        pytest.param("", "Empty"),
        pytest.param("   ", "Empty"),
    ],
)
def test_calculate(text: str, expected: str) -> None:
    assert calculate(text) == expected


def test_whitespace_is_ignored() -> None:
    assert evaluate_expression("7 + 12 - 3 + 1 . 1") == pytest.approx(17.1)


@pytest.mark.parametrize(
    "text, error_type",
    [
        pytest.param("1..", TokenizerError),
        pytest.param("(", ValidationError),
    ],
)
def test_errors_raised_by_stage(text: str, error_type: type) -> None:
    with pytest.raises(error_type):
        evaluate_expression(text)


def test_errors_share_base_class() -> None:
    with pytest.raises(CalculatorError) as exc_info:
        evaluate_expression("1+")
    assert exc_info.value.kind is ErrorKind.INVALID_SEQUENCE
    assert str(exc_info.value).startswith("[Validator error] Encountered invalid sequence")


@pytest.mark.parametrize(
    "value, expected",
    [
        pytest.param(53.0, "53"),
        pytest.param(-0.0, "0"),
        pytest.param(17.5, "17.5"),
        pytest.param(1e20, "1e+20"),
        pytest.param(math.inf, "inf"),
    ],
)
def test_format_result(value: float, expected: str) -> None:
    assert format_result(value) == expected


def test_rejected_input_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="calculator"):
        calculate("1+*2")
    assert "InvalidSequence" in caplog.text


@pytest.mark.parametrize(
    "text, expected",
    [
        pytest.param("+".join(["1"] * 1500), "1500"),
        pytest.param("((", "ParenthesisOpenedWithoutClosing"),
        pytest.param("())", "ParenthesisClosedWithoutOpening"),
    ],
)
def test_calculate_edge_inputs(text: str, expected: str) -> None:
    assert calculate(text) == expected
