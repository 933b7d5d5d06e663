import enum
import math
from typing import Callable, Optional

from calculator.utils import PrintableEnum


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()


class UnaryOperator(PrintableEnum):
    SQRT = enum.auto()
    SIN = enum.auto()
    COS = enum.auto()
    ACOS = enum.auto()
    NEG = enum.auto()


Operator = BinaryOperator | UnaryOperator

BinaryOperationImpl = Callable[[float, float], float]
UnaryOperationImpl = Callable[[float], float]


def _divide(a: float, b: float) -> float:
    # python raises on zero division, IEEE 754 does not
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


BINARY_SYMBOLS: dict[str, BinaryOperator] = {
    "+": BinaryOperator.ADD,
    "-": BinaryOperator.SUB,
    "*": BinaryOperator.MUL,
    "/": BinaryOperator.DIV,
}

BINARY_IMPLS: dict[BinaryOperator, BinaryOperationImpl] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUB: lambda a, b: a - b,
    BinaryOperator.MUL: lambda a, b: a * b,
    BinaryOperator.DIV: _divide,
}

UNARY_NAMES: dict[str, UnaryOperator] = dict()
UNARY_IMPLS: dict[UnaryOperator, UnaryOperationImpl] = dict()


def register_unary_operation(operator: UnaryOperator, *names: str):
    def decorator(fn: UnaryOperationImpl) -> UnaryOperationImpl:
        def decorated(arg: float) -> float:
            try:
                return fn(arg)
            except ValueError:  # math domain error
                return math.nan

        for name in names:
            UNARY_NAMES[name] = operator
        UNARY_IMPLS[operator] = decorated
        return decorated

    return decorator


@register_unary_operation(UnaryOperator.SQRT, "sqrt", "√")
def sqrt_(arg: float) -> float:
    return math.sqrt(arg)


@register_unary_operation(UnaryOperator.SIN, "sin")
def sin_(arg: float) -> float:
    return math.sin(arg)


@register_unary_operation(UnaryOperator.COS, "cos")
def cos_(arg: float) -> float:
    return math.cos(arg)


@register_unary_operation(UnaryOperator.ACOS, "acos")
def acos_(arg: float) -> float:
    return math.acos(arg)


@register_unary_operation(UnaryOperator.NEG, "-")
def neg_(arg: float) -> float:
    return -arg


def resolve_operation(name: str, prefix: bool) -> Optional[Operator]:
    """Looks up an operator by its symbol or name, None if there is no such operator.

    Some symbols are both binary and unary ("-"). In prefix position, i.e. where an operand is
    expected, the unary meaning is preferred.
    """
    binary = BINARY_SYMBOLS.get(name)
    unary = UNARY_NAMES.get(name)
    if prefix:
        return unary if unary is not None else binary
    return binary if binary is not None else unary


def is_operation_prefix(text: str) -> bool:
    return any(name.startswith(text) for name in [*BINARY_SYMBOLS, *UNARY_NAMES])


def apply_binary(operator: BinaryOperator, a: float, b: float) -> float:
    return BINARY_IMPLS[operator](a, b)


def apply_unary(operator: UnaryOperator, a: float) -> float:
    return UNARY_IMPLS[operator](a)


DEPTH_GRADE_OFFSET = 1_000_000


def get_grade(operator: Operator, depth: int) -> int:
    """Split priority of an operator at given parenthesis depth, the lowest grade binds most loosely"""
    if isinstance(operator, UnaryOperator):
        grade = 4
    elif operator in (BinaryOperator.ADD, BinaryOperator.SUB):
        grade = 1
    elif operator in (BinaryOperator.MUL, BinaryOperator.DIV):
        grade = 2
    else:
        grade = 3
    return grade + depth * DEPTH_GRADE_OFFSET


def symbol_of(operator: Operator) -> str:
    names = BINARY_SYMBOLS if isinstance(operator, BinaryOperator) else UNARY_NAMES
    return next(name for name, op in names.items() if op is operator)
