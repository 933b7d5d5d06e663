import logging

from calculator.errors import CalculatorError
from calculator.parser import split
from calculator.runtime import evaluate
from calculator.tokenizer import tokenize, untokenize
from calculator.validator import validate

logger = logging.getLogger(__name__)


def evaluate_expression(text: str) -> float:
    """Evaluates a single arithmetic expression, whitespace is ignored.

    Raises ``CalculatorError`` (``TokenizerError`` or ``ValidationError``) on malformed input.
    """
    code = "".join(text.split())
    tokens = tokenize(code)
    logger.debug("Tokens: %s", " ".join(str(t) for t in tokens))
    validated = validate(tokens)
    logger.debug("Validated: %s", untokenize(validated))
    tree = split(validated)
    logger.debug("Expression tree: %s", tree)
    return evaluate(tree)


def format_result(value: float) -> str:
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def calculate(text: str) -> str:
    """Result of the expression or the name of the error kind, as shown to the user"""
    try:
        result = evaluate_expression(text)
    except CalculatorError as e:
        logger.info("Rejected %r: %s", text, e.kind)
        return str(e.kind)
    return format_result(result)
