from calculator.config import Config
from calculator.errors import CalculatorError
from calculator.logging_config import setup_logging
from calculator.parser import split
from calculator.runtime import evaluate
from calculator.tokenizer import tokenize
from calculator.validator import validate

setup_logging(Config.from_env().log_level)

for code in [
    "5",
    "-1",
    "1+1",
    "-1+1",
    "1+-1",
    "4+6*3",
    "(4+6)",
    "(4+6)*3",
    "7+12-3+1.1",
    "7+12*3+(1+4)*2",
    "10-5-2",
    "7/6/2000",
    "1/0",
    "√16+sqrt(9)",
    "-cos(0)*sin0",
    "acos(-1)",
    "12.2.",
    "12$12",
    "(1+2",
    "1+2)",
    "",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
        print(f"tokens: {' '.join(str(t) for t in tokens)}")
        tree = split(validate(tokens))
    except CalculatorError as e:
        print(e)
        continue

    print(f"tree: {tree}")
    print(f"result: {evaluate(tree)}")
