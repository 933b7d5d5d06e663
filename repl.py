from calculator.config import Config
from calculator.errors import CalculatorError
from calculator.logging_config import setup_logging
from calculator.parser import split
from calculator.pipeline import calculate
from calculator.tokenizer import tokenize
from calculator.validator import validate


if __name__ == "__main__":
    config = Config.from_env()
    setup_logging(config.log_level)

    while True:
        try:
            code = input(config.prompt)
        except EOFError:
            break

        if config.show_tree:
            try:
                print(split(validate(tokenize("".join(code.split())))))
            except CalculatorError as e:
                print(e)
                continue

        print(calculate(code))
