import enum
from dataclasses import dataclass

from calculator.utils import excerpt_with_caret


class ErrorKind(enum.Enum):
    TOO_MANY_DOTS = "TooManyDots"
    INVALID_TOKEN = "InvalidToken"
    UNKNOWN_OPERATION = "UnknownOperation"
    INVALID_SEQUENCE = "InvalidSequence"
    PARENTHESIS_CLOSED_WITHOUT_OPENING = "ParenthesisClosedWithoutOpening"
    PARENTHESIS_OPENED_WITHOUT_CLOSING = "ParenthesisOpenedWithoutClosing"
    EMPTY = "Empty"

    def __str__(self) -> str:
        return self.value

    __repr__ = __str__

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorKind.TOO_MANY_DOTS: "Too many dots in a float. A float can have only 1 dot",
    ErrorKind.INVALID_TOKEN: "Invalid token given",
    ErrorKind.UNKNOWN_OPERATION: "Unknown operation",
    ErrorKind.INVALID_SEQUENCE: "Encountered invalid sequence",
    ErrorKind.PARENTHESIS_CLOSED_WITHOUT_OPENING: "Encountered ')' without respective opening",
    ErrorKind.PARENTHESIS_OPENED_WITHOUT_CLOSING: "Encountered '(' without respective closing",
    ErrorKind.EMPTY: "Nothing to calculate",
}


@dataclass
class CalculatorError(Exception):
    kind: ErrorKind
    code: str
    error_char_idx: int

    stage = "Calculator"

    def __str__(self) -> str:
        return "\n".join(
            [f"[{self.stage} error] {self.kind.description}", *excerpt_with_caret(self.code, self.error_char_idx)]
        )


class TokenizerError(CalculatorError):
    stage = "Tokenizer"


class ValidationError(CalculatorError):
    stage = "Validator"
