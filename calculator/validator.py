from dataclasses import dataclass
from typing import Iterator, Optional

from calculator.errors import ErrorKind, ValidationError
from calculator.tokenizer import NUMERALS, OPERATIONS, Token, TokenSequence, TokenType


@dataclass(frozen=True)
class ValidatedTokenSequence:
    """Token sequence known to be structurally valid. Only ``validate`` produces it."""

    tokens: tuple[Token, ...]
    code: str

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)


OPERAND_START = (*NUMERALS, TokenType.PARENTHESIS_OPEN, TokenType.UNARY_OPERATION)
OPERAND_END = (*NUMERALS, TokenType.PARENTHESIS_CLOSE)


def can_be_followed_by(prev: Optional[Token], next: Token) -> bool:
    """Adjacency rule, ``prev`` is None at the start of the input"""
    if prev is None or prev.type in (*OPERATIONS, TokenType.PARENTHESIS_OPEN):
        # an operand is expected
        return next.type in OPERAND_START
    elif prev.type in OPERAND_END:
        # no implicit multiplication
        return next.type in (TokenType.BINARY_OPERATION, TokenType.PARENTHESIS_CLOSE)
    else:
        return False


def _check_parenthesis_balance(sequence: TokenSequence) -> None:
    open_parenthesis_positions: list[int] = []
    for token in sequence:
        if token.type is TokenType.PARENTHESIS_OPEN:
            open_parenthesis_positions.append(token.position)
        elif token.type is TokenType.PARENTHESIS_CLOSE:
            if not open_parenthesis_positions:
                raise ValidationError(
                    ErrorKind.PARENTHESIS_CLOSED_WITHOUT_OPENING, code=sequence.code, error_char_idx=token.position
                )
            open_parenthesis_positions.pop()

    if open_parenthesis_positions:
        raise ValidationError(
            ErrorKind.PARENTHESIS_OPENED_WITHOUT_CLOSING,
            code=sequence.code,
            error_char_idx=open_parenthesis_positions[-1],
        )


def validate(sequence: TokenSequence) -> ValidatedTokenSequence:
    """Checks parenthesis balance first, so unbalanced input is always reported as such, then adjacency"""
    code = sequence.code
    if not sequence.tokens:
        raise ValidationError(ErrorKind.EMPTY, code=code, error_char_idx=0)

    _check_parenthesis_balance(sequence)

    prev: Optional[Token] = None
    for token in sequence:
        if token.type is TokenType.INCOMPLETE:
            raise ValidationError(ErrorKind.UNKNOWN_OPERATION, code=code, error_char_idx=token.position)
        if not can_be_followed_by(prev, token):
            raise ValidationError(ErrorKind.INVALID_SEQUENCE, code=code, error_char_idx=token.position)
        prev = token

    last = sequence.tokens[-1]
    if last.type not in OPERAND_END:
        raise ValidationError(ErrorKind.INVALID_SEQUENCE, code=code, error_char_idx=last.position)

    return ValidatedTokenSequence(tokens=sequence.tokens, code=code)
