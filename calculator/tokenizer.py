import enum
import re
import string
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Optional

from calculator.errors import ErrorKind, TokenizerError
from calculator.operations import BinaryOperator, Operator, is_operation_prefix, resolve_operation
from calculator.utils import PrintableEnum


class TokenType(PrintableEnum):
    INCOMPLETE = enum.auto()
    INTEGER = enum.auto()
    FLOAT = enum.auto()
    BINARY_OPERATION = enum.auto()
    UNARY_OPERATION = enum.auto()
    PARENTHESIS_OPEN = enum.auto()
    PARENTHESIS_CLOSE = enum.auto()


NUMERALS = (TokenType.INTEGER, TokenType.FLOAT)
OPERATIONS = (TokenType.BINARY_OPERATION, TokenType.UNARY_OPERATION)


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    position: int = field(default=0, compare=False)
    operator: Optional[Operator] = None

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


@dataclass(frozen=True)
class TokenSequence:
    """Output of the tokenizer, not yet checked for structural validity"""

    tokens: tuple[Token, ...]
    code: str

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)


def _classify(code: str, i: int) -> Token:
    char = code[i]
    if char in string.digits:
        return Token(type=TokenType.INTEGER, lexeme=char, position=i)
    elif char == ".":
        return Token(type=TokenType.FLOAT, lexeme=char, position=i)
    elif char == "(":
        return Token(type=TokenType.PARENTHESIS_OPEN, lexeme=char, position=i)
    elif char == ")":
        return Token(type=TokenType.PARENTHESIS_CLOSE, lexeme=char, position=i)
    elif char.isspace() or not char.isprintable():
        raise TokenizerError(ErrorKind.INVALID_TOKEN, code=code, error_char_idx=i)
    else:
        return Token(type=TokenType.INCOMPLETE, lexeme=char, position=i)


def _resolve(token: Token, prefix: bool, code: str) -> Token:
    operator = resolve_operation(token.lexeme, prefix=prefix)
    if operator is None:
        raise TokenizerError(ErrorKind.UNKNOWN_OPERATION, code=code, error_char_idx=token.position)
    token_type = TokenType.BINARY_OPERATION if isinstance(operator, BinaryOperator) else TokenType.UNARY_OPERATION
    return replace(token, type=token_type, operator=operator)


def _close(token: Token, prefix: bool, code: str) -> Token:
    if token.type is TokenType.INCOMPLETE:
        return _resolve(token, prefix, code)
    if token.type is TokenType.FLOAT and not any(c in string.digits for c in token.lexeme):
        raise TokenizerError(ErrorKind.INVALID_TOKEN, code=code, error_char_idx=token.position)
    return token


def _merge(current: Optional[Token], new: Token, prefix: bool, code: str) -> tuple[Optional[Token], Token]:
    """Feeds a freshly classified token to the one under construction.

    Returns the token that got closed by this step (if any) and the token under construction.
    """
    if current is None:
        return None, new

    if current.type is TokenType.INCOMPLETE:
        if new.type is TokenType.INCOMPLETE and is_operation_prefix(current.lexeme + new.lexeme):
            return None, replace(current, lexeme=current.lexeme + new.lexeme)
        if current.lexeme == "-" and prefix and new.type in NUMERALS:
            # signed numeral
            return None, replace(new, lexeme=current.lexeme + new.lexeme, position=current.position)
        return _resolve(current, prefix, code), new

    pair = (current.type, new.type)
    if pair in [(TokenType.INTEGER, TokenType.INTEGER), (TokenType.FLOAT, TokenType.INTEGER)]:
        return None, replace(current, lexeme=current.lexeme + new.lexeme)
    elif pair == (TokenType.INTEGER, TokenType.FLOAT):
        return None, replace(current, type=TokenType.FLOAT, lexeme=current.lexeme + new.lexeme)
    elif pair == (TokenType.FLOAT, TokenType.FLOAT):
        raise TokenizerError(ErrorKind.TOO_MANY_DOTS, code=code, error_char_idx=new.position)
    else:
        return _close(current, prefix, code), new


def _is_prefix_position(tokens: list[Token]) -> bool:
    """Whether an operand is expected after the tokens closed so far"""
    return not tokens or tokens[-1].type in (*OPERATIONS, TokenType.PARENTHESIS_OPEN)


def tokenize(code: str) -> TokenSequence:
    tokens: list[Token] = []
    current: Optional[Token] = None
    for i in range(len(code)):
        closed, current = _merge(current, _classify(code, i), prefix=_is_prefix_position(tokens), code=code)
        if closed is not None:
            tokens.append(closed)

    if current is not None:
        prefix = _is_prefix_position(tokens)
        if current.type is TokenType.INCOMPLETE and resolve_operation(current.lexeme, prefix) is None:
            # left for the validator to reject
            tokens.append(current)
        else:
            tokens.append(_close(current, prefix, code))

    return TokenSequence(tokens=tuple(tokens), code=code)


def untokenize(tokens: Iterable[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result
