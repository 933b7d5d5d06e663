from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from calculator.operations import BinaryOperator, Operator, UnaryOperator, get_grade, symbol_of
from calculator.tokenizer import NUMERALS, Token, TokenType
from calculator.validator import ValidatedTokenSequence


@dataclass(frozen=True)
class Leaf:
    token: Token

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class UnaryNode:
    operator: UnaryOperator
    operand: "ExpressionTree"

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class BinaryNode:
    left: "ExpressionTree"
    operator: BinaryOperator
    right: "ExpressionTree"

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class Grouped:
    """Explicit parenthesis pair around a compound sub-expression"""

    inner: "ExpressionTree"

    def __str__(self) -> str:
        return render(self)


ExpressionTree = Leaf | UnaryNode | BinaryNode | Grouped


def _children(node: ExpressionTree) -> tuple[ExpressionTree, ...]:
    if isinstance(node, BinaryNode):
        return (node.left, node.right)
    elif isinstance(node, UnaryNode):
        return (node.operand,)
    elif isinstance(node, Grouped):
        return (node.inner,)
    else:
        return ()


def postorder(tree: ExpressionTree) -> Iterator[ExpressionTree]:
    """Children before parents, left to right. Uses an explicit stack, long expressions make deep trees."""
    work: list[tuple[ExpressionTree, bool]] = [(tree, False)]
    while work:
        node, expanded = work.pop()
        children = _children(node)
        if expanded or not children:
            yield node
            continue
        work.append((node, True))
        work.extend((child, False) for child in reversed(children))


def render(tree: ExpressionTree) -> str:
    rendered: list[str] = []
    for node in postorder(tree):
        if isinstance(node, Leaf):
            rendered.append(node.token.lexeme)
        elif isinstance(node, Grouped):
            rendered.append(f"({rendered.pop()})")
        elif isinstance(node, UnaryNode):
            operand = rendered.pop()
            if node.operator is UnaryOperator.NEG:
                rendered.append(f"-{operand}")
            else:
                rendered.append(f"{symbol_of(node.operator)} {operand}")
        else:
            right = rendered.pop()
            left = rendered.pop()
            rendered.append(f"{left} {symbol_of(node.operator)} {right}")
    return rendered.pop()


def split(sequence: ValidatedTokenSequence) -> ExpressionTree:
    """Builds expression tree by splitting the sequence on its loosest-binding operators.

    7 + (9 - 2) * 7 + 3 * 4 is split on both top-level "+" into 7, (9 - 2) * 7 and 3 * 4,
    which are folded from the left. (9 - 2) * 7 is split on "*", and so on:

                     +
                  /     \\
                 +       *
                / \\     / \\
               7   *   3   4
                  / \\
              (9 - 2) 7
    """
    return _split(sequence.tokens)


@dataclass(frozen=True)
class _Fold:
    """Pending node, built once all of its ``operands`` sub-sequences are split"""

    operands: int
    operators: tuple[Operator, ...] = ()
    grouped: bool = False

    def build(self, subtrees: list[ExpressionTree]) -> ExpressionTree:
        if self.grouped:
            return Grouped(subtrees[0])
        if self.operands == 1:
            # prefix unary operators, the innermost is the last one
            node = subtrees[0]
            for operator in reversed(self.operators):
                assert isinstance(operator, UnaryOperator)
                node = UnaryNode(operator=operator, operand=node)
            return node
        node = subtrees[0]
        for operator, right in zip(self.operators, subtrees[1:]):
            assert isinstance(operator, BinaryOperator)
            node = BinaryNode(left=node, operator=operator, right=right)
        return node


def _split(tokens: Sequence[Token]) -> ExpressionTree:
    done: list[ExpressionTree] = []
    work: list[Sequence[Token] | _Fold] = [tokens]
    while work:
        item = work.pop()
        if isinstance(item, _Fold):
            subtrees = done[len(done) - item.operands :]
            del done[len(done) - item.operands :]
            done.append(item.build(subtrees))
            continue

        tokens = item
        if len(tokens) == 1:
            done.append(_leaf(tokens[0]))
            continue

        if _is_wrapped(tokens):
            while _is_wrapped(tokens):
                tokens = tokens[1:-1]
            if len(tokens) == 1:
                done.append(_leaf(tokens[0]))
            else:
                work.append(_Fold(operands=1, grouped=True))
                work.append(tokens)
            continue

        indices = _find_split_indices(tokens)
        operators = tuple(tokens[idx].operator for idx in indices)
        if all(isinstance(operator, BinaryOperator) for operator in operators):
            bounds = [-1, *indices, len(tokens)]
            segments = [tokens[start + 1 : end] for start, end in zip(bounds, bounds[1:])]
            work.append(_Fold(operands=len(segments), operators=operators))  # type: ignore
            # last pushed is split first, keeps ``done`` in left to right order
            work.extend(reversed(segments))
        elif all(isinstance(operator, UnaryOperator) for operator in operators):
            work.append(_Fold(operands=1, operators=operators))  # type: ignore
            work.append(tokens[indices[-1] + 1 :])
        else:
            raise RuntimeError(f"Unexpected split tokens: {' '.join(str(tokens[idx]) for idx in indices)}")

    if len(done) != 1:
        raise RuntimeError("Internal error, expression tree not assembled")
    return done[0]


def _leaf(token: Token) -> Leaf:
    if token.type not in NUMERALS:
        raise RuntimeError(f"Operand expected, found {token}")
    return Leaf(token)


def _is_wrapped(tokens: Sequence[Token]) -> bool:
    """Whether the first and the last token are a matching parenthesis pair"""
    if len(tokens) < 2 or tokens[0].type is not TokenType.PARENTHESIS_OPEN:
        return False
    depth = 0
    for i, token in enumerate(tokens):
        if token.type is TokenType.PARENTHESIS_OPEN:
            depth += 1
        elif token.type is TokenType.PARENTHESIS_CLOSE:
            depth -= 1
            if depth == 0:
                return i == len(tokens) - 1
    return False


def _find_split_indices(tokens: Sequence[Token]) -> list[int]:
    """Positions of all operators sharing the lowest grade, in order.

    Equally graded binary operators form a chain folded from the left. Lowest graded unary operators
    are the run of prefix operators at the start, applied right to left.
    """
    depth = 0
    lowest_grade: Optional[int] = None
    indices: list[int] = []
    for idx, token in enumerate(tokens):
        if token.type is TokenType.PARENTHESIS_OPEN:
            depth += 1
        elif token.type is TokenType.PARENTHESIS_CLOSE:
            depth -= 1
        elif token.operator is not None:
            grade = get_grade(token.operator, depth)
            if lowest_grade is None or grade < lowest_grade:
                lowest_grade = grade
                indices = [idx]
            elif grade == lowest_grade:
                indices.append(idx)

    if not indices:
        raise RuntimeError(f"No operator to split on: {' '.join(str(t) for t in tokens)}")
    return indices
