from calculator.operations import apply_binary, apply_unary
from calculator.parser import BinaryNode, ExpressionTree, Grouped, Leaf, UnaryNode, postorder


def evaluate(tree: ExpressionTree) -> float:
    values: list[float] = []
    for node in postorder(tree):
        if isinstance(node, Leaf):
            try:
                values.append(float(node.token.lexeme))
            except ValueError as e:
                raise RuntimeError(f"Malformed numeral: {node.token.lexeme!r}") from e
        elif isinstance(node, BinaryNode):
            right_res = values.pop()
            left_res = values.pop()
            values.append(apply_binary(node.operator, left_res, right_res))
        elif isinstance(node, UnaryNode):
            values.append(apply_unary(node.operator, values.pop()))
        elif isinstance(node, Grouped):
            pass
        else:
            raise RuntimeError(f"Unexpected expression tree node: {node}")
    return values.pop()
