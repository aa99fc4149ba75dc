"""Infix to postfix conversion and evaluation of postfix strings and expression trees."""

from __future__ import annotations

import string

from dsakit.stack import Stack, StackOverflow, StackUnderflow
from dsakit.trees import Node

_MAX_DEPTH = 100
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


class ExpressionError(ValueError):
    """Raised for malformed expressions."""


def precedence(operator: str) -> int:
    """Binding strength of an operator; anything else ranks 0."""
    return _PRECEDENCE.get(operator, 0)


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    operators: list[str] = []
    output: list[str] = []
    for token in infix:
        if token.isspace():
            continue
        if token.isalnum():
            output.append(token)
        elif token == "(":
            operators.append(token)
        elif token == ")":
            while True:
                if not operators:
                    raise ExpressionError("mismatched parentheses")
                top = operators.pop()
                if top == "(":
                    break
                output.append(top)
        else:
            while operators and precedence(operators[-1]) >= precedence(token):
                output.append(operators.pop())
            operators.append(token)
    while operators:
        top = operators.pop()
        if top == "(":
            raise ExpressionError("mismatched parentheses")
        output.append(top)
    return "".join(output)


def _divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        return base**exponent
    return int(base**exponent)


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        return _divide(left, right)
    if operator == "^":
        return _power(left, right)
    raise ExpressionError(f"invalid operator: {operator!r}")


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix string of single-digit operands with integer arithmetic.

    Whitespace is ignored; the value on top of the stack at the end is returned.
    """
    stack: Stack[int] = Stack(_MAX_DEPTH)
    try:
        for token in expression:
            if token in string.digits:
                stack.push(int(token))
            elif token.isspace():
                continue
            else:
                right = stack.pop()
                left = stack.pop()
                stack.push(_apply(token, left, right))
        return stack.pop()
    except StackUnderflow as exc:
        raise ExpressionError("not enough operands") from exc
    except StackOverflow as exc:
        raise ExpressionError("expression too deep") from exc


def _leaf_value(value: object) -> int:
    if isinstance(value, int):
        return value
    text = str(value)
    if not text or any(ch not in string.digits for ch in text):
        raise ExpressionError(f"invalid operand: {value!r}")
    return int(text)


def evaluate_expression_tree(root: Node | None) -> int:
    """Evaluate a tree whose leaves are digits and inner nodes are operators.

    An empty tree and a missing child count as 0.
    """
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return _leaf_value(root.value)
    left = evaluate_expression_tree(root.left)
    right = evaluate_expression_tree(root.right)
    return _apply(str(root.value), left, right)