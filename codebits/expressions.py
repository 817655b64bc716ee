"""Operator-precedence conversion and bracket matching."""

from __future__ import annotations

_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}
_OPERATORS = frozenset("^*/+-()")
_CLOSING = {")": "(", "}": "{", "]": "["}


def precedence(op: str) -> int:
    """Return the binding strength of an operator; 0 for anything else."""
    return _PRECEDENCE.get(op, 0)


def is_operator(ch: str) -> bool:
    """Return True for arithmetic operators and parentheses."""
    return ch in _OPERATORS


def infix_to_postfix(expr: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    All operators, ``^`` included, associate to the left. An unmatched
    opening parenthesis is emitted at the end of the output.
    """
    stack: list[str] = []
    output: list[str] = []
    for ch in expr:
        if not is_operator(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def is_valid_parentheses(text: str) -> bool:
    """Return True if every bracket is closed by its match in the right order.

    Any character that is not a closing bracket counts as an opener, so
    only strings made of brackets can be valid.
    """
    stack: list[str] = []
    for ch in text:
        if ch in _CLOSING:
            if not stack or stack[-1] != _CLOSING[ch]:
                return False
            stack.pop()
        else:
            stack.append(ch)
    return not stack