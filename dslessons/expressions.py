"""Stack-based parsing: infix to postfix, evaluation, brackets and formula masses."""

from __future__ import annotations

from dslessons.stack import Stack

_PRIORITY = {"(": 0, "+": 1, "-": 1, "*": 2, "/": 2}
_OPERATORS = frozenset("+-*/")
_DIGITS = frozenset("0123456789")
_CLOSING = {")": "(", "]": "[", "}": "{"}
_MASSES = {"C": 12, "H": 1, "O": 16}


def to_postfix(infix: str) -> str:
    """Convert an infix expression of single-digit operands to postfix form."""
    output: list[str] = []
    pending: Stack[str] = Stack()
    for char in infix:
        if char in _DIGITS:
            output.append(char)
        elif char == "(":
            pending.push(char)
        elif char == ")":
            while pending and pending.top() != "(":
                output.append(pending.pop())
            if not pending:
                raise ValueError("unmatched ')' in expression")
            pending.pop()
        elif char in _OPERATORS:
            while pending and _PRIORITY[pending.top()] >= _PRIORITY[char]:
                output.append(pending.pop())
            pending.push(char)
        else:
            raise ValueError(f"unexpected character {char!r} in expression")
    output.extend(pending)
    return "".join(output)


def _divide(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of single-digit operands with integer arithmetic."""
    values: Stack[int] = Stack()
    for char in postfix:
        if char in _DIGITS:
            values.push(int(char))
            continue
        if char not in _OPERATORS:
            raise ValueError(f"unexpected character {char!r} in expression")
        if len(values) < 2:
            raise ValueError(f"operator {char!r} lacks operands")
        right = values.pop()
        left = values.pop()
        if char == "+":
            values.push(left + right)
        elif char == "-":
            values.push(left - right)
        elif char == "*":
            values.push(left * right)
        else:
            values.push(_divide(left, right))
    if not values:
        raise ValueError("empty expression")
    return values.top()


def is_balanced(text: str) -> bool:
    """Tell whether the brackets ``()[]{}`` in ``text`` are properly nested."""
    opened: Stack[str] = Stack()
    for char in text:
        if char in "([{":
            opened.push(char)
        elif char in _CLOSING:
            if not opened or opened.top() != _CLOSING[char]:
                return False
            opened.pop()
    return not opened


_GROUP = object()


def molar_mass(formula: str) -> int:
    """Mass of a formula built from C, H, O, parentheses and single-digit counts."""
    parts: Stack[object] = Stack()
    for char in formula:
        if char in _MASSES:
            parts.push(_MASSES[char])
        elif char == "(":
            parts.push(_GROUP)
        elif char == ")":
            total = 0
            while True:
                if not parts:
                    raise ValueError("unmatched ')' in formula")
                part = parts.pop()
                if part is _GROUP:
                    break
                total += part
            parts.push(total)
        elif char in _DIGITS:
            if not parts or parts.top() is _GROUP:
                raise ValueError("count without a preceding element or group")
            parts.push(parts.pop() * int(char))
        else:
            raise ValueError(f"unexpected character {char!r} in formula")
    return sum(part for part in parts if part is not _GROUP)