"""Infix-to-postfix conversion and bracket balancing."""

from __future__ import annotations

from typing import List

from dsakit.stacks import ArrayStack

_OPERATORS = "+-*/"
_PAIRS = {"(": ")", "{": "}", "[": "]"}
_PAREN_CAPACITY = 10
_BRACKET_CAPACITY = 100


def precedence(ch: str) -> int:
    """Return the precedence of ``ch``; 0 for anything that is not an operator or parenthesis."""
    if ch in "()":
        return 4
    if ch in "*/":
        return 3
    if ch in "+-":
        return 2
    return 0


def is_operator(ch: str) -> bool:
    """Return True for the four binary arithmetic operators."""
    return len(ch) == 1 and ch in _OPERATORS


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression to postfix; every non-operator character is an operand."""
    output: List[str] = []
    pending: List[str] = []
    for ch in infix:
        if not is_operator(ch):
            output.append(ch)
            continue
        while pending and precedence(ch) <= precedence(pending[-1]):
            output.append(pending.pop())
        pending.append(ch)
    output.extend(reversed(pending))
    return "".join(output)


def parentheses_match(expression: str) -> bool:
    """Return True when the round parentheses of ``expression`` are balanced.

    Nesting deeper than ten levels raises ``StackOverflowError``.
    """
    stack = ArrayStack(_PAREN_CAPACITY)
    for ch in expression:
        if ch == "(":
            stack.push(ch)
        elif ch == ")":
            if stack.is_empty():
                return False
            stack.pop()
    return stack.is_empty()


def brackets_pair(opening: str, closing: str) -> bool:
    """Return True when ``opening`` and ``closing`` form a matching bracket pair."""
    return _PAIRS.get(opening) == closing


def brackets_match(expression: str) -> bool:
    """Return True when (), {} and [] in ``expression`` are balanced and properly nested.

    Nesting deeper than one hundred levels raises ``StackOverflowError``.
    """
    stack = ArrayStack(_BRACKET_CAPACITY)
    closers = set(_PAIRS.values())
    for ch in expression:
        if ch in _PAIRS:
            stack.push(ch)
        elif ch in closers:
            if stack.is_empty():
                return False
            if not brackets_pair(stack.pop(), ch):
                return False
    return stack.is_empty()