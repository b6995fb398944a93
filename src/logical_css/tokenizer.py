"""
Value tokenizer for shorthand declarations.

Splits a value such as "10px auto" into positional tokens.

Whitespace separates tokens, except inside parentheses: a function value like
`calc(1px + var(--x))` keeps its internal whitespace and stays one token.
Nothing is validated; tokens are opaque strings.
"""

import re
from typing import Tuple


_WHITESPACE_RE = re.compile(r"\s")
_VARIABLE_OR_FUNCTION_RE = re.compile(r"var\(|calc\(|\(--")


def tokenize(value: str) -> Tuple[str, ...]:
    """
    Split a shorthand value into positional tokens.

    Args:
        value: Raw declaration value

    Returns:
        Tuple of tokens in source order (empty for a blank value)
    """
    tokens = []
    current = []
    depth = 0

    for ch in value:
        if ch == "(":
            depth += 1
        elif ch == ")" and depth > 0:
            depth -= 1
        elif depth == 0 and ch.isspace():
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(ch)

    # An unbalanced group runs to the end of the value
    if current:
        tokens.append("".join(current))

    return tuple(tokens)


def is_single_value(value: str) -> bool:
    """True when the raw value contains no whitespace at all."""
    return _WHITESPACE_RE.search(value) is None


def is_variable_or_function(value: str) -> bool:
    """True when the value references a custom property or calc()."""
    return _VARIABLE_OR_FUNCTION_RE.search(value) is not None


__all__ = ["tokenize", "is_single_value", "is_variable_or_function"]
