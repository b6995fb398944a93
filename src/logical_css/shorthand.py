"""
Shorthand Reduction Engine for `margin` and `padding`.

A physical shorthand lists edge values clockwise from the top:

    margin: <top> <right> <bottom> <left>

which, in a horizontal left-to-right flow, reads as:

    block-start, inline-end, block-end, inline-start

This module rewrites such a shorthand into logical longhands, merging
positions that carry identical values so the output is as short as possible:

    margin: 10px 10px 10px 10px   ->  margin: 10px
    margin: 10px 20px 10px 20px   ->  margin-block: 10px; margin-inline: 20px
    padding: 1px 2px 3px 4px      ->  padding-block-start: 1px;
                                      padding-inline-end: 2px;
                                      padding-block-end: 3px;
                                      padding-inline-start: 4px

Values with 2, 3 or 4 tokens are reduced. Anything else is left alone.
Values without whitespace, or values using var()/calc(), are treated as
symmetric and split into `-block` and `-inline` carrying the raw value.

IMPORTANT: This module only computes longhands. It never touches a document.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from logical_css.tokenizer import tokenize, is_single_value, is_variable_or_function


@dataclass(frozen=True)
class Longhand:
    """One logical declaration produced from a shorthand."""
    property: str
    value: str


# Suffix per position, ignoring any merge. Used for reporting.
POSITIONAL_SUFFIXES: Dict[int, Tuple[str, ...]] = {
    2: ("-block", "-inline"),
    3: ("-block-start", "-inline", "-block-end"),
    4: ("-block-start", "-inline-end", "-block-end", "-inline-start"),
}


def _reduce_two(tokens: Sequence[str]) -> List[Tuple[str, str]]:
    block, inline = tokens
    if block == inline:
        return [("", block)]
    return [("-block", block), ("-inline", inline)]


def _reduce_three(tokens: Sequence[str]) -> List[Tuple[str, str]]:
    block_start, inline, block_end = tokens
    if block_start == inline == block_end:
        return [("", block_start)]
    if block_start == block_end:
        return [("-block", block_start), ("-inline", inline)]
    return [
        ("-block-start", block_start),
        ("-inline", inline),
        ("-block-end", block_end),
    ]


def _reduce_four(tokens: Sequence[str]) -> List[Tuple[str, str]]:
    block_start, inline_end, block_end, inline_start = tokens
    block_symmetric = block_start == block_end
    inline_symmetric = inline_start == inline_end

    if block_symmetric and inline_symmetric and block_start == inline_start:
        return [("", block_start)]
    if block_symmetric and inline_symmetric:
        return [("-block", block_start), ("-inline", inline_start)]
    if block_symmetric:
        return [
            ("-block", block_start),
            ("-inline-end", inline_end),
            ("-inline-start", inline_start),
        ]
    if inline_symmetric:
        return [
            ("-block-start", block_start),
            ("-inline", inline_start),
            ("-block-end", block_end),
        ]
    return [
        ("-block-start", block_start),
        ("-inline-end", inline_end),
        ("-block-end", block_end),
        ("-inline-start", inline_start),
    ]


_REDUCERS: Dict[int, Callable[[Sequence[str]], List[Tuple[str, str]]]] = {
    2: _reduce_two,
    3: _reduce_three,
    4: _reduce_four,
}


def is_symmetric_value(value: str) -> bool:
    """
    True when the value is expanded to `-block`/`-inline` verbatim.

    That is the case for single values and for values containing var(),
    calc() or a custom property reference, whose token count cannot be
    trusted before substitution.
    """
    return is_single_value(value) or is_variable_or_function(value)


def symmetric_longhands(prop: str, value: str) -> List[Longhand]:
    return [
        Longhand(f"{prop}-block", value),
        Longhand(f"{prop}-inline", value),
    ]


def reduce_shorthand(prop: str, value: str) -> Optional[List[Longhand]]:
    """
    Compute the merged logical longhands for a shorthand declaration.

    Args:
        prop: "margin" or "padding"
        value: Raw shorthand value

    Returns:
        Longhands in emission order, or None when the value has an
        unsupported number of tokens.
    """
    if is_symmetric_value(value):
        return symmetric_longhands(prop, value)

    tokens = tokenize(value)
    reducer = _REDUCERS.get(len(tokens))
    if reducer is None:
        return None

    return [Longhand(f"{prop}{suffix}", token) for suffix, token in reducer(tokens)]


def positional_longhands(prop: str, value: str) -> Optional[List[str]]:
    """
    Property names for each position of the shorthand, without merging.

    Returns None when the token count is unsupported.
    """
    suffixes = POSITIONAL_SUFFIXES.get(len(tokenize(value)))
    if suffixes is None:
        return None
    return [f"{prop}{suffix}" for suffix in suffixes]


__all__ = [
    "Longhand",
    "POSITIONAL_SUFFIXES",
    "is_symmetric_value",
    "symmetric_longhands",
    "reduce_shorthand",
    "positional_longhands",
]
