"""
Tests for the Shorthand Reduction Engine.

Tests cover:
    - Symmetric values (single token, var(), calc())
    - 2, 3 and 4 token reductions and every merge branch
    - Emission order
    - Unsupported token counts
    - Positional (unmerged) longhands used for reporting
"""

import pytest
from logical_css.shorthand import (
    Longhand,
    reduce_shorthand,
    positional_longhands,
    is_symmetric_value,
)


def pairs(longhands):
    return [(lh.property, lh.value) for lh in longhands]


class TestSymmetricValues:
    """Values that expand to -block and -inline verbatim."""

    def test_single_value(self):
        assert reduce_shorthand("margin", "10px") == [
            Longhand("margin-block", "10px"),
            Longhand("margin-inline", "10px"),
        ]

    def test_var_value_is_kept_whole(self):
        assert pairs(reduce_shorthand("padding", "var(--a) var(--b)")) == [
            ("padding-block", "var(--a) var(--b)"),
            ("padding-inline", "var(--a) var(--b)"),
        ]

    def test_calc_value_is_kept_whole(self):
        assert pairs(reduce_shorthand("margin", "calc(1px + 2px) 0")) == [
            ("margin-block", "calc(1px + 2px) 0"),
            ("margin-inline", "calc(1px + 2px) 0"),
        ]

    def test_is_symmetric_value(self):
        assert is_symmetric_value("auto")
        assert is_symmetric_value("1px var(--x)")
        assert not is_symmetric_value("1px 2px")


class TestTwoTokens:

    def test_equal_values_collapse(self):
        assert pairs(reduce_shorthand("margin", "5px 5px")) == [("margin", "5px")]

    def test_block_and_inline(self):
        assert pairs(reduce_shorthand("margin", "0 auto")) == [
            ("margin-block", "0"),
            ("margin-inline", "auto"),
        ]


class TestThreeTokens:

    def test_all_equal_collapse(self):
        assert pairs(reduce_shorthand("padding", "1px 1px 1px")) == [("padding", "1px")]

    def test_block_symmetric(self):
        assert pairs(reduce_shorthand("padding", "1px 2px 1px")) == [
            ("padding-block", "1px"),
            ("padding-inline", "2px"),
        ]

    def test_granular(self):
        assert pairs(reduce_shorthand("padding", "1px 2px 3px")) == [
            ("padding-block-start", "1px"),
            ("padding-inline", "2px"),
            ("padding-block-end", "3px"),
        ]


class TestFourTokens:

    def test_all_equal_collapse(self):
        assert pairs(reduce_shorthand("margin", "10px 10px 10px 10px")) == [("margin", "10px")]

    def test_both_axes_symmetric(self):
        assert pairs(reduce_shorthand("margin", "10px 20px 10px 20px")) == [
            ("margin-block", "10px"),
            ("margin-inline", "20px"),
        ]

    def test_block_axis_symmetric_only(self):
        assert pairs(reduce_shorthand("margin", "10px 20px 10px 30px")) == [
            ("margin-block", "10px"),
            ("margin-inline-end", "20px"),
            ("margin-inline-start", "30px"),
        ]

    def test_inline_axis_symmetric_only(self):
        assert pairs(reduce_shorthand("margin", "10px 20px 30px 20px")) == [
            ("margin-block-start", "10px"),
            ("margin-inline", "20px"),
            ("margin-block-end", "30px"),
        ]

    def test_all_different(self):
        assert pairs(reduce_shorthand("padding", "1px 2px 3px 4px")) == [
            ("padding-block-start", "1px"),
            ("padding-inline-end", "2px"),
            ("padding-block-end", "3px"),
            ("padding-inline-start", "4px"),
        ]

    def test_function_tokens(self):
        """min()/max() are not symmetric markers, so they are reduced as tokens."""
        assert pairs(reduce_shorthand("margin", "min(1px, 2px) 0 min(1px, 2px) 0")) == [
            ("margin-block", "min(1px, 2px)"),
            ("margin-inline", "0"),
        ]


class TestUnsupportedCounts:

    @pytest.mark.parametrize("value", [
        "1px 2px 3px 4px 5px",
        "1px 2px 3px 4px 5px 6px",
    ])
    def test_too_many_tokens(self, value):
        assert reduce_shorthand("margin", value) is None
        assert positional_longhands("margin", value) is None


class TestPositionalLonghands:
    """Unmerged decomposition, one name per position."""

    def test_two(self):
        assert positional_longhands("margin", "1px 1px") == ["margin-block", "margin-inline"]

    def test_three(self):
        assert positional_longhands("padding", "1px 2px 3px") == [
            "padding-block-start", "padding-inline", "padding-block-end",
        ]

    def test_four_ignores_equal_values(self):
        assert positional_longhands("margin", "1px 1px 1px 1px") == [
            "margin-block-start",
            "margin-inline-end",
            "margin-block-end",
            "margin-inline-start",
        ]

    def test_single_token(self):
        assert positional_longhands("margin", "1px") is None
