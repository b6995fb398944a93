"""
Lookup tables for physical-to-logical conversion.

Two kinds of tables live here:
    - PHYSICAL_TO_LOGICAL: physical longhand property -> logical longhand
    - KEYWORD_VALUE_MAPS: per-property tables translating `left`/`right`
      keyword values

All tables are read-only mapping proxies. Nothing in the package mutates them.
"""

from types import MappingProxyType
from typing import Mapping, Optional


PHYSICAL_TO_LOGICAL: Mapping[str, str] = MappingProxyType({
    # Margins
    "margin-top": "margin-block-start",
    "margin-bottom": "margin-block-end",
    "margin-left": "margin-inline-start",
    "margin-right": "margin-inline-end",

    # Padding
    "padding-top": "padding-block-start",
    "padding-bottom": "padding-block-end",
    "padding-left": "padding-inline-start",
    "padding-right": "padding-inline-end",

    # Border edges
    "border-top": "border-block-start",
    "border-bottom": "border-block-end",
    "border-left": "border-inline-start",
    "border-right": "border-inline-end",
    "border-top-width": "border-block-start-width",
    "border-bottom-width": "border-block-end-width",
    "border-left-width": "border-inline-start-width",
    "border-right-width": "border-inline-end-width",
    "border-top-color": "border-block-start-color",
    "border-bottom-color": "border-block-end-color",
    "border-left-color": "border-inline-start-color",
    "border-right-color": "border-inline-end-color",
    "border-top-style": "border-block-start-style",
    "border-bottom-style": "border-block-end-style",
    "border-left-style": "border-inline-start-style",
    "border-right-style": "border-inline-end-style",

    # Border corners
    "border-top-right-radius": "border-start-end-radius",
    "border-top-left-radius": "border-start-start-radius",
    "border-bottom-right-radius": "border-end-end-radius",
    "border-bottom-left-radius": "border-end-start-radius",

    # Insets
    "left": "inset-inline-start",
    "right": "inset-inline-end",
})


JUSTIFY_CONTENT_VALUES: Mapping[str, str] = MappingProxyType({
    "left": "flex-start",
    "right": "flex-end",
})

TEXT_ALIGN_VALUES: Mapping[str, str] = MappingProxyType({
    "left": "start",
    "right": "end",
})

FLOAT_VALUES: Mapping[str, str] = MappingProxyType({
    "left": "inline-start",
    "right": "inline-end",
})

KEYWORD_VALUE_MAPS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "justify-content": JUSTIFY_CONTENT_VALUES,
    "text-align": TEXT_ALIGN_VALUES,
    "float": FLOAT_VALUES,
})

SHORTHAND_PROPERTIES = frozenset({"margin", "padding"})


def lookup_logical_property(prop: str) -> Optional[str]:
    """Return the logical longhand for a physical property, or None."""
    return PHYSICAL_TO_LOGICAL.get(prop)


def resolve_keyword_value(prop: str, value: str) -> Optional[str]:
    """
    Translate a directional keyword value.

    Matching is exact: `value` must be precisely "left" or "right".
    Case variants or surrounding whitespace do not match.
    """
    table = KEYWORD_VALUE_MAPS.get(prop)
    if table is None:
        return None
    return table.get(value)


def is_shorthand_property(prop: str) -> bool:
    return prop in SHORTHAND_PROPERTIES


__all__ = [
    "PHYSICAL_TO_LOGICAL",
    "KEYWORD_VALUE_MAPS",
    "SHORTHAND_PROPERTIES",
    "lookup_logical_property",
    "resolve_keyword_value",
    "is_shorthand_property",
]
