"""
Declaration Transformer: the public entry point of the conversion engine.

For one declaration it decides which kind of conversion applies and answers
with either diagnostics (Mode.REPORT) or an edit plan (Mode.FIX).

Conversion kinds are tested in a fixed order and are mutually exclusive:
    1. KEYWORD   - justify-content / text-align / float with left|right
    2. RENAME    - physical longhand with a direct logical counterpart
    3. SHORTHAND - margin / padding
    4. NONE      - left untouched

IMPORTANT: The transformer never mutates its input and raises nothing of its
own. Applying edits is the host's job (see logical_css.backends).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Union

from logical_css.model import (
    Declaration,
    Diagnostic,
    Edit,
    InsertBefore,
    Mode,
    Remove,
    Rename,
    SetValue,
)
from logical_css.properties import (
    is_shorthand_property,
    lookup_logical_property,
    resolve_keyword_value,
)
from logical_css.shorthand import (
    is_symmetric_value,
    positional_longhands,
    reduce_shorthand,
)

logger = logging.getLogger(__name__)


class ConversionKind(Enum):
    """Which branch handles a declaration."""
    KEYWORD = "keyword"
    RENAME = "rename"
    SHORTHAND = "shorthand"
    NONE = "none"


def classify(declaration: Declaration) -> ConversionKind:
    """Pick the single conversion branch for a declaration."""
    prop = declaration.property
    if resolve_keyword_value(prop, declaration.value) is not None:
        return ConversionKind.KEYWORD
    if lookup_logical_property(prop) is not None:
        return ConversionKind.RENAME
    if is_shorthand_property(prop):
        return ConversionKind.SHORTHAND
    return ConversionKind.NONE


def _report_keyword(declaration: Declaration) -> List[Diagnostic]:
    prop = declaration.property
    new_value = resolve_keyword_value(prop, declaration.value)
    return [Diagnostic(f"{prop}: {declaration.value}", f"{prop}: {new_value}")]


def _fix_keyword(declaration: Declaration) -> List[Edit]:
    return [SetValue(resolve_keyword_value(declaration.property, declaration.value))]


def _report_rename(declaration: Declaration) -> List[Diagnostic]:
    prop = declaration.property
    return [Diagnostic(prop, lookup_logical_property(prop))]


def _fix_rename(declaration: Declaration) -> List[Edit]:
    return [Rename(lookup_logical_property(declaration.property))]


def _report_shorthand(declaration: Declaration) -> List[Diagnostic]:
    prop = declaration.property
    value = declaration.value

    if is_symmetric_value(value):
        return [Diagnostic(prop, f"{prop}-block and {prop}-inline")]

    # Reporting lists every position, even ones a fix would merge
    longhands = positional_longhands(prop, value)
    if longhands is None:
        return []
    return [
        Diagnostic(f"{prop}-{index}", longhand)
        for index, longhand in enumerate(longhands, start=1)
    ]


def _fix_shorthand(declaration: Declaration) -> List[Edit]:
    longhands = reduce_shorthand(declaration.property, declaration.value)
    if longhands is None:
        return []
    edits: List[Edit] = [InsertBefore(lh.property, lh.value) for lh in longhands]
    edits.append(Remove())
    return edits


_HANDLERS = {
    ConversionKind.KEYWORD: {Mode.REPORT: _report_keyword, Mode.FIX: _fix_keyword},
    ConversionKind.RENAME: {Mode.REPORT: _report_rename, Mode.FIX: _fix_rename},
    ConversionKind.SHORTHAND: {Mode.REPORT: _report_shorthand, Mode.FIX: _fix_shorthand},
}


def transform(declaration: Declaration, mode: Mode) -> Union[List[Diagnostic], List[Edit]]:
    """
    Convert one declaration.

    Args:
        declaration: The declaration to inspect
        mode: Mode.REPORT for diagnostics, Mode.FIX for edits ("report" and
            "fix" are accepted too)

    Returns:
        List of Diagnostic (report mode) or list of Edit (fix mode).
        An empty list means the declaration is left as is.

    Raises:
        ValueError: If mode is not a Mode or one of its values
    """
    mode = Mode(mode)  # ValueError for anything that is not a mode
    kind = classify(declaration)
    handlers = _HANDLERS.get(kind)
    if handlers is None:
        return []

    result = handlers[mode](declaration)

    if result:
        logger.debug(
            "%s %s: %s -> %d %s",
            kind.value,
            declaration.property,
            declaration.value,
            len(result),
            "edit(s)" if mode == Mode.FIX else "diagnostic(s)",
        )
    return result


def report(declaration: Declaration) -> List[Diagnostic]:
    """Shortcut for transform(declaration, Mode.REPORT)."""
    return transform(declaration, Mode.REPORT)


def fix(declaration: Declaration) -> List[Edit]:
    """Shortcut for transform(declaration, Mode.FIX)."""
    return transform(declaration, Mode.FIX)


__all__ = ["ConversionKind", "classify", "transform", "report", "fix"]
