"""
Plain-list host for the conversion engine.

Applies edit plans to an ordered list of Declaration objects, for callers
that hold declarations without any surrounding style sheet.
"""

from dataclasses import replace
from typing import Iterable, List, Sequence

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
from logical_css.transformer import transform


def apply_edits(declarations: List[Declaration], index: int, edits: Sequence[Edit]) -> int:
    """
    Apply one declaration's edit plan in place.

    Args:
        declarations: Mutable list holding the declaration block
        index: Position of the declaration the edits belong to
        edits: Edit plan returned by transform(..., Mode.FIX)

    Returns:
        Index of the next unprocessed declaration
    """
    current = declarations[index]
    removed = False

    for edit in edits:
        if isinstance(edit, Rename):
            current = replace(current, property=edit.new_property)
            declarations[index] = current
        elif isinstance(edit, SetValue):
            current = replace(current, value=edit.new_value)
            declarations[index] = current
        elif isinstance(edit, InsertBefore):
            declarations.insert(index, Declaration(edit.property, edit.value, current.important))
            index += 1
        elif isinstance(edit, Remove):
            del declarations[index]
            removed = True
        else:
            raise TypeError(f"Unsupported edit type: {type(edit)}")

    return index if removed else index + 1


def fix_declarations(declarations: Iterable[Declaration]) -> List[Declaration]:
    """Return a new list with every declaration converted."""
    result = list(declarations)
    index = 0
    while index < len(result):
        edits = transform(result[index], Mode.FIX)
        if edits:
            index = apply_edits(result, index, edits)
        else:
            index += 1
    return result


def report_declarations(declarations: Iterable[Declaration]) -> List[Diagnostic]:
    """Collect diagnostics for every declaration, in source order."""
    diagnostics: List[Diagnostic] = []
    for declaration in declarations:
        diagnostics.extend(transform(declaration, Mode.REPORT))
    return diagnostics


__all__ = ["apply_edits", "fix_declarations", "report_declarations"]
