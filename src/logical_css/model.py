"""
Core Conversion Model Objects

Defines the data structures that flow through the conversion engine.

These are pure data classes representing:
    - Declarations (one property/value pair read from a style sheet)
    - Edits (the operations a host must apply in fix mode)
    - Diagnostics (what is reported in report mode)
    - Mode (report or fix, fixed for a whole run)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about any concrete CSS document model
        - Are immutable
        - Are fully serializable
        - Represent results, not behavior
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


RULE_NAME = "logical-properties/convert-to-logical"


class Mode(Enum):
    """Run modes. A run uses exactly one of these for every declaration."""
    REPORT = "report"  # Describe conversions, never touch the document
    FIX = "fix"        # Return edit plans for the host to apply


@dataclass(frozen=True)
class Declaration:
    """
    A single CSS declaration as seen by the engine.

    The host owns the real node. The engine only receives this snapshot and
    answers with diagnostics or edits.

    Properties:
        property:
            Property name, e.g. "margin-left"

        value:
            Raw value string, e.g. "10px 20px"
            The `!important` marker is NOT part of the value.

        important:
            True when the declaration carries `!important`.
            Declarations inserted by a fix inherit this flag.
    """

    property: str
    value: str
    important: bool = False


@dataclass(frozen=True)
class Rename:
    """Rename the current declaration's property in place."""

    new_property: str


@dataclass(frozen=True)
class SetValue:
    """Replace the current declaration's value in place."""

    new_value: str


@dataclass(frozen=True)
class InsertBefore:
    """
    Insert a sibling declaration immediately before the current one.

    Several InsertBefore edits for one declaration are applied in the order
    they were emitted, so the resulting source order matches emission order.
    """

    property: str
    value: str


@dataclass(frozen=True)
class Remove:
    """Delete the current declaration."""


Edit = Union[Rename, SetValue, InsertBefore, Remove]


@dataclass(frozen=True)
class Diagnostic:
    """
    Describes one physical-to-logical conversion without performing it.

    Properties:
        from_spec: "property" or "property: value" as written
        to_spec: logical counterpart in the same form
    """

    from_spec: str
    to_spec: str

    @property
    def message(self) -> str:
        return expected_message(self.from_spec, self.to_spec)


def expected_message(physical: str, logical: str) -> str:
    """Format the user-facing message for a conversion."""
    return f'Replace "{physical}" with its logical counterpart "{logical}".'
