"""
tinycss2 host for the conversion engine.

Parses a style sheet with tinycss2, keeping comments and whitespace, and
exposes every declaration block in source order: style rules, rules nested
in any block at-rule (@media, @supports, @layer, @container, ...) and
declaration at-rules such as @font-face.

Serialization writes untouched nodes back from their own tokens, so only the
declarations an edit plan names change. A sheet whose tokens do not
reproduce the input exactly is flagged as not lossless, and the lint run
refuses to fix it.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import tinycss2

from logical_css.model import Declaration, Edit, InsertBefore, Remove, Rename, SetValue

logger = logging.getLogger(__name__)

_SKIPPABLE = ("whitespace", "comment")


def _is_literal(token, value: str) -> bool:
    return token.type == "literal" and token.value == value


def _split_segments(tokens: Sequence) -> Iterator[Tuple[list, bool]]:
    """Split block content at top-level semicolons. Yields (tokens, terminated)."""
    segment: list = []
    for token in tokens:
        if _is_literal(token, ";"):
            yield segment, True
            segment = []
        else:
            segment.append(token)
    if segment:
        yield segment, False


def _holds_rules(content: Sequence) -> bool:
    return any(token.type == "{} block" for token in content)


def _declaration_text(declaration: Declaration) -> str:
    text = f"{declaration.property}: {declaration.value}"
    if declaration.important:
        text += " !important"
    return text


def _trailing_whitespace(text: str) -> str:
    return text[len(text.rstrip()):]


@dataclass
class DeclarationSlot:
    """
    One `;`-separated entry of a declaration block.

    Properties:
        leading: whitespace and comments before the entry
        tokens: significant tokens as parsed (empty for inserted entries)
        trailing: whitespace and comments after the entry
        terminated: whether a `;` follows
        declaration: engine snapshot, None when the entry is not a declaration
        text: replacement body once the entry has been edited
    """

    leading: str
    tokens: list
    trailing: str
    terminated: bool
    declaration: Optional[Declaration] = None
    text: Optional[str] = None

    def serialize(self) -> str:
        body = self.text if self.text is not None else tinycss2.serialize(self.tokens)
        return self.leading + body + self.trailing + (";" if self.terminated else "")


def _make_slot(tokens: list, terminated: bool) -> DeclarationSlot:
    start = 0
    while start < len(tokens) and tokens[start].type in _SKIPPABLE:
        start += 1
    end = len(tokens)
    while end > start and tokens[end - 1].type in _SKIPPABLE:
        end -= 1

    slot = DeclarationSlot(
        leading=tinycss2.serialize(tokens[:start]),
        tokens=tokens[start:end],
        trailing=tinycss2.serialize(tokens[end:]),
        terminated=terminated,
    )
    if slot.tokens:
        parsed = tinycss2.parse_one_declaration(slot.tokens)
        if parsed.type == "declaration":
            slot.declaration = Declaration(
                property=parsed.lower_name,
                value=tinycss2.serialize(parsed.value).strip(),
                important=parsed.important,
            )
    return slot


def _set_value_text(tokens: list, value: str, important: bool) -> str:
    """Keep `name:` and its spacing as written, replace everything after."""
    head, spacer = "", ""
    for i, token in enumerate(tokens):
        if _is_literal(token, ":"):
            head = tinycss2.serialize(tokens[:i + 1])
            if i + 1 < len(tokens) and tokens[i + 1].type == "whitespace":
                spacer = " "
            break
    return head + spacer + value + (" !important" if important else "")


class DeclarationBlock:
    """The declarations between one pair of braces."""

    def __init__(self, selector: str, content: Sequence):
        self.selector = selector
        self.slots: List[DeclarationSlot] = [
            _make_slot(tokens, terminated) for tokens, terminated in _split_segments(content)
        ]
        self.changed = False

    def declarations(self) -> List[Declaration]:
        return [slot.declaration for slot in self.slots if slot.declaration is not None]

    def apply_edits(self, index: int, edits: Sequence[Edit]) -> int:
        """
        Apply the edit plan of the declaration in slot `index`.

        Returns:
            Index of the next unprocessed slot
        """
        slot = self.slots[index]
        current = slot.declaration
        inserted: List[DeclarationSlot] = []
        indent = _trailing_whitespace(slot.leading) or " "
        self.changed = True

        for edit in edits:
            if isinstance(edit, Rename):
                slot.text = edit.new_property + tinycss2.serialize(slot.tokens[1:])
                current = replace(current, property=edit.new_property)
            elif isinstance(edit, SetValue):
                slot.text = _set_value_text(slot.tokens, edit.new_value, current.important)
                current = replace(current, value=edit.new_value)
            elif isinstance(edit, InsertBefore):
                new = Declaration(edit.property, edit.value, current.important)
                leading = slot.leading if not inserted else indent
                new_slot = DeclarationSlot(leading, [], "", True, new, _declaration_text(new))
                self.slots.insert(index, new_slot)
                inserted.append(new_slot)
                index += 1
            elif isinstance(edit, Remove):
                del self.slots[index]
                if inserted:
                    # The last replacement takes over the removed entry's tail
                    inserted[-1].trailing = slot.trailing
                    inserted[-1].terminated = slot.terminated
                return index
            else:
                raise TypeError(f"Unsupported edit type: {type(edit)}")

        slot.declaration = current
        return index + 1

    def serialize(self) -> str:
        return "".join(slot.serialize() for slot in self.slots)


class Stylesheet:
    """Parsed sheet: verbatim text pieces interleaved with declaration blocks."""

    def __init__(self):
        self.pieces: List[Union[str, DeclarationBlock]] = []
        self.blocks: List[DeclarationBlock] = []
        self.lossless = True

    @property
    def changed(self) -> bool:
        return any(block.changed for block in self.blocks)

    def serialize(self) -> str:
        return "".join(p if isinstance(p, str) else p.serialize() for p in self.pieces)


class StylesheetHost:
    """Reads and rewrites declaration blocks of a tinycss2 style sheet."""

    def parse(self, css_text: str) -> Stylesheet:
        """
        Parse CSS text, keeping comments and whitespace.

        Args:
            css_text: Style sheet source

        Returns:
            Stylesheet
        """
        nodes = tinycss2.parse_stylesheet(css_text, skip_comments=False, skip_whitespace=False)
        sheet = Stylesheet()
        self._collect(nodes, sheet)

        if sheet.lossless and sheet.serialize() != css_text:
            sheet.lossless = False
        if not sheet.lossless:
            logger.warning("Style sheet does not serialize back to its source text")

        logger.debug("Parsed style sheet with %d declaration block(s)", len(sheet.blocks))
        return sheet

    def _collect(self, nodes: Sequence, sheet: Stylesheet) -> None:
        for node in nodes:
            if node.type == "qualified-rule":
                self._add_block(sheet, tinycss2.serialize(node.prelude), node.content)
            elif node.type == "at-rule" and node.content is not None:
                head = f"@{node.at_keyword}{tinycss2.serialize(node.prelude)}"
                if _holds_rules(node.content):
                    nested = tinycss2.parse_rule_list(
                        node.content, skip_comments=False, skip_whitespace=False)
                    sheet.pieces.append(head + "{")
                    self._collect(nested, sheet)
                    sheet.pieces.append("}")
                else:
                    self._add_block(sheet, head, node.content)
            elif node.type == "error":
                logger.warning("CSS parse error at %d:%d: %s",
                               node.source_line, node.source_column, node.message)
                sheet.lossless = False
            else:
                sheet.pieces.append(node.serialize())

    def _add_block(self, sheet: Stylesheet, head: str, content: Sequence) -> None:
        block = DeclarationBlock(" ".join(head.split()), content)
        sheet.pieces.extend([head + "{", block, "}"])
        sheet.blocks.append(block)

    def serialize(self, sheet: Stylesheet) -> str:
        return sheet.serialize()


__all__ = ["DeclarationSlot", "DeclarationBlock", "Stylesheet", "StylesheetHost"]
