"""
Tests for the tinycss2 style sheet host.

Tests verify that the host:
    - Reads declarations of every block in source order
    - Writes untouched text back exactly
    - Splices edit plans into a block without disturbing its neighbours
"""

import pytest
from logical_css.backends.tinycss2_host import StylesheetHost
from logical_css.model import Declaration, InsertBefore, Remove, Rename, SetValue


def parse(css):
    return StylesheetHost().parse(css)


class TestReading:

    def test_declarations_in_order(self):
        sheet = parse(".a { color: red; LEFT: 0 !important; margin: 1px  2px }")
        assert sheet.blocks[0].selector == ".a"
        assert sheet.blocks[0].declarations() == [
            Declaration("color", "red"),
            Declaration("left", "0", important=True),
            Declaration("margin", "1px  2px"),
        ]

    def test_duplicates_are_kept(self):
        sheet = parse(".a { left: 0; left: 1px }")
        assert [d.value for d in sheet.blocks[0].declarations()] == ["0", "1px"]

    def test_nested_blocks_are_visited(self):
        sheet = parse(
            ".a { color: red }"
            "@media print { .b { left: 0 } }"
            "@supports (display: grid) { @layer x { .c { right: 0 } } }"
        )
        assert [b.selector for b in sheet.blocks] == [".a", ".b", ".c"]

    def test_statement_at_rules_are_skipped(self):
        sheet = parse('@charset "utf-8";\n@import "a.css";\n.a { left: 0 }')
        assert [b.selector for b in sheet.blocks] == [".a"]

    def test_non_declaration_entries_are_ignored(self):
        sheet = parse(".a { color: red; 1px; left: 0 }")
        assert [d.property for d in sheet.blocks[0].declarations()] == ["color", "left"]


class TestSerialization:

    @pytest.mark.parametrize("css", [
        "",
        "/* only a comment */",
        ".a { color: #FFFFFF; }  \n\n.b{margin:0 auto}",
        "@media (min-width: 600px) {\n  .a { left: 0 }\n}\n",
        "@font-face { font-family: \"X\"; src: url(x.woff2) format(\"woff2\") }",
        ".a { width: calc(100% - 2 * var(--gap, 4px)) }",
    ])
    def test_untouched_sheet_round_trips(self, css):
        sheet = parse(css)
        assert sheet.lossless
        assert not sheet.changed
        assert sheet.serialize() == css

    def test_parse_error_marks_sheet_lossy(self):
        assert not parse(".a { left: 0 }\n}").lossless


class TestApplyEdits:

    def test_rename_keeps_spacing_and_priority(self):
        sheet = parse(".a {left :  0 ! important}")
        block = sheet.blocks[0]
        assert block.apply_edits(0, [Rename("inset-inline-start")]) == 1
        assert sheet.serialize() == ".a {inset-inline-start :  0 ! important}"
        assert block.declarations() == [Declaration("inset-inline-start", "0", important=True)]

    def test_set_value(self):
        sheet = parse(".a { float: left /* was */; color: red }")
        sheet.blocks[0].apply_edits(0, [SetValue("inline-start")])
        assert sheet.serialize() == ".a { float: inline-start /* was */; color: red }"

    def test_insert_and_remove(self):
        sheet = parse(".a {\n  color: red;\n  margin: 0 auto !important;\n}")
        block = sheet.blocks[0]
        next_index = block.apply_edits(1, [
            InsertBefore("margin-block", "0"),
            InsertBefore("margin-inline", "auto"),
            Remove(),
        ])
        assert next_index == 3
        assert sheet.changed
        assert sheet.serialize() == (
            ".a {\n  color: red;\n"
            "  margin-block: 0 !important;\n"
            "  margin-inline: auto !important;\n}"
        )

    def test_unknown_edit_raises(self):
        block = parse(".a { left: 0 }").blocks[0]
        with pytest.raises(TypeError):
            block.apply_edits(0, ["rename"])
