"""Hosts that apply the conversion engine to concrete documents."""

from .declaration_list import apply_edits, fix_declarations, report_declarations
from .tinycss2_host import StylesheetHost

__all__ = ["apply_edits", "fix_declarations", "report_declarations", "StylesheetHost"]
