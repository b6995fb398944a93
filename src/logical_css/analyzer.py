"""
Lint run over a whole style sheet.

This module ties the pieces together:
    - option validation (invalid options stop the run before any work)
    - traversal of every declaration block through the tinycss2 host
    - report mode: collect one warning per diagnostic
    - fix mode: apply edit plans and write back only the edited declarations

It produces a LintReport with the warnings and conversion counts.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from logical_css.backends.tinycss2_host import DeclarationBlock, StylesheetHost
from logical_css.config import POSSIBLE_OPTIONS, validate_options
from logical_css.model import RULE_NAME, Declaration, Mode
from logical_css.transformer import classify, transform

logger = logging.getLogger(__name__)


@dataclass
class LintWarning:
    """A single reported conversion."""
    selector: str
    property: str
    value: str
    message: str
    rule: str = RULE_NAME
    severity: str = "error"


@dataclass
class LintReport:
    """Outcome of one lint run."""

    rule_name: str = RULE_NAME
    fix: bool = False
    enabled: bool = True
    declarations_seen: int = 0

    # Conversions found (report mode) or applied (fix mode), per kind
    conversions: Dict[str, int] = field(default_factory=dict)

    warnings: List[LintWarning] = field(default_factory=list)
    invalid_option_warnings: List[str] = field(default_factory=list)

    # Set when fix mode refused to rewrite a sheet it cannot reproduce exactly
    fix_skipped: bool = False

    # Converted CSS in fix mode, the input unchanged otherwise
    output_css: Optional[str] = None

    @property
    def errored(self) -> bool:
        return bool(self.warnings or self.invalid_option_warnings)

    @property
    def total_conversions(self) -> int:
        return sum(self.conversions.values())


def lint_css(css_text: str, option: Any = True, fix: bool = False) -> LintReport:
    """
    Run the convert-to-logical rule over a style sheet.

    Args:
        css_text: Style sheet source
        option: Primary rule option, must be True or False
        fix: Rewrite the sheet instead of reporting

    Returns:
        LintReport
    """
    report = LintReport(fix=fix, output_css=css_text)

    if not validate_options(option):
        msg = (
            f'Invalid option value "{option}" for rule "{RULE_NAME}". '
            f"Possible values: {', '.join(str(p).lower() for p in POSSIBLE_OPTIONS)}"
        )
        logger.warning(msg)
        report.invalid_option_warnings.append(msg)
        report.enabled = False
        return report

    if option is False:
        logger.info("Rule %s is disabled", RULE_NAME)
        report.enabled = False
        return report

    host = StylesheetHost()
    sheet = host.parse(css_text)
    if fix and not sheet.lossless:
        logger.warning("Not fixing a style sheet with parse errors; reporting instead")
        report.fix_skipped = True
        fix = False
    conversions: Dict[str, int] = defaultdict(int)

    for block in sheet.blocks:
        declarations = block.declarations()
        report.declarations_seen += len(declarations)

        if fix:
            _fix_block(block, conversions)
        else:
            _report_rule_declarations(block.selector, declarations, conversions, report)

    report.conversions = dict(conversions)
    if sheet.changed:
        report.output_css = host.serialize(sheet)

    logger.info(
        "%s: %d declaration(s), %d conversion(s)%s",
        RULE_NAME,
        report.declarations_seen,
        report.total_conversions,
        " applied" if fix else "",
    )
    return report


def _fix_block(block: DeclarationBlock, conversions: Dict[str, int]) -> None:
    """Apply edit plans to one declaration block in place."""
    index = 0
    while index < len(block.slots):
        declaration = block.slots[index].declaration
        edits = transform(declaration, Mode.FIX) if declaration is not None else []
        if not edits:
            index += 1
            continue
        conversions[classify(declaration).value] += 1
        index = block.apply_edits(index, edits)


def _report_rule_declarations(selector: str, declarations: List[Declaration],
                              conversions: Dict[str, int], report: LintReport) -> None:
    for declaration in declarations:
        diagnostics = transform(declaration, Mode.REPORT)
        if not diagnostics:
            continue
        conversions[classify(declaration).value] += 1
        for diagnostic in diagnostics:
            report.warnings.append(LintWarning(
                selector=selector,
                property=declaration.property,
                value=declaration.value,
                message=diagnostic.message,
            ))


__all__ = ["LintWarning", "LintReport", "lint_css"]
