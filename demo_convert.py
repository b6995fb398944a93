#!/usr/bin/env python3
"""
Demo: Run the example style sheet through report and fix modes.
"""

from logical_css.analyzer import lint_css
from logical_css.examples import EXAMPLE_STYLESHEET
from logical_css.serialization import report_to_yaml


def main():
    print("=" * 70)
    print("REPORT MODE")
    print("=" * 70)

    report = lint_css(EXAMPLE_STYLESHEET)
    for w in report.warnings:
        print(f"  {w.selector:<12} {w.message}")
    print()
    print(report_to_yaml(report))

    print("=" * 70)
    print("FIX MODE")
    print("=" * 70)

    fixed = lint_css(EXAMPLE_STYLESHEET, fix=True)
    print(fixed.output_css)
    print(f"Applied conversions: {fixed.conversions}")


if __name__ == "__main__":
    main()
