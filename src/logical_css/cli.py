"""
Command line entry point.

    logical-css styles.css              # report physical declarations
    logical-css styles.css --fix        # rewrite files in place
    logical-css a.css b.css --format yaml --config .logicalcss.yaml

Exit status: 0 clean, 1 conversions reported, 2 usage or config error.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from logical_css.analyzer import LintReport, lint_css
from logical_css.config import ConfigError, LintConfig, load_config
from logical_css.serialization import report_to_dict

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logical-css",
        description="Convert physical CSS declarations to logical properties",
    )
    parser.add_argument("files", nargs="+", help="CSS files to check")
    parser.add_argument("--fix", action="store_true", help="Rewrite files in place")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--format", choices=["text", "json", "yaml"], default="text",
                        help="Output format for reports")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _print_text(reports: Dict[str, LintReport]) -> None:
    for path, report in reports.items():
        for msg in report.invalid_option_warnings:
            print(f"{path}: {msg}")
        for w in report.warnings:
            print(f"{path}: {w.selector}: {w.message} ({w.rule})")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else LintConfig()
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    fix = args.fix or config.fix
    sources: Dict[str, str] = {}
    unreadable = False

    # Every file is read before any is written
    for filename in args.files:
        try:
            sources[filename] = Path(filename).read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Cannot read %s: %s", filename, e)
            unreadable = True
    if unreadable:
        return 2

    reports: Dict[str, LintReport] = {}
    for filename, css_text in sources.items():
        report = lint_css(css_text, option=config.option, fix=fix)
        reports[filename] = report

        if fix and report.output_css != css_text:
            Path(filename).write_text(report.output_css, encoding="utf-8")
            logger.info("Fixed %s (%d conversion(s))", filename, report.total_conversions)

    if args.format == "json":
        print(json.dumps({p: report_to_dict(r) for p, r in reports.items()}, sort_keys=True, indent=2))
    elif args.format == "yaml":
        print(yaml.safe_dump({p: report_to_dict(r) for p, r in reports.items()}))
    else:
        _print_text(reports)

    return 1 if any(r.errored for r in reports.values()) else 0


if __name__ == "__main__":
    sys.exit(main())
