"""
Plain-dict, JSON and YAML forms of lint output.

Each result type has a *_to_dict function; the JSON and YAML writers
work from those dicts so both formats carry the same keys.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from logical_css.model import (
    Diagnostic,
    Edit,
    InsertBefore,
    Remove,
    Rename,
    SetValue,
)
from logical_css.analyzer import LintReport, LintWarning


def diagnostic_to_dict(d: Diagnostic) -> Dict[str, Any]:
    return {"from": d.from_spec, "to": d.to_spec, "message": d.message}


def edit_to_dict(e: Edit) -> Dict[str, Any]:
    if isinstance(e, Rename):
        return {"type": "rename", "property": e.new_property}
    if isinstance(e, SetValue):
        return {"type": "set_value", "value": e.new_value}
    if isinstance(e, InsertBefore):
        return {"type": "insert_before", "property": e.property, "value": e.value}
    if isinstance(e, Remove):
        return {"type": "remove"}
    raise TypeError(f"Unsupported Edit type: {type(e)}")


def warning_to_dict(w: LintWarning) -> Dict[str, Any]:
    return {
        "rule": w.rule,
        "severity": w.severity,
        "selector": w.selector,
        "property": w.property,
        "value": w.value,
        "message": w.message,
    }


def report_to_dict(r: LintReport) -> Dict[str, Any]:
    return {
        "rule": r.rule_name,
        "fix": r.fix,
        "enabled": r.enabled,
        "errored": r.errored,
        "declarations_seen": r.declarations_seen,
        "conversions": dict(r.conversions),
        "warnings": [warning_to_dict(w) for w in r.warnings],
        "invalid_option_warnings": list(r.invalid_option_warnings),
        "fix_skipped": r.fix_skipped,
    }


def report_to_json(r: LintReport) -> str:
    return json.dumps(report_to_dict(r), sort_keys=True)


def report_to_yaml(r: LintReport) -> str:
    return yaml.safe_dump(report_to_dict(r))
