"""
Configuration loading for the convert-to-logical rule.

Config files are YAML, shaped like a stylelint config:

    rules:
      logical-properties/convert-to-logical: true
    fix: false

The rule's primary option is carried through unvalidated; validate_options()
is applied by the lint run before any declaration is touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import yaml

from logical_css.model import RULE_NAME


POSSIBLE_OPTIONS = (True, False)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or has the wrong shape."""
    pass


@dataclass
class LintConfig:
    """
    Settings for one lint run.

    Properties:
        option: Primary rule option as written (valid values: True/False)
        fix: Whether the run rewrites the style sheet
    """

    option: Any = True
    fix: bool = False


def validate_options(actual: Any) -> bool:
    """True only for the booleans True and False."""
    return isinstance(actual, bool)


def config_from_dict(d: Dict[str, Any] | None) -> LintConfig:
    if d is None:
        return LintConfig()
    if not isinstance(d, dict):
        raise ConfigError(f"Config must be a mapping, got {type(d).__name__}")

    rules = d.get("rules") or {}
    if not isinstance(rules, dict):
        raise ConfigError("'rules' must be a mapping")

    fix = d.get("fix", False)
    if not isinstance(fix, bool):
        raise ConfigError(f"'fix' must be a boolean, got {fix!r}")

    return LintConfig(option=rules.get(RULE_NAME, True), fix=fix)


def config_from_yaml(s: str) -> LintConfig:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML config: {e}")
    return config_from_dict(d)


def load_config(filepath: str) -> LintConfig:
    """
    Load a YAML config file.

    Raises:
        ConfigError: If the file is missing, unreadable or malformed
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Cannot read config file {filepath}: {e}")

    return config_from_yaml(content)


__all__ = [
    "ConfigError",
    "LintConfig",
    "validate_options",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
]
