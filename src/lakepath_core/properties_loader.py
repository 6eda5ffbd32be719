"""Load table properties from JSON or YAML files and CLI overrides."""

from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

_PLACEHOLDER = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


def _load_raw(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix == ".json":
        return json.loads(path.read_text())
    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(path.read_text())
    raise ValueError(f"Unsupported properties format: {path}; use .json, .yaml, or .yml")


def _resolve_placeholder(match: "re.Match[str]") -> str:
    var, default = match.group(1), match.group(2)
    if var in os.environ:
        return os.environ[var]
    if default is not None:
        return default
    raise ValueError(f"Missing environment variable {var} for placeholder in properties")


def substitute_env(text: str) -> str:
    """Replace ``${VAR}`` and ``${VAR:default}`` placeholders from the environment."""

    start = text.find("${")
    while start != -1:
        if text.find("}", start) == -1:
            raise ValueError(f"Unclosed placeholder in {text!r}")
        start = text.find("${", start + 2)
    return _PLACEHOLDER.sub(_resolve_placeholder, text)


def _render_value(key: str, value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise ValueError(f"Property {key!r} must be a scalar value")
    if isinstance(value, bool):
        return "true" if value else "false"
    return substitute_env(str(value))


def load_properties_file(path: Path) -> Dict[str, str]:
    """Load a flat property mapping; null values are treated as absent."""

    if not path.exists():
        raise ValueError(f"Properties file does not exist: {path}")

    raw = _load_raw(path)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("Properties file must contain a mapping")

    properties: Dict[str, str] = {}
    for key, value in raw.items():
        rendered = _render_value(str(key), value)
        if rendered is not None:
            properties[str(key)] = rendered
    return properties


def parse_property_overrides(items: Iterable[str]) -> Dict[str, str]:
    """Parse ``key=value`` strings; later items win."""

    properties: Dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Invalid property override {item!r}; expected key=value")
        properties[key] = value
    return properties
