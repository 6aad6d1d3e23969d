"""
Utility functions for clsx
"""

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from clsx_core.exceptions import ContextError


def load_context(path: str) -> Dict[str, Any]:
    """
    Load an evaluation context from a YAML or JSON file.

    JSON is a subset of YAML, so .json files go through json and everything
    else through yaml.safe_load.

    Args:
        path: Path to the context file

    Returns:
        The context mapping (empty for an empty file)

    Raises:
        ContextError: If the file cannot be parsed or is not a mapping
    """
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8")

    try:
        if file_path.suffix == ".json":
            data = json.loads(text) if text.strip() else {}
        else:
            data = yaml.safe_load(text) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ContextError(f"Failed to parse context file {path}: {e}")

    if not isinstance(data, dict):
        raise ContextError(
            f"Context file {path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def parse_assignment(assignment: str) -> tuple[str, Any]:
    """
    Parse a NAME=VALUE assignment, reading VALUE as a YAML scalar.

    "active=true" gives ("active", True), "size=lg" gives ("size", "lg").
    """
    name, sep, raw = assignment.partition("=")
    name = name.strip()
    if not sep or not name:
        raise ContextError(f"Expected NAME=VALUE, got {assignment!r}")
    try:
        value = yaml.safe_load(raw) if raw.strip() else ""
    except yaml.YAMLError:
        value = raw
    return name, value

