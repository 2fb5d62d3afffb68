"""Utility functions for Amplify-Config."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .constants import JSON_OUTPUT_INDENT

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> Path:
    """
    Create directory if it doesn't exist.

    Args:
        path: Directory path to create

    Returns:
        The created/existing directory path
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def expand_path(path: str) -> Path:
    """
    Expand ~ and environment variables in a path and make it absolute.

    Args:
        path: Path string to expand

    Returns:
        Absolute Path
    """
    return Path(os.path.expandvars(os.path.expanduser(path))).resolve()


def load_legacy_config(path: Path) -> dict[str, Any]:
    """
    Load a legacy `amplifyconfiguration.json` file.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed legacy config mapping

    Raises:
        ValueError: If the file is not valid JSON or not a JSON object
        OSError: If the file cannot be read
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object, got {type(data).__name__}")

    logger.debug(f"Loaded legacy config with {len(data)} key(s) from {path}")
    return data


def dump_resources_config(
    config: dict[str, Any],
    indent: int = JSON_OUTPUT_INDENT,
    sort_keys: bool = False,
) -> str:
    """
    Serialize a resources config to JSON text.

    Args:
        config: Resources config mapping
        indent: Indentation width (0 for compact single-line output)
        sort_keys: Whether to sort mapping keys

    Returns:
        JSON text terminated by a newline
    """
    return json.dumps(config, indent=indent or None, sort_keys=sort_keys) + "\n"
