#!/usr/bin/env python3
"""
cli_utils.py
-------------------
Shared CLI utilities for eipv commands.

Functions:
    setup_logger: Initialize EipvLogger for CLI operations
    split_csv: Split a comma-separated option value
    load_config: Read suppression settings from a YAML file

Usage:
    from eipv.core.cli_utils import setup_logger

    logger = setup_logger(log_dir, "validate")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

# --- Third-party imports ---
import yaml

# --- Local imports ---
from eipv.core.exceptions import ConfigurationError
from eipv.core.logging_manager import EipvLogger


def setup_logger(log_dir: Path, component_name: str) -> EipvLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    an EipvLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'validate')

    Returns:
        Configured EipvLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return EipvLogger(operations_log_dir, component_name=component_name)


def split_csv(value: Optional[Union[str, Iterable[str]]]) -> List[str]:
    """
    Split a comma-separated value into stripped, non-empty items.

    Iterables are flattened, so repeated options and YAML lists both work.

    Examples:
        >>> split_csv("title_max_length, missing_discussions_to")
        ['title_max_length', 'missing_discussions_to']
        >>> split_csv(["a,b", "c"])
        ['a', 'b', 'c']
        >>> split_csv(None)
        []
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]

    items = []
    for chunk in value:
        for item in str(chunk).split(","):
            item = item.strip()
            if item:
                items.append(item)
    return items


def load_config(path: Path) -> Dict[str, List[str]]:
    """
    Load suppression settings from a YAML config file.

    Expected format:
        ignore:
          - title_max_length
        skip: [eip-20.md, eip-721.md]

    Both keys are optional and may also be comma-separated strings.

    Args:
        path: Path to the YAML file

    Returns:
        Dict with 'ignore' and 'skip' lists

    Raises:
        ConfigurationError: If the file can't be read or has the wrong shape
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        raise ConfigurationError(f"Cannot load config file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )

    unknown = set(data) - {"ignore", "skip"}
    if unknown:
        raise ConfigurationError(
            f"Unknown keys in config file {path}: {', '.join(sorted(unknown))}"
        )

    config = {}
    for key in ("ignore", "skip"):
        raw = data.get(key)
        if raw is not None and not isinstance(raw, (str, list)):
            raise ConfigurationError(
                f"'{key}' in {path} must be a list or a comma-separated string"
            )
        config[key] = split_csv(raw)
    return config
