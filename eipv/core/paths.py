#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for eipv.

eipv runs against arbitrary EIP checkouts, so the only fixed location is
where it writes its own logs:

    EIPV_LOG_DIR (env)  ->  used as-is
    otherwise           ->  ~/.eipv/logs
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _get_log_dir() -> Path:
    """
    Resolve the default log directory.

    Returns:
        Path from EIPV_LOG_DIR if set, else ~/.eipv/logs
    """
    override = os.environ.get("EIPV_LOG_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".eipv" / "logs"


# ----- Logs -----
LOG_DIR = _get_log_dir()

# ----- Documents -----
EIP_SUFFIX = ".md"
