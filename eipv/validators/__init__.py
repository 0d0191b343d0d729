#!/usr/bin/env python3
"""
validators
----------
Preamble validation for EIP documents.

Modules:
    - errors: ErrorKind taxonomy and PreambleIssue
    - context: SuppressionContext (ignored kinds, skipped files)
    - fields: one validator per preamble field
    - preamble: block extraction, line checks, presence checks
    - runner: file/directory validation and reporting
    - cli: `eipv` command

Usage:
    # Through CLI
    eipv EIPS/ --ignore title_max_length

    # Direct import for programmatic use
    from eipv.validators.preamble import parse_preamble
    from eipv.validators.runner import EipValidator
"""

__all__ = [
    "context",
    "errors",
    "fields",
    "preamble",
    "runner",
]
