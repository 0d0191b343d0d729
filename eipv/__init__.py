"""
eipv
====

Validator for the preamble of Ethereum Improvement Proposal documents.

An EIP starts with a `---` delimited block of `key: value` lines. eipv
checks that block field by field, collects every problem it finds instead
of stopping at the first one, and lets callers suppress error kinds or
skip whole files.

Main Components:
    - validators: error taxonomy, field validators, preamble parser, runner, CLI
    - dataclasses: EipDocument, the validated document
    - models: Preamble, Author and the status/type/category enums
    - core: exceptions, logging, paths, CLI helpers

Example Usage:
    >>> from eipv.dataclasses import EipDocument
    >>> from eipv.validators.context import SuppressionContext
    >>> ctx = SuppressionContext.from_options(ignore="title_max_length")
    >>> doc = EipDocument.from_file(Path("EIPS/eip-1559.md"), ctx)
"""

__version__ = "0.1.0"
