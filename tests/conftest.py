"""
conftest.py
-----------
Shared pytest fixtures for eipv tests.

Provides fixtures for:
- Sample EIP documents (valid and broken)
- A document factory for per-field variations
- Temporary EIP directories on disk
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory


VALID_FIELDS = {
    "eip": "1559",
    "title": "Fee market change for ETH 1.0 chain",
    "author": "Vitalik Buterin (@vbuterin), Eric Conner <eric@example.com>",
    "discussions-to": "https://ethereum-magicians.org/t/eip-1559/2783",
    "status": "Final",
    "type": "Standards Track",
    "category": "Core",
    "created": "2019-04-13",
    "requires": "2718, 2930",
}

DEFAULT_BODY = "## Simple Summary\n\nA transaction pricing mechanism.\n"


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Sample Document Fixtures -----

@pytest.fixture
def valid_document_content():
    """Complete, valid Standards Track document."""
    return """---
eip: 1559
title: Fee market change for ETH 1.0 chain
author: Vitalik Buterin (@vbuterin), Eric Conner <eric@example.com>
discussions-to: https://ethereum-magicians.org/t/eip-1559/2783
status: Final
type: Standards Track
category: Core
created: 2019-04-13
requires: 2718, 2930
---
## Simple Summary

A transaction pricing mechanism.
"""


@pytest.fixture
def informational_document_content():
    """Valid Informational document without a category."""
    return """---
eip: 2228
title: Canonicalize the name of network ID 1
author: William Entriken (@fulldecent)
discussions-to: https://github.com/ethereum/EIPs/issues/2228
status: Final
type: Informational
created: 2019-08-04
---
## Simple Summary

The network with chain ID 1 is called Ethereum Mainnet.
"""


@pytest.fixture
def no_preamble_content():
    """Document without any preamble."""
    return "# EIP-1\n\nThere is no preamble here.\n"


@pytest.fixture
def make_document():
    """
    Build a document from the valid field set.

    Args passed to the returned function:
        overrides: key -> raw value; None removes the key, unknown keys
            are appended after the defaults
        extra_lines: raw preamble lines appended verbatim
        body: text after the closing delimiter
    """

    def _make(overrides=None, extra_lines=None, body=DEFAULT_BODY):
        fields = dict(VALID_FIELDS)
        for key, value in (overrides or {}).items():
            if value is None:
                fields.pop(key, None)
            else:
                fields[key] = value

        lines = [f"{key}: {value}" for key, value in fields.items()]
        lines.extend(extra_lines or [])
        return "---\n" + "\n".join(lines) + "\n---\n" + body

    return _make


# ----- Directory Fixtures -----

@pytest.fixture
def eip_dir(tmp_path, valid_document_content, informational_document_content):
    """
    Directory with a realistic mix of documents.

    - eip-1559.md: valid Standards Track / Core / Final
    - eip-2228.md: valid Informational / Final
    - eip-9999.md: title too long, unknown status
    - notes.txt: not an EIP, never read
    """
    (tmp_path / "eip-1559.md").write_text(valid_document_content, encoding="utf-8")
    (tmp_path / "eip-2228.md").write_text(
        informational_document_content, encoding="utf-8"
    )
    (tmp_path / "eip-9999.md").write_text(
        valid_document_content.replace(
            "title: Fee market change for ETH 1.0 chain",
            "title: " + "x" * 45,
        ).replace("status: Final", "status: Living"),
        encoding="utf-8",
    )
    (tmp_path / "notes.txt").write_text("not an eip", encoding="utf-8")
    return tmp_path
