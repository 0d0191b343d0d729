"""
Enumeration Types
------------------

Enum classes for EIP preamble values.

Enums:
    - Status: Lifecycle stage of a proposal (Draft, Last Call, Final, ...)
    - EipType: Proposal type (Standards Track, Informational, Meta)
    - Category: Standards Track category (Core, Networking, Interface, ERC)

Each member's value is the exact spelling accepted in a preamble, so
lookups are case-sensitive and include embedded spaces ("Last Call").
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import List, Optional


class _PreambleEnum(str, Enum):
    """Shared lookup helpers for preamble enums."""

    @classmethod
    def choices(cls) -> List[str]:
        """Get all accepted spellings, in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def lookup(cls, value: str) -> Optional["_PreambleEnum"]:
        """Exact-match lookup; None when the spelling isn't accepted."""
        for member in cls:
            if member.value == value:
                return member
        return None


class Status(_PreambleEnum):
    """
    Enumeration of proposal statuses.
    - DRAFT: Work in progress
    - LAST_CALL: Final review window
    - ACCEPTED: Accepted, awaiting implementation
    - FINAL: Finalized standard
    - ACTIVE: Living process/informational document
    - ABANDONED: No longer pursued
    - SUPERSEDED: Replaced by a later proposal
    - REJECTED: Rejected by editors
    """

    DRAFT = "Draft"
    LAST_CALL = "Last Call"
    ACCEPTED = "Accepted"
    FINAL = "Final"
    ACTIVE = "Active"
    ABANDONED = "Abandoned"
    SUPERSEDED = "Superseded"
    REJECTED = "Rejected"


class EipType(_PreambleEnum):
    """
    Enumeration of proposal types.
    - STANDARDS: Standards Track (requires a category)
    - INFORMATIONAL: Design issues and guidelines
    - META: Process proposals
    """

    STANDARDS = "Standards Track"
    INFORMATIONAL = "Informational"
    META = "Meta"

    @property
    def requires_category(self) -> bool:
        """Whether a category field is mandatory for this type."""
        return self is EipType.STANDARDS


class Category(_PreambleEnum):
    """
    Enumeration of Standards Track categories.
    - CORE: Consensus and client changes
    - NETWORKING: Network protocol changes
    - INTERFACE: API/RPC and language-level standards
    - ERC: Application-level standards
    """

    CORE = "Core"
    NETWORKING = "Networking"
    INTERFACE = "Interface"
    ERC = "ERC"
