"""
Preamble Models
---------------

Typed representation of a parsed EIP preamble.

Models:
    - Author: One entry of the author list (name plus email or handle)
    - Preamble: Every recognized preamble field

A Preamble field is in one of three states:
    - absent: key never appeared (value None, not in invalid_fields)
    - parsed: value holds the typed result
    - invalid: key appeared but its value was rejected (value None,
      key recorded in invalid_fields)

"Missing" and "malformed" are therefore mutually exclusive per field.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field, fields
from datetime import date
from typing import List, Optional, Set

# --- Local imports ---
from eipv.models.enums import Category, EipType, Status


@dataclass(frozen=True)
class Author:
    """
    A single author entry.

    Exactly one of email/handle is set. Handles keep their leading '@'.

    Examples:
        Author("Vitalik Buterin", email="vitalik@ethereum.org")
        Author("Vitalik Buterin", handle="@vbuterin")
    """

    name: str
    email: Optional[str] = None
    handle: Optional[str] = None

    @property
    def contact(self) -> str:
        return self.email if self.email is not None else self.handle or ""

    def __str__(self) -> str:
        if self.email is not None:
            return f"{self.name} <{self.email}>"
        return f"{self.name} ({self.handle})"


@dataclass
class Preamble:
    """
    Parsed preamble fields, keyed by their Python attribute names.

    Preamble keys map to attributes by replacing '-' with '_'
    ('discussions-to' -> discussions_to); 'type' is stored as type_.
    """

    eip: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    author: Optional[List[Author]] = None
    discussions_to: Optional[str] = None
    status: Optional[Status] = None
    last_call_deadline: Optional[date] = None
    review_period_end: Optional[date] = None
    resolution: Optional[str] = None
    type_: Optional[EipType] = None
    category: Optional[Category] = None
    created: Optional[date] = None
    updated: Optional[List[date]] = None
    requires: Optional[List[int]] = None
    replaces: Optional[List[int]] = None
    superseded_by: Optional[List[int]] = None

    invalid_fields: Set[str] = field(default_factory=set, repr=False)

    @classmethod
    def field_names(cls) -> List[str]:
        """Attribute names of all preamble fields."""
        return [f.name for f in fields(cls) if f.name != "invalid_fields"]

    def set_valid(self, name: str, value: object) -> None:
        """Record a successfully parsed value."""
        setattr(self, name, value)
        self.invalid_fields.discard(name)

    def set_invalid(self, name: str) -> None:
        """Record that the key appeared but its value was rejected."""
        setattr(self, name, None)
        self.invalid_fields.add(name)

    def is_present(self, name: str) -> bool:
        """True if the key appeared at all, valid or not."""
        return getattr(self, name) is not None or name in self.invalid_fields

    def is_valid(self, name: str) -> bool:
        return getattr(self, name) is not None

    def is_invalid(self, name: str) -> bool:
        return name in self.invalid_fields
