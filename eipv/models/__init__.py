"""
models package
--------------
Typed preamble values.

- Status, EipType, Category: enums of the accepted spellings
- Author, Preamble: parsed preamble fields
"""
from eipv.models.enums import Category, EipType, Status
from eipv.models.preamble import Author, Preamble

__all__ = ["Author", "Category", "EipType", "Preamble", "Status"]
