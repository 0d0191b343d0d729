"""
dataclasses package
-------------------
Dataclass definitions for validated EIP documents.

- EipDocument: a document whose preamble passed validation
"""
from eipv.dataclasses.eip_document import EipDocument

__all__ = ["EipDocument"]
