"""Maptel - in-memory phone number renumbering tables.

This package provides:
- TableStore: table lifecycle and single-entry edits
- transform: cycle-safe resolution of a number through a table
- transform_into: the same, written into a fixed-capacity buffer
"""

from maptel.buffer import transform_into
from maptel.core.exceptions import (
    MaptelError,
    ContractViolation,
    InvalidIdentifier,
    InvalidPhoneNumber,
    InvalidOutputBuffer,
)
from maptel.resolver import is_cyclic, transform
from maptel.store import TableStore

__all__ = [
    "TableStore",
    "transform",
    "transform_into",
    "is_cyclic",
    "MaptelError",
    "ContractViolation",
    "InvalidIdentifier",
    "InvalidPhoneNumber",
    "InvalidOutputBuffer",
]
