# Maptel Core - configuration, exceptions, and logging

from maptel.core.exceptions import (
    MaptelError,
    ContractViolation,
    InvalidIdentifier,
    InvalidPhoneNumber,
    InvalidOutputBuffer,
)
from maptel.core.logging import configure_logging, JsonFormatter

__all__ = [
    "MaptelError",
    "ContractViolation",
    "InvalidIdentifier",
    "InvalidPhoneNumber",
    "InvalidOutputBuffer",
    "configure_logging",
    "JsonFormatter",
]
