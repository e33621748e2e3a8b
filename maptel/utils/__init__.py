# Maptel Utils - phone number validation

from maptel.utils.tn_utils import (
    TEL_PATTERN,
    is_valid_tel,
    validate_tel,
)

__all__ = [
    "TEL_PATTERN",
    "is_valid_tel",
    "validate_tel",
]
