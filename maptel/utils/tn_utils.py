"""Telephone Number Utilities.

Provides validation of the phone numbers stored in renumbering tables:
1 to TEL_NUM_MAX_LEN ASCII digits, nothing else. Unlike E.164 there is no
'+' prefix and leading zeros are allowed.
"""

import re

from maptel.core.config import TEL_NUM_MAX_LEN
from maptel.core.exceptions import InvalidPhoneNumber

# ASCII digits only; str.isdigit() would also accept other Unicode digits
TEL_PATTERN = re.compile(r'[0-9]{1,%d}' % TEL_NUM_MAX_LEN)


def is_valid_tel(tel) -> bool:
    """Check whether a value is a valid phone number."""
    return isinstance(tel, str) and TEL_PATTERN.fullmatch(tel) is not None


def validate_tel(tel) -> str:
    """Validate a phone number strictly.

    Args:
        tel: The phone number to validate.

    Returns:
        The phone number, unchanged.

    Raises:
        InvalidPhoneNumber: If the value is not a digit string of allowed length.
    """
    if tel is None:
        raise InvalidPhoneNumber.invalid(tel, "missing")

    if not isinstance(tel, str):
        raise InvalidPhoneNumber.invalid(tel, f"expected str, got {type(tel).__name__}")

    if not tel:
        raise InvalidPhoneNumber.invalid(tel, "empty")

    if len(tel) > TEL_NUM_MAX_LEN:
        raise InvalidPhoneNumber.invalid(
            tel, f"longer than {TEL_NUM_MAX_LEN} digits"
        )

    if not TEL_PATTERN.fullmatch(tel):
        raise InvalidPhoneNumber.invalid(tel, "must contain only digits 0-9")

    return tel
