"""Fixed-capacity output for transform results.

Callers that hand in a preallocated buffer get the result as ASCII bytes
followed by a NUL terminator. A result that does not fit is truncated to
capacity - 1 characters so the terminator always fits.
"""

import logging
from typing import Optional

from maptel.core.exceptions import InvalidOutputBuffer
from maptel.core.logging import log_call, log_outcome
from maptel.resolver import transform_detailed
from maptel.store import TableStore

log = logging.getLogger(__name__)

TERMINATOR = b"\0"


def fit_to_capacity(value: str, capacity: int) -> str:
    """Return the part of value that fits a buffer of the given capacity.

    One slot is reserved for the terminator.

    Raises:
        InvalidOutputBuffer: If capacity is below 1.
    """
    if capacity < 1:
        raise InvalidOutputBuffer.invalid(f"capacity must be at least 1, got {capacity}")
    if len(value) + 1 > capacity:
        return value[:capacity - 1]
    return value


def write_terminated(value: str, buffer: Optional[bytearray], capacity: int) -> int:
    """Write value and a terminator into buffer.

    Args:
        value: Phone number to write.
        buffer: Destination buffer.
        capacity: Usable size of buffer, terminator included.

    Returns:
        Number of characters written, terminator excluded.

    Raises:
        InvalidOutputBuffer: If buffer is missing or capacity is unusable.
    """
    _check_buffer(buffer, capacity)
    fitted = fit_to_capacity(value, capacity)
    size = len(fitted)
    buffer[:size] = fitted.encode("ascii")
    buffer[size:size + 1] = TERMINATOR
    return size


def transform_into(
    store: TableStore,
    table_id,
    tel_src: str,
    buffer: Optional[bytearray],
    capacity: int,
) -> int:
    """Resolve tel_src and write the result into a fixed-capacity buffer.

    Returns:
        Number of characters written, terminator excluded.

    Raises:
        InvalidIdentifier: If the table does not exist.
        InvalidPhoneNumber: If tel_src is malformed.
        InvalidOutputBuffer: If buffer is missing or capacity is unusable.
    """
    log_call(log, "transform_into", table_id, tel_src, "ADDR", capacity)
    _check_buffer(buffer, capacity)

    result, _ = transform_detailed(store, table_id, tel_src)
    written = write_terminated(result, buffer, capacity)
    if written < len(result):
        log_outcome(log, "transform_into", f"truncated to {written} of {len(result)} digits")
    return written


def _check_buffer(buffer: Optional[bytearray], capacity: int) -> None:
    if buffer is None:
        raise InvalidOutputBuffer.invalid("buffer is None")
    if capacity < 1:
        raise InvalidOutputBuffer.invalid(f"capacity must be at least 1, got {capacity}")
    if capacity > len(buffer):
        raise InvalidOutputBuffer.invalid(
            f"capacity {capacity} exceeds buffer size {len(buffer)}"
        )
