"""Maptel exception classes.

Contract violations are raised as typed errors carrying an error code that
maps to ErrorCode constants in maptel.api_models. The caller is responsible
for converting them to ErrorDetail.

Expected absence (deleting an unknown table, erasing an unknown number) is
not an error and never raises.
"""


class MaptelError(Exception):
    """Base exception for all maptel errors."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class ContractViolation(MaptelError):
    """A caller broke an operation precondition."""
    pass


class InvalidIdentifier(ContractViolation):
    """Table identifier does not name a live table.

    Maps to ErrorCode.INVALID_IDENTIFIER.
    """

    @classmethod
    def unknown(cls, table_id) -> "InvalidIdentifier":
        """Factory for an identifier that names no table."""
        return cls(
            code="INVALID_IDENTIFIER",
            message=f"No table with id {table_id}"
        )


class InvalidPhoneNumber(ContractViolation):
    """Phone number is not 1..TEL_NUM_MAX_LEN ASCII digits.

    Maps to ErrorCode.INVALID_PHONE_NUMBER.
    """

    @classmethod
    def invalid(cls, tel, reason: str) -> "InvalidPhoneNumber":
        """Factory for a malformed phone number."""
        return cls(
            code="INVALID_PHONE_NUMBER",
            message=f"Invalid phone number {tel!r}: {reason}"
        )


class InvalidOutputBuffer(ContractViolation):
    """Output buffer is missing or its capacity is unusable.

    Maps to ErrorCode.INVALID_OUTPUT_BUFFER.
    """

    @classmethod
    def invalid(cls, reason: str) -> "InvalidOutputBuffer":
        """Factory for an unusable output buffer."""
        return cls(
            code="INVALID_OUTPUT_BUFFER",
            message=f"Invalid output buffer: {reason}"
        )
