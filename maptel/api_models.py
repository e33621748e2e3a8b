"""
Maptel API models.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Request Models
# =============================================================================

class InsertRequest(BaseModel):
    """Request body for PUT /maps/{id}/entries/{tel_src}"""
    dst: str


class LogLevelRequest(BaseModel):
    level: str


# =============================================================================
# Response Models
# =============================================================================

class CreateResponse(BaseModel):
    id: int


class DeleteResponse(BaseModel):
    id: int
    deleted: bool


class TableResponse(BaseModel):
    """Snapshot of one renumbering table"""
    id: int
    entries: Dict[str, str] = Field(default_factory=dict)


class InsertResponse(BaseModel):
    id: int
    src: str
    dst: str


class EraseResponse(BaseModel):
    id: int
    src: str
    erased: bool


class TransformResponse(BaseModel):
    """Response for GET /maps/{id}/transform/{tel_src}

    result is truncated to capacity - 1 digits when capacity is given and
    the resolved number does not fit; truncated reports whether it was.
    """
    id: int
    source: str
    result: str
    cyclic: bool
    truncated: bool = False
    capacity: Optional[int] = None


# =============================================================================
# Error Models
# =============================================================================

class ErrorDetail(BaseModel):
    code: str
    message: str
    recoverable: bool


class ErrorCode:
    """Error code registry"""
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    INVALID_PHONE_NUMBER = "INVALID_PHONE_NUMBER"
    INVALID_OUTPUT_BUFFER = "INVALID_OUTPUT_BUFFER"


# Contract violations are never fixed by retrying the same call
ERROR_RECOVERABILITY: Dict[str, bool] = {
    ErrorCode.INVALID_IDENTIFIER: False,
    ErrorCode.INVALID_PHONE_NUMBER: False,
    ErrorCode.INVALID_OUTPUT_BUFFER: False,
}

ERROR_HTTP_STATUS: Dict[str, int] = {
    ErrorCode.INVALID_IDENTIFIER: 404,
    ErrorCode.INVALID_PHONE_NUMBER: 400,
    ErrorCode.INVALID_OUTPUT_BUFFER: 400,
}


def error_detail(code: str, message: str) -> ErrorDetail:
    """Build an ErrorDetail with recoverability looked up from the registry."""
    return ErrorDetail(
        code=code,
        message=message,
        recoverable=ERROR_RECOVERABILITY.get(code, False),
    )
