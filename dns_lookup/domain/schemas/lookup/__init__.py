from .lookup import (
    ErrorCode,
    ErrorResponse,
    LookupRequest,
    LookupResponse,
    LookupResult,
    to_json,
)

__all__ = [
    "ErrorCode",
    "ErrorResponse",
    "LookupRequest",
    "LookupResponse",
    "LookupResult",
    "to_json",
]
