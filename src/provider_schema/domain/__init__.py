"""Domain types for decode results and failures."""

from .errors import (
    EmptyFieldError,
    FieldDecodeError,
    FieldEncodeError,
    InvalidStatusError,
    MissingFieldError,
    ProviderSchemaError,
    TypeMismatchError,
    UnsupportedVersionError,
    WrongValueTypeError,
)
from .results import ErrorResponse, Response, ResponseError, SuccessResponse, build_response

__all__ = [
    "ProviderSchemaError",
    "FieldDecodeError",
    "MissingFieldError",
    "TypeMismatchError",
    "FieldEncodeError",
    "EmptyFieldError",
    "WrongValueTypeError",
    "UnsupportedVersionError",
    "InvalidStatusError",
    "ResponseError",
    "SuccessResponse",
    "ErrorResponse",
    "Response",
    "build_response",
]
