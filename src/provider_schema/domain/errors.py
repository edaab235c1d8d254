"""Unified error taxonomy for field decoding and encoding."""

from dataclasses import dataclass


@dataclass(slots=True)
class ProviderSchemaError(Exception):
    """Base class for decode/encode failures."""

    message: str
    code: str

    def __str__(self) -> str:
        return self.message


class FieldDecodeError(ProviderSchemaError):
    """Raised when a field cannot be read from a field store."""


class MissingFieldError(FieldDecodeError):
    """Raised when a requested key is absent from the field store."""

    def __init__(self, key: str) -> None:
        super().__init__(message=f"Has no field with name {key}", code="missing_field")


class TypeMismatchError(FieldDecodeError):
    """Raised when a stored field declares a different type than expected."""

    def __init__(self, actual: str, expected: str) -> None:
        super().__init__(
            message=f"Wrong field type! {actual} is not equal to {expected}",
            code="type_mismatch",
        )


class FieldEncodeError(ProviderSchemaError):
    """Raised when an entity attribute cannot be serialized as a field."""


class EmptyFieldError(FieldEncodeError):
    """Raised when a required attribute is missing or None."""

    def __init__(self, name: str) -> None:
        super().__init__(message=f"Empty field {name}!", code="empty_field")


class WrongValueTypeError(FieldEncodeError):
    """Raised when an attribute value does not fit the declared field type."""

    def __init__(self, value_type: str, expected: str) -> None:
        super().__init__(
            message=f"Wrong value type! {value_type} is not assignable to type {expected}!",
            code="wrong_value_type",
        )


class UnsupportedVersionError(ProviderSchemaError):
    """Raised when no schema is registered for a declared protocol version."""

    def __init__(self, entity: str, version: object) -> None:
        super().__init__(
            message=f"Unsupported {entity} version: {version}",
            code="unsupported_version",
        )


class InvalidStatusError(ProviderSchemaError):
    """Raised when an asset status is outside the known status codes."""

    def __init__(self, status: object) -> None:
        super().__init__(message=f"Invalid asset status: {status}", code="invalid_status")
