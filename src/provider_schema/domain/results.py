"""Typed decode result envelopes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from provider_schema.constants import ResponseStatus

from .errors import ProviderSchemaError


@dataclass(slots=True, frozen=True)
class ResponseError:
    """One field-level failure collected while decoding."""

    path: str
    error: ProviderSchemaError

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error entry to JSON-ready dictionary."""
        return {"path": self.path, "code": self.error.code, "message": self.error.message}


@dataclass(slots=True)
class SuccessResponse:
    """Every field of the entity parsed."""

    content: dict[str, Any]
    status: ResponseStatus = field(default=ResponseStatus.OK, init=False)

    @property
    def errors(self) -> list[ResponseError]:
        return []

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        """Return a stable machine-readable structure."""
        return {"status": str(self.status), "content": self.content}


@dataclass(slots=True)
class ErrorResponse:
    """Some fields failed; content keeps the ones that parsed."""

    content: dict[str, Any]
    errors: list[ResponseError]
    status: ResponseStatus = field(default=ResponseStatus.ERROR, init=False)

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("ErrorResponse requires at least one error")

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        """Return a stable machine-readable structure."""
        return {
            "status": str(self.status),
            "content": self.content,
            "errors": [error.to_dict() for error in self.errors],
        }


Response = SuccessResponse | ErrorResponse


def build_response(content: dict[str, Any], errors: list[ResponseError]) -> Response:
    """Pick the response shape from the collected errors."""
    if errors:
        return ErrorResponse(content=content, errors=errors)
    return SuccessResponse(content=content)
