"""Shared pydantic base for the JSON wire shapes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from guidebook.errors import MalformedDocumentError

PayloadT = TypeVar("PayloadT", bound="WirePayload")


class WirePayload(BaseModel):
    """Strict, read-only view over one JSON object of a document.

    Strict mode keeps ``"10"`` from passing as an int and ``true`` from
    passing as ``1``. Unknown keys (such as the discriminator) are ignored.
    """

    model_config = ConfigDict(strict=True, frozen=True)


def describe_validation_error(exc: ValidationError) -> str:
    """Render the first pydantic error as ``field.path: message``."""

    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if not location:
        return first["msg"]
    return f"{location}: {first['msg']}"


def validate_payload(model: type[PayloadT], data: Any, *, where: str) -> PayloadT:
    """Validate ``data`` against ``model``, raising ``MalformedDocumentError`` on failure."""

    if not isinstance(data, Mapping):
        raise MalformedDocumentError(
            f"{where}: expected a JSON object, got {type(data).__name__}"
        )
    try:
        return model.model_validate(dict(data))
    except ValidationError as exc:
        raise MalformedDocumentError(f"{where}: {describe_validation_error(exc)}") from exc
