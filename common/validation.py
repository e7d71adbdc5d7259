"""Request payload validation for plugin APIs."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

import pydantic
from pydantic import BaseModel


class ValidationError(ValueError):
    """Raised when a request payload does not match its schema."""

    def __init__(self, message: str, *, details: Any | None = None):
        super().__init__(message)
        self.details = details


class SchemaModel(BaseModel):
    """Strict base model for request/response validation."""

    model_config = pydantic.ConfigDict(extra="forbid", str_strip_whitespace=True)


TModel = TypeVar("TModel", bound=SchemaModel)


def parse_model(model: type[TModel], payload: Mapping[str, Any] | None) -> TModel:
    payload = payload or {}
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        raise ValidationError("Invalid request payload", details={"errors": errors}) from exc


def setting_int(
    settings: Mapping[str, Any] | None, key: str, default: int, *, minimum: int = 1
) -> int:
    """Read an integer from plugin settings, falling back to ``default``.

    Settings come from ``config.yml``; a missing or malformed value must not
    take the service down.
    """

    if not isinstance(settings, Mapping):
        return default
    raw = settings.get(key)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        value = default
    return max(value, minimum)


__all__ = ["ValidationError", "SchemaModel", "parse_model", "setting_int"]
